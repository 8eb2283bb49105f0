from bubblepop.core.scheduler import DeferredScheduler


def test_runs_in_deadline_order(clock):
    sched = DeferredScheduler(clock)
    fired = []
    sched.call_later(1.0, lambda: fired.append("late"))
    sched.call_later(0.2, lambda: fired.append("early"))
    assert sched.run_due() == 0

    clock.advance(0.2)
    assert sched.run_due() == 1
    assert fired == ["early"]

    clock.advance(5.0)
    sched.run_due()
    assert fired == ["early", "late"]
    assert len(sched) == 0


def test_same_deadline_keeps_insertion_order(clock):
    sched = DeferredScheduler(clock)
    fired = []
    for i in range(3):
        sched.call_later(0.5, lambda i=i: fired.append(i))
    sched.run_due(clock() + 0.5)
    assert fired == [0, 1, 2]
