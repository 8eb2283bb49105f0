from __future__ import annotations
import heapq
import itertools
import time
from typing import Callable, List, Optional, Tuple


class DeferredScheduler:
    """
    One-shot callbacks keyed by deadline. Nothing runs on its own: the owner
    calls run_due() from its event loop. Callbacks must be safe to run after
    the thing they act on is already gone.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self.clock = clock or time.monotonic
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None]) -> float:
        deadline = self.clock() + delay
        heapq.heappush(self._queue, (deadline, next(self._seq), callback))
        return deadline

    def run_due(self, now: Optional[float] = None) -> int:
        """Fire every callback whose deadline has passed, earliest first."""
        if now is None:
            now = self.clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            fired += 1
        return fired
