import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from bubblepop.api import Bubble, BubbleType, SessionSnapshot
from bubblepop.app.loop import find_tapped


def _snap(bubbles, popping=()):
    return SessionSnapshot(
        player_name="Ann",
        score=0,
        time_remaining=10,
        is_counting_down=False,
        countdown_value=0,
        is_game_over=False,
        bubbles=tuple(bubbles),
        popping_ids=frozenset(popping),
        pop_effects=(),
    )


def test_find_tapped_prefers_topmost():
    under = Bubble(type=BubbleType.RED, x=100.0, y=100.0, dx=1.0, dy=0.0)
    over = Bubble(type=BubbleType.BLUE, x=110.0, y=100.0, dx=1.0, dy=0.0)
    assert find_tapped(_snap([under, over]), (105, 100), 35.0) == over.id


def test_find_tapped_skips_popping_and_misses():
    b = Bubble(type=BubbleType.RED, x=100.0, y=100.0, dx=1.0, dy=0.0)
    assert find_tapped(_snap([b], popping=[b.id]), (100, 100), 35.0) is None
    assert find_tapped(_snap([b]), (200, 200), 35.0) is None
