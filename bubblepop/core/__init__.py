from .factory import make_bubble, random_bubble_type
from .movement import advance, speed_for
from .placement import place_bubbles
from .scheduler import DeferredScheduler
from .scoring import PopResult, ScoreKeeper, StreakPolicy
from .session import GameSession

__all__ = [
    "make_bubble",
    "random_bubble_type",
    "advance",
    "speed_for",
    "place_bubbles",
    "DeferredScheduler",
    "PopResult",
    "ScoreKeeper",
    "StreakPolicy",
    "GameSession",
]
