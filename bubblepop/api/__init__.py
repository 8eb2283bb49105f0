from .bubble import Bubble, BubbleType, PopEffect
from .config import GameConfig
from .events import Event, FastTick, PopCommand, Restart, SlowTick
from .state import HighScoreEntry, SessionSnapshot

__all__ = [
    "Bubble",
    "BubbleType",
    "PopEffect",
    "GameConfig",
    "Event",
    "FastTick",
    "PopCommand",
    "Restart",
    "SlowTick",
    "HighScoreEntry",
    "SessionSnapshot",
]
