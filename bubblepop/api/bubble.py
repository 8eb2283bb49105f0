from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class BubbleType(Enum):
    # name, points, time bonus (s), spawn weight among normal types, RGB
    RED = ("red", 1, 0, 0.40, (220, 50, 50))
    PINK = ("pink", 2, 0, 0.30, (240, 120, 180))
    GREEN = ("green", 5, 0, 0.15, (60, 180, 90))
    BLUE = ("blue", 8, 0, 0.10, (50, 110, 230))
    BLACK = ("black", 10, 0, 0.05, (20, 20, 20))
    GOLD = ("gold", 0, 10, 0.0, (240, 190, 40))

    def __init__(self, label: str, points: int, time_bonus: int, spawn_weight: float, rgb: Tuple[int, int, int]):
        self.label = label
        self.points = points
        self.time_bonus = time_bonus
        self.spawn_weight = spawn_weight
        self.rgb = rgb

    @classmethod
    def normal_types(cls) -> List["BubbleType"]:
        """Non-gold types in declared order; spawn weights sum to 1.0."""
        return [t for t in cls if t is not cls.GOLD]


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Bubble:
    type: BubbleType
    x: float
    y: float
    # unit direction, fixed at creation
    dx: float
    dy: float
    id: str = field(default_factory=_new_id)

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PopEffect:
    """Floating text shown where a gold bubble was popped."""
    x: float
    y: float
    text: str
    id: str = field(default_factory=_new_id)
