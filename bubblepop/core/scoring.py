from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Optional

from bubblepop.api.bubble import Bubble, BubbleType, PopEffect
from bubblepop.const import GOLD_EFFECT_TEXT, STREAK_MULTIPLIER


@dataclass(frozen=True)
class StreakPolicy:
    """
    Bonus for consecutive pops of the same type. The multiplier applies once
    the streak count reaches `threshold` (1 = the second pop in a row), and
    the product is converted back to whole points with `rounding`.
    """
    multiplier: float = STREAK_MULTIPLIER
    threshold: int = 1
    rounding: Callable[[float], int] = math.trunc

    def points(self, base: int, streak: int) -> int:
        if streak >= self.threshold:
            return int(self.rounding(base * self.multiplier))
        return base


@dataclass(frozen=True)
class PopResult:
    points: int
    time_bonus: int
    effect: Optional[PopEffect] = None


class ScoreKeeper:
    """Tracks colour streaks and prices each pop."""

    def __init__(self, policy: Optional[StreakPolicy] = None):
        self.policy = policy or StreakPolicy()
        self.last_popped_type: Optional[BubbleType] = None
        self.streak: int = 0

    def reset(self) -> None:
        self.last_popped_type = None
        self.streak = 0

    def pop(self, bubble: Bubble) -> PopResult:
        effect = None
        if bubble.type is BubbleType.GOLD:
            effect = PopEffect(x=bubble.x, y=bubble.y, text=GOLD_EFFECT_TEXT)

        if bubble.type is self.last_popped_type:
            self.streak += 1
        else:
            self.last_popped_type = bubble.type
            self.streak = 0

        points = self.policy.points(bubble.type.points, self.streak)
        return PopResult(points=points, time_bonus=bubble.type.time_bonus, effect=effect)
