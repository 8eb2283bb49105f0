from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .bubble import Bubble, BubbleType, PopEffect


@dataclass(frozen=True)
class HighScoreEntry:
    id: str
    name: str
    score: int


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for the presentation layer."""
    player_name: str
    score: int
    time_remaining: int
    is_counting_down: bool
    countdown_value: int
    is_game_over: bool
    # bubbles are copies; mutating them does not affect the session
    bubbles: Tuple[Bubble, ...]
    popping_ids: FrozenSet[str]
    pop_effects: Tuple[PopEffect, ...]
    last_popped_type: Optional[BubbleType] = None
    pop_streak: int = 0
    top_three: Tuple[HighScoreEntry, ...] = ()

    @property
    def is_active(self) -> bool:
        return not self.is_counting_down and not self.is_game_over
