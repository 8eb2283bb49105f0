from __future__ import annotations
from dataclasses import dataclass

from bubblepop.const import (
    BASE_SPEED,
    BUBBLE_DIAMETER,
    HUD_HEIGHT,
    MAX_BUBBLES,
    MAX_SPEED,
    SESSION_DURATION_SEC,
)


@dataclass(frozen=True)
class GameConfig:
    session_duration_sec: int = SESSION_DURATION_SEC
    max_bubbles: int = MAX_BUBBLES
    bubble_diameter: float = BUBBLE_DIAMETER
    base_speed: float = BASE_SPEED
    max_speed: float = MAX_SPEED
    hud_height: float = HUD_HEIGHT

    @property
    def bubble_radius(self) -> float:
        return self.bubble_diameter / 2
