from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from bubblepop.const import FAST_TICK_DT


@dataclass(frozen=True)
class SlowTick:
    """1 Hz: countdown, game clock, bubble refresh, game over."""


@dataclass(frozen=True)
class FastTick:
    """30 Hz: movement and off-screen culling."""
    dt: float = FAST_TICK_DT


@dataclass(frozen=True)
class PopCommand:
    bubble_id: str


@dataclass(frozen=True)
class Restart:
    """Play again from the game-over screen."""


Event = Union[SlowTick, FastTick, PopCommand, Restart]
