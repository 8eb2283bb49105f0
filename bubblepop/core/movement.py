from __future__ import annotations
from typing import List, Tuple

import numpy as np

from bubblepop.api.bubble import Bubble
from bubblepop.api.config import GameConfig


def speed_for(elapsed_fraction: float, config: GameConfig) -> float:
    """Linear ramp from base_speed to max_speed over the session."""
    f = max(0.0, min(1.0, elapsed_fraction))
    return config.base_speed + f * (config.max_speed - config.base_speed)


def advance(
    bubbles: List[Bubble],
    area_size: Tuple[float, float],
    elapsed_fraction: float,
    dt: float,
    config: GameConfig,
) -> List[Bubble]:
    """
    Move every bubble one step along its direction (in place) and return the
    ones still on screen, in input order. A bubble is culled once its centre
    is more than one diameter past an edge; the top edge is the HUD band.
    """
    if not bubbles:
        return []

    w, h = area_size
    d = config.bubble_diameter
    step = speed_for(elapsed_fraction, config) * dt

    pos = np.array([(b.x, b.y) for b in bubbles], dtype=np.float64)
    direction = np.array([(b.dx, b.dy) for b in bubbles], dtype=np.float64)
    pos += direction * step

    x, y = pos[:, 0], pos[:, 1]
    keep = (x >= -d) & (x <= w + d) & (y >= config.hud_height - d) & (y <= h + d)

    survivors: List[Bubble] = []
    for b, (nx, ny), alive in zip(bubbles, pos.tolist(), keep.tolist()):
        b.x = nx
        b.y = ny
        if alive:
            survivors.append(b)
    return survivors
