from __future__ import annotations
import math
import random
from typing import Tuple

from bubblepop.api.bubble import Bubble, BubbleType
from bubblepop.api.config import GameConfig
from bubblepop.const import GOLD_CHANCE


def random_bubble_type(rng=random) -> BubbleType:
    """
    Gold with GOLD_CHANCE, otherwise a weighted pick among the normal types.
    The remaining probability mass is rescaled to [0, 1) and walked in
    declared order (red, pink, green, blue, black).
    """
    r0 = rng.random()
    if r0 < GOLD_CHANCE:
        return BubbleType.GOLD

    r = (r0 - GOLD_CHANCE) / (1 - GOLD_CHANCE)
    cum = 0.0
    for t in BubbleType.normal_types():
        cum += t.spawn_weight
        if r < cum:
            return t
    # float drift can leave r just above the summed weights
    return BubbleType.RED


def make_bubble(area_size: Tuple[float, float], config: GameConfig, rng=random) -> Bubble:
    """
    Create one bubble fully inside the play area and below the HUD band.
    Width and height must each exceed the bubble diameter.
    """
    w, h = area_size
    radius = config.bubble_radius
    bubble_type = random_bubble_type(rng)
    x = rng.uniform(radius, w - radius)
    y = rng.uniform(config.hud_height + radius, h - radius)
    angle = rng.uniform(0.0, 2 * math.pi)
    return Bubble(type=bubble_type, x=x, y=y, dx=math.cos(angle), dy=math.sin(angle))
