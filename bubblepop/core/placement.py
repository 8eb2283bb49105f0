from __future__ import annotations
import logging
import random
from typing import Iterable, List, Tuple

import numpy as np

from bubblepop.api.bubble import Bubble
from bubblepop.api.config import GameConfig
from bubblepop.const import MAX_PLACEMENT_ATTEMPTS

from .factory import make_bubble

logger = logging.getLogger(__name__)


def _overlaps(candidate: Bubble, centers: List[Tuple[float, float]], diameter: float) -> bool:
    if not centers:
        return False
    pts = np.asarray(centers, dtype=np.float64)
    dist = np.hypot(pts[:, 0] - candidate.x, pts[:, 1] - candidate.y)
    return bool((dist < diameter).any())


def place_bubbles(
    count: int,
    area_size: Tuple[float, float],
    existing: Iterable[Bubble],
    config: GameConfig,
    rng=random,
) -> List[Bubble]:
    """
    Place up to `count` bubbles so that no two (including `existing`) overlap.
    Each bubble gets MAX_PLACEMENT_ATTEMPTS draws; a bubble that cannot be
    fitted is skipped, so the result may be shorter than `count`.
    """
    centers = [b.position for b in existing]
    placed: List[Bubble] = []
    for _ in range(count):
        for _attempt in range(MAX_PLACEMENT_ATTEMPTS):
            candidate = make_bubble(area_size, config, rng)
            if not _overlaps(candidate, centers, config.bubble_diameter):
                placed.append(candidate)
                centers.append(candidate.position)
                break

    if len(placed) < count:
        logger.debug("[placement-saturated] requested=%d placed=%d area=%s", count, len(placed), area_size)
    return placed
