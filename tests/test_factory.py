import math
import random

import pytest

from bubblepop.api import BubbleType, GameConfig
from bubblepop.core.factory import make_bubble, random_bubble_type


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_normal_weights_sum_to_one():
    assert math.isclose(sum(t.spawn_weight for t in BubbleType.normal_types()), 1.0)
    assert BubbleType.GOLD not in BubbleType.normal_types()


def test_type_table():
    assert [t.points for t in BubbleType] == [1, 2, 5, 8, 10, 0]
    assert [t.time_bonus for t in BubbleType] == [0, 0, 0, 0, 0, 10]


@pytest.mark.parametrize("r0, expected", [
    (0.0, BubbleType.GOLD),
    (0.029, BubbleType.GOLD),
    (0.03, BubbleType.RED),
    (0.03 + 0.97 * 0.39, BubbleType.RED),
    (0.03 + 0.97 * 0.41, BubbleType.PINK),
    (0.03 + 0.97 * 0.80, BubbleType.GREEN),
    (0.03 + 0.97 * 0.90, BubbleType.BLUE),
    (0.03 + 0.97 * 0.97, BubbleType.BLACK),
])
def test_random_bubble_type_walks_declared_order(r0, expected):
    assert random_bubble_type(FixedRandom(r0)) is expected


def test_random_bubble_type_falls_back_to_red():
    # r rescales past 1.0, so no cumulative weight exceeds it
    assert random_bubble_type(FixedRandom(1.5)) is BubbleType.RED


def test_gold_is_rare(rng):
    draws = [random_bubble_type(rng) for _ in range(5000)]
    gold = sum(1 for t in draws if t is BubbleType.GOLD)
    assert 50 < gold < 250


@pytest.mark.parametrize("size", [(71.0, 131.0), (200.0, 300.0), (480.0, 800.0), (1280.0, 720.0)])
def test_bubbles_stay_inside_play_area(size, config):
    rng = random.Random(7)
    w, h = size
    r = config.bubble_radius
    for _ in range(500):
        b = make_bubble(size, config, rng)
        assert r <= b.x <= w - r
        assert config.hud_height + r <= b.y <= h - r


def test_direction_is_unit(rng, config, area):
    for _ in range(100):
        b = make_bubble(area, config, rng)
        assert math.isclose(math.hypot(b.dx, b.dy), 1.0, rel_tol=1e-9)


def test_same_seed_same_bubble(config, area):
    a = make_bubble(area, config, random.Random(3))
    b = make_bubble(area, config, random.Random(3))
    assert (a.type, a.x, a.y, a.dx, a.dy) == (b.type, b.x, b.y, b.dx, b.dy)
    assert a.id != b.id


def test_custom_hud_height(rng):
    cfg = GameConfig(hud_height=200.0, bubble_diameter=20.0)
    for _ in range(200):
        assert make_bubble((100.0, 400.0), cfg, rng).y >= 210.0
