import dataclasses
import math

import pytest

from bubblepop.api import Bubble, BubbleType, GameConfig
from bubblepop.core.movement import advance, speed_for

W, H = 480.0, 800.0


def _bubble(x, y, dx=0.0, dy=1.0):
    return Bubble(type=BubbleType.BLUE, x=x, y=y, dx=dx, dy=dy)


def test_speed_ramp(config):
    assert speed_for(0.0, config) == config.base_speed
    assert speed_for(1.0, config) == config.max_speed
    assert speed_for(0.5, config) == pytest.approx((config.base_speed + config.max_speed) / 2)
    assert speed_for(1.7, config) == config.max_speed
    assert speed_for(-0.2, config) == config.base_speed


def test_moves_along_direction(config):
    b = _bubble(100.0, 300.0, dx=0.6, dy=0.8)
    out = advance([b], (W, H), 0.0, 0.5, config)
    assert out == [b]
    assert b.x == pytest.approx(100.0 + 0.6 * 100.0 * 0.5)
    assert b.y == pytest.approx(300.0 + 0.8 * 100.0 * 0.5)


def test_direction_not_renormalised(config):
    b = _bubble(100.0, 300.0, dx=math.cos(1.0), dy=math.sin(1.0))
    before = (b.dx, b.dy)
    advance([b], (W, H), 0.3, 1 / 30, config)
    assert (b.dx, b.dy) == before


def test_deterministic(config):
    src = [_bubble(50.0 + i * 20, 200.0 + i * 10, dx=math.cos(i), dy=math.sin(i)) for i in range(10)]
    a = [dataclasses.replace(b) for b in src]
    b = [dataclasses.replace(x) for x in src]
    out_a = advance(a, (W, H), 0.4, 1 / 30, config)
    out_b = advance(b, (W, H), 0.4, 1 / 30, config)
    assert [(x.id, x.x, x.y) for x in out_a] == [(y.id, y.x, y.y) for y in out_b]


def test_culls_past_right_edge(config):
    d = config.bubble_diameter
    gone = _bubble(W + d + 1, 400.0)
    kept = _bubble(W + d - 1, 400.0)
    out = advance([gone, kept], (W, H), 0.0, 1 / 30, config)
    assert out == [kept]


@pytest.mark.parametrize("x, y, alive", [
    (-71.0, 400.0, False),
    (-69.0, 400.0, True),
    (240.0, 60.0 - 71.0, False),
    (240.0, 60.0 - 69.0, True),
    (240.0, 800.0 + 71.0, False),
    (240.0, 800.0 + 69.0, True),
])
def test_cull_margins(x, y, alive):
    cfg = GameConfig()
    # moving sideways so the step never changes the y test, and dt=0 leaves x alone
    b = _bubble(x, y, dx=1.0, dy=0.0)
    out = advance([b], (W, H), 0.0, 0.0, cfg)
    assert (out == [b]) is alive


def test_empty():
    assert advance([], (W, H), 0.0, 1 / 30, GameConfig()) == []
