import math

import pytest

from physics import PlayerBody, is_valid_dt
from settings import GRAVITY, JUMP_FORCE


def test_spawn_position():
    body = PlayerBody.spawn(900)
    assert body.y == 300
    assert body.velocity == 0


def test_integrate_moves_then_accelerates():
    body = PlayerBody(y=100.0, velocity=50.0)
    body.integrate(0.1)
    # position uses the old velocity
    assert body.y == pytest.approx(105.0)
    assert body.velocity == pytest.approx(50.0 + GRAVITY * 0.1)


def test_gravity_accumulates_each_tick():
    body = PlayerBody(y=0.0)
    for i in range(1, 6):
        body.integrate(0.02)
        assert body.velocity == pytest.approx(GRAVITY * 0.02 * i)


def test_impulse_sets_fresh_velocity():
    for start in (-1000.0, 0.0, 250.0, 5000.0):
        body = PlayerBody(y=10.0, velocity=start)
        body.apply_impulse()
        assert body.velocity == JUMP_FORCE
        body.apply_impulse()
        assert body.velocity == JUMP_FORCE


@pytest.mark.parametrize("dt", [None, 0, 0.0, -0.016, math.nan, math.inf, -math.inf, "0.1"])
def test_invalid_dt(dt):
    assert not is_valid_dt(dt)


@pytest.mark.parametrize("dt", [0.001, 1 / 60, 0.5])
def test_valid_dt(dt):
    assert is_valid_dt(dt)
