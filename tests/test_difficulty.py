import pytest

from difficulty import interpolate, speed_multiplier, tilt_for_velocity


def test_speed_multiplier_curve():
    assert speed_multiplier(0) == pytest.approx(1.0)
    assert speed_multiplier(10) == pytest.approx(1.5)
    assert speed_multiplier(20) == pytest.approx(2.0)
    # keeps growing past 20
    assert speed_multiplier(40) == pytest.approx(3.0)


def test_interpolate_extrapolates_by_default():
    assert interpolate(-10, (0, 10), (0, 100)) == pytest.approx(-100)
    assert interpolate(20, (0, 10), (0, 100)) == pytest.approx(200)


def test_interpolate_clamps_when_asked():
    assert interpolate(-10, (0, 10), (0, 100), clamp=True) == pytest.approx(0)
    assert interpolate(20, (0, 10), (0, 100), clamp=True) == pytest.approx(100)


def test_interpolate_degenerate_range():
    assert interpolate(5, (3, 3), (7, 9)) == 7


def test_tilt_is_clamped():
    assert tilt_for_velocity(0) == pytest.approx(0.0)
    assert tilt_for_velocity(400) == pytest.approx(0.5)
    assert tilt_for_velocity(-300) == pytest.approx(-0.375)
    assert tilt_for_velocity(5000) == pytest.approx(0.5)
    assert tilt_for_velocity(-5000) == pytest.approx(-0.5)
