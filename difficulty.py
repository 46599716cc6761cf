# difficulty.py
from __future__ import annotations

from settings import SPEED_SCORE_RANGE, SPEED_RANGE, TILT_VELOCITY_RANGE, TILT_RANGE


def interpolate(value: float,
                in_range: tuple[float, float],
                out_range: tuple[float, float],
                clamp: bool = False) -> float:
    """Map value linearly from in_range onto out_range.

    Without clamp the line keeps going past either end of in_range.
    """
    in0, in1 = in_range
    out0, out1 = out_range
    if in1 == in0:
        return out0
    t = (value - in0) / (in1 - in0)
    if clamp:
        t = max(0.0, min(1.0, t))
    return out0 + (out1 - out0) * t


def speed_multiplier(score: int) -> float:
    return interpolate(score, SPEED_SCORE_RANGE, SPEED_RANGE)


def tilt_for_velocity(velocity: float) -> float:
    """Bird rotation in radians; nose up while rising, down while falling."""
    return interpolate(velocity, TILT_VELOCITY_RANGE, TILT_RANGE, clamp=True)
