# physics.py
from __future__ import annotations
from dataclasses import dataclass
import math

from settings import GRAVITY, JUMP_FORCE


def is_valid_dt(dt: float | None) -> bool:
    """A frame delta we can integrate: present, finite and positive."""
    if dt is None:
        return False
    try:
        return math.isfinite(dt) and dt > 0
    except TypeError:
        return False


@dataclass
class PlayerBody:
    y: float
    velocity: float = 0.0

    @classmethod
    def spawn(cls, viewport_height: float) -> "PlayerBody":
        return cls(y=viewport_height / 3, velocity=0.0)

    def integrate(self, dt: float, gravity: float = GRAVITY):
        # position first, with the velocity from the previous frame
        self.y += self.velocity * dt
        self.velocity += gravity * dt

    def apply_impulse(self, jump_force: float = JUMP_FORCE):
        # a fresh velocity, not an added one
        self.velocity = jump_force
