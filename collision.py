# collision.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from settings import GROUND_MARGIN, BIRD_WIDTH, BIRD_HEIGHT

if TYPE_CHECKING:
    from obstacle import Obstacle


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


def point_in_rect(px: float, py: float, rect: Rect) -> bool:
    # closed on every edge
    return rect.x <= px <= rect.right and rect.y <= py <= rect.bottom


def bird_center(bird_x: float, bird_y: float) -> tuple[float, float]:
    return bird_x + BIRD_WIDTH / 2, bird_y + BIRD_HEIGHT / 2


def out_of_bounds(bird_y: float, viewport_height: float) -> bool:
    return bird_y > viewport_height - GROUND_MARGIN or bird_y < 0


def detect_collision(bird_x: float, bird_y: float,
                     obstacle: "Obstacle", viewport_height: float) -> bool:
    """True when the bird hits the ground, the ceiling or either pipe.

    Only the bird's center point is tested against the pipes, so wings and
    tail can clip a pipe edge without ending the run.
    """
    if out_of_bounds(bird_y, viewport_height):
        return True
    cx, cy = bird_center(bird_x, bird_y)
    return any(point_in_rect(cx, cy, r) for r in obstacle.rects())
