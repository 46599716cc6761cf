# obstacle.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import Callable, Protocol

from collision import Rect
from difficulty import speed_multiplier
from settings import (
    PIPE_WIDTH, PIPE_HEIGHT, PIPE_END_X, PIPE_RESPAWN_X,
    GAP_RANGE, BASE_TRAVERSAL_SECONDS,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


@dataclass
class Obstacle:
    """The single pipe pair. Recycled every cycle, never re-created."""
    x: float
    viewport_height: float
    gap_offset: float = 0.0
    width: float = PIPE_WIDTH
    height: float = PIPE_HEIGHT

    @property
    def top_rect(self) -> Rect:
        return Rect(self.x, self.gap_offset - self.height / 2, self.width, self.height)

    @property
    def bottom_rect(self) -> Rect:
        return Rect(self.x, self.viewport_height - self.height / 2 + self.gap_offset,
                    self.width, self.height)

    def rects(self) -> tuple[Rect, Rect]:
        return self.top_rect, self.bottom_rect


class Traversal:
    """Linear tween from start to end over duration seconds.

    Once cancelled or finished, advance() keeps returning the last value.
    on_complete fires once when the end is reached, never after cancel().
    """

    def __init__(self, start: float, end: float, duration: float,
                 on_complete: Callable[[], None] | None = None):
        if duration <= 0:
            raise ValueError("Traversal duration must be positive")
        self.start = start
        self.end = end
        self.duration = duration
        self.elapsed = 0.0
        self.value = start
        self.cancelled = False
        self.finished = False
        self.on_complete = on_complete

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.finished)

    def advance(self, dt: float) -> float:
        if not self.active:
            return self.value
        self.elapsed = min(self.duration, self.elapsed + dt)
        t = self.elapsed / self.duration
        self.value = self.start + (self.end - self.start) * t
        if self.elapsed >= self.duration:
            self.value = self.end
            self.finished = True
            if self.on_complete is not None:
                self.on_complete()
        return self.value

    def cancel(self):
        self.cancelled = True


class ObstacleCycler:
    """Moves the obstacle right-to-left, then respawns it with a new gap.

    A cycle is: jump to the right edge, traverse to PIPE_END_X, and as soon
    as the position drops below PIPE_RESPAWN_X redraw the gap and start over.
    """

    def __init__(self, obstacle: Obstacle, viewport_width: float,
                 rng: RandomSource | None = None,
                 base_seconds: float = BASE_TRAVERSAL_SECONDS,
                 gap_range: float = GAP_RANGE):
        self.obstacle = obstacle
        self.viewport_width = viewport_width
        self.rng = rng if rng is not None else random.Random()
        self.base_seconds = base_seconds
        self.gap_range = gap_range
        self.traversal: Traversal | None = None
        self.cycles = 0
        self._prev_x: float | None = None

    @property
    def running(self) -> bool:
        return self.traversal is not None and self.traversal.active

    def start_cycle(self, score: int) -> Traversal:
        if self.traversal is not None:
            self.traversal.cancel()
        self.obstacle.x = self.viewport_width
        self._prev_x = self.obstacle.x
        multiplier = speed_multiplier(score)
        self.traversal = Traversal(self.viewport_width, PIPE_END_X, self.base_seconds / multiplier,
                                   on_complete=self._on_traversal_end)
        self.cycles += 1
        logger.debug("cycle %d: speed x%.2f over %.2fs, gap %.1f",
                     self.cycles, multiplier, self.traversal.duration, self.obstacle.gap_offset)
        return self.traversal

    def advance(self, dt: float, score: int) -> list[float]:
        """Step the traversal; return every x published this frame, in order."""
        if not self.running:
            return []
        x = self.traversal.advance(dt)
        prev = self._prev_x
        self.obstacle.x = x
        self._prev_x = x
        samples = [x]

        crossed = prev is not None and prev > PIPE_RESPAWN_X and x < PIPE_RESPAWN_X
        if crossed or self.traversal.finished:
            self._respawn(score)
            samples.append(self.obstacle.x)
        return samples

    def halt(self):
        # freezes the obstacle where it is until start_cycle()
        if self.traversal is not None:
            self.traversal.cancel()

    def _on_traversal_end(self):
        # advance() sees finished and respawns on the same frame
        logger.debug("cycle %d: traversal ran to the end", self.cycles)

    def _respawn(self, score: int):
        self.obstacle.gap_offset = self.rng.uniform(-self.gap_range, self.gap_range)
        self.traversal.cancel()
        self.start_cycle(score)
