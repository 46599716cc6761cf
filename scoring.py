# scoring.py
from __future__ import annotations
import logging

logger = logging.getLogger(__name__)


class ScoreTracker:
    """Counts one point each time the pipe's x passes the bird's x going left.

    Compares consecutive samples, so a crossing scores once no matter how
    often the position is sampled.
    """

    def __init__(self, player_x: float):
        self.player_x = player_x
        self.score = 0
        self._prev: float | None = None

    def observe(self, current: float) -> bool:
        prev = self._prev
        self._prev = current
        if prev is None or current == prev:
            return False
        if prev > self.player_x >= current:
            self.score += 1
            logger.debug("score %d", self.score)
            return True
        return False

    def reset(self):
        self.score = 0
        self._prev = None
