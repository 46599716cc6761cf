# session.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

from collision import Rect, detect_collision
from config_loader import Tuning
from difficulty import speed_multiplier, tilt_for_velocity
from obstacle import Obstacle, ObstacleCycler, RandomSource
from physics import PlayerBody, is_valid_dt
from scoring import ScoreTracker

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs for one frame, read in one go."""
    player_x: float
    player_y: float
    player_velocity: float
    player_tilt: float
    obstacle_x: float
    gap_offset: float
    top_rect: Rect
    bottom_rect: Rect
    score: int
    state: GameState


class GameSession:
    """Owns all mutable game state and is the only thing callers drive.

    Per frame, call update(dt): physics and collision first, then the
    obstacle clock and scoring. on_tap() jumps while playing and restarts
    after a game over.
    """

    def __init__(self, viewport_width: float, viewport_height: float,
                 rng: RandomSource | None = None, tuning: Tuning | None = None):
        if viewport_width <= 0 or viewport_height <= 0:
            raise ValueError("Viewport dimensions must be positive")
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        self.tuning = tuning or Tuning()
        self.player_x = viewport_width / 4

        self.body = PlayerBody.spawn(viewport_height)
        self.obstacle = Obstacle(x=viewport_width, viewport_height=viewport_height)
        self.cycler = ObstacleCycler(self.obstacle, viewport_width, rng=rng,
                                     base_seconds=self.tuning.base_traversal_seconds,
                                     gap_range=self.tuning.gap_range)
        self.scorer = ScoreTracker(self.player_x)
        self.state = GameState.PLAYING
        self._start_cycle()

    # ---------- Read-only state ----------
    @property
    def game_state(self) -> GameState:
        return self.state

    @property
    def player_position(self) -> float:
        return self.body.y

    @property
    def player_velocity(self) -> float:
        return self.body.velocity

    @property
    def player_velocity_for_tilt(self) -> float:
        # raw velocity; the renderer maps it to an angle (see player_tilt)
        return self.body.velocity

    @property
    def player_tilt(self) -> float:
        return tilt_for_velocity(self.body.velocity)

    @property
    def obstacle_horizontal_position(self) -> float:
        return self.obstacle.x

    @property
    def obstacle_gap_offset(self) -> float:
        return self.obstacle.gap_offset

    @property
    def score(self) -> int:
        return self.scorer.score

    @property
    def speed_multiplier(self) -> float:
        return speed_multiplier(self.scorer.score)

    def snapshot(self) -> GameSnapshot:
        top, bottom = self.obstacle.rects()
        return GameSnapshot(
            player_x=self.player_x,
            player_y=self.body.y,
            player_velocity=self.body.velocity,
            player_tilt=self.player_tilt,
            obstacle_x=self.obstacle.x,
            gap_offset=self.obstacle.gap_offset,
            top_rect=top,
            bottom_rect=bottom,
            score=self.scorer.score,
            state=self.state,
        )

    # ---------- Clocks ----------
    def on_tick(self, dt: float | None):
        """Physics clock: integrate the bird, then test for collisions."""
        if self.state is GameState.GAME_OVER:
            return
        if not is_valid_dt(dt):
            logger.debug("Skipping physics tick with dt=%r", dt)
            return
        self.body.integrate(dt, self.tuning.gravity)
        if detect_collision(self.player_x, self.body.y, self.obstacle, self.viewport_height):
            self._game_over()

    def on_obstacle_clock(self, dt: float | None):
        """Animation clock: move the pipes, respawn them and score crossings."""
        if self.state is GameState.GAME_OVER:
            return
        if not is_valid_dt(dt):
            logger.debug("Skipping obstacle tick with dt=%r", dt)
            return
        for x in self.cycler.advance(dt, self.scorer.score):
            self.scorer.observe(x)

    def update(self, dt: float | None):
        self.on_tick(dt)
        self.on_obstacle_clock(dt)

    # ---------- Input ----------
    def on_tap(self):
        if self.state is GameState.GAME_OVER:
            self.restart()
        else:
            self.body.apply_impulse(self.tuning.jump_force)

    def restart(self):
        # state flips to PLAYING last, after everything else is reset
        self.body = PlayerBody.spawn(self.viewport_height)
        self.scorer.reset()
        self._start_cycle()
        self.state = GameState.PLAYING
        logger.info("Restarted")

    def _start_cycle(self):
        self.cycler.start_cycle(self.scorer.score)
        # seed the crossing check with the reset position
        self.scorer.observe(self.obstacle.x)

    def _game_over(self):
        if self.state is GameState.GAME_OVER:
            return
        self.state = GameState.GAME_OVER
        self.cycler.halt()
        logger.info("Game over with score %d", self.scorer.score)
