# game_view.py
from __future__ import annotations
import math
import arcade

from collision import Rect
from session import GameSession, GameSnapshot, GameState
from settings import (
    BIRD_WIDTH, BIRD_HEIGHT, GROUND_MARGIN,
    GROUND, GRASS, BIRD_COLOR, PIPE_COLOR, PIPE_EDGE,
    WHITE, PINK, GRAY,
)


class GameView(arcade.View):
    """Draws a GameSession and feeds it input and frame time. No game rules here."""

    def __init__(self, session: GameSession):
        super().__init__()
        self.session = session
        self.view_w = session.viewport_width
        self.view_h = session.viewport_height

        # --- Sprites ---
        self.bird_list = arcade.SpriteList()
        self.bird = arcade.SpriteSolidColor(BIRD_WIDTH, BIRD_HEIGHT, color=BIRD_COLOR)
        self.bird_list.append(self.bird)

        # --- Text ---
        self.score_text = arcade.Text("0", self.view_w / 2, self.view_h - 100, WHITE, 40,
                                      anchor_x="center", bold=True)
        self.dead_text = arcade.Text("Game Over", self.view_w / 2, self.view_h / 2 + 40,
                                     PINK, 28, anchor_x="center")
        self.help_text = arcade.Text("SPACE/Click = Restart", self.view_w / 2, self.view_h / 2 - 6,
                                     GRAY, 18, anchor_x="center")

    # ---------- Coordinates ----------
    def _flip_y(self, y: float, h: float = 0.0) -> float:
        """Session y grows downward from the top; arcade's grows upward."""
        return self.view_h - y - h

    def _draw_pipe(self, rect: Rect):
        bottom = self._flip_y(rect.y, rect.h)
        arcade.draw_lbwh_rectangle_filled(rect.x, bottom, rect.w, rect.h, PIPE_COLOR)
        arcade.draw_lbwh_rectangle_outline(rect.x, bottom, rect.w, rect.h, PIPE_EDGE, 3)

    def _place_bird(self, snap: GameSnapshot):
        self.bird.center_x = snap.player_x + BIRD_WIDTH / 2
        self.bird.center_y = self._flip_y(snap.player_y + BIRD_HEIGHT / 2)
        # arcade angles are clockwise degrees; positive tilt = nose down
        self.bird.angle = math.degrees(snap.player_tilt)

    # ---------- Input ----------
    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in (arcade.key.SPACE, arcade.key.UP):
            self.session.on_tap()
        elif symbol == arcade.key.ESCAPE:
            self.window.close()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self.session.on_tap()

    # ---------- Update ----------
    def on_update(self, dt: float):
        self.session.update(dt)

    # ---------- Draw ----------
    def on_draw(self):
        self.clear()
        snap = self.session.snapshot()

        self._draw_pipe(snap.top_rect)
        self._draw_pipe(snap.bottom_rect)

        # Ground strip; its top edge sits a little below the death line
        ground_h = GROUND_MARGIN * 0.75
        arcade.draw_lbwh_rectangle_filled(0, 0, self.view_w, ground_h, GROUND)
        arcade.draw_lbwh_rectangle_filled(0, ground_h - 8, self.view_w, 8, GRASS)

        self._place_bird(snap)
        self.bird_list.draw()

        self.score_text.text = str(snap.score)
        self.score_text.draw()
        if snap.state is GameState.GAME_OVER:
            self.dead_text.draw()
            self.help_text.draw()
