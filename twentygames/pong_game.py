"""Pong: the game itself and the command that starts it."""

from __future__ import annotations

import argparse
import logging
import math
from pathlib import Path

from twentygames import log as engine_log
from twentygames.color import Color
from twentygames.engine import Engine
from twentygames.engine import version as engine_version
from twentygames.game import FixedUpdateContext, Game, GameContext
from twentygames.keycodes import KeyCode
from twentygames.platform import Platform
from twentygames.platform import version as platform_version
from twentygames.pong_physics import step_physics
from twentygames.pong_state import GAME_H, GAME_W, BallState, GameState, PaddleState

CLEAR_COLOR = Color.rgb(0.05, 0.08, 0.18)
WHITE = Color.rgb(1.0, 1.0, 1.0)

DASH_WIDTH = 4.0
DASH_HEIGHT = 20.0
DASH_GAP = 15.0


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def center_line_dashes() -> list[tuple[float, float, float, float]]:
    """The ``(x, y, w, h)`` rects of the dashed centre line.

    As many dashes as fit, centred vertically so the top and bottom margins
    are equal.
    """
    period = DASH_HEIGHT + DASH_GAP
    x = math.floor(GAME_W * 0.5 - DASH_WIDTH * 0.5)
    count = int((GAME_H + DASH_GAP) / period)
    y0 = math.floor((GAME_H - (count * period - DASH_GAP)) * 0.5)
    return [(x, y0 + i * period, DASH_WIDTH, DASH_HEIGHT) for i in range(count)]


class Pong(Game):
    """Single-paddle Pong: W and S move the left paddle."""

    def __init__(self) -> None:
        start_y = PaddleState.HEIGHT / 2 + 20
        self.state = GameState(
            paddle=PaddleState(y_pos=start_y, y_pos_prev=start_y),
            ball=BallState.serve(True),
        )
        self.clear_color = CLEAR_COLOR

    def fixed_update(self, ctx: FixedUpdateContext, fixed_dt: float) -> None:
        vel = 0.0
        if ctx.keyboard.pressed(KeyCode.KEY_W):
            vel = -PaddleState.VEL_MAX
        if ctx.keyboard.pressed(KeyCode.KEY_S):
            vel += PaddleState.VEL_MAX
        self.state.paddle.vel = vel
        step_physics(self.state, fixed_dt)

    def update(self, ctx: GameContext, dt: float) -> None:
        renderer = ctx.renderer
        renderer.set_projection_extent(GAME_W, GAME_H)
        renderer.set_clear_color(self.clear_color)

        paddle = self.state.paddle
        y = _lerp(paddle.y_pos_prev, paddle.y_pos, ctx.alpha)
        renderer.draw_quad(paddle.x_pos, y, PaddleState.WIDTH, PaddleState.HEIGHT, WHITE)

        ball = self.state.ball
        bx = _lerp(ball.pos_prev.x, ball.pos.x, ctx.alpha)
        by = _lerp(ball.pos_prev.y, ball.pos.y, ctx.alpha)
        renderer.draw_disc(bx, by, BallState.RADIUS, WHITE)

        for dash in center_line_dashes():
            renderer.draw_quad(*dash, WHITE)


def main(argv: list[str] | None = None) -> int:
    """Open the Pong window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="pong", description="Play Pong.")
    parser.parse_args(argv)

    logger = engine_log.init(engine_log.LogConfig(file_path=Path("pong.log")))
    logger.info("Pong - engine %s, platform %s", engine_version(), platform_version())
    try:
        with Platform("Pong") as platform:
            engine = Engine(platform)
            try:
                engine.init_renderer("Pong")
            except RuntimeError as exc:
                logger.error("Renderer init failed: %s", exc)
                return 1
            engine.run(Pong())
        return 0
    finally:
        logging.getLogger(engine_log.LOGGER_NAME).info("Pong exiting")
        engine_log.shutdown()