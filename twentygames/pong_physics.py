"""Fixed-step Pong simulation."""

from __future__ import annotations

from twentygames.pong_state import GAME_H, GAME_W, BallState, GameState, PaddleState, Vec2


def step_physics(gs: GameState, dt: float) -> None:
    """Advance ``gs`` by one step of ``dt`` seconds, in place.

    Applies the paddle velocity, moves the ball, resolves wall and paddle
    collisions, and re-serves once the ball leaves the playfield.
    """
    paddle = gs.paddle
    ball = gs.ball
    radius = BallState.RADIUS

    paddle.y_pos_prev = paddle.y_pos
    paddle.y_pos = min(max(paddle.y_pos + paddle.vel * dt, 0.0), GAME_H - PaddleState.HEIGHT)

    ball.pos_prev = ball.pos
    moved = ball.pos + ball.vel * dt
    x, y = moved.x, moved.y
    vx, vy = ball.vel.x, ball.vel.y

    if y - radius < 0.0:
        y = radius + (radius - y)
        vy = abs(vy)
    if y + radius > GAME_H:
        y = (GAME_H - radius) - (y + radius - GAME_H)
        vy = -abs(vy)

    # The left paddle is struck on its right face.
    face_x = paddle.x_pos + PaddleState.WIDTH
    if (
        vx < 0.0
        and x - radius <= face_x
        and x >= paddle.x_pos
        and y + radius >= paddle.y_pos
        and y - radius <= paddle.y_pos + PaddleState.HEIGHT
    ):
        x = (face_x + radius) + ((face_x + radius) - x)
        vx = abs(vx)

    ball.pos = Vec2(x, y)
    ball.vel = Vec2(vx, vy)

    if x + radius < 0.0 or x - radius > GAME_W:
        gs.serve_right = not gs.serve_right
        gs.ball = BallState.serve(gs.serve_right)