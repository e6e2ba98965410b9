"""Pong simulation state: playfield size, paddle, ball and serve rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import ClassVar

GAME_W = 800.0
GAME_H = 600.0


@dataclass(frozen=True)
class Vec2:
    """An immutable 2-D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> Vec2:
        if not isinstance(scale, Real):
            return NotImplemented
        s = float(scale)
        return Vec2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)


@dataclass
class PaddleState:
    """The left paddle. ``vel`` is set from input each tick."""

    HEIGHT: ClassVar[float] = GAME_H * 0.20
    WIDTH: ClassVar[float] = GAME_W * 0.02
    VEL_MAX: ClassVar[float] = GAME_H * 0.20

    x_pos: float = 50.0
    y_pos: float = 0.0
    y_pos_prev: float = 0.0
    vel: float = 0.0


@dataclass
class BallState:
    """The ball, with its previous position kept for interpolation."""

    RADIUS: ClassVar[float] = 6.0
    SPEED: ClassVar[float] = 340.0
    COS30: ClassVar[float] = 0.866025
    SIN30: ClassVar[float] = 0.500000

    pos: Vec2 = field(default_factory=Vec2)
    pos_prev: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)

    @classmethod
    def serve(cls, to_right: bool) -> BallState:
        """A ball at the centre, launched 30 degrees from horizontal."""
        center = Vec2(GAME_W * 0.5, GAME_H * 0.5)
        sx = cls.SPEED * cls.COS30 * (1.0 if to_right else -1.0)
        sy = cls.SPEED * cls.SIN30
        return cls(pos=center, pos_prev=center, vel=Vec2(sx, sy))


@dataclass
class GameState:
    """Everything the Pong simulation advances each fixed step."""

    paddle: PaddleState = field(default_factory=PaddleState)
    ball: BallState = field(default_factory=BallState)
    serve_right: bool = True