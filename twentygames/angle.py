"""Unit-tagged angle: stored in radians, built explicitly from either unit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True, order=True)
class Angle:
    """An angle held in radians.

    Build one with :meth:`from_radians` or :meth:`from_degrees` (or the
    :func:`rad` / :func:`deg` shorthands) so the unit is visible at every
    call site.
    """

    radians: float = 0.0

    @classmethod
    def from_radians(cls, v: float) -> Angle:
        return cls(float(v))

    @classmethod
    def from_degrees(cls, v: float) -> Angle:
        return cls(v * (math.pi / 180.0))

    @classmethod
    def zero(cls) -> Angle:
        return cls(0.0)

    def degrees(self) -> float:
        return self.radians * (180.0 / math.pi)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)

    def __add__(self, other: object) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: object) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __mul__(self, scale: object) -> Angle:
        if not isinstance(scale, Real):
            return NotImplemented
        return Angle(self.radians * float(scale))

    __rmul__ = __mul__

    def __truediv__(self, scale: object) -> Angle:
        if not isinstance(scale, Real):
            return NotImplemented
        return Angle(self.radians / float(scale))


def rad(v: float) -> Angle:
    """Shorthand for :meth:`Angle.from_radians`."""
    return Angle.from_radians(v)


def deg(v: float) -> Angle:
    """Shorthand for :meth:`Angle.from_degrees`."""
    return Angle.from_degrees(v)