"""Linear-space RGBA colour with HSV construction and manipulation."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Color:
    """Linear-space RGBA colour, nominally in [0, 1] per channel.

    Out-of-range components are kept verbatim; clamping is left to whatever
    consumes the colour.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def rgb(cls, r: float, g: float, b: float, a: float = 1.0) -> Color:
        """Build a colour from RGB(A) components."""
        return cls(r, g, b, a)

    @classmethod
    def hsv(cls, h: float, s: float, v: float, a: float = 1.0) -> Color:
        """Build a colour from HSV(A), all normalised; hue wraps modulo 1."""
        h = h - math.floor(h)
        c = v * s
        h6 = h * 6.0
        x = c * (1.0 - abs(math.fmod(h6, 2.0) - 1.0))
        m = v - c

        if h6 < 1.0:
            r1, g1, b1 = c, x, 0.0
        elif h6 < 2.0:
            r1, g1, b1 = x, c, 0.0
        elif h6 < 3.0:
            r1, g1, b1 = 0.0, c, x
        elif h6 < 4.0:
            r1, g1, b1 = 0.0, x, c
        elif h6 < 5.0:
            r1, g1, b1 = x, 0.0, c
        else:
            r1, g1, b1 = c, 0.0, x

        return cls(r1 + m, g1 + m, b1 + m, a)

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0, 1.0)

    def hue(self) -> float:
        """Hue in [0, 1); greys report 0."""
        high = max(self.r, self.g, self.b)
        low = min(self.r, self.g, self.b)
        delta = high - low
        if delta == 0.0:
            return 0.0

        if high == self.r:
            h = math.fmod((self.g - self.b) / delta, 6.0)
        elif high == self.g:
            h = (self.b - self.r) / delta + 2.0
        else:
            h = (self.r - self.g) / delta + 4.0

        h /= 6.0
        if h < 0.0:
            h += 1.0
        return h

    def saturation(self) -> float:
        high = max(self.r, self.g, self.b)
        if high == 0.0:
            return 0.0
        low = min(self.r, self.g, self.b)
        return (high - low) / high

    def value(self) -> float:
        return max(self.r, self.g, self.b)

    def with_hue(self, h: float) -> Color:
        return Color.hsv(h, self.saturation(), self.value(), self.a)

    def with_saturation(self, s: float) -> Color:
        return Color.hsv(self.hue(), s, self.value(), self.a)

    def with_value(self, v: float) -> Color:
        return Color.hsv(self.hue(), self.saturation(), v, self.a)

    def with_alpha(self, a: float) -> Color:
        return replace(self, a=a)

    def floats(self) -> tuple[float, float, float, float]:
        """The components as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)