"""Orthographic projection and the per-draw push-constant block for 2-D quads."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

#: The 4x4 identity, stored as four columns.
IDENTITY: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

# mat4 at offset 0, rect vec4 at 64, colour vec4 at 80: 24 little-endian floats.
_LAYOUT = struct.Struct("<24f")

#: Size in bytes of a packed :class:`QuadPushConstants` block.
PUSH_CONSTANTS_SIZE = _LAYOUT.size

#: Smallest push-constant budget a device is guaranteed to offer.
MAX_GUARANTEED_PUSH_CONSTANTS = 128


def ortho_rh_zo(
    left: float,
    right: float,
    bottom: float,
    top: float,
    z_near: float,
    z_far: float,
) -> Matrix4:
    """Right-handed orthographic projection with depth mapped to [0, 1].

    The matrix is returned column-major: ``m[column][row]``.
    """
    if right == left or top == bottom or z_far == z_near:
        raise ValueError("projection volume has zero extent on some axis")
    width = right - left
    height = top - bottom
    depth = z_far - z_near
    return (
        (2.0 / width, 0.0, 0.0, 0.0),
        (0.0, 2.0 / height, 0.0, 0.0),
        (0.0, 0.0, -1.0 / depth, 0.0),
        (-(right + left) / width, -(top + bottom) / height, -z_near / depth, 1.0),
    )


def transform_point(matrix: Matrix4, x: float, y: float) -> tuple[float, float]:
    """Map the point ``(x, y, 0)`` through ``matrix`` and return its x and y."""
    px, py, pz, pw = x, y, 0.0, 1.0
    out = [
        sum(col[row] * comp for col, comp in zip(matrix, (px, py, pz, pw)))
        for row in range(4)
    ]
    w = out[3]
    if w == 0.0:
        raise ValueError("point maps to infinity under this matrix")
    return (out[0] / w, out[1] / w)


def disc_rect(cx: float, cy: float, radius: float) -> tuple[float, float, float, float]:
    """The ``(x, y, w, h)`` square that bounds a disc of ``radius`` at ``(cx, cy)``."""
    return (cx - radius, cy - radius, radius * 2.0, radius * 2.0)


def _check_matrix(matrix: Matrix4) -> Matrix4:
    columns = tuple(tuple(float(v) for v in col) for col in matrix)
    if len(columns) != 4 or any(len(col) != 4 for col in columns):
        raise ValueError("view_proj must be a 4x4 matrix")
    return columns  # type: ignore[return-value]


def _check_vec4(name: str, values: tuple[float, ...]) -> tuple[float, float, float, float]:
    vec = tuple(float(v) for v in values)
    if len(vec) != 4:
        raise ValueError(f"{name} must have exactly 4 components")
    return vec  # type: ignore[return-value]


@dataclass(frozen=True)
class QuadPushConstants:
    """Per-draw data for the quad shader: projection, target rect and colour.

    ``rect`` is ``(x, y, w, h)`` with a top-left origin; ``color`` is linear
    RGBA. The packed form matches the shader's block byte for byte.
    """

    view_proj: Matrix4 = IDENTITY
    rect: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    color: tuple[float, float, float, float] = field(default=(0.0, 0.0, 0.0, 1.0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "view_proj", _check_matrix(self.view_proj))
        object.__setattr__(self, "rect", _check_vec4("rect", self.rect))
        object.__setattr__(self, "color", _check_vec4("color", self.color))

    def pack(self) -> bytes:
        """Serialise to the 96-byte, column-major, little-endian layout."""
        flat = [v for col in self.view_proj for v in col]
        return _LAYOUT.pack(*flat, *self.rect, *self.color)