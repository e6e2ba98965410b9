"""Immediate-mode 2-D renderer drawing solid quads and discs onto a pygame surface."""

from __future__ import annotations

import pygame

from twentygames.color import Color
from twentygames.projection import Matrix4, disc_rect, ortho_rh_zo, transform_point

#: Number of frame slots the renderer rotates through.
MAX_FRAMES_IN_FLIGHT = 2


def _linear_to_srgb(channel: float) -> int:
    """Encode one linear channel as an 8-bit sRGB value, clamped to [0, 255]."""
    c = min(max(channel, 0.0), 1.0)
    if c <= 0.0031308:
        encoded = 12.92 * c
    else:
        encoded = 1.055 * c ** (1.0 / 2.4) - 0.055
    return round(min(max(encoded, 0.0), 1.0) * 255.0)


def _to_pixel_color(color: Color) -> tuple[int, int, int, int]:
    r, g, b, a = color.floats()
    alpha = round(min(max(a, 0.0), 1.0) * 255.0)
    return (_linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(b), alpha)


class Renderer:
    """Draws into ``surface`` between :meth:`begin_frame` and :meth:`end_frame`.

    Colours are linear; they are sRGB-encoded when written to the surface.
    Coordinates are pixels with a top-left origin unless
    :meth:`set_projection_extent` picks another space for the current frame.
    """

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._extent = surface.get_size()
        self._clear_color = Color.black()
        self._view_proj: Matrix4 | None = None
        self._frame_index = 0
        self._in_frame = False

    @property
    def frame_index(self) -> int:
        """Which frame slot is active; rotates after every finished frame."""
        return self._frame_index

    @property
    def in_frame(self) -> bool:
        """True between a successful :meth:`begin_frame` and :meth:`end_frame`."""
        return self._in_frame

    def set_clear_color(self, color: Color) -> None:
        """Colour every following frame is cleared to, until set again."""
        self._clear_color = color

    def set_projection_extent(self, w: float, h: float) -> None:
        """Use a ``w`` x ``h`` coordinate space for draws until the next frame."""
        self._view_proj = ortho_rh_zo(0.0, w, 0.0, h, 0.0, 1.0)

    def begin_frame(self) -> bool:
        """Start a frame and clear it.

        Returns False, and starts nothing, while the surface has no drawable
        area; the caller must then skip :meth:`end_frame`.
        """
        if self._in_frame:
            raise RuntimeError("begin_frame called twice without end_frame")
        self._extent = self._surface.get_size()
        width, height = self._extent
        if width == 0 or height == 0:
            return False
        self._view_proj = ortho_rh_zo(0.0, float(width), 0.0, float(height), 0.0, 1.0)
        self._surface.fill(_to_pixel_color(self._clear_color))
        self._in_frame = True
        return True

    def end_frame(self) -> None:
        """Finish the frame and present it if the surface is the window."""
        if not self._in_frame:
            raise RuntimeError("end_frame called without a successful begin_frame")
        self._in_frame = False
        if pygame.display.get_init() and pygame.display.get_surface() is self._surface:
            pygame.display.flip()
        self._frame_index = (self._frame_index + 1) % MAX_FRAMES_IN_FLIGHT

    def _pixel_rect(self, x: float, y: float, w: float, h: float) -> pygame.Rect:
        if not self._in_frame or self._view_proj is None:
            raise RuntimeError("draw calls are only valid inside a frame")
        width, height = self._extent
        corners = [
            transform_point(self._view_proj, px, py) for px, py in ((x, y), (x + w, y + h))
        ]
        xs = [(nx + 1.0) * 0.5 * width for nx, _ in corners]
        ys = [(ny + 1.0) * 0.5 * height for _, ny in corners]
        left, right = round(min(xs)), round(max(xs))
        top, bottom = round(min(ys)), round(max(ys))
        return pygame.Rect(left, top, right - left, bottom - top)

    def draw_quad(self, x: float, y: float, w: float, h: float, color: Color) -> None:
        """Fill the axis-aligned rectangle at ``(x, y)`` of size ``w`` x ``h``."""
        rect = self._pixel_rect(x, y, w, h)
        if rect.width > 0 and rect.height > 0:
            self._surface.fill(_to_pixel_color(color), rect)

    def draw_disc(self, cx: float, cy: float, radius: float, color: Color) -> None:
        """Fill the disc of ``radius`` centred on ``(cx, cy)``."""
        rect = self._pixel_rect(*disc_rect(cx, cy, radius))
        if rect.width > 0 and rect.height > 0:
            pygame.draw.ellipse(self._surface, _to_pixel_color(color), rect)

    def viewport_extent(self) -> tuple[int, int]:
        """Drawable size in pixels as of the last frame start."""
        return self._extent