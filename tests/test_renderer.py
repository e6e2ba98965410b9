import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from twentygames.color import Color
from twentygames.renderer import MAX_FRAMES_IN_FLIGHT, Renderer

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def make(width=20, height=20):
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    return surface, Renderer(surface)


def test_default_clear_is_opaque_black():
    surface, r = make()
    surface.fill((9, 9, 9, 9))
    assert r.begin_frame() is True
    assert tuple(surface.get_at((0, 0))) == BLACK
    r.end_frame()


def test_clear_color_is_used_until_changed():
    surface, r = make()
    r.set_clear_color(Color.white())
    r.begin_frame()
    r.end_frame()
    r.begin_frame()
    assert tuple(surface.get_at((19, 19))) == WHITE
    r.end_frame()


def test_draw_quad_in_pixel_space():
    surface, r = make()
    r.begin_frame()
    r.draw_quad(2, 2, 4, 4, Color.white())
    assert tuple(surface.get_at((2, 2))) == WHITE
    assert tuple(surface.get_at((5, 5))) == WHITE
    assert tuple(surface.get_at((1, 1))) == BLACK
    assert tuple(surface.get_at((6, 6))) == BLACK
    r.end_frame()


def test_projection_extent_scales_coordinates():
    surface, r = make()
    r.begin_frame()
    r.set_projection_extent(10, 10)
    r.draw_quad(0, 0, 5, 5, Color.white())
    assert tuple(surface.get_at((9, 9))) == WHITE
    assert tuple(surface.get_at((10, 10))) == BLACK
    r.end_frame()


def test_begin_frame_resets_projection_to_pixels():
    surface, r = make()
    r.begin_frame()
    r.set_projection_extent(10, 10)
    r.end_frame()
    r.begin_frame()
    r.draw_quad(0, 0, 5, 5, Color.white())
    assert tuple(surface.get_at((4, 4))) == WHITE
    assert tuple(surface.get_at((5, 5))) == BLACK
    r.end_frame()


def test_draw_disc_fills_centre_not_corners():
    surface, r = make()
    r.begin_frame()
    r.draw_disc(10, 10, 5, Color.white())
    assert tuple(surface.get_at((10, 10))) == WHITE
    assert tuple(surface.get_at((5, 5))) == BLACK
    assert tuple(surface.get_at((14, 5))) == BLACK
    r.end_frame()


def test_draw_outside_frame_raises():
    _, r = make()
    with pytest.raises(RuntimeError):
        r.draw_quad(0, 0, 1, 1, Color.white())
    with pytest.raises(RuntimeError):
        r.draw_disc(5, 5, 2, Color.white())


def test_end_frame_without_begin_raises():
    _, r = make()
    with pytest.raises(RuntimeError):
        r.end_frame()


def test_begin_frame_twice_raises():
    _, r = make()
    r.begin_frame()
    with pytest.raises(RuntimeError):
        r.begin_frame()


def test_zero_sized_surface_skips_frame():
    _, r = make(0, 0)
    assert r.begin_frame() is False
    assert r.in_frame is False
    with pytest.raises(RuntimeError):
        r.end_frame()


def test_viewport_extent_matches_surface():
    _, r = make(20, 10)
    r.begin_frame()
    assert r.viewport_extent() == (20, 10)
    r.end_frame()


def test_frame_index_rotates():
    _, r = make()
    seen = []
    for _ in range(MAX_FRAMES_IN_FLIGHT * 2):
        seen.append(r.frame_index)
        r.begin_frame()
        r.end_frame()
    assert seen == [0, 1, 0, 1]


def test_mid_grey_is_srgb_encoded_brighter():
    surface, r = make()
    r.set_clear_color(Color.rgb(0.5, 0.5, 0.5))
    r.begin_frame()
    red, green, blue, alpha = tuple(surface.get_at((0, 0)))
    assert red == green == blue
    assert red > 128
    assert alpha == 255
    r.end_frame()


def test_out_of_range_channels_are_clamped():
    surface, r = make()
    r.set_clear_color(Color.rgb(2.0, -1.0, 0.0))
    r.begin_frame()
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    r.end_frame()