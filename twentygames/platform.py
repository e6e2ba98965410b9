"""Window, event pump and keyboard polling on top of pygame."""

from __future__ import annotations

import os
import string
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from twentygames.keycodes import KeyCode  # noqa: E402

DEFAULT_WINDOW_SIZE = (800, 600)


def _const(*names: str) -> int | None:
    """The first pygame key constant among ``names`` that exists."""
    for name in names:
        value = getattr(pygame, name, None)
        if value is not None:
            return value
    return None


def _build_key_table() -> dict[int, KeyCode]:
    table: dict[int, KeyCode] = {}

    runs = (
        ([f"K_{c}" for c in string.ascii_lowercase], KeyCode.KEY_A),
        ([f"K_{d}" for d in string.digits], KeyCode.DIGIT_0),
        ([f"K_F{n}" for n in range(1, 13)], KeyCode.F1),
    )
    for names, first in runs:
        for offset, name in enumerate(names):
            value = _const(name)
            if value is not None:
                table[value] = KeyCode(first + offset)

    for offset, digit in enumerate(string.digits):
        value = _const(f"K_KP{digit}", f"K_KP_{digit}")
        if value is not None:
            table[value] = KeyCode(KeyCode.NUMPAD_0 + offset)

    named = (
        (("K_UP",), KeyCode.ARROW_UP),
        (("K_DOWN",), KeyCode.ARROW_DOWN),
        (("K_LEFT",), KeyCode.ARROW_LEFT),
        (("K_RIGHT",), KeyCode.ARROW_RIGHT),
        (("K_LSHIFT",), KeyCode.SHIFT_LEFT),
        (("K_RSHIFT",), KeyCode.SHIFT_RIGHT),
        (("K_LCTRL",), KeyCode.CONTROL_LEFT),
        (("K_RCTRL",), KeyCode.CONTROL_RIGHT),
        (("K_LALT",), KeyCode.ALT_LEFT),
        (("K_RALT",), KeyCode.ALT_RIGHT),
        (("K_LSUPER", "K_LGUI"), KeyCode.SUPER_LEFT),
        (("K_RSUPER", "K_RGUI"), KeyCode.SUPER_RIGHT),
        (("K_SPACE",), KeyCode.SPACE),
        (("K_RETURN",), KeyCode.ENTER),
        # Numpad enter reports as the main Enter key.
        (("K_KP_ENTER",), KeyCode.ENTER),
        (("K_TAB",), KeyCode.TAB),
        (("K_ESCAPE",), KeyCode.ESCAPE),
        (("K_BACKSPACE",), KeyCode.BACKSPACE),
        (("K_HOME",), KeyCode.HOME),
        (("K_END",), KeyCode.END),
        (("K_PAGEUP",), KeyCode.PAGE_UP),
        (("K_PAGEDOWN",), KeyCode.PAGE_DOWN),
        (("K_INSERT",), KeyCode.INSERT),
        (("K_DELETE",), KeyCode.DELETE),
        (("K_KP_PLUS",), KeyCode.NUMPAD_ADD),
        (("K_KP_MINUS",), KeyCode.NUMPAD_SUBTRACT),
        (("K_KP_MULTIPLY",), KeyCode.NUMPAD_MULTIPLY),
        (("K_KP_DIVIDE",), KeyCode.NUMPAD_DIVIDE),
        (("K_KP_PERIOD",), KeyCode.NUMPAD_DECIMAL),
        (("K_CAPSLOCK",), KeyCode.CAPS_LOCK),
        (("K_NUMLOCK", "K_NUMLOCKCLEAR"), KeyCode.NUM_LOCK),
        (("K_SCROLLOCK", "K_SCROLLLOCK"), KeyCode.SCROLL_LOCK),
        (("K_PRINT", "K_PRINTSCREEN"), KeyCode.PRINT_SCREEN),
        (("K_PAUSE",), KeyCode.PAUSE),
        (("K_COMMA",), KeyCode.COMMA),
        (("K_PERIOD",), KeyCode.PERIOD),
        (("K_SLASH",), KeyCode.SLASH),
        (("K_SEMICOLON",), KeyCode.SEMICOLON),
        (("K_QUOTE",), KeyCode.QUOTE),
        (("K_LEFTBRACKET",), KeyCode.BRACKET_LEFT),
        (("K_RIGHTBRACKET",), KeyCode.BRACKET_RIGHT),
        (("K_BACKSLASH",), KeyCode.BACKSLASH),
        (("K_BACKQUOTE",), KeyCode.BACKQUOTE),
        (("K_MINUS",), KeyCode.MINUS),
        (("K_EQUALS",), KeyCode.EQUAL),
    )
    for names, code in named:
        value = _const(*names)
        if value is not None:
            table[value] = code

    return table


_KEY_TABLE = _build_key_table()


def keycode_from_pygame(key: int) -> KeyCode:
    """Map a pygame key constant to a :class:`KeyCode`; unmapped keys give UNKNOWN."""
    return _KEY_TABLE.get(key, KeyCode.UNKNOWN)


def version() -> str:
    return "0.0.1"


def executable_dir() -> Path:
    """Directory holding the running program, or an empty path if unknown."""
    program = sys.argv[0] if sys.argv else ""
    if not program:
        return Path()
    return Path(program).resolve().parent


class Platform:
    """A game window with its event pump and keyboard polling.

    The window is created hidden; :meth:`show` reveals it once the caller is
    ready to draw the first frame.
    """

    def __init__(self, window_name: str) -> None:
        pygame.display.init()
        pygame.display.set_caption(window_name)
        self._size = DEFAULT_WINDOW_SIZE
        pygame.display.set_mode(self._size, pygame.RESIZABLE | pygame.HIDDEN)
        self._running = True
        self._minimized = False
        self._open = True

    def __enter__(self) -> Platform:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def surface(self) -> pygame.Surface:
        """The window's drawable surface."""
        return pygame.display.get_surface()

    def show(self) -> None:
        """Make the window visible."""
        size = self.surface.get_size() if self.surface is not None else self._size
        pygame.display.set_mode(size, pygame.RESIZABLE | pygame.SHOWN)

    def poll_events(self) -> None:
        """Drain every queued window event without blocking."""
        restored = {
            getattr(pygame, name)
            for name in ("WINDOWRESTORED", "WINDOWMAXIMIZED", "WINDOWSHOWN")
            if hasattr(pygame, name)
        }
        minimized = getattr(pygame, "WINDOWMINIMIZED", None)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif minimized is not None and event.type == minimized:
                self._minimized = True
            elif event.type in restored:
                self._minimized = False

    def poll_pressed_keys(self) -> frozenset[KeyCode]:
        """The keys currently held down."""
        state = pygame.key.get_pressed()
        return frozenset(code for key, code in _KEY_TABLE.items() if state[key])

    def should_close(self) -> bool:
        """True once the window has been asked to close."""
        return not self._running

    def framebuffer_extent(self) -> tuple[int, int]:
        """Drawable size in pixels; ``(0, 0)`` while minimized."""
        if self._minimized or not self._open:
            return (0, 0)
        surface = self.surface
        if surface is None:
            return (0, 0)
        width, height = surface.get_size()
        return (width, height)

    def close(self) -> None:
        """Destroy the window. Safe to call more than once."""
        if self._open:
            self._open = False
            self._running = False
            pygame.display.quit()