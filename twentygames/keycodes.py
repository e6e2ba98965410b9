"""Keyboard key identifiers shared by the platform and engine layers."""

from __future__ import annotations

from enum import IntEnum, auto


class KeyCode(IntEnum):
    """Keyboard keys.

    Letters, digits, function keys and numpad digits form contiguous runs, so
    a platform layer can build its lookup table with simple arithmetic.
    ``UNKNOWN`` is what a lookup returns for a native key with no mapping.
    """

    UNKNOWN = 0

    KEY_A = auto()
    KEY_B = auto()
    KEY_C = auto()
    KEY_D = auto()
    KEY_E = auto()
    KEY_F = auto()
    KEY_G = auto()
    KEY_H = auto()
    KEY_I = auto()
    KEY_J = auto()
    KEY_K = auto()
    KEY_L = auto()
    KEY_M = auto()
    KEY_N = auto()
    KEY_O = auto()
    KEY_P = auto()
    KEY_Q = auto()
    KEY_R = auto()
    KEY_S = auto()
    KEY_T = auto()
    KEY_U = auto()
    KEY_V = auto()
    KEY_W = auto()
    KEY_X = auto()
    KEY_Y = auto()
    KEY_Z = auto()

    DIGIT_0 = auto()
    DIGIT_1 = auto()
    DIGIT_2 = auto()
    DIGIT_3 = auto()
    DIGIT_4 = auto()
    DIGIT_5 = auto()
    DIGIT_6 = auto()
    DIGIT_7 = auto()
    DIGIT_8 = auto()
    DIGIT_9 = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()

    SHIFT_LEFT = auto()
    SHIFT_RIGHT = auto()
    CONTROL_LEFT = auto()
    CONTROL_RIGHT = auto()
    ALT_LEFT = auto()
    ALT_RIGHT = auto()
    SUPER_LEFT = auto()
    SUPER_RIGHT = auto()

    SPACE = auto()
    ENTER = auto()
    TAB = auto()
    ESCAPE = auto()
    BACKSPACE = auto()

    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    INSERT = auto()
    DELETE = auto()

    NUMPAD_0 = auto()
    NUMPAD_1 = auto()
    NUMPAD_2 = auto()
    NUMPAD_3 = auto()
    NUMPAD_4 = auto()
    NUMPAD_5 = auto()
    NUMPAD_6 = auto()
    NUMPAD_7 = auto()
    NUMPAD_8 = auto()
    NUMPAD_9 = auto()
    NUMPAD_ADD = auto()
    NUMPAD_SUBTRACT = auto()
    NUMPAD_MULTIPLY = auto()
    NUMPAD_DIVIDE = auto()
    NUMPAD_DECIMAL = auto()

    CAPS_LOCK = auto()
    NUM_LOCK = auto()
    SCROLL_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()

    COMMA = auto()
    PERIOD = auto()
    SLASH = auto()
    SEMICOLON = auto()
    QUOTE = auto()
    BRACKET_LEFT = auto()
    BRACKET_RIGHT = auto()
    BACKSLASH = auto()
    BACKQUOTE = auto()
    MINUS = auto()
    EQUAL = auto()


#: Number of key identifiers, ``UNKNOWN`` included.
KEY_COUNT = len(KeyCode)