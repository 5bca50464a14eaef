"""Keyboard keys and their mapping from names and to GLFW key codes."""

from __future__ import annotations

import string
from enum import IntEnum


class Key(IntEnum):
    """A keyboard key independent of any windowing library."""

    UNKNOWN = -1
    SPACE = 0
    GRAVE_ACCENT = 1
    NUM0 = 2
    NUM1 = 3
    NUM2 = 4
    NUM3 = 5
    NUM4 = 6
    NUM5 = 7
    NUM6 = 8
    NUM7 = 9
    NUM8 = 10
    NUM9 = 11
    MINUS = 12
    EQUAL = 13
    A = 14
    B = 15
    C = 16
    D = 17
    E = 18
    F = 19
    G = 20
    H = 21
    I = 22  # noqa: E741
    J = 23
    K = 24
    L = 25
    M = 26
    N = 27
    O = 28  # noqa: E741
    P = 29
    Q = 30
    R = 31
    S = 32
    T = 33
    U = 34
    V = 35
    W = 36
    X = 37
    Y = 38
    Z = 39
    LBRACKET = 40
    RBRACKET = 41
    BACKSLASH = 42
    SEMICOLON = 43
    APOSTROPHE = 44
    COMMA = 45
    PERIOD = 46
    SLASH = 47
    ESC = 48
    ENTER = 49
    TAB = 50
    BACKSPACE = 51
    INSERT = 52
    DELETE = 53
    RIGHT = 54
    LEFT = 55
    DOWN = 56
    UP = 57
    PAGE_UP = 58
    PAGE_DOWN = 59
    HOME = 60
    END = 61
    CAPS_LOCK = 62
    SCROLL_LOCK = 63
    NUM_LOCK = 64
    PRINT_SCREEN = 65
    PAUSE = 66
    F1 = 67
    F2 = 68
    F3 = 69
    F4 = 70
    F5 = 71
    F6 = 72
    F7 = 73
    F8 = 74
    F9 = 75
    F10 = 76
    F11 = 77
    F12 = 78
    LSHIFT = 79
    LCTRL = 80
    LALT = 81
    LSUPER = 82
    RSHIFT = 83
    RCTRL = 84
    RALT = 85
    RSUPER = 86
    MENU = 87


GLFW_KEY_UNKNOWN = -1
GLFW_KEY_LAST = 348

_NAMED_KEYS: dict[str, Key] = {
    "unknown": Key.UNKNOWN,
    "space": Key.SPACE,
    "`": Key.GRAVE_ACCENT,
    "-": Key.MINUS,
    "=": Key.EQUAL,
    "[": Key.LBRACKET,
    "]": Key.RBRACKET,
    "\\": Key.BACKSLASH,
    ";": Key.SEMICOLON,
    "'": Key.APOSTROPHE,
    ",": Key.COMMA,
    ".": Key.PERIOD,
    "/": Key.SLASH,
    "esc": Key.ESC,
    "enter": Key.ENTER,
    "tab": Key.TAB,
    "backspace": Key.BACKSPACE,
    "insert": Key.INSERT,
    "delete": Key.DELETE,
    "right": Key.RIGHT,
    "left": Key.LEFT,
    "down": Key.DOWN,
    "up": Key.UP,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "capslock": Key.CAPS_LOCK,
    "scrolllock": Key.SCROLL_LOCK,
    "numlock": Key.NUM_LOCK,
    "printscreen": Key.PRINT_SCREEN,
    "pause": Key.PAUSE,
    "lshift": Key.LSHIFT,
    "lctrl": Key.LCTRL,
    "lalt": Key.LALT,
    "lsuper": Key.LSUPER,
    "rshift": Key.RSHIFT,
    "rctrl": Key.RCTRL,
    "ralt": Key.RALT,
    "rsuper": Key.RSUPER,
    "menu": Key.MENU,
}
_NAMED_KEYS.update({digit: Key[f"NUM{digit}"] for digit in string.digits})
_NAMED_KEYS.update({letter: Key[letter.upper()] for letter in string.ascii_lowercase})
_NAMED_KEYS.update({f"f{n}": Key[f"F{n}"] for n in range(1, 13)})

_GLFW_CODES: dict[Key, int] = {
    Key.UNKNOWN: GLFW_KEY_UNKNOWN,
    Key.SPACE: 32,
    Key.APOSTROPHE: 39,
    Key.COMMA: 44,
    Key.MINUS: 45,
    Key.PERIOD: 46,
    Key.SLASH: 47,
    Key.SEMICOLON: 59,
    Key.EQUAL: 61,
    Key.LBRACKET: 91,
    Key.BACKSLASH: 92,
    Key.RBRACKET: 93,
    Key.GRAVE_ACCENT: 96,
    Key.ESC: 256,
    Key.ENTER: 257,
    Key.TAB: 258,
    Key.BACKSPACE: 259,
    Key.INSERT: 260,
    Key.DELETE: 261,
    Key.RIGHT: 262,
    Key.LEFT: 263,
    Key.DOWN: 264,
    Key.UP: 265,
    Key.PAGE_UP: 266,
    Key.PAGE_DOWN: 267,
    Key.HOME: 268,
    Key.END: 269,
    Key.CAPS_LOCK: 280,
    Key.SCROLL_LOCK: 281,
    Key.NUM_LOCK: 282,
    Key.PRINT_SCREEN: 283,
    Key.PAUSE: 284,
    Key.LSHIFT: 340,
    Key.LCTRL: 341,
    Key.LALT: 342,
    Key.LSUPER: 343,
    Key.RSHIFT: 344,
    Key.RCTRL: 345,
    Key.RALT: 346,
    Key.RSUPER: 347,
    Key.MENU: GLFW_KEY_LAST,
}
_GLFW_CODES.update({Key[f"NUM{d}"]: ord(str(d)) for d in range(10)})
_GLFW_CODES.update({Key[c]: ord(c) for c in string.ascii_uppercase})
_GLFW_CODES.update({Key[f"F{n}"]: 289 + n for n in range(1, 13)})


def string_to_key(name: str) -> Key:
    """Return the key with the given case-insensitive name, or Key.UNKNOWN."""
    return _NAMED_KEYS.get(name.lower(), Key.UNKNOWN)


def key_to_glfw(key: Key) -> int:
    """Return the GLFW key code for a key, or the GLFW unknown code."""
    return _GLFW_CODES.get(key, GLFW_KEY_UNKNOWN)