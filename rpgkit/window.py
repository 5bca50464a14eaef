"""Window state: keyboard, mouse and cursor input and the framebuffer size."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum

from .keys import GLFW_KEY_LAST, Key, key_to_glfw

MOUSE_BUTTON_LAST = 7

EventHandler = Callable[[int, int], None]


class Action(IntEnum):
    """What happened to a key or mouse button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Window:
    """The state of a game window, fed by the windowing system's events.

    ``width`` and ``height`` are the framebuffer size; the logical window
    size given at creation is used to scale cursor positions.
    """

    def __init__(self, width: int, height: int, title: str) -> None:
        self.title = title
        self.width = width
        self.height = height
        self._window_size = (width, height)
        self._open = True
        self._keys = [False] * (GLFW_KEY_LAST + 1)
        self._mouse_buttons = [False] * (MOUSE_BUTTON_LAST + 1)
        self._cursor = (0.0, 0.0)
        self.on_input: list[EventHandler] = []
        self.on_resize: list[EventHandler] = []

    def is_open(self) -> bool:
        """Return True until the window is asked to close."""
        return self._open

    def close(self) -> None:
        """Ask the window to close."""
        self._open = False

    def get_key(self, key: Key) -> bool:
        """Return True while the key is held down."""
        code = key_to_glfw(key)
        if code < 0:
            return False
        return self._keys[code]

    def get_mouse_button(self, button: int) -> bool:
        """Return True while the mouse button is held down."""
        return self._mouse_buttons[self._button_index(button)]

    def cursor_position(self) -> tuple[float, float]:
        """The cursor position in framebuffer pixels."""
        x, y = self._cursor
        window_width, window_height = self._window_size
        if window_width == 0 or window_height == 0:
            return (float(x), float(y))
        return (x * self.width / window_width, y * self.height / window_height)

    def handle_key(self, glfw_key: int, action: int) -> None:
        """Record a key event given as a GLFW key code; unknown keys are ignored."""
        if glfw_key < 0:
            return
        if glfw_key > GLFW_KEY_LAST:
            raise ValueError(f"key code {glfw_key} is out of range")
        action = Action(action)
        for handler in list(self.on_input):
            handler(glfw_key, int(action))
        if action is Action.PRESS:
            self._keys[glfw_key] = True
        elif action is Action.RELEASE:
            self._keys[glfw_key] = False

    def handle_mouse_button(self, button: int, action: int) -> None:
        """Record a mouse button event."""
        index = self._button_index(button)
        action = Action(action)
        if action is Action.PRESS:
            self._mouse_buttons[index] = True
        elif action is Action.RELEASE:
            self._mouse_buttons[index] = False

    def handle_cursor(self, x: float, y: float) -> None:
        """Record the cursor position in window coordinates."""
        self._cursor = (x, y)

    def handle_resize(self, width: int, height: int) -> None:
        """Record a new framebuffer size and notify the resize handlers."""
        self.width = width
        self.height = height
        for handler in list(self.on_resize):
            handler(width, height)

    @staticmethod
    def _button_index(button: int) -> int:
        if not 0 <= button <= MOUSE_BUTTON_LAST:
            raise ValueError(f"mouse button {button} is out of range")
        return button


_window: Window | None = None


def get_window(width: int = 0, height: int = 0, title: str = "") -> Window:
    """Return the game's window, creating it on the first call."""
    global _window
    if _window is None:
        _window = Window(width, height, title)
    return _window