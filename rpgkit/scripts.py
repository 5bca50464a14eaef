"""Scripts that give the game's entities their behaviour."""

from __future__ import annotations

import dataclasses

from .components import ButtonComponent
from .scene import Script, TransformComponent
from .window import Window, get_window


class ButtonScript(Script):
    """Keeps a button in the top-left corner of the window.

    The button stays one eightieth of the window's width away from both edges.
    Without a window of its own the game's window is used.
    """

    window: Window | None = None

    def _window(self) -> Window:
        return self.window if self.window is not None else get_window()

    def on_update(self, delta_time: float) -> None:
        window = self._window()
        button = self.get_component(ButtonComponent)
        transform = self.get_component(TransformComponent)
        indent = window.width / 80
        _, button_height = button.size
        transform.position = (
            -window.width / 2 + indent,
            window.height / 2 - button_height - indent,
        )