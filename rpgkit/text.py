"""Text laid out as one sprite per glyph."""

from __future__ import annotations

import dataclasses

from .font import Font
from .geometry import Rect
from .sprite import Color, Sprite, Vec2
from .spritebatch import SpriteBatch


class Text:
    """A string drawn with a font; its size follows the text."""

    def __init__(self, font: Font, text: str) -> None:
        self.font = font
        self.position: Vec2 = (0.0, 0.0)
        self.origin: Vec2 = (0.0, 0.0)
        self.scale: Vec2 = (1.0, 1.0)
        self.color: Color = (1.0, 1.0, 1.0, 1.0)
        self._text = text
        self._layout()

    @property
    def text(self) -> str:
        """The displayed string; setting it lays the glyphs out again."""
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self._layout()

    @property
    def width(self) -> float:
        """The width of the widest line."""
        return self._width

    @property
    def height(self) -> float:
        """The height of all lines together."""
        return self._height

    @property
    def sprites(self) -> tuple[Sprite, ...]:
        """The glyph sprites in text coordinates."""
        return tuple(self._sprites)

    def draw(self, batch: SpriteBatch, layer: int = 0, order: int = 0) -> None:
        """Add the glyphs to a sprite batch, the origin at the bottom left."""
        px, py = self.position
        ox, oy = self.origin
        sx, sy = self.scale
        for sprite in self._sprites:
            x, y = sprite.position
            batch.draw(
                dataclasses.replace(
                    sprite,
                    position=(px + (x - ox) * sx, py + (y + self._height - oy) * sy),
                    scale=self.scale,
                    color=self.color,
                ),
                layer,
                order,
            )

    def local_bounds(self) -> Rect:
        """The bounds of the text in its own coordinates."""
        return Rect(0.0, 0.0, self._width, self._height)

    def global_bounds(self) -> Rect:
        """The bounds of the text in world coordinates."""
        (x, y), (ox, oy), (sx, sy) = self.position, self.origin, self.scale
        return Rect(x - ox * sx, y - oy * sy, self._width * sx, self._height * sy)

    def _layout(self) -> None:
        size = self.font.size
        texture = self.font.texture
        sprites: list[Sprite] = []
        max_width = 0.0
        max_height = 0.0
        x = y = 0.0
        for c in self._text:
            if c == " ":
                x += size // 4
                continue
            if c == "\n":
                max_width = max(max_width, x)
                max_height += size
                x, y = 0.0, y - size
                continue
            character = self.font.character(c)
            w, h = character.size
            # Glyph rows run top-down, so the rectangle is mirrored vertically.
            sprites.append(
                Sprite(
                    texture=texture,
                    texture_rect=Rect(character.x_offset, h, w, -h),
                    position=(x, y - character.baseline),
                    origin=(0.0, float(h)),
                )
            )
            x += w
        self._sprites = sprites
        self._width = max(max_width, x)
        self._height = max_height + size