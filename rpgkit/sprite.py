"""Sprites: a textured rectangle placed in the world."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect
from .texture import Texture

Vec2 = tuple[float, float]
Color = tuple[float, float, float, float]


@dataclass
class Sprite:
    """A piece of a texture drawn at a position with an origin and scale.

    Without a texture the shared empty texture is used. Without a texture
    rectangle the whole texture is shown.
    """

    texture: Texture | None = None
    texture_rect: Rect | None = None
    position: Vec2 = (0.0, 0.0)
    origin: Vec2 = (0.0, 0.0)
    scale: Vec2 = (1.0, 1.0)
    color: Color = (1.0, 1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        if self.texture is None:
            self.texture = Texture.empty()
        if self.texture_rect is None:
            self.texture_rect = Rect(0, 0, self.texture.width, self.texture.height)

    def local_bounds(self) -> Rect:
        """The bounds of the sprite in its own coordinates."""
        rect = self.texture_rect
        return Rect(0.0, 0.0, float(abs(rect.width)), float(abs(rect.height)))

    def global_bounds(self) -> Rect:
        """The bounds of the sprite in world coordinates."""
        rect = self.texture_rect
        (x, y), (ox, oy), (sx, sy) = self.position, self.origin, self.scale
        return Rect(
            x - ox * sx,
            y - oy * sy,
            abs(rect.width) * sx,
            abs(rect.height) * sy,
        )