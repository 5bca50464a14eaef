"""Collects sprites by layer and order and turns them into vertices."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from .geometry import Rect
from .sprite import Color, Sprite, Vec2
from .texture import Texture

MAX_TEXTURES = 16
MAX_LAYERS = 16


class SpriteBatchError(Exception):
    """Raised when a sprite cannot be added to a batch."""


@dataclass(frozen=True)
class Vertex:
    """One vertex of a sprite quad."""

    position: Vec2
    color: Color
    tex_coord: Vec2
    tex_id: float


@dataclass(frozen=True)
class _Quad:
    corners: tuple[tuple[Vec2, Vec2], ...]
    color: Color
    tex_id: float
    order: int


def quad_indices(max_sprites: int) -> list[int]:
    """Return the index pattern for drawing quads as two triangles each."""
    return [
        base + offset
        for base in range(0, max_sprites * 4, 4)
        for offset in (0, 1, 2, 2, 3, 0)
    ]


def _sign(value: float) -> float:
    return float((value > 0) - (value < 0))


def _prepare_rect(rect: Rect) -> Rect:
    # Shrinks the rectangle by half a texel on each side to avoid bleeding.
    offset = 0.5
    width, height = float(rect.width), float(rect.height)
    return Rect(
        rect.left + _sign(width) * offset,
        rect.bottom + _sign(height) * offset,
        _sign(width) * (abs(width) - 2 * offset),
        _sign(height) * (abs(height) - 2 * offset),
    )


def _tex_coords(texture: Texture, x: float, y: float) -> Vec2:
    return (x / texture.width, y / texture.height)


class SpriteBatch:
    """Gathers sprites between begin() and end() into one vertex list.

    Quads come out layer by layer; within a layer they are sorted by order,
    sprites of equal order keeping the order they were drawn in.
    """

    def __init__(self, max_sprites: int = 2000) -> None:
        if max_sprites < 0:
            raise ValueError("the sprite limit must not be negative")
        self.max_sprites = max_sprites
        self._layers: list[list[_Quad]] = [[] for _ in range(MAX_LAYERS)]
        self._textures: list[Texture] = []
        self._sprite_count = 0

    @property
    def sprite_count(self) -> int:
        """The number of sprites drawn since begin()."""
        return self._sprite_count

    @property
    def textures(self) -> tuple[Texture, ...]:
        """The textures in use, in the order of their slots."""
        return tuple(self._textures)

    def begin(self) -> None:
        """Forget every sprite drawn so far."""
        for layer in self._layers:
            layer.clear()
        self._textures.clear()
        self._sprite_count = 0

    def _texture_slot(self, texture: Texture) -> int:
        for slot, known in enumerate(self._textures):
            if known.id == texture.id:
                return slot
        if len(self._textures) >= MAX_TEXTURES:
            raise SpriteBatchError(
                f"cannot draw a sprite with texture {texture.path!r}: "
                f"the maximum of {MAX_TEXTURES} textures is reached"
            )
        self._textures.append(texture)
        return len(self._textures) - 1

    def draw(self, sprite: Sprite, layer: int = 0, order: int = 0) -> None:
        """Add a sprite to the batch on the given layer with the given order."""
        if not 0 <= layer < MAX_LAYERS:
            raise SpriteBatchError(
                f"cannot draw a sprite on layer {layer}: layers run from 0 to {MAX_LAYERS - 1}"
            )
        if self._sprite_count >= self.max_sprites:
            raise SpriteBatchError("cannot draw a sprite: the maximum number of sprites is reached")
        texture = sprite.texture
        if texture.width == 0 or texture.height == 0:
            raise SpriteBatchError("cannot draw a sprite with a texture of zero size")
        tex_id = float(self._texture_slot(texture))
        self._sprite_count += 1

        (px, py), (ox, oy), (sx, sy) = sprite.position, sprite.origin, sprite.scale
        x, y = px - ox * sx, py - oy * sy
        rect = sprite.texture_rect
        w = abs(rect.width) * sx
        h = abs(rect.height) * sy
        r = _prepare_rect(rect)
        right, top = r.left + r.width, r.bottom + r.height

        corners = (
            ((x, y), _tex_coords(texture, r.left, r.bottom)),
            ((x + w, y), _tex_coords(texture, right, r.bottom)),
            ((x + w, y + h), _tex_coords(texture, right, top)),
            ((x, y + h), _tex_coords(texture, r.left, top)),
        )
        quad = _Quad(corners, tuple(sprite.color), tex_id, order)
        bisect.insort(self._layers[layer], quad, key=lambda q: q.order)

    def end(self) -> list[Vertex]:
        """Return the vertices of every drawn sprite, four per sprite."""
        return [
            Vertex(position, quad.color, tex_coord, quad.tex_id)
            for layer in self._layers
            for quad in layer
            for position, tex_coord in quad.corners
        ]