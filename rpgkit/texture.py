"""Textures: RGBA pixel data with an identifier, a source path and a size."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass, field
from functools import lru_cache

from PIL import Image

from .bitmap import Bitmap

NO_PATH = "no_path"

_ids = itertools.count(1)


class TextureError(Exception):
    """Raised when a texture cannot be created."""


@lru_cache(maxsize=None)
def _empty_texture_id() -> int:
    return next(_ids)


@dataclass(frozen=True)
class Texture:
    """An RGBA texture.

    The pixel data is stored bottom row first, the way the renderer expects it.
    Two textures compare equal when their id, path and size match.
    """

    id: int = 0
    path: str = ""
    width: int = 0
    height: int = 0
    data: bytes = field(default=b"", repr=False, compare=False)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Texture:
        """Load an image file as an RGBA texture, flipped vertically."""
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA").transpose(
                    Image.Transpose.FLIP_TOP_BOTTOM
                )
        except OSError as exc:
            raise TextureError(f"failed to load texture {os.fspath(path)!r}") from exc
        return cls(
            next(_ids), os.fspath(path), rgba.width, rgba.height, rgba.tobytes()
        )

    @classmethod
    def empty(cls) -> Texture:
        """Return the shared 1x1 white texture."""
        return cls(_empty_texture_id(), NO_PATH, 1, 1, b"\xff\xff\xff\xff")

    @classmethod
    def from_bitmap(cls, bitmap: Bitmap) -> Texture:
        """Create a texture holding the pixels of a bitmap."""
        return cls(
            next(_ids), NO_PATH, bitmap.width, bitmap.height, bitmap.raw_pixels
        )