"""Bitmap fonts: glyph atlases built from rendered characters."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from itertools import product

from .bitmap import Bitmap, Pixel
from .texture import Texture

_FIRST_CODE = 32
_END_CODE = 128

# A rendered glyph: width, rows, distance from baseline to top, alpha bytes.
_Glyph = tuple[int, int, int, Sequence[int]]


@dataclass(frozen=True)
class Character:
    """Where a glyph sits in the font atlas."""

    size: tuple[int, int] = (0, 0)
    x_offset: int = 0
    baseline: int = 0


def fill_pixel_buffer(buffer: Sequence[int], width: int, height: int) -> bytes:
    """Turn a one-channel glyph bitmap into white RGBA pixels with that alpha."""
    if width < 0 or height < 0:
        raise ValueError("glyph dimensions must not be negative")
    count = width * height
    if len(buffer) < count:
        raise ValueError(
            f"glyph buffer holds {len(buffer)} values, {count} are needed"
        )
    return bytes(
        channel for alpha in buffer[:count] for channel in (255, 255, 255, alpha)
    )


def _as_char(key: str | int) -> str:
    if isinstance(key, int):
        return chr(key)
    if isinstance(key, str) and len(key) == 1:
        return key
    raise ValueError(f"glyph key {key!r} is not a single character")


@dataclass
class Font:
    """A font whose glyphs are packed side by side into one texture."""

    path: str = ""
    size: int = 0
    texture: Texture = field(default_factory=Texture)
    characters: dict[str, Character] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str | os.PathLike[str], size: int) -> Font:
        """Render the printable ASCII characters of a TrueType font file."""
        from PIL import Image, ImageDraw, ImageFont

        if size <= 0:
            raise ValueError("the font size must be positive")
        face = ImageFont.truetype(os.fspath(path), size)
        ascent, _ = face.getmetrics()
        glyphs: dict[str, _Glyph] = {}
        for code in range(_FIRST_CODE, _END_CODE):
            char = chr(code)
            left, top, right, bottom = face.getbbox(char)
            width, rows = int(right - left), int(bottom - top)
            if width <= 0 or rows <= 0:
                continue
            image = Image.new("L", (width, rows), 0)
            ImageDraw.Draw(image).text((-left, -top), char, font=face, fill=255)
            glyphs[char] = (width, rows, int(ascent - top), image.tobytes())
        return cls.from_glyphs(path, size, glyphs)

    @classmethod
    def from_glyphs(
        cls,
        path: str | os.PathLike[str],
        size: int,
        glyphs: Mapping[str | int, _Glyph],
    ) -> Font:
        """Build a font from rendered glyphs.

        Each glyph is ``(width, rows, top, alpha_bytes)``, with ``top`` the
        distance from the baseline to the glyph's top row. Glyphs are laid out
        in order of their character codes; those without data are skipped.
        """
        ordered = sorted(
            ((_as_char(key), tuple(glyph)) for key, glyph in glyphs.items()),
            key=lambda item: ord(item[0]),
        )
        atlas_width = sum(width for _, (width, _, _, _) in ordered)
        atlas_height = max((rows for _, (_, rows, _, _) in ordered), default=0)
        bitmap = Bitmap(atlas_width, atlas_height)

        characters: dict[str, Character] = {}
        x = 0
        for char, (width, rows, top, buffer) in ordered:
            if not buffer:
                continue
            pixels = fill_pixel_buffer(buffer, width, rows)
            for (row, col), offset in zip(
                product(range(rows), range(width)), range(0, len(pixels), 4)
            ):
                bitmap.set_pixel(x + col, row, Pixel(*pixels[offset:offset + 4]))
            characters[char] = Character((width, rows), x, atlas_height - top)
            x += width

        texture = dataclasses.replace(Texture.from_bitmap(bitmap), path=os.fspath(path))
        return cls(os.fspath(path), size, texture, characters)

    def character(self, c: str) -> Character:
        """Return the glyph for a character, or an empty one if it is missing."""
        return self.characters.get(c, Character())