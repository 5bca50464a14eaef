"""A simple in-memory RGBA bitmap."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pixel:
    """One RGBA pixel with channels in the range 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"pixel channel {channel} is outside 0-255")


class Bitmap:
    """A width x height grid of pixels, stored row by row."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [Pixel()] * (width * height)

    @property
    def pixels(self) -> list[Pixel]:
        """The pixels in row-major order."""
        return list(self._pixels)

    @property
    def raw_pixels(self) -> bytes:
        """The pixels as interleaved RGBA bytes."""
        return bytes(
            channel for p in self._pixels for channel in (p.r, p.g, p.b, p.a)
        )

    @property
    def channels(self) -> int:
        """The number of channels per pixel."""
        return 4

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} bitmap"
            )
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at column x, row y."""
        return self._pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Replace the pixel at column x, row y."""
        self._pixels[self._index(x, y)] = pixel