"""Axis-aligned rectangles described by their bottom-left corner and size."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real


@dataclass(frozen=True)
class Rect:
    """A rectangle with its origin in the bottom-left corner.

    Width and height may be negative; texture rectangles use that to mirror.
    """

    left: float = 0
    bottom: float = 0
    width: float = 0
    height: float = 0

    def contains(self, pos: Sequence[float]) -> bool:
        """Return True if the point lies strictly inside the rectangle."""
        x, y = pos
        return (
            self.left < x < self.left + self.width
            and self.bottom < y < self.bottom + self.height
        )

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap."""
        return (
            self.left < other.left + other.width
            and self.left + self.width > other.left
            and self.bottom < other.bottom + other.height
            and self.bottom + self.height > other.bottom
        )

    def __mul__(self, value: float) -> Rect:
        if not isinstance(value, Real):
            return NotImplemented
        return Rect(
            self.left * value,
            self.bottom * value,
            self.width * value,
            self.height * value,
        )

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> Rect:
        """Build a rectangle from ``[left, bottom, width, height]``.

        Raises ValueError unless given a sequence of exactly four numbers.
        """
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise ValueError("a rectangle must be a sequence of four numbers")
        if len(values) != 4:
            raise ValueError(
                f"a rectangle needs exactly four values, got {len(values)}"
            )
        for value in values:
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"rectangle value {value!r} is not a number")
        return cls(*values)