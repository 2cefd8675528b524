"""Axis-aligned rectangular regions."""

from __future__ import annotations

from dataclasses import dataclass

from spacefighter.vector2 import Vector2


@dataclass
class Region:
    """A rectangle given by its upper-left corner, width and height."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @property
    def top(self) -> int:
        """The top edge."""
        return self.y

    @property
    def bottom(self) -> int:
        """The bottom edge."""
        return self.y + self.height

    @property
    def left(self) -> int:
        """The left edge."""
        return self.x

    @property
    def right(self) -> int:
        """The right edge."""
        return self.x + self.width

    @property
    def top_left(self) -> tuple[int, int]:
        """The top-left corner."""
        return self.left, self.top

    @property
    def top_right(self) -> tuple[int, int]:
        """The top-right corner."""
        return self.right, self.top

    @property
    def bottom_left(self) -> tuple[int, int]:
        """The bottom-left corner."""
        return self.left, self.bottom

    @property
    def bottom_right(self) -> tuple[int, int]:
        """The bottom-right corner."""
        return self.right, self.bottom

    @property
    def center(self) -> Vector2:
        """The center of the region."""
        return Vector2(*self.top_left) + Vector2(self.width, self.height) / 2

    def translate(self, x: int, y: int) -> None:
        """Move the region by the given offsets."""
        self.x += x
        self.y += y