"""Two-component vector used for positions, velocities and directions."""

from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector with x and y components."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    UNIT_X: ClassVar[Vector2]
    UNIT_Y: ClassVar[Vector2]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        if self.is_zero():
            return self
        size = self.length()
        return Vector2(self.x / size, self.y / size)

    def is_zero(self) -> bool:
        """Return True if both components are zero."""
        return self.x == 0 and self.y == 0

    def dot(self, other: Vector2) -> float:
        """Return the dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Return the 2D cross product (z component) with another vector."""
        return self.x * other.y - self.y * other.x

    @staticmethod
    def distance(first: Vector2, second: Vector2) -> float:
        """Return the distance between two vectors."""
        return math.sqrt(Vector2.distance_squared(first, second))

    @staticmethod
    def distance_squared(first: Vector2, second: Vector2) -> float:
        """Return the squared distance between two vectors."""
        return (second.x - first.x) ** 2 + (second.y - first.y) ** 2

    @staticmethod
    def lerp(start: Vector2, end: Vector2, value: float) -> Vector2:
        """Interpolate linearly between start and end, clamping value to [0, 1]."""
        if value < 0:
            return start
        if value > 1:
            return end
        return start + (end - start) * value

    @staticmethod
    def random(normalize: bool = False) -> Vector2:
        """Return a vector with components in [-1, 1), optionally normalized."""
        result = Vector2(_random.random() * 2 - 1, _random.random() * 2 - 1)
        return result.normalized() if normalize else result

    @staticmethod
    def parse(text: str) -> Vector2:
        """Read a vector from two whitespace-separated numbers."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers, got {text!r}")
        try:
            return Vector2(float(parts[0]), float(parts[1]))
        except ValueError as exc:
            raise ValueError(f"invalid vector text {text!r}") from exc

    def left(self) -> Vector2:
        """Return the left-hand orthogonal vector."""
        return Vector2(-self.y, self.x)

    def right(self) -> Vector2:
        """Return the right-hand orthogonal vector."""
        return Vector2(self.y, -self.x)

    def to_point(self) -> tuple[int, int]:
        """Return integer coordinates, truncated toward zero."""
        return int(self.x), int(self.y)

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: object) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"{{ {self.x:g}, {self.y:g} }}"


Vector2.ZERO = Vector2(0, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.UNIT_X = Vector2(1, 0)
Vector2.UNIT_Y = Vector2(0, 1)