"""Two-dimensional vector value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    zero: ClassVar["Vector2"]
    unit_x: ClassVar["Vector2"]
    unit_y: ClassVar["Vector2"]

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def length_sq(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sq())

    def normalized(self) -> "Vector2":
        """Vector of unit length in the same direction."""
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: "Vector2") -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def lerp(self, other: "Vector2", f: float) -> "Vector2":
        """Linear interpolation from this vector towards ``other``."""
        return self + f * (other - self)


Vector2.zero = Vector2(0.0, 0.0)
Vector2.unit_x = Vector2(1.0, 0.0)
Vector2.unit_y = Vector2(0.0, 1.0)