"""Seedable random number source used by the game."""

from __future__ import annotations

import random
from typing import Optional

from .vector2 import Vector2


class RandomSource:
    """Random floats, integers and vectors from a Mersenne Twister generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._generator = random.Random()
        if seed is None:
            self._generator.seed()
        else:
            self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the generator with ``seed``."""
        self._generator.seed(seed)

    def get_float(self) -> float:
        """A float in [0.0, 1.0)."""
        return self.get_float_range(0.0, 1.0)

    def get_float_range(self, low: float, high: float) -> float:
        """A float in [low, high)."""
        return low + (high - low) * self._generator.random()

    def get_int_range(self, low: int, high: int) -> int:
        """An integer in [low, high], both ends included."""
        return self._generator.randint(low, high)

    def get_vector(self, low: Vector2, high: Vector2) -> Vector2:
        """A vector whose components lie between those of ``low`` and ``high``."""
        rx = self.get_float()
        ry = self.get_float()
        diff = high - low
        return low + Vector2(diff.x * rx, diff.y * ry)