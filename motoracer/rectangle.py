"""Axis-aligned rectangle value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    null: ClassVar["Rectangle"]

    def to_int_tuple(self) -> tuple[int, int, int, int]:
        """Integer (x, y, width, height), truncated toward zero."""
        return int(self.x), int(self.y), int(self.width), int(self.height)

    def is_null(self) -> bool:
        """True for the all-zero rectangle that stands for "whole texture"."""
        return self == Rectangle.null


Rectangle.null = Rectangle(0.0, 0.0, 0.0, 0.0)
NULL_RECT = Rectangle.null