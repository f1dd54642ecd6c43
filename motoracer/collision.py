"""Circle and axis-aligned rectangle collision components."""

from __future__ import annotations

from .actor import Actor, Component
from .vector2 import Vector2


class CircleCollisionComponent(Component):
    """A collision circle centred on the owner, scaled with it."""

    def __init__(self, owner: Actor) -> None:
        super().__init__(owner)
        self._radius = 1.0

    @property
    def radius(self) -> float:
        """Radius after applying the owner's scale."""
        return self.owner.scale * self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = value

    @property
    def center(self) -> Vector2:
        return self.owner.position


class RectangleCollisionComponent(Component):
    """An axis-aligned collision box centred on the owner, scaled with it."""

    def __init__(self, owner: Actor) -> None:
        super().__init__(owner)
        self._width = 1.0
        self._height = 1.0

    @property
    def width(self) -> float:
        """Width after applying the owner's scale."""
        return self.owner.scale * self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value

    @property
    def height(self) -> float:
        """Height after applying the owner's scale."""
        return self.owner.scale * self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value

    @property
    def center(self) -> Vector2:
        return self.owner.position


def _half_extents(shape) -> tuple[float, float]:
    if isinstance(shape, RectangleCollisionComponent):
        return shape.width / 2, shape.height / 2
    return shape.radius, shape.radius


def intersect(a, b) -> bool:
    """Whether two collision components overlap (touching counts).

    Two circles are compared by distance; any pair involving a rectangle is
    compared as boxes, a circle standing for a box of its radius.
    """
    shapes = (CircleCollisionComponent, RectangleCollisionComponent)
    if not isinstance(a, shapes) or not isinstance(b, shapes):
        raise TypeError(
            f"cannot intersect {type(a).__name__} with {type(b).__name__}"
        )
    ab = b.center - a.center
    if isinstance(a, CircleCollisionComponent) and isinstance(b, CircleCollisionComponent):
        reach = a.radius + b.radius
        return ab.length_sq() <= reach * reach
    a_w, a_h = _half_extents(a)
    b_w, b_h = _half_extents(b)
    return abs(ab.x) <= a_w + b_w and abs(ab.y) <= a_h + b_h