"""The player-controlled motorbike."""

from __future__ import annotations

from typing import Any

from .actor import Actor
from .collision import CircleCollisionComponent
from .maths import to_radians
from .movement import InputComponent
from .sprites import SpriteComponent

MOTO_TEXTURE = "Moto"
MAX_FORWARD_SPEED = 150.0
MAX_ANGULAR_SPEED = to_radians(65.0)
COLLISION_RADIUS = 10.0


class Moto(Actor):
    """A motorbike with a sprite, keyboard control and a collision circle.

    ``game`` must provide ``assets`` holding a texture named ``"Moto"`` and,
    to be drawn, a ``renderer``.
    """

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.sprite_component = SpriteComponent(self, game.assets.get_texture(MOTO_TEXTURE))
        self.input_component = InputComponent(self)
        self.input_component.max_forward_speed = MAX_FORWARD_SPEED
        self.input_component.max_angular_speed = MAX_ANGULAR_SPEED
        self.collision = CircleCollisionComponent(self)
        self.collision.radius = COLLISION_RADIUS

    def update_actor(self, dt: float) -> None:
        """The bike has no behaviour beyond its components."""