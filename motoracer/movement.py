"""Movement driven by speeds, and keyboard control of those speeds."""

from __future__ import annotations

from typing import Any

import pygame

from .actor import Actor, Component
from .maths import near_zero, to_radians

_TURN_THRESHOLD = 25.0
_STEER_STEP = to_radians(5.0)
_STEER_RETURN = to_radians(10.0)


class MoveComponent(Component):
    """Moves and turns its owner from forward and angular speeds.

    Turning only happens while the forward speed exceeds 25 in either
    direction; when reversing, the turn is mirrored.
    """

    def __init__(self, owner: Actor, update_order: int = 10) -> None:
        super().__init__(owner, update_order)
        self.forward_speed = 0.0
        self.up_speed = 0.0
        self.angular_speed = 0.0

    def update(self, dt: float) -> None:
        owner = self.owner
        if not near_zero(self.angular_speed) and abs(self.forward_speed) > _TURN_THRESHOLD:
            turn = self.angular_speed * dt
            if self.forward_speed < 0:
                turn = -turn
            owner.rotation = owner.rotation + turn
        if not near_zero(self.forward_speed):
            owner.position = owner.position + owner.forward() * self.forward_speed * dt


class InputComponent(MoveComponent):
    """Keyboard-driven throttle, braking, reverse and steering.

    ``key_state`` passed to :meth:`process_input` is anything indexable by a
    key code returning a truthy value for pressed keys.
    """

    def __init__(self, owner: Actor) -> None:
        super().__init__(owner)
        self.max_forward_speed = 100.0
        self.max_up_speed = 0.0
        self.max_angular_speed = 1.0
        self.forward_key = pygame.K_w
        self.back_key = pygame.K_s
        self.left_key = pygame.K_LEFT
        self.right_key = pygame.K_RIGHT
        self.up_key = pygame.K_UP
        self.down_key = pygame.K_DOWN
        self.clockwise_key = pygame.K_d
        self.counter_clockwise_key = pygame.K_a
        self.crash = False
        self._throttle = 0.0
        self._steer = 0.0

    def _coast(self) -> None:
        if self._throttle > 0:
            self._throttle -= 2.0
        if self._throttle < 0:
            self._throttle += 2.0

    def process_input(self, key_state: Any) -> None:
        if key_state[self.up_key]:
            if self._throttle < self.max_forward_speed:
                self._throttle += 1.0
        elif key_state[self.down_key]:
            if self._throttle > 0:
                self._throttle -= 3.0
            elif self._throttle > -(self.max_forward_speed / 2):
                self._throttle -= 1.0
        else:
            self._coast()

        if not self.crash:
            self.forward_speed = self._throttle
        else:
            # Bounce back at half speed until the throttle settles.
            self.forward_speed = -(self._throttle / 2)
            self._coast()
            if self._throttle == 0:
                self.crash = False

        if key_state[self.right_key]:
            if self._steer > -self.max_angular_speed:
                self._steer -= _STEER_STEP
        elif key_state[self.left_key]:
            if self._steer < self.max_angular_speed:
                self._steer += _STEER_STEP
        else:
            if self._steer > 0:
                self._steer -= _STEER_RETURN
            if self._steer < 0:
                self._steer += _STEER_RETURN
        self.angular_speed = self._steer