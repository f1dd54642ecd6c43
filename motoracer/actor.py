"""Game objects (actors) and the components that give them behaviour."""

from __future__ import annotations

import enum
import math
from typing import Any, Optional, Protocol

from .vector2 import Vector2


class ActorHost(Protocol):
    """What an actor needs from the game that owns it."""

    def add_actor(self, actor: "Actor") -> None: ...

    def remove_actor(self, actor: "Actor") -> None: ...


class ActorState(enum.Enum):
    """Life cycle of an actor."""

    ACTIVE = "active"
    PAUSED = "paused"
    DEAD = "dead"


class Actor:
    """An object in the game world with a transform and a list of components.

    When a ``game`` is given, the actor registers with it on creation and
    unregisters on :meth:`destroy`.
    """

    def __init__(self, game: Optional[ActorHost] = None) -> None:
        self.game = game
        self.state = ActorState.ACTIVE
        self.position = Vector2.zero
        self.scale = 1.0
        self.rotation = 0.0
        self._components: list[Component] = []
        if game is not None:
            game.add_actor(self)

    @property
    def components(self) -> tuple["Component", ...]:
        """Components in update order."""
        return tuple(self._components)

    def forward(self) -> Vector2:
        """Unit vector the actor faces (screen y grows downwards)."""
        return Vector2(math.cos(self.rotation), -math.sin(self.rotation))

    def up(self) -> Vector2:
        """Unit vector perpendicular to :meth:`forward`."""
        return Vector2(math.sin(self.rotation), -math.cos(self.rotation))

    def update(self, dt: float) -> None:
        """Update components then the actor itself, if active."""
        if self.state is ActorState.ACTIVE:
            self.update_components(dt)
            self.update_actor(dt)

    def update_components(self, dt: float) -> None:
        """Update every component in update order."""
        for component in tuple(self._components):
            component.update(dt)

    def update_actor(self, dt: float) -> None:
        """Actor-specific update; does nothing by default."""

    def add_component(self, component: "Component") -> None:
        """Insert ``component`` after all components of lower or equal order."""
        order = component.update_order
        index = next(
            (i for i, existing in enumerate(self._components) if order < existing.update_order),
            len(self._components),
        )
        self._components.insert(index, component)

    def remove_component(self, component: "Component") -> None:
        """Remove ``component`` if it belongs to this actor."""
        try:
            self._components.remove(component)
        except ValueError:
            pass

    def process_input(self, key_state: Any) -> None:
        """Pass the keyboard state to components, then to the actor, if active."""
        if self.state is ActorState.ACTIVE:
            for component in tuple(self._components):
                component.process_input(key_state)
            self.actor_input(key_state)

    def actor_input(self, key_state: Any) -> None:
        """Actor-specific input handling; does nothing by default."""

    def destroy(self) -> None:
        """Unregister from the game and destroy every component."""
        if self.game is not None:
            self.game.remove_actor(self)
        while self._components:
            self._components[-1].destroy()


class Component:
    """A piece of behaviour attached to an actor.

    Components with a lower ``update_order`` are updated first.
    """

    def __init__(self, owner: Actor, update_order: int = 100) -> None:
        self.owner = owner
        self.update_order = update_order
        owner.add_component(self)

    def update(self, dt: float) -> None:
        """Per-frame update; does nothing by default."""

    def process_input(self, key_state: Any) -> None:
        """Keyboard handling; does nothing by default."""

    def destroy(self) -> None:
        """Detach from the owner."""
        self.owner.remove_component(self)