"""The game: window, main loop, actors and the two-player race."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Iterable, Optional, Sequence

import pygame

from .actor import Actor, ActorState
from .maths import to_radians
from .moto import Moto
from .renderer import DisplayError, Renderer, Window
from .texture import Assets
from .timer import Timer
from .track import Grid

logger = logging.getLogger(__name__)

TEXTURE_FILES = (
    ("building.png", "Building"),
    ("tree.png", "Tree"),
    ("border.png", "Border"),
    ("endLine.png", "EndLine"),
    ("moto.png", "Moto"),
    ("moto2.png", "Moto2"),
)

CIRCUIT = (
    (2, 3, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2),
    (3, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1),
    (1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1),
    (1, 0, 0, 0, 1, 1, 1, 1, 2, 2, 3, 1, 1, 1, 1, 1, 1, 0, 0, 1),
    (1, 0, 0, 1, 1, 0, 0, 1, 1, 3, 1, 1, 0, 0, 0, 1, 1, 0, 0, 1),
    (1, 0, 0, 1, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1),
    (1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1),
    (1, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 0, 1),
    (1, 0, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1, 0, 0, 1),
    (1, 0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 0, 0, 1, 0, 0, 1),
    (1, 1, 1, 1, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1),
    (4, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1),
    (4, 0, 0, 0, 0, 0, 1, 2, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 1),
    (1, 1, 1, 1, 1, 1, 1, 3, 3, 2, 3, 2, 2, 2, 1, 1, 1, 1, 1, 3),
)


def _swap_remove(items: list, item: Any) -> None:
    """Remove ``item`` by moving the last element into its place."""
    try:
        index = items.index(item)
    except ValueError:
        return
    items[index] = items[-1]
    items.pop()


class Game:
    """Owns the window, the renderer, the assets and every actor.

    ``poll_events`` returns the pending events and ``key_state`` the keyboard
    state indexable by key code; both default to pygame's.
    """

    def __init__(
        self,
        resource_dir: str = "Res",
        poll_events: Optional[Callable[[], Iterable[Any]]] = None,
        key_state: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.resource_dir = resource_dir
        self._poll_events = poll_events if poll_events is not None else pygame.event.get
        self._key_state = key_state if key_state is not None else pygame.key.get_pressed
        self.window = Window()
        self.renderer = Renderer()
        self.assets = Assets()
        self.is_running = True
        self._updating_actors = False
        self.actors: list[Actor] = []
        self.pending_actors: list[Actor] = []
        self.grid: Optional[Grid] = None
        self.motos: list[Moto] = []
        self.party_is_end = False

    def initialize(self) -> None:
        """Open the window and attach the renderer; raises DisplayError on failure."""
        self.window.initialize()
        self.renderer.initialize(self.window)

    def load(self) -> None:
        """Load textures, build the track and place the two bikes."""
        for filename, name in TEXTURE_FILES:
            self.assets.load_texture(
                self.renderer, os.path.join(self.resource_dir, filename), name
            )
        self.grid = Grid(self, CIRCUIT)
        self.moto_init()

    def loop(self) -> None:
        """Run frames until the game stops."""
        timer = Timer()
        while self.is_running:
            dt = timer.compute_delta_time() / 1000.0
            self.process_input()
            self.update(dt)
            self.render()
            timer.delay_time()

    def unload(self) -> None:
        """Destroy every actor and release the assets."""
        while self.actors:
            self.actors[-1].destroy()
        self.motos.clear()
        self.grid = None
        self.assets.clear()

    def close(self) -> None:
        """Close the renderer and the window and shut pygame down."""
        self.renderer.close()
        self.window.close()
        pygame.quit()

    def add_actor(self, actor: Actor) -> None:
        """Register ``actor``; while actors are updating it waits until the update ends."""
        if self._updating_actors:
            self.pending_actors.append(actor)
        else:
            self.actors.append(actor)

    def remove_actor(self, actor: Actor) -> None:
        """Unregister ``actor`` (the last actor takes its place)."""
        _swap_remove(self.pending_actors, actor)
        _swap_remove(self.actors, actor)

    def end_game(self) -> None:
        """Stop the race and wait for a reset."""
        self.party_is_end = True
        print("Press ENTER to reset\n")

    def process_input(self) -> None:
        """Handle quit requests, resets and the actors' keyboard input."""
        for event in self._poll_events():
            if event.type == pygame.QUIT:
                self.is_running = False

        keys = self._key_state()
        if keys[pygame.K_ESCAPE]:
            self.is_running = False
        if keys[pygame.K_RETURN] and self.party_is_end:
            self.new_party()

        self._updating_actors = True
        try:
            for actor in tuple(self.actors):
                if not self.party_is_end:
                    actor.process_input(keys)
        finally:
            self._updating_actors = False

    def update(self, dt: float) -> None:
        """Update actors, admit pending ones and destroy dead ones."""
        self._updating_actors = True
        try:
            for actor in tuple(self.actors):
                actor.update(dt)
        finally:
            self._updating_actors = False

        self.actors.extend(self.pending_actors)
        self.pending_actors.clear()

        for dead in [a for a in self.actors if a.state is ActorState.DEAD]:
            dead.destroy()

    def render(self) -> None:
        """Draw a frame."""
        self.renderer.begin_draw()
        self.renderer.draw()
        self.renderer.end_draw()

    def new_party(self) -> None:
        """Replace the bikes with fresh ones at the start line."""
        self.party_is_end = False
        for moto in self.motos:
            moto.destroy()
        self.motos.clear()
        self.moto_init()

    def moto_init(self) -> None:
        """Create both players' bikes at the start line."""
        moto = Moto(self)
        moto.position = moto.position.__class__(100.0, 400.0)
        moto.rotation = to_radians(90.0)
        self.motos.append(moto)

        moto2 = Moto(self)
        moto2.sprite_component.set_texture(self.assets.get_texture("Moto2"))
        controls = moto2.input_component
        controls.up_key = pygame.K_w
        controls.down_key = pygame.K_s
        controls.left_key = pygame.K_a
        controls.right_key = pygame.K_d
        moto2.position = moto2.position.__class__(60.0, 400.0)
        moto2.rotation = to_radians(90.0)
        self.motos.append(moto2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game and run it until the player quits."""
    game = Game()
    try:
        try:
            game.initialize()
        except DisplayError as exc:
            logger.error("%s", exc)
        else:
            game.load()
            game.loop()
            game.unload()
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())