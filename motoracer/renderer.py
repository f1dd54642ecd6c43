"""The game window and the renderer that draws sprites onto it."""

from __future__ import annotations

import enum
import math
import os
from typing import TYPE_CHECKING, Optional, Protocol

import pygame

from .maths import to_degrees
from .rectangle import Rectangle
from .vector2 import Vector2

if TYPE_CHECKING:
    from .actor import Actor
    from .texture import Texture

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Racing"
WINDOW_POSITION = (400, 300)

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class DisplayError(RuntimeError):
    """The window or renderer could not be set up or is not ready."""


class Flip(enum.Enum):
    """Mirroring applied when drawing a sprite."""

    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Drawable(Protocol):
    """What the renderer needs from a sprite."""

    draw_order: int

    def draw(self, renderer: "Renderer") -> None: ...


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class Window:
    """The game's display window."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.title = WINDOW_TITLE
        self.surface: Optional[pygame.Surface] = None

    def initialize(self) -> None:
        """Open the window."""
        os.environ.setdefault("SDL_VIDEO_WINDOW_POS", "%d,%d" % WINDOW_POSITION)
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise DisplayError("Unable to initialize the display") from exc
        try:
            self.surface = pygame.display.set_mode((self.width, self.height))
        except pygame.error as exc:
            raise DisplayError("Failed to create window") from exc
        pygame.display.set_caption(self.title)

    def close(self) -> None:
        """Close the window."""
        self.surface = None
        pygame.display.quit()


class Renderer:
    """Draws sprites, sorted by draw order, onto a target surface."""

    def __init__(self, target: Optional[pygame.Surface] = None) -> None:
        self.target = target
        self._sprites: list[Drawable] = []

    @property
    def sprites(self) -> tuple[Drawable, ...]:
        """Registered sprites in drawing order."""
        return tuple(self._sprites)

    def initialize(self, window: Window) -> None:
        """Draw onto ``window`` from now on."""
        if window.surface is None:
            raise DisplayError("Failed to create renderer: window is not open")
        self.target = window.surface

    def _require_target(self) -> pygame.Surface:
        if self.target is None:
            raise DisplayError("Renderer is not initialized")
        return self.target

    def begin_draw(self) -> None:
        """Clear the target to black."""
        self._require_target().fill(BLACK)

    def draw(self) -> None:
        """Draw the frame's content."""
        self.draw_sprites()

    def end_draw(self) -> None:
        """Show the frame when drawing to the display."""
        target = self._require_target()
        if target is pygame.display.get_surface():
            pygame.display.flip()

    def draw_rect(self, rect: Rectangle) -> None:
        """Fill ``rect`` in white."""
        pygame.draw.rect(self._require_target(), WHITE, pygame.Rect(rect.to_int_tuple()))

    def add_sprite(self, sprite: Drawable) -> None:
        """Register ``sprite`` after all sprites of lower or equal draw order."""
        order = sprite.draw_order
        index = next(
            (i for i, existing in enumerate(self._sprites) if order < existing.draw_order),
            len(self._sprites),
        )
        self._sprites.insert(index, sprite)

    def remove_sprite(self, sprite: Drawable) -> None:
        """Unregister ``sprite``; raises ValueError if it is not registered."""
        self._sprites.remove(sprite)

    def draw_sprites(self) -> None:
        """Draw every registered sprite in order."""
        for sprite in tuple(self._sprites):
            sprite.draw(self)

    def draw_sprite(
        self,
        actor: "Actor",
        texture: "Texture",
        src_rect: Rectangle = Rectangle.null,
        origin: Vector2 = Vector2.zero,
        flip: Flip = Flip.NONE,
    ) -> pygame.Rect:
        """Draw ``texture`` at the actor's transform and return the destination box.

        The box has the texture's size times the actor's scale and its corner at
        the actor's position minus ``origin``; rotation turns the image about the
        box's centre. A non-null ``src_rect`` selects the part of the texture
        that is stretched into the box.
        """
        target = self._require_target()
        position = actor.position
        width = int(texture.width * actor.scale)
        height = int(texture.height * actor.scale)
        dest = pygame.Rect(
            int(position.x - origin.x), int(position.y - origin.y), width, height
        )
        image = texture.surface
        if image is None or width <= 0 or height <= 0:
            return dest

        if not src_rect.is_null():
            area = pygame.Rect(
                _round(src_rect.x),
                _round(src_rect.y),
                _round(src_rect.width),
                _round(src_rect.height),
            ).clip(image.get_rect())
            if area.width <= 0 or area.height <= 0:
                return dest
            image = image.subsurface(area)

        if image.get_size() != (width, height):
            image = pygame.transform.scale(image, (width, height))
        if flip is not Flip.NONE:
            image = pygame.transform.flip(image, flip is Flip.HORIZONTAL, flip is Flip.VERTICAL)

        angle = to_degrees(actor.rotation)
        if angle:
            image = pygame.transform.rotate(image, angle)
            target.blit(image, image.get_rect(center=dest.center))
        else:
            target.blit(image, dest)
        return dest

    def close(self) -> None:
        """Stop drawing to the current target."""
        self.target = None