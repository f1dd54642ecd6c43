"""Components that draw an actor: static, animated and scrolling sprites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .actor import Actor, Component
from .rectangle import Rectangle
from .renderer import WINDOW_HEIGHT, WINDOW_WIDTH, Flip, Renderer
from .texture import Texture
from .vector2 import Vector2


class SpriteComponent(Component):
    """Draws one texture centred on its owner.

    The sprite registers with ``renderer``, or with the renderer of the
    owner's game when none is given.
    """

    def __init__(
        self,
        owner: Actor,
        texture: Texture,
        draw_order: int = 100,
        renderer: Optional[Renderer] = None,
    ) -> None:
        super().__init__(owner)
        self.texture = texture
        self.draw_order = draw_order
        self.tex_width = texture.width
        self.tex_height = texture.height
        if renderer is None and owner.game is not None:
            renderer = getattr(owner.game, "renderer", None)
        self._renderer = renderer
        if renderer is not None:
            renderer.add_sprite(self)

    def set_texture(self, texture: Texture) -> None:
        """Draw ``texture`` from now on."""
        self.texture = texture
        self.tex_width = texture.width
        self.tex_height = texture.height

    def draw(self, renderer: Renderer) -> None:
        origin = Vector2(self.tex_width / 2.0, self.tex_height / 2.0)
        renderer.draw_sprite(self.owner, self.texture, Rectangle.null, origin, Flip.NONE)

    def destroy(self) -> None:
        """Unregister from the renderer and detach from the owner."""
        if self._renderer is not None:
            self._renderer.remove_sprite(self)
            self._renderer = None
        super().destroy()


class AnimSpriteComponent(SpriteComponent):
    """Cycles through a list of textures at ``anim_fps`` frames per second."""

    def __init__(
        self,
        owner: Actor,
        textures: Sequence[Texture],
        draw_order: int = 100,
        renderer: Optional[Renderer] = None,
    ) -> None:
        if not textures:
            raise ValueError("an animated sprite needs at least one texture")
        super().__init__(owner, textures[0], draw_order, renderer)
        self.current_frame = 0.0
        self.anim_fps = 24.0
        self.anim_textures: list[Texture] = []
        self.set_anim_textures(textures)

    def set_anim_textures(self, textures: Sequence[Texture]) -> None:
        """Replace the animation frames and restart from the first one."""
        self.anim_textures = list(textures)
        if self.anim_textures:
            self.current_frame = 0.0
            self.set_texture(self.anim_textures[0])

    def update(self, dt: float) -> None:
        super().update(dt)
        if self.anim_textures:
            count = len(self.anim_textures)
            self.current_frame += self.anim_fps * dt
            while self.current_frame >= count:
                self.current_frame -= count
            self.set_texture(self.anim_textures[int(self.current_frame)])


@dataclass
class _Layer:
    texture: Texture
    offset: Vector2


class BackgroundSpriteComponent(SpriteComponent):
    """Screen-wide textures laid side by side and scrolled horizontally."""

    def __init__(
        self,
        owner: Actor,
        textures: Sequence[Texture],
        draw_order: int = 10,
        renderer: Optional[Renderer] = None,
    ) -> None:
        if not textures:
            raise ValueError("a background needs at least one texture")
        super().__init__(owner, textures[0], draw_order, renderer)
        self.scroll_speed = 0.0
        self.screen_size = Vector2(float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        self._layers: list[_Layer] = []
        self.set_textures(textures)

    @property
    def offsets(self) -> list[Vector2]:
        """Current offset of each background texture."""
        return [layer.offset for layer in self._layers]

    def set_textures(self, textures: Sequence[Texture]) -> None:
        """Append ``textures``, each one screen width to the right of the last."""
        self._layers.extend(
            _Layer(texture, Vector2(count * self.screen_size.x, 0.0))
            for count, texture in enumerate(textures)
        )

    def update(self, dt: float) -> None:
        super().update(dt)
        width = self.screen_size.x
        for layer in self._layers:
            x = layer.offset.x + self.scroll_speed * dt
            # Once fully off screen, move it behind the last texture.
            if x < -width:
                x = (len(self._layers) - 1) * width - 1
            layer.offset = Vector2(x, layer.offset.y)

    def draw(self, renderer: Renderer) -> None:
        for layer in self._layers:
            self.owner.position = Vector2(layer.offset.x, layer.offset.y)
            renderer.draw_sprite(self.owner, layer.texture, Rectangle.null, Vector2.zero, Flip.NONE)