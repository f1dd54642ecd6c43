import pygame
import pytest

from motoracer.actor import Actor
from motoracer.renderer import WINDOW_WIDTH, Renderer
from motoracer.sprites import (
    AnimSpriteComponent,
    BackgroundSpriteComponent,
    SpriteComponent,
)
from motoracer.texture import Texture
from motoracer.vector2 import Vector2

RED = (255, 0, 0)


def _texture(w=4, h=4, color=RED):
    surface = pygame.Surface((w, h))
    surface.fill(color)
    return Texture(surface)


class _FakeGame:
    def __init__(self, renderer):
        self.renderer = renderer
        self.actors = []

    def add_actor(self, actor):
        self.actors.append(actor)

    def remove_actor(self, actor):
        self.actors.remove(actor)


def test_sprite_registers_with_given_renderer():
    renderer = Renderer(pygame.Surface((10, 10)))
    texture = _texture(3, 5)
    sprite = SpriteComponent(Actor(), texture, renderer=renderer)
    assert renderer.sprites == (sprite,)
    assert sprite.draw_order == 100
    assert (sprite.tex_width, sprite.tex_height) == (texture.width, texture.height)


def test_sprite_uses_renderer_of_owner_game():
    renderer = Renderer(pygame.Surface((10, 10)))
    actor = Actor(_FakeGame(renderer))
    sprite = SpriteComponent(actor, _texture())
    assert renderer.sprites == (sprite,)
    assert actor.components == (sprite,)


def test_sprite_destroy_unregisters_everywhere():
    renderer = Renderer(pygame.Surface((10, 10)))
    actor = Actor()
    sprite = SpriteComponent(actor, _texture(), renderer=renderer)
    sprite.destroy()
    assert renderer.sprites == ()
    assert actor.components == ()


def test_set_texture_updates_size():
    sprite = SpriteComponent(Actor(), _texture(4, 4))
    other = _texture(6, 2)
    sprite.set_texture(other)
    assert sprite.texture is other
    assert (sprite.tex_width, sprite.tex_height) == (other.width, other.height)


def test_sprite_draw_is_centred_on_owner():
    target = pygame.Surface((40, 40))
    renderer = Renderer(target)
    actor = Actor()
    actor.position = Vector2(20.0, 20.0)
    SpriteComponent(actor, _texture(4, 4), renderer=renderer)
    renderer.draw_sprites()
    assert tuple(target.get_at((18, 18)))[:3] == RED
    assert tuple(target.get_at((21, 21)))[:3] == RED
    assert tuple(target.get_at((22, 22)))[:3] == (0, 0, 0)


def test_anim_sprite_defaults():
    textures = [_texture(), _texture()]
    anim = AnimSpriteComponent(Actor(), textures)
    assert anim.anim_fps == 24.0
    assert anim.draw_order == 100
    assert anim.texture is textures[0]
    assert anim.current_frame == 0.0


def test_anim_sprite_advances_and_wraps():
    textures = [_texture(), _texture(), _texture()]
    anim = AnimSpriteComponent(Actor(), textures)
    anim.anim_fps = 2.0
    anim.update(0.5)
    assert anim.texture is textures[1]
    anim.update(1.0)
    assert anim.texture is textures[0]
    assert 0.0 <= anim.current_frame < len(textures)


def test_anim_set_textures_restarts():
    first = [_texture(), _texture()]
    anim = AnimSpriteComponent(Actor(), first)
    anim.anim_fps = 2.0
    anim.update(0.5)
    second = [_texture(2, 2)]
    anim.set_anim_textures(second)
    assert anim.current_frame == 0.0
    assert anim.texture is second[0]
    assert anim.tex_width == second[0].width


def test_anim_sprite_needs_textures():
    with pytest.raises(ValueError):
        AnimSpriteComponent(Actor(), [])


def test_background_initial_offsets_one_screen_apart():
    bg = BackgroundSpriteComponent(Actor(), [_texture(), _texture()])
    assert bg.draw_order == 10
    assert bg.offsets == [Vector2(0.0, 0.0), Vector2(float(WINDOW_WIDTH), 0.0)]


def test_background_scrolls_and_wraps():
    bg = BackgroundSpriteComponent(Actor(), [_texture(), _texture()])
    bg.scroll_speed = -float(WINDOW_WIDTH) - 200.0
    bg.update(1.0)
    first, second = bg.offsets
    assert first == Vector2(WINDOW_WIDTH - 1.0, 0.0)
    assert second.x == -200.0


def test_background_scroll_without_wrap_keeps_spacing():
    bg = BackgroundSpriteComponent(Actor(), [_texture(), _texture()])
    bg.scroll_speed = -10.0
    bg.update(0.5)
    first, second = bg.offsets
    assert second.x - first.x == WINDOW_WIDTH
    assert first.x < 0


def test_background_draw_moves_owner_to_each_layer():
    target = pygame.Surface((20, 20))
    renderer = Renderer(target)
    actor = Actor()
    bg = BackgroundSpriteComponent(actor, [_texture(5, 5)], renderer=renderer)
    bg.scroll_speed = 3.0
    bg.update(1.0)
    renderer.draw_sprites()
    assert actor.position == bg.offsets[0]
    assert tuple(target.get_at((3, 0)))[:3] == RED
    assert tuple(target.get_at((2, 0)))[:3] == (0, 0, 0)