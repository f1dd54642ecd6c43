from collections import defaultdict

import pygame
import pytest

from motoracer.game import CIRCUIT, Game
from motoracer.moto import Moto
from motoracer.texture import Texture
from motoracer.track import NB_COLS, NB_ROWS, TILE_SIZE, Border, Grid, Tile, TileState
from motoracer.vector2 import Vector2

NAMES = ("Building", "Tree", "Border", "EndLine", "Moto", "Moto2")


def make_game():
    game = Game(poll_events=lambda: [], key_state=lambda: defaultdict(bool))
    for name in NAMES:
        game.assets.textures[name] = Texture(pygame.Surface((40, 40)), name)
    return game


def test_default_tile_has_no_sprite_or_collision():
    tile = Tile(make_game())
    assert tile.tile_state is TileState.DEFAULT
    assert tile.sprite is None
    assert tile.collision is None


def test_border_tile_gets_sprite_and_box():
    game = make_game()
    tile = Tile(game)
    tile.tile_state = TileState.BORDER
    assert tile.sprite.texture is game.assets.get_texture("Border")
    assert tile.collision.width == TILE_SIZE
    assert tile.collision.height == TILE_SIZE


def test_changing_state_reuses_sprite():
    game = make_game()
    tile = Tile(game)
    tile.tile_state = TileState.BORDER
    sprite = tile.sprite
    tile.tile_state = TileState.TREE
    assert tile.sprite is sprite
    assert sprite.texture is game.assets.get_texture("Tree")


def test_back_to_default_removes_sprite():
    game = make_game()
    tile = Tile(game)
    tile.tile_state = TileState.BUILDING
    sprite = tile.sprite
    tile.tile_state = TileState.DEFAULT
    assert tile.sprite is None
    assert tile.collision is None
    assert sprite not in game.renderer.sprites


def test_toggle_select_flips():
    tile = Tile(make_game())
    tile.toggle_select()
    assert tile.selected is True
    tile.toggle_select()
    assert tile.selected is False


def test_grid_without_circuit_is_empty():
    grid = Grid(make_game())
    assert len(grid.tiles) == NB_ROWS
    assert all(len(row) == NB_COLS for row in grid.tiles)
    assert all(t.tile_state is TileState.DEFAULT for row in grid.tiles for t in row)


def test_grid_follows_circuit_codes():
    grid = Grid(make_game(), CIRCUIT)
    assert grid.tiles[0][0].tile_state is TileState.TREE
    assert grid.tiles[0][1].tile_state is TileState.BUILDING
    assert grid.tiles[0][2].tile_state is TileState.BORDER
    assert grid.tiles[12][0].tile_state is TileState.END_LINE
    assert grid.tiles[1][3].tile_state is TileState.DEFAULT


def test_unknown_code_is_empty():
    circuit = [[9] * NB_COLS for _ in range(NB_ROWS)]
    grid = Grid(make_game(), circuit)
    assert grid.tiles[5][5].tile_state is TileState.DEFAULT


def test_tile_spacing():
    grid = Grid(make_game())
    a = grid.tiles[2][3].position
    assert grid.tiles[2][4].position.x - a.x == TILE_SIZE
    assert grid.tiles[3][3].position.y - a.y == TILE_SIZE


def test_short_circuit_rejected():
    with pytest.raises(ValueError):
        Grid(make_game(), [[0] * NB_COLS])


def test_start_and_end_tiles():
    grid = Grid(make_game())
    assert grid.start_tile() is grid.tiles[3][0]
    assert grid.end_tile() is grid.tiles[3][NB_COLS - 1]


def test_click_in_top_band_selects():
    grid = Grid(make_game())
    grid.process_click(85, 0)
    assert grid.tiles[0][2].selected is True
    assert sum(t.selected for row in grid.tiles for t in row) == 1


def test_click_below_band_does_nothing():
    grid = Grid(make_game())
    grid.process_click(85, 200)
    assert not any(t.selected for row in grid.tiles for t in row)


def place(game, state, speed, others=()):
    tile = Tile(game)
    tile.tile_state = state
    tile.position = Vector2(100.0, 100.0)
    moto = Moto(game)
    moto.position = Vector2(100.0, 100.0)
    moto.input_component.forward_speed = speed
    game.motos.extend(others)
    game.motos.append(moto)
    return tile, moto


def test_fast_moto_crashes_on_border():
    game = make_game()
    tile, moto = place(game, TileState.BORDER, 10.0)
    tile.update_actor(0.0)
    assert moto.input_component.crash is True


def test_slow_moto_does_not_crash():
    game = make_game()
    tile, moto = place(game, TileState.BORDER, 0.0)
    tile.update_actor(0.0)
    assert moto.input_component.crash is False


def test_far_moto_does_not_crash():
    game = make_game()
    tile, moto = place(game, TileState.BORDER, 10.0)
    moto.position = Vector2(500.0, 500.0)
    tile.update_actor(0.0)
    assert moto.input_component.crash is False


def test_end_line_ends_race(capsys):
    game = make_game()
    other = Moto(game)
    other.position = Vector2(700.0, 500.0)
    tile, moto = place(game, TileState.END_LINE, -10.0, others=[other])
    tile.update_actor(0.0)
    assert game.party_is_end is True
    assert "Player 2 wins!" in capsys.readouterr().out
    assert moto.input_component.crash is False


def test_border_actor_has_border_sprite():
    game = make_game()
    border = Border(game)
    assert border.sprite.texture is game.assets.get_texture("Border")
    assert border in game.actors