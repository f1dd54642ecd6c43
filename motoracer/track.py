"""The race track: a grid of tiles, some of them obstacles or the finish line."""

from __future__ import annotations

import enum
from typing import Any, Optional, Sequence

from .actor import Actor
from .collision import RectangleCollisionComponent, intersect
from .sprites import SpriteComponent
from .vector2 import Vector2

NB_ROWS = 15
NB_COLS = 20
START_Y = 20.0
TILE_SIZE = 40.0
MIN_CRASH_SPEED = 5.0


class TileState(enum.Enum):
    """What occupies a tile."""

    DEFAULT = "default"
    BORDER = "border"
    BUILDING = "building"
    TREE = "tree"
    END_LINE = "end_line"


# Codes used in circuit layouts.
_CIRCUIT_CODES = {
    0: TileState.DEFAULT,
    1: TileState.BORDER,
    2: TileState.TREE,
    3: TileState.BUILDING,
    4: TileState.END_LINE,
}

_TEXTURE_NAMES = {
    TileState.BORDER: "Border",
    TileState.BUILDING: "Building",
    TileState.TREE: "Tree",
    TileState.END_LINE: "EndLine",
}


class Tile(Actor):
    """One square of the track.

    Every tile but an empty one has a sprite and a collision box: bikes that
    hit it crash, except on the finish line, where the first to arrive wins.
    """

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.collision: Optional[RectangleCollisionComponent] = None
        self.sprite: Optional[SpriteComponent] = None
        self.selected = False
        self._tile_state = TileState.DEFAULT

    @property
    def tile_state(self) -> TileState:
        return self._tile_state

    @tile_state.setter
    def tile_state(self, state: TileState) -> None:
        self._tile_state = state
        self._update_texture()

    def update_actor(self, dt: float) -> None:
        """Crash bikes hitting an obstacle; end the race when one crosses the line."""
        if self.collision is None:
            return
        game = self.game
        for number, moto in enumerate(list(game.motos), start=1):
            if self.collision is None:
                return
            if not intersect(moto.collision, self.collision):
                continue
            if abs(moto.input_component.forward_speed) < MIN_CRASH_SPEED:
                continue
            if self._tile_state is TileState.END_LINE:
                if not game.party_is_end:
                    print(f"\nPlayer {number} wins!")
                    game.end_game()
            else:
                moto.input_component.crash = True

    def toggle_select(self) -> None:
        """Flip the selection mark."""
        self.selected = not self.selected
        self._update_texture()

    def _update_texture(self) -> None:
        name = _TEXTURE_NAMES.get(self._tile_state)
        if name is None:
            if self.sprite is not None:
                self.sprite.destroy()
                self.sprite = None
            if self.collision is not None:
                self.collision.destroy()
                self.collision = None
            return
        if self.collision is None:
            self.collision = RectangleCollisionComponent(self)
            self.collision.height = TILE_SIZE
            self.collision.width = TILE_SIZE
        texture = self.game.assets.get_texture(name)
        if self.sprite is None:
            self.sprite = SpriteComponent(self, texture)
        else:
            self.sprite.set_texture(texture)


class Grid(Actor):
    """A 15 x 20 arrangement of tiles, optionally laid out from a circuit.

    A circuit is a sequence of rows of integer codes: 0 empty, 1 border,
    2 tree, 3 building, 4 finish line; any other code is empty.
    """

    def __init__(self, game: Any, circuit: Optional[Sequence[Sequence[int]]] = None) -> None:
        super().__init__(game)
        if circuit is not None:
            if len(circuit) < NB_ROWS or any(len(row) < NB_COLS for row in circuit[:NB_ROWS]):
                raise ValueError(f"a circuit needs at least {NB_ROWS} rows of {NB_COLS} codes")
        self.selected_tile: Optional[Tile] = None
        self.tiles: list[list[Tile]] = []
        for i in range(NB_ROWS):
            row = []
            for j in range(NB_COLS):
                tile = Tile(game)
                tile.position = Vector2(TILE_SIZE / 2.0 + j * TILE_SIZE, START_Y + i * TILE_SIZE)
                code = circuit[i][j] if circuit is not None else 0
                tile.tile_state = _CIRCUIT_CODES.get(code, TileState.DEFAULT)
                row.append(tile)
            self.tiles.append(row)

    def process_click(self, x: int, y: int) -> None:
        """Toggle the selection of the tile under a click in the top band."""
        y -= int(START_Y - TILE_SIZE / 2)
        if y <= 0:
            col = int(x / int(TILE_SIZE))
            row = int(y / int(TILE_SIZE))
            if 0 <= col < NB_COLS and 0 <= row < NB_ROWS:
                self._select_tile(row, col)

    def start_tile(self) -> Tile:
        return self.tiles[3][0]

    def end_tile(self) -> Tile:
        return self.tiles[3][NB_COLS - 1]

    def _select_tile(self, row: int, col: int) -> None:
        self.tiles[row][col].toggle_select()


class Border(Actor):
    """A free-standing piece of border."""

    def __init__(self, game: Any) -> None:
        super().__init__(game)
        self.sprite = SpriteComponent(self, game.assets.get_texture("Border"))