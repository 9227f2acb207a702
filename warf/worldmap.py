"""Tiles, the layered world map, collision checks, walls and drawing."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional

from warf.direction import (
    Direction,
    direction_to_text,
    index_at_direction,
    one_down,
    one_down_left,
    one_down_right,
    one_left,
    one_right,
    one_up,
    one_up_left,
    one_up_right,
)
from warf.grid import TILES_BOTTOM, TILES_H, TILES_T, TILES_W, idx_to_x, idx_to_y, xy_to_idx
from warf.items import Resource, is_item_blocking, item_to_string
from warf.sprites import (
    BOUNDARY_EXPOSED,
    BOUNDARY_SOLID,
    GROUND,
    NONE,
    WALL_EXPOSED,
    WALL_SELECTED_EXPOSED,
    WALL_SELECTED_SOLID,
    WALL_SOLID,
    is_any_wall,
    is_boundary,
    is_exposed,
    is_selected_wall,
    is_wall,
)


class TileType(IntEnum):
    NORMAL = 0
    RAIL = 1


@dataclass(eq=False)
class Tile:
    """One cell of a map layer."""

    idx: int
    x: int
    y: int
    sprite: int
    tile_type: TileType = TileType.NORMAL
    island: int = 0
    map: Optional["Map"] = field(default=None, repr=False)
    rotation: float = 0.0
    resource: Resource = Resource.NONE
    resource_amount: int = 0
    room: Any = field(default=None, repr=False)

    def __str__(self) -> str:
        return (
            f"IDX: {self.idx}. SPRITE: {item_to_string(self.sprite)}. "
            f"RESOURCE: {self.resource}. AMOUNT: {self.resource_amount}."
        )


def create_tile(idx: int, sprite: int, mp: Optional["Map"]) -> Tile:
    """A new normal tile at idx with the given sprite."""
    return Tile(idx=idx, x=idx_to_x(idx), y=idx_to_y(idx), sprite=sprite, map=mp)


def create_rail_tile(idx: int, mp: Optional["Map"]) -> Tile:
    """A new, empty rail tile at idx."""
    tile = create_tile(idx, NONE, mp)
    tile.tile_type = TileType.RAIL
    return tile


def tiles_to_idxs(tiles: Iterable[Tile]) -> list[int]:
    return [t.idx for t in tiles]


def _layer_get(layer: list[Tile], idx: int) -> Optional[Tile]:
    if idx < 0 or idx >= TILES_T:
        return None
    return layer[idx]


def _at(layer: list[Tile], idx: int) -> Tile:
    if idx < 0:
        raise IndexError(f"tile index out of range: {idx}")
    return layer[idx]


class Map:
    """All tile layers of one world: ground, selection, items and rails."""

    def __init__(self) -> None:
        self.tiles = self._new_tiles(GROUND)
        self.selected_tiles = self._new_tiles(NONE)
        self.items = self._new_tiles(NONE)
        self.rails = [create_rail_tile(i, self) for i in range(TILES_W * TILES_H)]

    def _new_tiles(self, sprite: int) -> list[Tile]:
        return [create_tile(i, sprite, self) for i in range(TILES_W * TILES_H)]

    def clear(self) -> None:
        self.tiles = self._new_tiles(GROUND)
        self.selected_tiles = self._new_tiles(NONE)
        self.items = self._new_tiles(NONE)

    def clear_selected_tiles(self) -> None:
        self.selected_tiles = self._new_tiles(NONE)

    # Lookups; each returns None when the index is off the map.

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        return self.get_tile_by_index(x + y * TILES_W)

    def get_selection_tile(self, x: int, y: int) -> Optional[Tile]:
        return self.get_selection_tile_by_index(x + y * TILES_W)

    def get_tile_by_index(self, idx: int) -> Optional[Tile]:
        return _layer_get(self.tiles, idx)

    def get_selection_tile_by_index(self, idx: int) -> Optional[Tile]:
        return _layer_get(self.selected_tiles, idx)

    def get_item_tile_by_index(self, idx: int) -> Optional[Tile]:
        return _layer_get(self.items, idx)

    def get_item_tile(self, x: int, y: int) -> Optional[Tile]:
        return _layer_get(self.items, xy_to_idx(x, y))

    def get_rail_tile_by_index(self, idx: int) -> Optional[Tile]:
        return _layer_get(self.rails, idx)

    def get_rail_tile(self, x: int, y: int) -> Optional[Tile]:
        return _layer_get(self.rails, xy_to_idx(x, y))

    def reset_islands(self) -> None:
        for tile in self.tiles:
            tile.island = 0

    def tiles_for_island(self, island: int) -> list[Tile]:
        return [t for t in self.tiles if t.island == island]

    # Neighbouring tiles.

    def one_tile_up(self, idx: int) -> Tile:
        return _at(self.tiles, one_up(idx))

    def one_tile_down(self, idx: int) -> Tile:
        return _at(self.tiles, one_down(idx))

    def one_tile_left(self, idx: int) -> Tile:
        return _at(self.tiles, one_left(idx))

    def one_tile_right(self, idx: int) -> Tile:
        return _at(self.tiles, one_right(idx))

    def one_tile_up_left(self, idx: int) -> Tile:
        return _at(self.tiles, one_up_left(idx))

    def one_tile_up_right(self, idx: int) -> Tile:
        return _at(self.tiles, one_up_right(idx))

    def one_tile_down_left(self, idx: int) -> Tile:
        return _at(self.tiles, one_down_left(idx))

    def one_tile_down_right(self, idx: int) -> Tile:
        return _at(self.tiles, one_down_right(idx))

    def one_rail_up(self, idx: int) -> Tile:
        return _at(self.rails, one_up(idx))

    def one_rail_down(self, idx: int) -> Tile:
        return _at(self.rails, one_down(idx))

    def one_rail_left(self, idx: int) -> Tile:
        return _at(self.rails, one_left(idx))

    def one_rail_right(self, idx: int) -> Tile:
        return _at(self.rails, one_right(idx))

    # Drawing on the ground layer; x2 and y2 are exclusive.

    def draw_square(self, x1: int, y1: int, x2: int, y2: int, sprite: int) -> None:
        for x in range(x1, x2):
            for y in range(y1, y2):
                self.tiles[xy_to_idx(x, y)].sprite = sprite

    def draw_random_square(
        self, x1: int, y1: int, x2: int, y2: int, generator: Callable[[], int]
    ) -> None:
        for x in range(x1, x2):
            for y in range(y1, y2):
                self.tiles[xy_to_idx(x, y)].sprite = generator()

    def draw_square_sprite(self, x1: int, y1: int, x2: int, y2: int, sprite: int) -> None:
        self.draw_square(x1, y1, x2, y2, sprite)

    def draw_outline(self, x1: int, y1: int, x2: int, y2: int, sprite: int) -> None:
        for x in range(x1, x2):
            for y in range(y1, y2):
                if x in (x1, x2 - 1) or y in (y1, y2 - 1):
                    self.tiles[xy_to_idx(x, y)].sprite = sprite

    # Walls.

    def create_boundary_walls(self) -> None:
        self.draw_outline(0, 0, TILES_W, TILES_H, BOUNDARY_SOLID)

    def create_outmost_walls(self) -> None:
        self.draw_outline(1, 1, TILES_W - 1, TILES_H - 1, WALL_SOLID)

    def randomize_walls(self, chance: int) -> None:
        """Turn each tile into a wall with the given percentage chance."""
        for tile in self.tiles:
            if random.randrange(100) < chance:
                tile.sprite = WALL_SOLID

    def fix_walls(self) -> None:
        for tile in self.tiles:
            self.fix_wall(tile)

    def fix_wall(self, tile: Tile) -> None:
        """Pick the solid or exposed variant of a wall from the tile below it."""
        if tile.idx >= TILES_BOTTOM:
            return
        exposed = is_exposed(self.tiles[one_down(tile.idx)].sprite)
        target = self.tiles[tile.idx]
        if is_boundary(tile.sprite):
            target.sprite = BOUNDARY_EXPOSED if exposed else BOUNDARY_SOLID
        elif is_wall(tile.sprite):
            target.sprite = WALL_EXPOSED if exposed else WALL_SOLID
        elif is_selected_wall(tile.sprite):
            target.sprite = WALL_SELECTED_EXPOSED if exposed else WALL_SELECTED_SOLID


def boundaries_map() -> Map:
    """An open map enclosed by boundary walls."""
    mp = Map()
    mp.create_boundary_walls()
    mp.fix_walls()
    return mp


def filled_map() -> Map:
    """A map of solid walls enclosed by boundary walls."""
    mp = Map()
    mp.create_boundary_walls()
    for tile in mp.tiles:
        if not is_any_wall(tile.sprite):
            tile.sprite = WALL_SOLID
    mp.fix_walls()
    return mp


# Collision.


def _out_of_bounds(idx: int) -> bool:
    return idx <= 0 or idx >= TILES_T - 1


def index_out_of_bounds(idx: int, direction: Direction) -> bool:
    """Whether stepping from idx in direction would leave the map."""
    if _out_of_bounds(idx):
        return True
    if direction in (Direction.UP, Direction.UP_RIGHT):
        return idx < TILES_W
    if direction == Direction.UP_LEFT:
        return idx < TILES_W + 1
    if direction in (Direction.DOWN, Direction.DOWN_LEFT):
        return idx > TILES_T - TILES_W
    if direction == Direction.DOWN_RIGHT:
        return idx > (TILES_T - TILES_W) - 1
    if direction not in (Direction.LEFT, Direction.RIGHT):
        print("unknown direction:", direction_to_text(direction))
    return False


def blocking(tile: Tile, item_tile: Tile) -> bool:
    """Whether a ground tile and its item together block movement."""
    return is_any_wall(tile.sprite) or is_item_blocking(item_tile.sprite)


def is_colliding(mp: Map, current: int, direction: Direction) -> bool:
    """Whether moving from current in direction runs into something."""
    if index_out_of_bounds(current, direction):
        return True
    target = index_at_direction(current, direction)
    tile = mp.get_tile_by_index(target)
    if tile is None:
        return True
    item_tile = mp.get_item_tile_by_index(target)
    if item_tile is None:
        return True
    return blocking(tile, item_tile)


def not_colliding(mp: Map, idx: int, direction: Direction) -> bool:
    return not is_colliding(mp, idx, direction)


# Line drawing on the ground layer.


def draw_h_line_idx(mp: Map, idx: int, n: int, sprite: int) -> None:
    for i in range(idx, idx + n):
        mp.tiles[i].sprite = sprite


def draw_v_line_idx(mp: Map, idx: int, n: int, sprite: int) -> None:
    for i in range(idx, idx + TILES_W * n, TILES_W):
        mp.tiles[i].sprite = sprite


def draw_h_random_line_idx(mp: Map, idx: int, n: int, generator: Callable[[], int]) -> None:
    for i in range(idx, idx + n):
        mp.tiles[i].sprite = generator()


def draw_v_random_line_idx(mp: Map, idx: int, n: int, generator: Callable[[], int]) -> None:
    for i in range(idx, idx + TILES_W * n, TILES_W):
        mp.tiles[i].sprite = generator()