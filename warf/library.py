"""Libraries: rooms of bookshelves, chairs and tables."""

from __future__ import annotations

import itertools
from typing import Optional

from warf.direction import one_down, one_left
from warf.grid import xy_to_idx
from warf.items import CHAIR_LEFT, CHAIR_RIGHT, NO_ITEM, TABLE, is_bookshelf
from warf.mapgen import flood_fill_room, random_wood_floor
from warf.placement import place, place_random, random_bookshelf
from warf.room import Room
from warf.sprites import (
    is_any_wall,
    is_door_opening,
    is_library_wood_floor,
    is_next_to_door_opening,
)
from warf.worldmap import Map, Tile

_SPACE_EVERY = 5


class Library(Room):
    """A room where dwarves sit down and read."""

    def update(self, mp: Map) -> None:
        """Libraries do not change over time."""

    def tiles(self) -> list[int]:
        return self._tiles

    def _place_items(self, mp: Map, tile: Tile, first_row: int, last_shelf_row: int) -> int:
        """Furnish one tile; returns the row of the latest unbroken shelf, or -1."""
        if tile.y == first_row:
            if is_any_wall(mp.one_tile_up(tile.idx).sprite):
                place_random(mp, tile.x, tile.y, random_bookshelf)
            return last_shelf_row
        offset = first_row - tile.y
        if offset % 4 == 0:
            self._generate_bookshelves(mp, tile)
            return tile.y
        if offset % 2 == 0:
            self._generate_furniture(mp, tile)
        if tile.y == last_shelf_row + 1:
            self._breakup_bookshelves(mp, last_shelf_row)
            return -1
        return last_shelf_row

    def _generate_bookshelves(self, mp: Map, tile: Tile) -> None:
        if is_next_to_door_opening(mp, tile.idx):
            return
        place_random(mp, tile.x, tile.y, random_bookshelf)

    def _breakup_bookshelves(self, mp: Map, y: int) -> None:
        """Open gaps in a shelf row that runs through the room unbroken."""
        row = [mp.items[idx] for idx in self._tiles if mp.tiles[idx].y == y]
        if not row:
            return
        shelves = sum(1 for item in row[1:-1] if is_bookshelf(item.sprite))
        if shelves < _SPACE_EVERY:
            return
        for i in range(shelves // _SPACE_EVERY):
            row[_SPACE_EVERY * i].sprite = NO_ITEM

    def _generate_furniture(self, mp: Map, tile: Tile) -> None:
        left = one_left(tile.idx)
        if (
            is_any_wall(mp.tiles[left].sprite)
            or mp.items[left].sprite != NO_ITEM
            or is_door_opening(mp, one_down(tile.idx))
        ):
            return
        for x in range(tile.x, tile.x + 3):
            idx = xy_to_idx(x, tile.y)
            sprite = mp.tiles[idx].sprite
            if is_any_wall(sprite) or not is_library_wood_floor(sprite):
                return
            if is_door_opening(mp, one_down(idx)):
                return
        place(mp, tile.x, tile.y, CHAIR_LEFT)
        place(mp, tile.x + 1, tile.y, TABLE)
        place(mp, tile.x + 2, tile.y, CHAIR_RIGHT)


_library_ids = itertools.count()


def new_library(mp: Map, x: int, y: int) -> Optional[Library]:
    """Turn the ground region around (x, y) into a furnished library.

    Returns None when there is no ground to fill at (x, y).
    """
    tiles = sorted(flood_fill_room(mp, x, y, random_wood_floor))
    if not tiles:
        return None
    library = Library(tiles=tiles)
    first_row = mp.tiles[tiles[0]].y
    last_shelf_row = -1
    for idx in tiles:
        last_shelf_row = library._place_items(mp, mp.tiles[idx], first_row, last_shelf_row)
        mp.tiles[idx].room = library
    library.id = next(_library_ids)
    return library