"""Bars: rooms with a counter that serves beer."""

from __future__ import annotations

import itertools
import random
from typing import Optional

from warf.direction import one_down
from warf.grid import idx_to_xy, xy_to_idx
from warf.items import (
    BAR_DRINKS_LEFT,
    BAR_DRINKS_RIGHT,
    BAR_H,
    BAR_LEFT,
    BAR_RIGHT,
    BAR_STOOL,
    BAR_V,
    NO_ITEM,
)
from warf.mapgen import flood_fill_room
from warf.room import Room
from warf.sprites import BAR_FLOOR, GROUND, is_any_wall
from warf.worldmap import Map

NEEDS_MORE_BEER_RATE = 5

_WIDTH = 6
_HEIGHT = 5

_LAYOUTS = (
    (
        BAR_DRINKS_LEFT, BAR_DRINKS_RIGHT, NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM,
        NO_ITEM, NO_ITEM, NO_ITEM, BAR_V, BAR_STOOL, NO_ITEM,
        BAR_LEFT, BAR_H, BAR_H, BAR_RIGHT, BAR_STOOL, NO_ITEM,
        BAR_STOOL, BAR_STOOL, BAR_STOOL, BAR_STOOL, BAR_STOOL, NO_ITEM,
        NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM,
    ),
    (
        NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM, BAR_DRINKS_LEFT, BAR_DRINKS_RIGHT,
        NO_ITEM, BAR_STOOL, BAR_V, NO_ITEM, NO_ITEM, NO_ITEM,
        NO_ITEM, BAR_STOOL, BAR_LEFT, BAR_H, BAR_H, BAR_RIGHT,
        NO_ITEM, BAR_STOOL, BAR_STOOL, BAR_STOOL, BAR_STOOL, BAR_STOOL,
        NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM, NO_ITEM,
    ),
)


class Bar(Room):
    """A room with a bar counter and a stock of beer."""

    def __init__(self) -> None:
        super().__init__()
        self.beers = 0
        self.beer_refill_index = 0

    def update(self, mp: Map) -> None:
        """Bars have no timed state."""
        return None

    def tiles(self) -> list[int]:
        return self._tiles

    def add_beer(self, amount: int) -> None:
        self.beers += amount

    def consume_beer(self) -> bool:
        """Take one beer from stock; False when there is none."""
        if self.beers <= 0:
            return False
        self.beers -= 1
        return True

    def needs_more_beer(self) -> bool:
        return self.beers <= NEEDS_MORE_BEER_RATE

    def _place_bar(self, mp: Map, idx: int) -> bool:
        """Place a counter with its top-left corner at idx if the area is free."""
        x0, y0 = idx_to_xy(idx)
        placements = []
        for y in range(y0, y0 + _HEIGHT):
            for x in range(x0, x0 + _WIDTH):
                curr = xy_to_idx(x, y)
                if mp.items[curr].sprite != NO_ITEM:
                    return False
                if is_any_wall(mp.tiles[curr].sprite):
                    return False
                placements.append(curr)
        layout = random.choice(_LAYOUTS)
        for curr, sprite in zip(placements, layout):
            mp.items[curr].sprite = sprite
            if sprite == BAR_DRINKS_LEFT:
                self.beer_refill_index = one_down(curr)
        return True


_bar_ids = itertools.count()


def new_bar(mp: Map, x: int, y: int) -> Optional[Bar]:
    """Turn the ground region around (x, y) into a bar.

    Returns None when there is no ground there or no room for the counter;
    in the latter case the region is turned back into plain ground.
    """
    tiles = sorted(flood_fill_room(mp, x, y, lambda: BAR_FLOOR))
    if not tiles:
        return None
    bar = Bar()
    bar._tiles = tiles
    placed = False
    for idx in tiles:
        mp.tiles[idx].room = bar
        if not placed:
            placed = bar._place_bar(mp, idx)
    if not placed:
        for idx in tiles:
            mp.tiles[idx].sprite = GROUND
            mp.tiles[idx].room = None
        return None
    bar.id = next(_bar_ids)
    return bar