"""Breweries: rooms of barrels that turn wheat into beer."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Optional

from warf.direction import one_up
from warf.items import EMPTY_BARREL, Resource, is_barrel, is_empty_barrel, is_filled_barrel
from warf.mapgen import flood_fill_room
from warf.room import Room
from warf.sprites import BREWERY_FLOOR, is_any_wall, surrounding_tiles_eight
from warf.worldmap import Map

BREW_DONE = 5


@dataclass
class _BrewingBarrel:
    idx: int
    val: int = 0


class Brewery(Room):
    """A room whose barrels brew beer once filled with wheat."""

    def __init__(self) -> None:
        super().__init__()
        self._barrels: list[_BrewingBarrel] = []

    def tiles(self) -> list[int]:
        return self._tiles

    def update(self, mp: Map) -> None:
        """Brew filled barrels; a barrel brewed BREW_DONE times holds one beer."""
        for barrel in self._barrels:
            item = mp.items[barrel.idx]
            if not is_filled_barrel(item.sprite):
                barrel.val = 0
                continue
            barrel.val += 1
            if barrel.val < BREW_DONE:
                continue
            item.resource = Resource.BEER
            item.resource_amount = 1

    def needs_more_wheat(self, mp: Map) -> bool:
        return any(is_empty_barrel(mp.items[b.idx].sprite) for b in self._barrels)

    def get_empty_barrel(self, mp: Map) -> Optional[int]:
        """Index of the first empty barrel, or None."""
        return next(
            (b.idx for b in self._barrels if is_empty_barrel(mp.items[b.idx].sprite)),
            None,
        )


_brewery_ids = itertools.count()


def new_brewery(mp: Map, x: int, y: int) -> Optional[Brewery]:
    """Turn the ground region around (x, y) into a brewery with barrels.

    Returns None when there is no ground to fill at (x, y).
    """
    tiles = sorted(flood_fill_room(mp, x, y, lambda: BREWERY_FLOOR))
    if not tiles:
        return None
    brewery = Brewery()
    for idx in tiles:
        mp.tiles[idx].room = brewery
        if any(is_any_wall(mp.tiles[n.idx].sprite) for n in surrounding_tiles_eight(idx)):
            continue
        above = one_up(idx)
        if is_barrel(mp.items[above].sprite) and is_barrel(mp.items[one_up(above)].sprite):
            continue
        item = mp.items[idx]
        item.resource_amount = 0
        item.resource = Resource.NONE
        item.sprite = EMPTY_BARREL
        brewery._barrels.append(_BrewingBarrel(idx))
    brewery._tiles = tiles
    brewery.id = next(_brewery_ids)
    return brewery