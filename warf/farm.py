"""Farms: rooms of wheat fields that grow and get harvested."""

from __future__ import annotations

import itertools
from typing import Optional

from warf.direction import one_left
from warf.items import (
    FARM_LEFT_EMPTY,
    FARM_MIDDLE_EMPTY,
    FARM_RIGHT_EMPTY,
    FARM_SINGLE_EMPTY,
    FARM_SINGLE_WHEAT4,
    NO_ITEM,
    Resource,
    is_farm,
    is_farm_harvestable,
    is_farm_right,
    is_farm_single,
)
from warf.mapgen import flood_fill_room
from warf.placement import place
from warf.room import Room
from warf.sprites import GROUND, is_any_wall, surrounding_tiles_eight
from warf.worldmap import Map, Tile

# Each growth stage sits four sprites after the previous one.
_GROWTH = {sprite: sprite + 4 for sprite in range(FARM_SINGLE_EMPTY, FARM_SINGLE_WHEAT4)}


class Farm(Room):
    """A room of farm plots; its id is assigned on creation."""

    def __init__(self) -> None:
        super().__init__()
        self.all_tile_idxs: list[int] = []
        self.farmable_idxs: list[int] = []
        self._farm_tile: Optional[Tile] = None

    def tiles(self) -> list[int]:
        return self.all_tile_idxs

    def update(self, mp: Map) -> None:
        """Grow every plot by one stage until fully grown."""
        for idx in self.farmable_idxs:
            item = mp.items[idx]
            if item.sprite == NO_ITEM:
                continue
            item.sprite = _GROWTH.get(item.sprite, item.sprite)

    def fully_harvested_and_cleaned(self, mp: Map) -> bool:
        return all(mp.items[idx].sprite == NO_ITEM for idx in self.farmable_idxs)

    def fully_planted(self, mp: Map) -> bool:
        return all(is_farm(mp.items[idx].sprite) for idx in self.farmable_idxs)

    def should_harvest(self, mp: Map) -> Optional[list[int]]:
        """The plots to harvest when all are fully grown, else None."""
        if self._farm_tile is None or not is_farm_harvestable(self._farm_tile.sprite):
            return None
        if not all(is_farm_harvestable(mp.items[idx].sprite) for idx in self.farmable_idxs):
            return None
        return self.farmable_idxs

    def plant_farm(self, mp: Map, tile: Tile) -> None:
        """Plant an empty plot at tile, joining it to a plot on its left."""
        idx = tile.idx
        if any(is_any_wall(mp.tiles[n.idx].sprite) for n in surrounding_tiles_eight(idx)):
            return
        left = mp.items[one_left(idx)]
        if is_farm_single(left.sprite):
            left.sprite = FARM_LEFT_EMPTY
            place(mp, tile.x, tile.y, FARM_RIGHT_EMPTY)
        elif is_farm_right(left.sprite):
            left.sprite = FARM_MIDDLE_EMPTY
            place(mp, tile.x, tile.y, FARM_RIGHT_EMPTY)
        else:
            place(mp, tile.x, tile.y, FARM_SINGLE_EMPTY)
        mp.items[idx].resource = Resource.NONE

    def _farmable_indexes(self, mp: Map) -> list[int]:
        return sorted(
            (idx for idx in self.all_tile_idxs if is_farm(mp.items[idx].sprite)),
            reverse=True,
        )


_farm_ids = itertools.count()


def new_farm(mp: Map, x: int, y: int) -> Optional[Farm]:
    """Turn the ground region around (x, y) into a planted farm.

    Returns None when there is no ground to fill at (x, y).
    """
    tiles = sorted(flood_fill_room(mp, x, y, lambda: GROUND))
    if not tiles:
        return None
    farm = Farm()
    for idx in tiles:
        mp.tiles[idx].room = farm
        farm.plant_farm(mp, mp.tiles[idx])
        if farm._farm_tile is None and is_farm(mp.items[idx].sprite):
            farm._farm_tile = mp.items[idx]
    farm.all_tile_idxs = tiles
    farm.farmable_idxs = farm._farmable_indexes(mp)
    farm.id = next(_farm_ids)
    return farm