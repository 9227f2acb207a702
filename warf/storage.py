"""Storage rooms and the tiles in them that hold resources."""

from __future__ import annotations

import itertools
from typing import Optional

from warf.grid import xy_to_idx
from warf.items import NO_ITEM, Resource
from warf.mapgen import flood_fill_room, random_floor_brick
from warf.room import Room
from warf.sprites import is_any_wall
from warf.worldmap import Map, Tile

MAX_STORAGE = 8


class StorageTile:
    """An item tile inside a storage that holds up to MAX_STORAGE of one resource."""

    def __init__(self, tile: Tile) -> None:
        self.tile = tile

    def __repr__(self) -> str:
        return (
            f"StorageTile(idx={self.idx}, resource={self.tile.resource!s}, "
            f"amount={self.tile.resource_amount})"
        )

    @property
    def idx(self) -> int:
        return self.tile.idx

    def available(self, resource: Resource) -> bool:
        """Whether resource can be added; an empty tile forgets its resource."""
        if resource == self.tile.resource and self.tile.resource_amount < MAX_STORAGE:
            return True
        if self.tile.resource_amount == 0:
            self.tile.resource = Resource.NONE
            return True
        return False

    def unavailable(self, resource: Resource) -> bool:
        return not self.available(resource)

    def has(self, resource: Resource) -> bool:
        return self.tile.resource == resource and self.tile.resource_amount > 0

    def add(self, resource: Resource, amount: int) -> int:
        """Add up to the tile's capacity and return what did not fit.

        Raises ValueError when the tile already holds another resource.
        """
        if self.tile.resource != resource and self.tile.resource != Resource.NONE:
            raise ValueError(
                f"trying to add {resource} to a tile holding {self.tile.resource}"
            )
        self.tile.resource = resource
        stored = min(amount, MAX_STORAGE - self.tile.resource_amount)
        stored = max(stored, 0)
        self.tile.resource_amount += stored
        return amount - stored

    def take(self, desired_amount: int) -> int:
        """Remove desired_amount and return the amount left on the tile.

        When less than desired_amount is stored, everything is taken and returned.
        """
        if self.tile.resource_amount < desired_amount:
            return self.take_all()
        self.tile.resource_amount -= desired_amount
        return self.tile.resource_amount

    def take_all(self) -> int:
        """Empty the tile, clearing its item, and return what it held."""
        amount = self.tile.resource_amount
        self.tile.resource_amount = 0
        self.tile.resource = Resource.NONE
        self.tile.sprite = NO_ITEM
        return amount

    def remaining(self) -> int:
        return MAX_STORAGE - self.tile.resource_amount


class Storage(Room):
    """A room whose item tiles store resources."""

    def __init__(self) -> None:
        super().__init__()
        self.center = -1
        self.storage_tiles: list[StorageTile] = []

    def update(self, mp: Map) -> None:
        """Storages do not change over time."""

    def tiles(self) -> list[int]:
        return [t.idx for t in self.storage_tiles]

    def get_available_tile(self, resource: Resource) -> Optional[int]:
        """Index of the first tile that can take resource, or None."""
        for tile in self.storage_tiles:
            if tile.available(resource):
                return tile.idx
        return None

    def add_item(self, idx: int, amount: int, resource: Resource) -> Optional[int]:
        """Store resource on the tile at idx, or the first tile with room.

        Returns the map index it was stored at, or None when idx is not in
        this storage or nothing can take it.
        """
        here = next((t for t in self.storage_tiles if t.idx == idx), None)
        if here is None:
            return None
        if here.available(resource):
            here.add(resource, amount)
            return here.idx
        for tile in self.storage_tiles:
            if tile.available(resource):
                tile.add(resource, amount)
                return tile.idx
        return None

    def has_space(self, resource: Resource) -> bool:
        return any(t.available(resource) for t in self.storage_tiles)

    def has_wheat(self) -> Optional[StorageTile]:
        return self._find(Resource.WHEAT)

    def has_beer(self) -> Optional[StorageTile]:
        return self._find(Resource.BEER)

    def _find(self, resource: Resource) -> Optional[StorageTile]:
        return next((t for t in self.storage_tiles if t.has(resource)), None)


_storage_ids = itertools.count()


def create_storage_tiles(mp: Map, tiles: list[int]) -> list[StorageTile]:
    return [StorageTile(mp.items[idx]) for idx in tiles]


def determine_center(mp: Map, tiles: list[int]) -> int:
    """Middle of the bounding box of tiles, moved right past any walls."""
    xs = [mp.tiles[idx].x for idx in tiles]
    ys = [mp.tiles[idx].y for idx in tiles]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    center = xy_to_idx(min_x + (max_x - min_x) // 2, min_y + (max_y - min_y) // 2)
    while is_any_wall(mp.tiles[center].sprite):
        center += 1
    return center


def new_storage(mp: Map, x: int, y: int) -> Optional[Storage]:
    """Turn the ground region around (x, y) into a storage, or None if there is none."""
    tiles = flood_fill_room(mp, x, y, random_floor_brick)
    if not tiles:
        return None
    storage = Storage()
    for idx in tiles:
        mp.tiles[idx].room = storage
    storage.storage_tiles = create_storage_tiles(mp, tiles)
    storage.center = determine_center(mp, tiles)
    storage.id = next(_storage_ids)
    return storage