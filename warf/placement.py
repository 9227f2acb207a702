"""Finding and placing items on the item layer of a map."""

from __future__ import annotations

import random
from typing import Callable, Optional

from warf.grid import dist, xy_to_idx
from warf.items import (
    BEDS,
    BOOKSHELVES,
    FURNITURE,
    WALL_CRUMBLED1,
    WALL_CRUMBLED4,
    is_bed_top,
    is_bookshelf,
    is_chair,
)
from warf.sprites import is_any_wall
from warf.worldmap import Map


def find_nearest(mp: Map, idx: int, predicate: Callable[[int], bool]) -> Optional[int]:
    """Index of the nearest item whose sprite matches, or None.

    None is returned both when idx is off the map and when nothing matches.
    """
    current = mp.get_tile_by_index(idx)
    if current is None:
        return None
    matches = [t for t in mp.items if predicate(t.sprite)]
    if not matches:
        return None
    nearest = min(matches, key=lambda t: dist(current.x, current.y, t.x, t.y))
    return nearest.idx


def find_nearest_many(mp: Map, idx: int, predicate: Callable[[int], bool]) -> list[int]:
    """Indexes of all matching items, nearest first; empty when idx is off the map."""
    current = mp.get_tile_by_index(idx)
    if current is None:
        return []
    matches = [t for t in mp.items if predicate(t.sprite)]
    matches.sort(key=lambda t: dist(current.x, current.y, t.x, t.y))
    return [t.idx for t in matches]


def find_nearest_bookshelf(mp: Map, idx: int) -> Optional[int]:
    return find_nearest(mp, idx, is_bookshelf)


def find_nearest_chair(mp: Map, idx: int) -> Optional[int]:
    return find_nearest(mp, idx, is_chair)


def find_nearest_chairs(mp: Map, idx: int) -> list[int]:
    return find_nearest_many(mp, idx, is_chair)


def find_nearest_beds(mp: Map, idx: int) -> list[int]:
    return find_nearest_many(mp, idx, is_bed_top)


def place(mp: Map, x: int, y: int, sprite: int) -> None:
    """Put an item at (x, y) unless the ground there is a wall or off the map."""
    tile = mp.get_tile(x, y)
    if tile is None or is_any_wall(tile.sprite):
        return
    item = mp.get_item_tile(x, y)
    if item is None:
        return
    item.sprite = sprite


def place_random(mp: Map, x: int, y: int, generator: Callable[[], int]) -> None:
    place_random_idx(mp, xy_to_idx(x, y), generator)


def place_random_idx(mp: Map, idx: int, generator: Callable[[], int]) -> None:
    """Put a generated item at idx unless the ground there is a wall or off the map."""
    tile = mp.get_tile_by_index(idx)
    if tile is None or is_any_wall(tile.sprite):
        return
    item = mp.get_item_tile_by_index(idx)
    if item is None:
        return
    item.sprite = generator()


def random_bookshelf() -> int:
    return random.choice(BOOKSHELVES)


def random_furniture() -> int:
    return random.choice(FURNITURE)


def random_crumbled_wall() -> int:
    return random.randint(WALL_CRUMBLED1, WALL_CRUMBLED4)


def random_bed() -> tuple[int, int]:
    """Top and bottom sprites of a randomly coloured bed."""
    n = random.randrange(len(BEDS) // 2) * 2
    return BEDS[n], BEDS[n + 1]