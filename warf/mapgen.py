"""Map generation: random floors, flood fills, islands and cave automata."""

from __future__ import annotations

import random
from typing import Callable

from warf.grid import TILES_H, TILES_W, idx_to_xy, xy_to_idx
from warf.sprites import (
    GROUND,
    LIBRARY_FLOOR1,
    LIBRARY_FLOOR4,
    STORAGE_FLOOR1,
    STORAGE_FLOOR10,
    WALL_SOLID,
    is_any_wall,
    is_door_opening,
    is_ground,
    is_wall,
    surrounding_tiles_eight,
)
from warf.worldmap import Map, Tile, index_out_of_bounds

_ROOM_ISLAND = 99


def random_floor_brick() -> int:
    return random.randint(STORAGE_FLOOR1, STORAGE_FLOOR10)


def random_wood_floor() -> int:
    if random.randrange(3) < 2:
        return LIBRARY_FLOOR1
    return random.randint(LIBRARY_FLOOR1, LIBRARY_FLOOR4)


def flood_fill(
    x: int, y: int, mp: Map, island: int, predicate: Callable[[int], bool]
) -> None:
    """Depth-first fill from (x, y), spreading up, left, down and right
    from every index for which predicate returns True."""
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not predicate(xy_to_idx(cx, cy)):
            continue
        steps = []
        if cy > 0:
            steps.append((cx, cy - 1))
        if cx > 0:
            steps.append((cx - 1, cy))
        if cy < TILES_H - 1:
            steps.append((cx, cy + 1))
        if cx < TILES_W - 1:
            steps.append((cx + 1, cy))
        pending.extend(reversed(steps))


def _mark(mp: Map, island: int, accept: Callable[[int], bool]) -> Callable[[int], bool]:
    def predicate(idx: int) -> bool:
        tile = mp.tiles[idx]
        if not accept(tile.sprite) or tile.island == island:
            return False
        tile.island = island
        return True

    return predicate


def flood_fill_walls(x: int, y: int, mp: Map, island: int) -> None:
    flood_fill(x, y, mp, island, _mark(mp, island, is_any_wall))


def flood_fill_ground(x: int, y: int, mp: Map, island: int) -> None:
    flood_fill(x, y, mp, island, _mark(mp, island, is_ground))


def flood_fill_room(
    mp: Map, x: int, y: int, sprite_generator: Callable[[], int]
) -> list[int]:
    """Repaint the ground region around (x, y), stopping at door openings.

    Returns the repainted indexes in fill order and resets all islands.
    """
    tiles: list[int] = []

    def predicate(idx: int) -> bool:
        tile = mp.tiles[idx]
        if not is_ground(tile.sprite) or tile.island == _ROOM_ISLAND:
            return False
        if is_door_opening(mp, idx):
            return False
        tile.sprite = sprite_generator()
        tile.island = _ROOM_ISLAND
        tiles.append(tile.idx)
        return True

    flood_fill(x, y, mp, _ROOM_ISLAND, predicate)
    mp.reset_islands()
    return tiles


def fill_islands(mp: Map, inverse: bool) -> None:
    """Remove islands of five tiles or fewer: to ground when inverse, else to walls."""
    island = 1
    for i, tile in enumerate(mp.tiles):
        if tile.island != 0:
            continue
        x, y = idx_to_xy(i)
        if is_wall(tile.sprite):
            flood_fill_walls(x, y, mp, island)
            island += 1
        elif is_ground(tile.sprite):
            flood_fill_ground(x, y, mp, island)
            island += 1
    replacement = GROUND if inverse else WALL_SOLID
    for current in range(1, island + 1):
        members = mp.tiles_for_island(current)
        if not members or len(members) > 5:
            continue
        for tile in members:
            tile.island = 0
            tile.sprite = replacement
    mp.reset_islands()


def automata(mp: Map) -> None:
    """One step of a cave-building cellular automaton."""
    mp.randomize_walls(40)
    mp.create_outmost_walls()
    for i, tile in enumerate(mp.tiles):
        neighbors = sum(
            1
            for st in surrounding_tiles_eight(i)
            if not index_out_of_bounds(st.idx, st.direction)
            and is_any_wall(mp.tiles[st.idx].sprite)
        )
        if neighbors > 3:
            if random.randrange(100) < 80:
                tile.sprite = WALL_SOLID
        elif random.randrange(100) < 80:
            tile.sprite = GROUND
    mp.create_outmost_walls()


def normal_map() -> Map:
    """A randomly generated cave map enclosed by boundary walls."""
    mp = Map()
    automata(mp)
    fill_islands(mp, True)
    fill_islands(mp, False)
    mp.create_boundary_walls()
    mp.fix_walls()
    return mp


def find_nearest_door_openings(mp: Map, x: int, y: int, island: int) -> list[Tile]:
    """Door openings bordering the ground region around (x, y).

    Marks the region with the island number and leaves it marked.
    """
    openings: list[Tile] = []

    def predicate(idx: int) -> bool:
        tile = mp.tiles[idx]
        if not is_ground(tile.sprite) or tile.island == island:
            return False
        if is_door_opening(mp, idx):
            openings.append(tile)
            return False
        tile.island = island
        return True

    flood_fill(x, y, mp, island, predicate)
    return openings