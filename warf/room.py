"""Rooms on the world map, and the sleep hall with its beds."""

from __future__ import annotations

import itertools
from typing import Iterable, Optional

from warf.direction import (
    one_down,
    one_down_left,
    one_down_right,
    one_left,
    one_right,
    one_up,
    one_up_left,
    one_up_right,
)
from warf.items import is_bed
from warf.mapgen import flood_fill_room
from warf.placement import random_bed
from warf.sprites import SLEEP_HALL_FLOOR, is_any_wall, is_next_to_door_opening
from warf.worldmap import Map


class Room:
    """A region of floor tiles given a purpose."""

    def __init__(self, room_id: int = -1, tiles: Optional[Iterable[int]] = None) -> None:
        self.id = room_id
        self._tiles: list[int] = list(tiles) if tiles is not None else []

    def __str__(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"

    def update(self, mp: Map) -> None:
        """Advance the room by one step; rooms without timed state do nothing."""
        return None

    def tiles(self) -> list[int]:
        """Map indexes covered by the room."""
        return self._tiles


class SleepHall(Room):
    """A room furnished with beds for sleeping dwarves."""


_sleep_hall_ids = itertools.count()

_BED_CLEARANCE = (
    lambda i: i,
    one_down,
    one_left,
    one_down_left,
    one_right,
    one_down_right,
    one_up,
    one_up_left,
    one_up_right,
)


def new_sleep_hall(mp: Map, x: int, y: int) -> Optional[SleepHall]:
    """Turn the ground region around (x, y) into a sleep hall full of beds.

    Returns None when there is no ground to fill at (x, y).
    """
    tiles = sorted(flood_fill_room(mp, x, y, lambda: SLEEP_HALL_FLOOR))
    if not tiles:
        return None
    hall = SleepHall(tiles=tiles)
    for idx in tiles:
        mp.tiles[idx].room = hall
        below = one_down(idx)
        if is_any_wall(mp.tiles[idx].sprite) or is_any_wall(mp.tiles[below].sprite):
            continue
        if any(is_bed(mp.items[step(idx)].sprite) for step in _BED_CLEARANCE):
            continue
        if is_next_to_door_opening(mp, idx) or is_next_to_door_opening(mp, below):
            continue
        mp.items[idx].sprite, mp.items[below].sprite = random_bed()
    hall.id = next(_sleep_hall_ids)
    return hall