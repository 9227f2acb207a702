"""Mouse modes and helpers for acting on a dragged range of tiles."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from warf.grid import idx_to_xy
from warf.worldmap import Map


class Mode(IntEnum):
    """What a mouse click does."""

    NORMAL = 0
    STORAGE = 1
    SLEEP_HALL = 2
    FARM = 3
    BREWERY = 4
    BAR = 5
    LIBRARY = 6
    DELETE = 7

    def __str__(self) -> str:
        return _MODE_NAMES[self]


_MODE_NAMES = {
    Mode.NORMAL: "Normal",
    Mode.STORAGE: "Storage",
    Mode.SLEEP_HALL: "SleepHall",
    Mode.FARM: "Farm",
    Mode.BREWERY: "Brewery",
    Mode.BAR: "Bar",
    Mode.LIBRARY: "Library",
    Mode.DELETE: "Delete",
}
_MODES_BY_NAME = {name: mode for mode, name in _MODE_NAMES.items()}


def mode_from_string(name: str) -> Mode:
    """Mode for its display name; unknown names give Mode.NORMAL."""
    return _MODES_BY_NAME.get(name, Mode.NORMAL)


def tile_range(start: int, end: int) -> tuple[int, int, int, int]:
    """Corners x1, y1, x2, y2 of the rectangle spanned by two indexes."""
    x1, y1 = idx_to_xy(start)
    x2, y2 = idx_to_xy(end)
    return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)


def func_over_range(
    mp: Map, start: int, end: int, func: Callable[[Map, int, int], None]
) -> None:
    """Call func(mp, x, y) for every tile in the rectangle, corners included."""
    x1, y1, x2, y2 = tile_range(start, end)
    for x in range(x1, x2 + 1):
        for y in range(y1, y2 + 1):
            func(mp, x, y)