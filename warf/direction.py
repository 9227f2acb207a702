"""Directions and index arithmetic between neighbouring tiles."""

from enum import IntEnum
from typing import NamedTuple

from warf.grid import TILES_W, idx_to_xy


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    UP_LEFT = 4
    UP_RIGHT = 5
    DOWN_LEFT = 6
    DOWN_RIGHT = 7


class TileDir(NamedTuple):
    """An index and its direction from the index it was requested from."""

    idx: int
    direction: Direction


_TEXT = {
    Direction.UP: "Up",
    Direction.DOWN: "Down",
    Direction.LEFT: "Left",
    Direction.RIGHT: "Right",
}


def get_direction(i: int) -> Direction:
    """Convert 0-3 into one of the four cardinal directions."""
    if i in (0, 1, 2, 3):
        return Direction(i)
    raise ValueError(f"no such direction: {i}")


def direction_to_text(direction: Direction) -> str:
    return _TEXT.get(direction, "Unknown direction")


def one_up(idx: int) -> int:
    return idx - TILES_W


def one_down(idx: int) -> int:
    return idx + TILES_W


def one_left(idx: int) -> int:
    return idx - 1


def one_right(idx: int) -> int:
    return idx + 1


def one_up_left(idx: int) -> int:
    return one_up(one_left(idx))


def one_up_right(idx: int) -> int:
    return one_up(one_right(idx))


def one_down_left(idx: int) -> int:
    return one_down(one_left(idx))


def one_down_right(idx: int) -> int:
    return one_down(one_right(idx))


_STEPS = {
    Direction.UP: one_up,
    Direction.RIGHT: one_right,
    Direction.DOWN: one_down,
    Direction.LEFT: one_left,
    Direction.UP_LEFT: one_up_left,
    Direction.UP_RIGHT: one_up_right,
    Direction.DOWN_LEFT: one_down_left,
    Direction.DOWN_RIGHT: one_down_right,
}


def index_at_direction(idx: int, direction: Direction) -> int:
    """Index one step from idx in direction, or -1 for an unknown direction."""
    step = _STEPS.get(direction)
    if step is None:
        print("unknown direction:", direction_to_text(direction))
        return -1
    return step(idx)


def next_idx_to_dir(idx: int, nxt: int) -> Direction:
    """Cardinal direction leading from idx to the adjacent index nxt."""
    for direction in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
        if nxt == _STEPS[direction](idx):
            return direction
    x1, y1 = idx_to_xy(idx)
    x2, y2 = idx_to_xy(nxt)
    raise ValueError(
        f"idx {idx} and next {nxt} not adjacent, "
        f"vertical diff {y1 - y2}, horizontal diff {x1 - x2}"
    )