"""World tile sprites, neighbourhoods and tile classification."""

from warf.direction import (
    Direction,
    TileDir,
    one_down,
    one_down_left,
    one_down_right,
    one_left,
    one_right,
    one_up,
    one_up_left,
    one_up_right,
)
from warf.grid import TILESET_W

NONE = 0
WARNING = 1
GROUND = 2
BOUNDARY_SOLID = 3
BOUNDARY_EXPOSED = 4
WALL_SOLID = 5
WALL_EXPOSED = 6
WALL_SELECTED_SOLID = 7
WALL_SELECTED_EXPOSED = 8

(
    STORAGE_FLOOR1,
    STORAGE_FLOOR2,
    STORAGE_FLOOR3,
    STORAGE_FLOOR4,
    STORAGE_FLOOR5,
    STORAGE_FLOOR6,
    STORAGE_FLOOR7,
    STORAGE_FLOOR8,
    STORAGE_FLOOR9,
    STORAGE_FLOOR10,
) = range(TILESET_W, TILESET_W + 10)

(
    LIBRARY_FLOOR1,
    LIBRARY_FLOOR2,
    LIBRARY_FLOOR3,
    LIBRARY_FLOOR4,
    SLEEP_HALL_FLOOR,
    BREWERY_FLOOR,
    BAR_FLOOR,
) = range(TILESET_W * 2, TILESET_W * 2 + 7)

# Rail layer sprites.
STRAIGHT = 1
CURVE = 2
STOP = 3
CROSS = 4
CART = 5

_GRAPHIC_NAMES = {
    NONE: "Transparent",
    GROUND: "Ground",
    BOUNDARY_SOLID: "BoundarySolid",
    BOUNDARY_EXPOSED: "BoundaryExposed",
    WALL_SOLID: "WallSolid",
    WALL_EXPOSED: "WallExposed",
    WALL_SELECTED_SOLID: "WallSelectedSolid",
    WALL_SELECTED_EXPOSED: "WallSelectedExposed",
}


def graphic_name(sprite: int) -> str:
    return _GRAPHIC_NAMES.get(sprite, f"unknown graphic #{sprite}")


def neigh_tile_four(idx: int) -> list[int]:
    """Indexes above, right of, below and left of idx."""
    return [one_up(idx), one_right(idx), one_down(idx), one_left(idx)]


def neigh_tile_dir_four(idx: int) -> list[TileDir]:
    return [
        TileDir(one_up(idx), Direction.UP),
        TileDir(one_right(idx), Direction.RIGHT),
        TileDir(one_down(idx), Direction.DOWN),
        TileDir(one_left(idx), Direction.LEFT),
    ]


def neigh_wall_tile_dir_four(mp, idx: int) -> list[TileDir]:
    """The four neighbours of idx that are walls of any kind."""
    return [t for t in neigh_tile_dir_four(idx) if is_any_wall(mp.tiles[t.idx].sprite)]


def surrounding_tiles_eight(idx: int) -> list[TileDir]:
    corners = [
        TileDir(one_up_left(idx), Direction.UP_LEFT),
        TileDir(one_up_right(idx), Direction.UP_RIGHT),
        TileDir(one_down_left(idx), Direction.DOWN_LEFT),
        TileDir(one_down_right(idx), Direction.DOWN_RIGHT),
    ]
    return neigh_tile_dir_four(idx) + corners


def is_none(sprite: int) -> bool:
    return sprite == NONE


def is_ground(sprite: int) -> bool:
    return sprite == GROUND


def is_exposed(sprite: int) -> bool:
    return not is_any_wall(sprite)


def is_any_wall(sprite: int) -> bool:
    return is_boundary(sprite) or is_wall(sprite) or is_selected_wall(sprite)


def is_boundary(sprite: int) -> bool:
    return BOUNDARY_SOLID <= sprite <= BOUNDARY_EXPOSED


def is_wall(sprite: int) -> bool:
    return WALL_SOLID <= sprite <= WALL_EXPOSED


def is_selected_wall(sprite: int) -> bool:
    return WALL_SELECTED_SOLID <= sprite <= WALL_SELECTED_EXPOSED


def is_wall_or_selected(sprite: int) -> bool:
    return is_wall(sprite) or is_selected_wall(sprite)


def is_rail(sprite: int) -> bool:
    return STRAIGHT <= sprite <= CROSS


def is_storage_floor_brick(sprite: int) -> bool:
    return STORAGE_FLOOR1 <= sprite <= STORAGE_FLOOR10


def is_library_wood_floor(sprite: int) -> bool:
    return LIBRARY_FLOOR1 <= sprite < LIBRARY_FLOOR4


def is_sleep_hall_wood_floor(sprite: int) -> bool:
    return sprite == SLEEP_HALL_FLOOR


_OPENINGS = {
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
    (Direction.LEFT, Direction.RIGHT),
    (Direction.RIGHT, Direction.LEFT),
}


def is_door_opening(mp, idx: int) -> bool:
    """True when idx is open and flanked by exactly two aligned walls."""
    if is_any_wall(mp.tiles[idx].sprite):
        return False
    walls = neigh_wall_tile_dir_four(mp, idx)
    if len(walls) != 2:
        return False
    return (walls[0].direction, walls[1].direction) in _OPENINGS


def is_next_to_door_opening(mp, idx: int) -> bool:
    """True when a neighbour is a door opening or a wall lies below idx."""
    if any(
        is_door_opening(mp, n)
        for n in (one_up(idx), one_down(idx), one_left(idx), one_right(idx))
    ):
        return True
    return any(
        is_any_wall(mp.tiles[n].sprite)
        for n in (one_down(idx), one_down_left(idx), one_down_right(idx))
    )