from types import SimpleNamespace

import pytest

from warf import sprites
from warf.direction import Direction, one_down, one_left, one_right, one_up
from warf.grid import TILES_T, xy_to_idx
from warf.sprites import (
    graphic_name,
    is_any_wall,
    is_boundary,
    is_door_opening,
    is_exposed,
    is_library_wood_floor,
    is_next_to_door_opening,
    is_rail,
    is_selected_wall,
    is_storage_floor_brick,
    is_wall,
    is_wall_or_selected,
    neigh_tile_dir_four,
    neigh_tile_four,
    neigh_wall_tile_dir_four,
    surrounding_tiles_eight,
)

CENTER = xy_to_idx(10, 10)


def _ground_map():
    return SimpleNamespace(tiles=[SimpleNamespace(sprite=sprites.GROUND) for _ in range(TILES_T)])


def _walls(mp, *idxs):
    for idx in idxs:
        mp.tiles[idx].sprite = sprites.WALL_SOLID
    return mp


@pytest.mark.parametrize(
    "sprite,name",
    [
        (sprites.NONE, "Transparent"),
        (sprites.GROUND, "Ground"),
        (sprites.WALL_SELECTED_EXPOSED, "WallSelectedExposed"),
        (999, "unknown graphic #999"),
    ],
)
def test_graphic_name(sprite, name):
    assert graphic_name(sprite) == name


def test_neighbour_lists_agree():
    assert neigh_tile_four(CENTER) == [t.idx for t in neigh_tile_dir_four(CENTER)]
    assert [t.direction for t in neigh_tile_dir_four(CENTER)] == [
        Direction.UP,
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
    ]


def test_surrounding_eight_distinct():
    around = surrounding_tiles_eight(CENTER)
    assert len({t.idx for t in around}) == len(around) == len(Direction)
    assert CENTER not in {t.idx for t in around}
    assert around[:4] == neigh_tile_dir_four(CENTER)


def test_wall_predicates():
    for s in (sprites.BOUNDARY_SOLID, sprites.BOUNDARY_EXPOSED):
        assert is_boundary(s) and is_any_wall(s) and not is_wall_or_selected(s)
    for s in (sprites.WALL_SOLID, sprites.WALL_EXPOSED):
        assert is_wall(s) and is_wall_or_selected(s) and not is_selected_wall(s)
    for s in (sprites.WALL_SELECTED_SOLID, sprites.WALL_SELECTED_EXPOSED):
        assert is_selected_wall(s) and is_any_wall(s) and not is_wall(s)
    assert is_exposed(sprites.GROUND)
    assert not is_exposed(sprites.WALL_EXPOSED)


def test_rail_predicate():
    assert all(is_rail(s) for s in (sprites.STRAIGHT, sprites.CURVE, sprites.STOP, sprites.CROSS))
    assert not is_rail(sprites.CART)
    assert not is_rail(sprites.NONE)


def test_floor_predicates():
    assert is_storage_floor_brick(sprites.STORAGE_FLOOR10)
    assert not is_storage_floor_brick(sprites.LIBRARY_FLOOR1)
    assert is_library_wood_floor(sprites.LIBRARY_FLOOR3)
    assert not is_library_wood_floor(sprites.LIBRARY_FLOOR4)


def test_neigh_wall_tile_dir_four():
    mp = _walls(_ground_map(), one_left(CENTER), one_up(CENTER))
    found = neigh_wall_tile_dir_four(mp, CENTER)
    assert [t.direction for t in found] == [Direction.UP, Direction.LEFT]


def test_vertical_door_opening():
    mp = _walls(_ground_map(), one_up(CENTER), one_down(CENTER))
    assert is_door_opening(mp, CENTER)


def test_horizontal_door_opening():
    mp = _walls(_ground_map(), one_left(CENTER), one_right(CENTER))
    assert is_door_opening(mp, CENTER)


def test_corner_is_not_door_opening():
    mp = _walls(_ground_map(), one_up(CENTER), one_left(CENTER))
    assert not is_door_opening(mp, CENTER)


def test_wall_is_not_door_opening():
    mp = _walls(_ground_map(), CENTER, one_left(CENTER), one_right(CENTER))
    assert not is_door_opening(mp, CENTER)


def test_open_area_not_next_to_door():
    assert not is_next_to_door_opening(_ground_map(), CENTER)


def test_wall_below_counts_as_next_to_door():
    mp = _walls(_ground_map(), one_down(CENTER))
    assert is_next_to_door_opening(mp, CENTER)


def test_door_above_is_next_to_door():
    above = one_up(CENTER)
    mp = _walls(_ground_map(), one_left(above), one_right(above))
    assert is_next_to_door_opening(mp, CENTER)