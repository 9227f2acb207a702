import pytest

from warf.grid import dist, idx_to_xy, xy_to_idx
from warf.items import FILLED_BARREL, NO_ITEM, Resource
from warf.sprites import WALL_SOLID, is_storage_floor_brick
from warf.storage import (
    MAX_STORAGE,
    Storage,
    StorageTile,
    create_storage_tiles,
    determine_center,
    new_storage,
)
from warf.worldmap import boundaries_map, create_tile


def _tile(resource=Resource.NONE, amount=0):
    tile = create_tile(0, NO_ITEM, None)
    tile.resource = resource
    tile.resource_amount = amount
    return StorageTile(tile)


def _two_storages():
    mp = boundaries_map()
    mp.draw_outline(5, 5, 10, 10, WALL_SOLID)
    mp.draw_outline(20, 5, 25, 10, WALL_SOLID)
    return mp, new_storage(mp, 6, 6), new_storage(mp, 21, 6)


def test_storage_tile_add():
    st = _tile(Resource.ROCK, 0)
    r = st.add(Resource.ROCK, 5)
    assert (st.tile.resource_amount, r) == (5, 0)
    r = st.add(Resource.ROCK, 5)
    assert (st.tile.resource_amount, r) == (8, 2)


def test_storage_tile_take():
    st = _tile(Resource.ROCK, 10)
    r = st.take(5)
    assert (st.tile.resource_amount, r) == (5, 5)
    r = st.take(10)
    assert (st.tile.resource_amount, r) == (0, 5)


def test_add_other_resource_raises():
    st = _tile(Resource.ROCK, 3)
    with pytest.raises(ValueError):
        st.add(Resource.WHEAT, 1)


def test_take_all_clears_tile():
    st = _tile(Resource.BEER, 4)
    st.tile.sprite = FILLED_BARREL
    assert st.take_all() == 4
    assert st.tile.resource == Resource.NONE
    assert st.tile.sprite == NO_ITEM
    assert st.remaining() == MAX_STORAGE


def test_available_resets_empty_tile():
    st = _tile(Resource.ROCK, 0)
    assert st.available(Resource.WHEAT)
    assert st.tile.resource == Resource.NONE


def test_full_tile_unavailable():
    st = _tile(Resource.ROCK, MAX_STORAGE)
    assert st.unavailable(Resource.ROCK)
    assert st.unavailable(Resource.WHEAT)
    assert st.has(Resource.ROCK)
    assert not st.has(Resource.WHEAT)


def test_new_storage_on_wall_is_none():
    assert new_storage(boundaries_map(), 0, 0) is None


def test_new_storage_claims_room():
    mp, first, _ = _two_storages()
    assert isinstance(first, Storage)
    assert str(first) == "Storage"
    assert sorted(first.tiles()) == [xy_to_idx(x, y) for y in range(6, 9) for x in range(6, 9)]
    for idx in first.tiles():
        assert mp.tiles[idx].room is first
        assert is_storage_floor_brick(mp.tiles[idx].sprite)
    assert first.center == xy_to_idx(7, 7)


def test_nearest_storage_center_is_first():
    _, first, second = _two_storages()
    assert second.id == first.id + 1
    fx, fy = idx_to_xy(first.center)
    sx, sy = idx_to_xy(second.center)
    assert dist(1, 1, fx, fy) < dist(1, 1, sx, sy)


def test_determine_center_skips_walls():
    mp = boundaries_map()
    mp.tiles[xy_to_idx(7, 6)].sprite = WALL_SOLID
    assert determine_center(mp, [xy_to_idx(6, 6), xy_to_idx(8, 6)]) == xy_to_idx(8, 6)


def test_create_storage_tiles_wraps_items():
    mp = boundaries_map()
    sts = create_storage_tiles(mp, [10, 20])
    assert [st.idx for st in sts] == [10, 20]
    assert sts[0].tile is mp.items[10]


def test_add_item_prefers_given_tile_then_first_free():
    _, storage, _ = _two_storages()
    target = storage.tiles()[3]
    assert storage.add_item(target, MAX_STORAGE, Resource.ROCK) == target
    other = storage.add_item(target, 1, Resource.WHEAT)
    assert other == storage.tiles()[0]
    assert storage.add_item(-5, 1, Resource.ROCK) is None


def test_has_wheat_and_beer():
    _, storage, _ = _two_storages()
    assert storage.has_wheat() is None
    idx = storage.tiles()[2]
    storage.add_item(idx, 2, Resource.WHEAT)
    found = storage.has_wheat()
    assert found.idx == idx
    assert storage.has_beer() is None


def test_space_and_available_tile_when_full():
    _, storage, _ = _two_storages()
    for idx in storage.tiles():
        storage.add_item(idx, MAX_STORAGE, Resource.ROCK)
    assert not storage.has_space(Resource.WHEAT)
    assert storage.get_available_tile(Resource.ROCK) is None
    assert storage.add_item(storage.tiles()[0], 1, Resource.ROCK) is None