import random

import pytest

from warf.direction import Direction
from warf.dwarf import (
    DWARF_TEAL,
    MAX,
    Attributes,
    Dwarf,
    NameService,
    Needs,
    WorkState,
    generate_attributes,
    load_names,
    new_dwarf,
    save_names,
)
from warf.grid import TILES_T, xy_to_idx
from warf.items import BOOKSHELF_ONE
from warf.sprites import WALL_SOLID, is_any_wall
from warf.worldmap import boundaries_map


def test_work_state_names():
    d = new_dwarf(100, "Bob")
    d.set_job()
    assert str(d.state) == "HasJob"
    d.set_to_available()
    assert str(d.state) == "Idle"


def test_needs_update_adds_increments():
    needs = Needs()
    needs.update(Attributes("a", 10))
    assert needs.read == 10
    assert needs.sleep == needs.drink


def test_needs_capped_at_max():
    needs = Needs(sleep=200)
    for _ in range(20):
        needs.update(Attributes("a", 15))
    assert needs.sleep == MAX
    assert needs.drink == MAX
    assert needs.read == MAX


def test_generate_attributes_range():
    for _ in range(200):
        attrs = generate_attributes("x")
        assert attrs.name == "x"
        assert 1 <= attrs.desire_to_read <= 15


def test_new_dwarf():
    d = new_dwarf(100, "Bob")
    assert d.idx == 100
    assert d.name == "Bob"
    assert 0 <= d.sprite < DWARF_TEAL
    assert d.state == WorkState.IDLE
    assert d.available()


def test_dwarf_str():
    d = Dwarf(idx=100, attributes=Attributes("Bob"))
    assert str(d) == "NAME: Bob.  IDX: 100.  STATE: Idle.  PATH-LEN: 0."


def test_move_right_on_open_ground():
    mp = boundaries_map()
    d = Dwarf(idx=xy_to_idx(5, 5))
    assert d.move(mp, Direction.RIGHT)
    assert d.idx == xy_to_idx(6, 5)


def test_move_into_boundary_fails():
    mp = boundaries_map()
    d = Dwarf(idx=xy_to_idx(1, 1))
    assert not d.move(mp, Direction.UP)
    assert not d.move(mp, Direction.LEFT)
    assert d.idx == xy_to_idx(1, 1)


def test_move_blocked_by_item():
    mp = boundaries_map()
    mp.items[xy_to_idx(6, 5)].sprite = BOOKSHELF_ONE
    d = Dwarf(idx=xy_to_idx(5, 5))
    assert not d.move(mp, Direction.RIGHT)
    assert d.idx == xy_to_idx(5, 5)


def test_move_to_and_walk_arrives():
    mp = boundaries_map()
    d = new_dwarf(xy_to_idx(2, 2), "Ann")
    goal = xy_to_idx(5, 2)
    assert d.move_to(goal, mp)
    assert d.state == WorkState.MOVING
    assert d.path[0] == xy_to_idx(2, 2)
    assert d.path[-1] == goal
    for _ in range(50):
        if not d.path:
            break
        d.walk(mp)
    assert d.idx == goal


def test_move_to_invalid_index():
    mp = boundaries_map()
    d = new_dwarf(xy_to_idx(2, 2), "Ann")
    d.set_job()
    assert not d.move_to(-5, mp)
    assert d.state == WorkState.IDLE
    assert d.path == []


def test_move_to_unreachable():
    mp = boundaries_map()
    mp.draw_outline(10, 10, 15, 15, WALL_SOLID)
    d = new_dwarf(xy_to_idx(2, 2), "Ann")
    assert not d.move_to(xy_to_idx(12, 12), mp)
    assert d.available()


def test_walk_with_job_and_no_path_stays():
    mp = boundaries_map()
    d = Dwarf(idx=xy_to_idx(5, 5))
    d.set_job()
    assert d.has_job()
    for _ in range(100):
        d.walk(mp)
    assert d.idx == xy_to_idx(5, 5)


def test_random_walk_stays_on_open_tiles():
    random.seed(1)
    mp = boundaries_map()
    d = Dwarf(idx=xy_to_idx(10, 10))
    for _ in range(500):
        d.walk(mp)
        assert 0 <= d.idx < TILES_T
        assert not is_any_wall(mp.tiles[d.idx].sprite)


def test_non_adjacent_path_is_kept():
    mp = boundaries_map()
    start = xy_to_idx(5, 5)
    far = xy_to_idx(20, 20)
    d = Dwarf(idx=start, path=[start, far])
    d.walk(mp)
    d.walk(mp)
    assert d.idx == start
    assert d.path == [far]


def test_set_to_available_clears():
    d = Dwarf(idx=5, path=[1, 2, 3], state=WorkState.MOVING)
    d.set_to_available()
    assert d.path == []
    assert d.state == WorkState.IDLE


def test_dwarves_compare_by_identity():
    a = Dwarf(idx=1)
    b = Dwarf(idx=1)
    assert a != b
    assert a == a


def test_load_names_sorted(tmp_path):
    path = tmp_path / "names.txt"
    path.write_bytes(b"Charlie\r\nAlpha\r\n\rBravo\r")
    assert load_names(str(path)) == ["Alpha", "Bravo", "Charlie"]


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "names.txt"
    save_names(str(path), ["Alpha", "Bravo"])
    assert path.read_bytes() == b"Alpha\rBravo\r"
    assert load_names(str(path)) == ["Alpha", "Bravo"]


def test_load_names_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_names(str(tmp_path / "missing.txt"))


def test_name_service(tmp_path):
    path = tmp_path / "names.txt"
    path.write_bytes(b"Zed\r\nAlpha\r\nBravo\r")
    service = NameService(str(path))
    assert service.names == ["Alpha", "Bravo", "Zed"]
    for _ in range(50):
        assert service.random_name() in ("Alpha", "Bravo")
    service.clean_names()
    assert path.read_bytes() == b"Alpha\rBravo\rZed\r"


def test_name_service_single_name_raises(tmp_path):
    path = tmp_path / "names.txt"
    path.write_bytes(b"Solo\r")
    service = NameService(str(path))
    with pytest.raises(ValueError):
        service.random_name()