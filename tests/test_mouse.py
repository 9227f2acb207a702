import pytest

from warf.grid import xy_to_idx
from warf.mouse import Mode, func_over_range, mode_from_string, tile_range
from warf.worldmap import Map


def test_tile_range_normalises_direction():
    a = xy_to_idx(5, 7)
    b = xy_to_idx(2, 3)
    assert tile_range(a, b) == (2, 3, 5, 7)
    assert tile_range(b, a) == (2, 3, 5, 7)


def test_func_over_range_visits_whole_rectangle():
    seen = []
    func_over_range(Map(), xy_to_idx(4, 6), xy_to_idx(2, 3), lambda m, x, y: seen.append((x, y)))
    expected = {(x, y) for x in range(2, 5) for y in range(3, 7)}
    assert set(seen) == expected
    assert len(seen) == len(expected)


def test_mode_names_round_trip():
    for mode in Mode:
        assert mode_from_string(str(mode)) == mode
    assert str(Mode.SLEEP_HALL) == "SleepHall"
    assert mode_from_string("Farm") == Mode.FARM


def test_mode_from_unknown_string():
    assert mode_from_string("nonsense") == Mode.NORMAL