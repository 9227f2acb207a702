from warf.dwarf import MAX, Attributes, Dwarf
from warf.farm import new_farm
from warf.grid import xy_to_idx
from warf.items import CHAIR_LEFT, NO_ITEM, WHEAT, Resource, is_crumbled_wall
from warf.jobs import SLEEP_TIME, Carrying, Digging, Farming, Read, Sleep
from warf.rooms import RoomService
from warf.sprites import GROUND, WALL_SELECTED_SOLID, WALL_SOLID
from warf.storage import new_storage
from warf.worldmap import boundaries_map


def _worker(idx):
    return Dwarf(idx=idx, attributes=Attributes("tester"))


def test_digging_selected_wall():
    mp = boundaries_map()
    wall = xy_to_idx(5, 5)
    mp.tiles[wall].sprite = WALL_SELECTED_SOLID
    job = Digging([xy_to_idx(5, 6)], wall)
    assert job.perform_work(mp, [], RoomService()) is True
    assert job.remove is True
    assert mp.tiles[wall].sprite == GROUND
    assert is_crumbled_wall(mp.items[wall].sprite)
    assert mp.items[wall].resource == Resource.ROCK
    assert mp.items[wall].resource_amount == 1


def test_digging_unselected_wall_is_dropped():
    mp = boundaries_map()
    wall = xy_to_idx(5, 5)
    mp.tiles[wall].sprite = WALL_SOLID
    job = Digging([], wall)
    assert job.perform_work(mp, [], RoomService()) is True
    assert job.remove is True
    assert mp.tiles[wall].sprite == WALL_SOLID


def test_job_names_and_internal_moves():
    assert str(Digging([], 0)) == "Digging"
    assert str(Sleep(0, [])) == "Sleep"
    assert str(Read([0], 1)) == "Library"
    assert str(Carrying([0], Resource.ROCK, 0, 0, 0)) == "Carrying"
    assert str(Farming(0, [])) == "Farming"
    assert Farming(0, []).has_internal_move() is True
    assert Digging([], 0).has_internal_move() is False


def test_sleep_cycle():
    mp = boundaries_map()
    start, bed = xy_to_idx(4, 4), xy_to_idx(4, 3)
    worker = _worker(start)
    worker.needs.sleep = MAX
    job = Sleep(bed, [start])
    job.worker = worker
    assert job.perform_work(mp, [worker], RoomService()) is False
    assert worker.idx == bed
    assert worker.needs.sleep == 0
    assert job.sleep_time == SLEEP_TIME - 1
    job.sleep_time = 0
    assert job.perform_work(mp, [worker], RoomService()) is True
    assert worker.idx == start
    assert job.remove is True


def test_sleep_occupied_bed():
    mp = boundaries_map()
    bed = xy_to_idx(4, 3)
    worker = _worker(xy_to_idx(4, 4))
    sleeper = _worker(bed)
    job = Sleep(bed, [worker.idx])
    job.worker = worker
    assert job.perform_work(mp, [worker, sleeper], RoomService()) is True
    assert worker.needs.sleep == MAX
    assert job.remove is True


def test_read_counts_down_in_chair():
    mp = boundaries_map()
    seat = xy_to_idx(3, 3)
    mp.items[seat].sprite = CHAIR_LEFT
    worker = _worker(seat)
    job = Read([seat], 3)
    job.worker = worker
    results = [job.perform_work(mp, [worker], RoomService()) for _ in range(3)]
    assert results == [False, False, True]
    assert job.reading_time == 0
    assert job.remove is True


def test_read_picks_unoccupied_chair():
    mp = boundaries_map()
    near, far = xy_to_idx(5, 3), xy_to_idx(12, 3)
    mp.items[near].sprite = CHAIR_LEFT
    mp.items[far].sprite = CHAIR_LEFT
    worker = _worker(xy_to_idx(3, 3))
    other = _worker(near)
    job = Read([worker.idx], 3)
    job.worker = worker
    assert job.perform_work(mp, [worker, other], RoomService()) is False
    assert job.destinations[0] == far


def _storage_setup():
    mp = boundaries_map()
    mp.draw_outline(5, 5, 10, 10, WALL_SOLID)
    mp.tiles[xy_to_idx(7, 5)].sprite = GROUND
    rooms = RoomService()
    storage = new_storage(mp, 6, 6)
    rooms.add_room(mp, storage)
    return mp, rooms, storage


def test_carrying_delivers_to_storage():
    mp, rooms, storage = _storage_setup()
    origin = xy_to_idx(2, 2)
    mp.items[origin].sprite = WHEAT
    mp.items[origin].resource = Resource.WHEAT
    mp.items[origin].resource_amount = 1
    goal = storage.get_available_tile(Resource.WHEAT)
    worker = _worker(origin)
    job = Carrying([origin], Resource.WHEAT, 0, goal, WHEAT)
    job.worker = worker
    finished = False
    for _ in range(200):
        if job.perform_work(mp, [worker], rooms):
            finished = True
            break
    assert finished
    assert job.remove is True
    assert worker.idx == goal
    assert mp.items[origin].sprite == NO_ITEM
    assert mp.items[goal].sprite == WHEAT
    assert mp.items[goal].resource == Resource.WHEAT
    assert mp.items[goal].resource_amount == 1


def test_carrying_without_storage_finishes():
    mp = boundaries_map()
    worker = _worker(xy_to_idx(2, 2))
    job = Carrying([worker.idx], Resource.ROCK, 3, 0, 0)
    job.worker = worker
    assert job.perform_work(mp, [worker], RoomService()) is True
    assert job.path == []


def test_carrying_missing_item_is_dropped():
    mp, rooms, storage = _storage_setup()
    worker = _worker(xy_to_idx(2, 2))
    job = Carrying([worker.idx], Resource.ROCK, 0, storage.tiles()[0], 1)
    job.worker = worker
    assert job.perform_work(mp, [worker], rooms) is True
    assert job.remove is True


def test_farming_without_farm_is_dropped():
    mp = boundaries_map()
    worker = _worker(xy_to_idx(2, 2))
    job = Farming(-1, [worker.idx])
    job.worker = worker
    assert job.perform_work(mp, [worker], RoomService()) is True
    assert job.remove is True


def test_farming_harvests_adjacent_plots():
    mp = boundaries_map()
    mp.draw_outline(5, 5, 12, 10, WALL_SOLID)
    rooms = RoomService()
    farm = new_farm(mp, 6, 6)
    rooms.add_room(mp, farm)
    first, second = xy_to_idx(20, 20), xy_to_idx(21, 20)
    worker = _worker(first)
    job = Farming(farm.id, [second, first])
    job.worker = worker
    assert job.perform_work(mp, [worker], rooms) is False
    assert mp.items[first].sprite == WHEAT
    assert mp.items[first].resource == Resource.WHEAT
    assert worker.idx == second
    assert job.perform_work(mp, [worker], rooms) is True
    assert mp.items[second].sprite == WHEAT
    assert job.destinations == []
    assert job.remove is True