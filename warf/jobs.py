"""Jobs that dwarves perform: digging, sleeping, reading, carrying and farming."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from warf.dwarf import MAX, Dwarf, WorkState
from warf.items import (
    EMPTY_BARREL,
    FILLED_BARREL,
    NO_ITEM,
    WHEAT,
    Resource,
    is_carriable,
    is_chair,
)
from warf.pathfinding import create_path
from warf.placement import find_nearest_chairs, random_crumbled_wall
from warf.rooms import RoomService
from warf.sprites import GROUND, NONE, is_selected_wall, neigh_tile_dir_four
from warf.storage import Storage
from warf.worldmap import Map

SLEEP_TIME = 600


def _next_idx(destinations: list[int]) -> int:
    return destinations[-1]


def _path_between(mp: Map, nxt: int, dwarf_idx: int) -> Optional[list[int]]:
    return create_path(mp.tiles[dwarf_idx], mp.tiles[nxt])


class Job(ABC):
    """Work for one dwarf at one of several destinations.

    ``worker`` is the assigned dwarf, ``remove`` marks a job to be dropped.
    """

    def __init__(self, destinations: Iterable[int]) -> None:
        self.worker: Optional[Dwarf] = None
        self.destinations: list[int] = list(destinations)
        self.remove = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(destinations={self.destinations})"

    @abstractmethod
    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        """Do one step of work; returns True when the job is finished."""

    def has_internal_move(self) -> bool:
        """Whether the job moves its worker itself before arrival."""
        return False


class Digging(Job):
    """Dig out a selected wall, leaving rubble behind."""

    def __init__(self, destinations: Iterable[int], wall_idx: int) -> None:
        super().__init__(destinations)
        self.wall_idx = wall_idx

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        wall = mp.tiles[self.wall_idx]
        self.remove = True
        if not is_selected_wall(wall.sprite):
            return True
        wall.sprite = GROUND
        item = mp.items[wall.idx]
        item.sprite = random_crumbled_wall()
        item.resource = Resource.ROCK
        item.resource_amount = 1
        for neighbour in neigh_tile_dir_four(wall.idx):
            mp.fix_wall(mp.tiles[neighbour.idx])
        return True

    def has_internal_move(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Digging"


class Sleep(Job):
    """Lie down in a bed for SLEEP_TIME steps."""

    def __init__(self, bed_idx: int, destinations: Iterable[int]) -> None:
        super().__init__(destinations)
        self.bed_idx = bed_idx
        self.sleep_time = SLEEP_TIME
        self.arrived_at_idx = -1

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        worker = self.worker
        if self.arrived_at_idx == -1:
            if any(d.idx == self.bed_idx for d in dwarves):
                # Someone took the bed; stay tired and try elsewhere.
                worker.needs.sleep = MAX
                self.remove = True
                return True
            self.arrived_at_idx = worker.idx
            worker.path = []
            worker.idx = self.bed_idx
        if self.sleep_time == 0:
            self.remove = True
            worker.idx = self.arrived_at_idx
            return True
        worker.needs.sleep = 0
        self.sleep_time -= 1
        return False

    def has_internal_move(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Sleep"


class Read(Job):
    """Sit in a library chair and read for a while."""

    def __init__(self, destinations: Iterable[int], reading_time: int) -> None:
        super().__init__(destinations)
        self.reading_time = reading_time

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        worker = self.worker
        if not is_chair(mp.items[worker.idx].sprite) and worker.state != WorkState.MOVING:
            self._go_to_chair(mp, dwarves)
            return False
        if self.reading_time > 1:
            self.reading_time -= 1
            return False
        self.reading_time = 0
        self.remove = True
        return True

    def _go_to_chair(self, mp: Map, dwarves: list[Dwarf]) -> None:
        occupied = {d.idx for d in dwarves}
        target = next(
            (c for c in find_nearest_chairs(mp, self.destinations[0]) if c not in occupied),
            None,
        )
        if target is None:
            return
        self.destinations[0] = target
        self.worker.move_to(target, mp)

    def has_internal_move(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Library"


class Carrying(Job):
    """Carry an item to a tile in a storage room."""

    def __init__(
        self,
        destinations: Iterable[int],
        resource: Resource,
        storage_idx: int,
        goal_destination: int,
        sprite: int,
    ) -> None:
        super().__init__(destinations)
        self.resource = resource
        self.amount = 0
        self.goal_destination = goal_destination
        self.storage_idx = storage_idx
        self.sprite = sprite
        self.path: Optional[list[int]] = None
        self.prev = 0

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        if self._storage_missing_or_full(rooms):
            return True
        worker = self.worker
        if self.path is None:
            if not is_carriable(mp.items[worker.idx].sprite):
                # The item is gone.
                self.path = []
                self.remove = True
                return True
            self._setup_path(mp)
            return False
        if not self.path:
            self._finish(mp, rooms)
            return True
        worker.idx = self.path[0]
        self.prev = self.path[0]
        self.path = self.path[1:]
        return False

    def _finish(self, mp: Map, rooms: RoomService) -> None:
        self.remove = True
        if self.sprite == NONE:
            return
        if self.storage_idx >= len(rooms.rooms):
            return
        storage = rooms.rooms[self.storage_idx]
        if not isinstance(storage, Storage):
            return
        drop_idx = storage.add_item(self.worker.idx, self.amount, self.resource)
        if drop_idx is None:
            print("Carrying: Finish: Couldn't find storage tile.",
                  "Ignoring item (forever lost!).")
            return
        mp.items[drop_idx].sprite = self.sprite

    def _setup_path(self, mp: Map) -> None:
        worker = self.worker
        item = mp.items[worker.idx]
        item.sprite = EMPTY_BARREL if item.sprite == FILLED_BARREL else NO_ITEM
        self.amount = item.resource_amount
        item.resource = Resource.NONE
        item.resource_amount = 0
        self.prev = worker.idx
        self.destinations[0] = worker.idx
        path = create_path(mp.tiles[worker.idx], mp.tiles[self.goal_destination])
        if path is None:
            print(f"Carrying: No path for {worker.name} from {worker.idx} "
                  f"to {self.goal_destination}.")
            return
        self.path = path

    def _storage_missing_or_full(self, rooms: RoomService) -> bool:
        if self.storage_idx >= len(rooms.rooms):
            self.path = []
            return True
        storage = rooms.rooms[self.storage_idx]
        if not isinstance(storage, Storage):
            return True
        if not storage.has_space(self.resource):
            self.path = []
            return True
        return False

    def has_internal_move(self) -> bool:
        return False

    def __str__(self) -> str:
        return "Carrying"


class Farming(Job):
    """Harvest the grown plots of a farm, last destination first."""

    def __init__(self, farm_id: int, destinations: Iterable[int]) -> None:
        super().__init__(destinations)
        self.farm_id = farm_id
        self.path: Optional[list[int]] = None

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        if rooms.get_farm(self.farm_id) is None or not self.destinations:
            self.remove = True
            return True
        return self._move_dwarf(mp)

    def _move_dwarf(self, mp: Map) -> bool:
        worker = self.worker
        current = _next_idx(self.destinations)
        if worker.idx == current:
            item = mp.items[current]
            item.sprite = WHEAT
            item.resource = Resource.WHEAT
            item.resource_amount = 1
            self.destinations.pop()
            if not self.destinations:
                self.remove = True
                return True
        if self.path is not None:
            self._move_along_path()
            return False
        nxt = _next_idx(self.destinations)
        if nxt - worker.idx == 1:
            worker.idx = nxt
        else:
            path = _path_between(mp, nxt, worker.idx)
            if path is not None:
                self.path = path
        return False

    def _move_along_path(self) -> None:
        if not self.path:
            self.path = None
            return
        self.worker.idx = self.path[0]
        self.path = self.path[1:]

    def has_internal_move(self) -> bool:
        return True

    def __str__(self) -> str:
        return "Farming"