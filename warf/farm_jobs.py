"""Jobs that feed the brewing chain: filling barrels, fetching beer and planting farms."""

from __future__ import annotations

from typing import Iterable, Optional

from warf.bar import Bar
from warf.dwarf import Dwarf
from warf.farm import Farm
from warf.items import FILLED_BARREL, NO_ITEM
from warf.jobs import Job
from warf.pathfinding import create_path
from warf.rooms import RoomService
from warf.sprites import neigh_tile_four
from warf.storage import StorageTile
from warf.worldmap import Map


class FillBarrel(Job):
    """Take the wheat from a storage tile and pour it into an empty barrel."""

    def __init__(
        self, storage_tile: StorageTile, barrel_idx: int, destinations: Iterable[int]
    ) -> None:
        super().__init__(destinations)
        self.storage_tile = storage_tile
        self.wheat_index = storage_tile.idx
        self.barrel_index = barrel_idx
        self.path: Optional[list[int]] = None
        self.amount = 0

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        worker = self.worker
        if self.path is None:
            self.amount = self.storage_tile.take_all()
            self._setup_path(mp)
            return False
        if not self.path:
            barrel = mp.items[self.barrel_index]
            barrel.sprite = FILLED_BARREL
            barrel.resource_amount = self.amount
            worker.idx = self.barrel_index
            self.remove = True
            return True
        worker.idx = self.path[0]
        self.path = self.path[1:]
        return False

    def _setup_path(self, mp: Map) -> None:
        start = mp.tiles[self.worker.idx]
        for dst in neigh_tile_four(self.barrel_index):
            path = create_path(start, mp.tiles[dst])
            if path:
                self.path = path
                return

    def has_internal_move(self) -> bool:
        return True

    def __str__(self) -> str:
        return "FillBarrel"


class GetBeer(Job):
    """Carry the beer from a storage tile to a bar's refill spot."""

    def __init__(
        self,
        bar: Bar,
        storage_tile: StorageTile,
        refill_idx: int,
        destinations: Iterable[int],
    ) -> None:
        super().__init__(destinations)
        self.bar = bar
        self.storage_tile = storage_tile
        self.beer_refill_index = refill_idx
        self.path: Optional[list[int]] = None
        self.amount = 0

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        if self.path is None:
            self.amount = self.storage_tile.take_all()
            self._setup_path(mp)
            return False
        if not self.path:
            self.bar.add_beer(self.amount)
            self.remove = True
            return True
        self.worker.idx = self.path[0]
        self.path = self.path[1:]
        return False

    def _setup_path(self, mp: Map) -> None:
        worker = self.worker
        path = create_path(mp.tiles[worker.idx], mp.tiles[self.beer_refill_index])
        if not path:
            return
        mp.items[worker.idx].sprite = NO_ITEM
        self.path = path

    def has_internal_move(self) -> bool:
        return False

    def __str__(self) -> str:
        return "GetBeer"


class PlantFarm(Job):
    """Plant empty plots on every farmable tile of a farm, last destination first."""

    def __init__(self, farm: Farm, destinations: Iterable[int]) -> None:
        super().__init__(destinations)
        self.farm: Optional[Farm] = farm
        self.path: Optional[list[int]] = None

    def perform_work(self, mp: Map, dwarves: list[Dwarf], rooms: RoomService) -> bool:
        if self.farm is None or rooms.get_farm(self.farm.id) is None:
            self.farm = None
            self.remove = True
            return True
        if not self.destinations:
            self.remove = True
            return True
        return self._move_dwarf(mp)

    def _move_dwarf(self, mp: Map) -> bool:
        worker = self.worker
        current = self.destinations[-1]
        if worker.idx == current:
            self.farm.plant_farm(mp, mp.items[current])
            self.destinations.pop()
            self.path = None
            if not self.destinations:
                self.remove = True
                return True
        if self.path is not None:
            self._move_along_path()
            return False
        nxt = self.destinations[-1]
        if nxt - worker.idx == 1:
            worker.idx = nxt
        else:
            path = create_path(mp.tiles[worker.idx], mp.tiles[nxt])
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
        return "PlantFarm"