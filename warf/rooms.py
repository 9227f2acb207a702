"""The collection of rooms on a map: adding, finding and deleting them."""

from __future__ import annotations

from typing import Optional

from warf.bar import Bar, new_bar
from warf.brewery import Brewery, new_brewery
from warf.farm import Farm, new_farm
from warf.grid import dist, idx_to_xy
from warf.items import Resource, is_carriable
from warf.library import Library, new_library
from warf.room import Room, SleepHall, new_sleep_hall
from warf.sprites import GROUND, NONE
from warf.storage import Storage, new_storage
from warf.worldmap import Map

_FACTORIES = {
    Storage: new_storage,
    SleepHall: new_sleep_hall,
    Farm: new_farm,
    Brewery: new_brewery,
    Bar: new_bar,
    Library: new_library,
}


def reset_ground_tile(mp: Map, idx: int) -> None:
    """Return a room tile to plain ground, clearing any non-carriable item."""
    mp.tiles[idx].sprite = GROUND
    mp.tiles[idx].room = None
    item = mp.items[idx]
    if is_carriable(item.sprite):
        return
    item.sprite = NONE
    item.resource = Resource.NONE
    item.resource_amount = 0


class RoomService:
    """All rooms built on the map."""

    def __init__(self) -> None:
        self.rooms: list[Room] = []

    def update(self, mp: Map) -> None:
        for room in self.rooms:
            room.update(mp)

    def add_room_by_type(self, mp: Map, pos: int, room_type: type) -> Optional[Room]:
        """Build a room of room_type around the map index pos and add it.

        Returns the new room, or None when it could not be built.
        Raises TypeError for a class that is not a known room type.
        """
        factory = _FACTORIES.get(room_type)
        if factory is None:
            raise TypeError(f"unknown room type: {room_type!r}")
        x, y = idx_to_xy(pos)
        room = factory(mp, x, y)
        if room is None:
            print("NEW ROOM WAS NIL")
            return None
        self.rooms.append(room)
        return room

    def add_room(self, mp: Map, room: Room) -> None:
        if room is None:
            raise ValueError("cannot add a missing room")
        self.rooms.append(room)

    def get_farm(self, room_id: int) -> Optional[Farm]:
        return next(
            (r for r in self.rooms if r.id == room_id and isinstance(r, Farm)), None
        )

    def get_storage(self, room_id: int) -> Optional[Storage]:
        return next(
            (r for r in self.rooms if r.id == room_id and isinstance(r, Storage)), None
        )

    def find_nearest_storage(
        self, mp: Map, x: int, y: int, resource: Resource
    ) -> Optional[tuple[Storage, int]]:
        """Nearest storage with space for resource and its position in rooms."""
        best: Optional[tuple[Storage, int]] = None
        closest = float("inf")
        for i, room in enumerate(self.rooms):
            if not isinstance(room, Storage) or not room.has_space(resource):
                continue
            cx, cy = idx_to_xy(room.center)
            d = dist(x, y, cx, cy)
            if d < closest:
                closest = d
                best = (room, i)
        return best

    def delete_room_at(self, mp: Map, pos: int) -> None:
        """Delete the room covering the map index pos, if any."""
        room = mp.tiles[pos].room
        if room is None:
            room = mp.items[pos].room
        if room is None:
            print("ROOM POINTER WAS NIL AT", pos)
            return
        if isinstance(room, Storage):
            self.delete_storage(mp, room.id)
        else:
            self.delete_room(mp, room.id, str(room))

    def delete_room(self, mp: Map, room_id: int, room_type: str) -> None:
        """Delete the room of the named type with the given id."""
        for i, room in enumerate(self.rooms):
            if str(room) == room_type and room.id == room_id:
                for idx in room.tiles():
                    reset_ground_tile(mp, idx)
                del self.rooms[i]
                return

    def delete_storage(self, mp: Map, room_id: int) -> None:
        """Delete a storage; carriable goods stay where they lie."""
        for i, room in enumerate(self.rooms):
            if isinstance(room, Storage) and room.id == room_id:
                for tile in room.storage_tiles:
                    reset_ground_tile(mp, tile.idx)
                del self.rooms[i]
                return