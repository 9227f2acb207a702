"""Dwarves: attributes, needs, walking, work state and name handling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from warf.direction import Direction, get_direction, index_at_direction, next_idx_to_dir
from warf.grid import TILES_T, TILES_W
from warf.pathfinding import create_path
from warf.worldmap import Map, Tile, is_colliding

DWARF_GREEN = 0
DWARF_BLUE = 1
DWARF_ORANGE = 2
DWARF_TEAL = 3
DWARF_PURPLE = 4
DWARF_RED = 5

MAX = 100
SLEEP_INC = 25
DRINK_INC = 25

NAMES_PATH = "./data/names.txt"


class WorkState(IntEnum):
    IDLE = 0
    HAS_JOB = 1
    MOVING = 2
    ARRIVED = 3

    def __str__(self) -> str:
        return _STATE_NAMES[self]


_STATE_NAMES = {
    WorkState.IDLE: "Idle",
    WorkState.HAS_JOB: "HasJob",
    WorkState.MOVING: "Moving",
    WorkState.ARRIVED: "Arrived",
}


@dataclass
class Attributes:
    """Fixed characteristics of a dwarf."""

    name: str
    desire_to_read: int = 1


def generate_attributes(name: str) -> Attributes:
    """Attributes for a new dwarf with a random desire to read of 1 to 15."""
    return Attributes(name=name, desire_to_read=1 + random.randrange(15))


def _inc(value: int, amount: int) -> int:
    return min(value + amount, MAX)


@dataclass
class Needs:
    """Needs that grow every cycle until satisfied; capped at MAX."""

    sleep: int = 0
    drink: int = 0
    read: int = 0

    def update(self, attributes: Attributes) -> None:
        self.sleep = _inc(self.sleep, SLEEP_INC)
        self.drink = _inc(self.drink, DRINK_INC)
        self.read = _inc(self.read, attributes.desire_to_read)


class Walker:
    """Movement for objects with an ``idx`` and a ``path`` of indexes."""

    idx: int
    path: list[int]

    def move(self, mp: Map, direction: Direction) -> bool:
        """Step one tile in direction unless at the edge or blocked."""
        idx = self.idx
        if direction == Direction.UP:
            allowed = idx > TILES_W
        elif direction == Direction.RIGHT:
            allowed = idx % TILES_W != TILES_W - 1
        elif direction == Direction.DOWN:
            allowed = idx < TILES_T - TILES_W
        elif direction == Direction.LEFT:
            allowed = idx % TILES_W != 0
        else:
            return False
        if not allowed or is_colliding(mp, idx, direction):
            return False
        self.idx = index_at_direction(idx, direction)
        return True

    def setup_path(self, start: Tile, goal: Tile) -> bool:
        path = create_path(start, goal)
        if path is None:
            return False
        self.path = path
        return True


@dataclass(eq=False)
class Dwarf(Walker):
    """An in-game character."""

    idx: int = 0
    sprite: int = 0
    path: list[int] = field(default_factory=list)
    attributes: Attributes = field(default_factory=lambda: Attributes(""))
    needs: Needs = field(default_factory=Needs)
    state: WorkState = WorkState.IDLE

    @property
    def name(self) -> str:
        return self.attributes.name

    def __str__(self) -> str:
        return (
            f"NAME: {self.name}.  IDX: {self.idx}.  "
            f"STATE: {self.state}.  PATH-LEN: {len(self.path)}."
        )

    def walk(self, mp: Map) -> None:
        """Advance along the current path, or wander when idle."""
        if not self.path:
            if self.has_job():
                return
            self._random_walk(mp)
            return
        self._traverse_path(mp)

    def _random_walk(self, mp: Map) -> None:
        if random.randrange(100) > 90:
            self.move(mp, get_direction(random.randrange(4)))

    def _traverse_path(self, mp: Map) -> None:
        if not self.path:
            return
        if self.idx == self.path[0]:
            self.path = self.path[1:]
            return
        try:
            direction = next_idx_to_dir(self.idx, self.path[0])
        except ValueError as err:
            print(err, self.name)
            return
        if self.move(mp, direction):
            self.path = self.path[1:]

    def set_job(self) -> None:
        self.state = WorkState.HAS_JOB

    def has_job(self) -> bool:
        return self.state != WorkState.IDLE

    def available(self) -> bool:
        return not self.has_job()

    def set_to_available(self) -> None:
        self.path = []
        self.state = WorkState.IDLE

    def move_to(self, idx: int, mp: Map) -> bool:
        """Plan a path to idx and start moving; on failure become available."""
        start = mp.get_tile_by_index(self.idx)
        goal = mp.get_tile_by_index(idx)
        if start is None or goal is None or not self.setup_path(start, goal):
            self.set_to_available()
            return False
        self.state = WorkState.MOVING
        return True


def new_dwarf(starting_idx: int, name: str) -> Dwarf:
    """A new idle dwarf at starting_idx with a random sprite and attributes."""
    return Dwarf(
        idx=starting_idx,
        sprite=random.randrange(DWARF_TEAL),
        attributes=generate_attributes(name),
    )


def load_names(path: str) -> list[str]:
    """Read carriage-return separated names, dropping blanks, sorted."""
    with open(path, encoding="utf-8", newline="") as fh:
        content = fh.read()
    names = [part.replace("\n", "") for part in content.split("\r")]
    return sorted(name for name in names if name)


def save_names(path: str, names: list[str]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as fh:
        for name in names:
            fh.write(name + "\r")


class NameService:
    """Names available for new dwarves."""

    def __init__(self, path: str = NAMES_PATH) -> None:
        self.path = path
        self.names = load_names(path)

    def random_name(self) -> str:
        return self.names[random.randrange(len(self.names) - 1)]

    def clean_names(self) -> None:
        """Rewrite the names file sorted and without blank entries."""
        save_names(self.path, load_names(self.path))