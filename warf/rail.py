"""Rails laid on the rail layer of a map and carts that ride them."""

from __future__ import annotations

import math

from warf.direction import next_idx_to_dir
from warf.dwarf import Walker
from warf.grid import TILES_T, xy_to_idx
from warf.pathfinding import create_path
from warf.sprites import CART, CROSS, CURVE, NONE, STOP, STRAIGHT, is_rail
from warf.worldmap import Map, Tile, blocking


class Cart(Walker):
    """A cart that follows paths along rails."""

    def __init__(self, idx: int) -> None:
        self.idx = idx
        self.sprite = CART
        self.path: list[int] = []

    def __repr__(self) -> str:
        return f"Cart(idx={self.idx}, path={self.path})"

    def initiate_ride(self, mp: Map, goal: Tile) -> bool:
        """Plan a ride along rails from the cart's position to goal."""
        path = create_path(mp.rails[self.idx], goal)
        if path is None:
            return False
        self.path = path
        return True

    def traverse_path(self, mp: Map) -> None:
        """Advance one step along the planned ride."""
        if not self.path:
            return
        nxt = self.path[0]
        if self.idx == nxt:
            self.path = self.path[1:]
            return
        direction = next_idx_to_dir(self.idx, nxt)
        if self.move(mp, direction):
            self.path = self.path[1:]


class RailService:
    """Places rails on a map and drives its carts."""

    def __init__(self, mp: Map) -> None:
        self.map = mp
        self.carts: list[Cart] = []

    def update(self, mp: Map) -> None:
        for cart in self.carts:
            cart.traverse_path(mp)

    def place_rail(self, idx: int) -> None:
        self.place_rails([idx])

    def place_rails(self, idxs: list[int]) -> None:
        """Lay straight rails on free, unblocked tiles, then shape them."""
        lo, hi = TILES_T + 1, -1
        for idx in idxs:
            tile = self.map.get_tile_by_index(idx)
            item = self.map.get_item_tile_by_index(idx)
            if tile is None or item is None or blocking(tile, item):
                continue
            rail = self.map.get_rail_tile_by_index(idx)
            if rail is None or rail.sprite != NONE:
                continue
            rail.sprite = STRAIGHT
            lo = min(lo, idx)
            hi = max(hi, idx)
        self.fix_rails(lo, hi)

    def place_rail_xy(self, x: int, y: int) -> None:
        self.place_rails([xy_to_idx(x, y)])

    def place_rails_xy(self, xys: list[tuple[int, int]]) -> None:
        self.place_rails([xy_to_idx(x, y) for x, y in xys])

    def fix_rails(self, lo: int, hi: int) -> None:
        """Choose sprite and rotation of each rail in [lo, hi] from its neighbours."""
        mp = self.map
        for idx in range(lo, hi + 1):
            t = mp.rails[idx]
            if t.sprite == NONE:
                continue
            up = is_rail(mp.one_rail_up(idx).sprite)
            right = is_rail(mp.one_rail_right(idx).sprite)
            down = is_rail(mp.one_rail_down(idx).sprite)
            left = is_rail(mp.one_rail_left(idx).sprite)
            if up and right and down and left:
                t.sprite = CROSS
            elif left and right:
                t.rotation = math.pi * 1.5
            elif up and right:
                t.sprite = CURVE
            elif up and left:
                t.sprite = CURVE
                t.rotation = math.pi * 1.5
            elif down and right:
                t.sprite = CURVE
                t.rotation = -math.pi * 1.5
            elif down and left:
                t.sprite = CURVE
                t.rotation = math.pi * 3.0
            elif not up and down:
                t.sprite = STOP
            elif not right and left:
                t.sprite = STOP
                t.rotation = -math.pi * 1.5
            elif not down and up:
                t.sprite = STOP
                t.rotation = math.pi * 3.0
            elif not left and right:
                t.sprite = STOP
                t.rotation = math.pi * 1.5