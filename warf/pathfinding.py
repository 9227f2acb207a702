"""A* path finding over the ground and rail layers of a map."""

from __future__ import annotations

import heapq
import itertools
from typing import Optional

from warf.grid import dist
from warf.sprites import is_any_wall, is_rail
from warf.worldmap import Tile, TileType, blocking

_OFFSETS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def path_neighbors(tile: Tile) -> list[Tile]:
    """Walkable neighbours of tile within its own layer."""
    mp = tile.map
    neighbors = []
    for ox, oy in _OFFSETS:
        x, y = tile.x + ox, tile.y + oy
        if tile.tile_type == TileType.RAIL:
            rail = mp.get_rail_tile(x, y)
            if rail is None or not is_rail(rail.sprite):
                continue
            neighbors.append(rail)
            continue
        ground = mp.get_tile(x, y)
        item = mp.get_item_tile(x, y)
        if ground is None or item is None:
            continue
        if is_any_wall(ground.sprite) or blocking(ground, item):
            continue
        neighbors.append(ground)
    return neighbors


def estimated_cost(start: Tile, goal: Tile) -> float:
    """Manhattan distance heuristic."""
    return dist(start.x, start.y, goal.x, goal.y)


def astar(start: Tile, goal: Tile) -> Optional[list[Tile]]:
    """Shortest path of tiles from start to goal, both included, or None."""
    counter = itertools.count()
    cost = {start: 0.0}
    parent: dict[Tile, Optional[Tile]] = {start: None}
    closed: set[Tile] = set()
    frontier = [(estimated_cost(start, goal), next(counter), start)]
    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        if current is goal:
            path = []
            node: Optional[Tile] = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path
        closed.add(current)
        for neighbor in path_neighbors(current):
            new_cost = cost[current] + 1
            if neighbor in cost and new_cost >= cost[neighbor]:
                continue
            cost[neighbor] = new_cost
            parent[neighbor] = current
            closed.discard(neighbor)
            heapq.heappush(
                frontier,
                (new_cost + estimated_cost(neighbor, goal), next(counter), neighbor),
            )
    return None


def create_path(start: Tile, goal: Tile) -> Optional[list[int]]:
    """Indexes along the shortest path from start to goal, or None."""
    path = astar(start, goal)
    if path is None:
        return None
    return [tile.idx for tile in path]