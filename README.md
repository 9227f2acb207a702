# warf

The simulation core of a tile-based dwarf colony game. It models a fixed-size
grid world where dwarves dig walls, carry resources to storages, farm wheat,
brew beer, stock bars, sleep and read, and where carts ride on rails. It needs
no graphics and has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Modules

- `warf.grid`: grid size constants (`TILES_W`, `TILES_H`, `TILES_T`,
  `CYCLE_LENGTH`, ...) and helpers `xy_to_idx`, `idx_to_xy`, `idx_to_x`,
  `idx_to_y` and `dist` (Manhattan distance).
- `warf.items`: item sprite constants, the `Resource` enum, `Entity`,
  `item_to_string`, `sprite_to_resource` and predicates such as
  `is_item_blocking`, `is_carriable`, `is_farm` and `is_bed_top`.
- `warf.direction`: the `Direction` enum, `TileDir`, neighbour index helpers
  (`one_up`, `one_down_left`, ...), `index_at_direction` and
  `next_idx_to_dir` (raises `ValueError` for non-adjacent indexes).
- `warf.sprites`: world and rail sprite constants, neighbourhoods
  (`neigh_tile_four`, `surrounding_tiles_eight`, ...) and tile predicates such
  as `is_any_wall`, `is_door_opening` and `is_next_to_door_opening`.
- `warf.worldmap`: `Tile`, `TileType` and `Map` with its ground, selection,
  item and rail layers; lookups return `None` off the map. Also
  `boundaries_map`, `filled_map`, collision checks (`is_colliding`,
  `blocking`, `index_out_of_bounds`), wall fixing and drawing helpers.
- `warf.mapgen`: flood fills (`flood_fill`, `flood_fill_room`, ...),
  `fill_islands`, the cave `automata` and `normal_map()`, a randomly generated
  cave map.
- `warf.pathfinding`: A* search over the ground or rail layer; `create_path`
  returns the list of indexes from start to goal, or `None`.
- `warf.dwarf`: `Dwarf` with `Attributes`, `Needs`, `WorkState`, walking and
  path planning (`move_to`), `new_dwarf`, and `NameService`, which reads and
  tidies a carriage-return separated names file.
- `warf.placement`: finding the nearest items (`find_nearest_beds`,
  `find_nearest_chairs`, ...) and placing items (`place`, `random_bed`, ...).
- `warf.room`, `warf.storage`, `warf.farm`, `warf.brewery`, `warf.bar`,
  `warf.library`: the room types `SleepHall`, `Storage` (with
  `StorageTile`), `Farm`, `Brewery`, `Bar` and `Library`, each built from a
  walled ground region by its `new_*` function, which returns `None` when no
  room can be built.
- `warf.rooms`: `RoomService`, which builds, finds (`find_nearest_storage`,
  `get_farm`, `get_storage`), updates and deletes rooms.
- `warf.jobs`, `warf.farm_jobs`: the job kinds `Digging`, `Sleep`, `Read`,
  `Carrying`, `Farming`, `FillBarrel`, `GetBeer` and `PlantFarm`. Each has a
  `worker`, `destinations` and `perform_work(mp, dwarves, rooms)`, which does
  one step and returns `True` when the job is finished.
- `warf.rail`: `RailService`, which lays rails and shapes them from their
  neighbours, and `Cart`, which rides along them.
- `warf.mouse`: the `Mode` enum, `mode_from_string`, `tile_range` and
  `func_over_range` for acting on a rectangle of tiles.
- `warf.gametime`: the game `Clock` and `GameSpeed`.

## Example

```python
from warf.grid import xy_to_idx
from warf.items import Resource
from warf.rooms import RoomService
from warf.sprites import WALL_SOLID
from warf.storage import Storage
from warf.worldmap import boundaries_map
from warf.dwarf import new_dwarf

mp = boundaries_map()
mp.draw_outline(5, 5, 10, 10, WALL_SOLID)  # a walled 4x4 room

rooms = RoomService()
rooms.add_room_by_type(mp, xy_to_idx(6, 6), Storage)
storage, index = rooms.find_nearest_storage(mp, 1, 1, Resource.NONE)
print(storage.center)

dwarf = new_dwarf(xy_to_idx(2, 2), "Urist")
if dwarf.move_to(xy_to_idx(20, 10), mp):
    while dwarf.path:
        dwarf.walk(mp)
print(dwarf)
```

## What the package does not do

- There is no scheduler that finds jobs, ranks them, assigns them to dwarves
  and advances them each frame. Jobs are created, given a `worker` and stepped
  with `perform_work` by the caller.
- There is no window, rendering, keyboard or mouse input; `warf.mouse` only
  holds the mode enum and range helpers.
- Games are not saved to or loaded from disk.
- There is no command-line program.

## Tests

```
pip install .[test]
pytest
```