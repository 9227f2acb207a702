"""Item sprites, resources and the predicates that classify them."""

from dataclasses import dataclass
from enum import IntEnum

from warf.grid import TILESET_W


@dataclass
class Entity:
    """Position and sprite of an in-game object."""

    idx: int = 0
    sprite: int = 0


class Resource(IntEnum):
    """Kind of resource an item tile holds."""

    NONE = 0
    ROCK = 1
    WHEAT = 2
    BEER = 3

    def __str__(self) -> str:
        return self.name.title()


NO_ITEM = 0
WALL_CRUMBLED1 = 1
WALL_CRUMBLED2 = 2
WALL_CRUMBLED3 = 3
WALL_CRUMBLED4 = 4

(
    BOOKSHELF_ONE,
    BOOKSHELF_TWO,
    BOOKSHELF_THREE,
    BOOKSHELF_FOUR,
    BOOKSHELF_FIVE,
    BOOKSHELF_SIX,
    BOOKSHELF_SEVEN,
    BOOKSHELF_EIGHT,
    BOOKSHELF_NINE,
    BOOKSHELF_TEN,
    CHAIR_LEFT,
    TABLE,
    CHAIR_RIGHT,
) = range(TILESET_W, TILESET_W + 13)

(
    FARM_SINGLE_EMPTY,
    FARM_LEFT_EMPTY,
    FARM_MIDDLE_EMPTY,
    FARM_RIGHT_EMPTY,
    FARM_SINGLE_WHEAT1,
    FARM_LEFT_WHEAT1,
    FARM_MIDDLE_WHEAT1,
    FARM_RIGHT_WHEAT1,
    FARM_SINGLE_WHEAT2,
    FARM_LEFT_WHEAT2,
    FARM_MIDDLE_WHEAT2,
    FARM_RIGHT_WHEAT2,
    FARM_SINGLE_WHEAT3,
    FARM_LEFT_WHEAT3,
    FARM_MIDDLE_WHEAT3,
    FARM_RIGHT_WHEAT3,
    FARM_SINGLE_WHEAT4,
    FARM_LEFT_WHEAT4,
    FARM_MIDDLE_WHEAT4,
    FARM_RIGHT_WHEAT4,
    WHEAT,
    EMPTY_BARREL,
    FILLED_BARREL,
    BAR_H,
    BAR_V,
    BAR_LEFT,
    BAR_RIGHT,
    BAR_TOP_LEFT,
    BAR_TOP_RIGHT,
    BAR_DRINKS_LEFT,
    BAR_DRINKS_RIGHT,
    BAR_STOOL,
) = range(TILESET_W * 2, TILESET_W * 2 + 32)

(
    BED_RED1,
    BED_RED2,
    BED_BLUE1,
    BED_BLUE2,
    BED_GREEN1,
    BED_GREEN2,
    BED_PURPLE1,
    BED_PURPLE2,
) = range(TILESET_W * 4, TILESET_W * 4 + 8)

BOOKSHELVES = tuple(range(BOOKSHELF_ONE, BOOKSHELF_TEN + 1))
FURNITURE = (CHAIR_LEFT, TABLE, CHAIR_RIGHT)
# Barrels are not blocking: carrying jobs cannot yet pick up blocking items.
BREW: tuple[int, ...] = ()
BAR = (
    BAR_H,
    BAR_V,
    BAR_LEFT,
    BAR_RIGHT,
    BAR_TOP_LEFT,
    BAR_TOP_RIGHT,
    BAR_DRINKS_LEFT,
    BAR_DRINKS_RIGHT,
    BAR_STOOL,
)
BEDS = (
    BED_RED1,
    BED_RED2,
    BED_BLUE1,
    BED_BLUE2,
    BED_GREEN1,
    BED_GREEN2,
    BED_PURPLE1,
    BED_PURPLE2,
)

_BLOCKING = frozenset(BOOKSHELVES + FURNITURE + BREW + BAR + BEDS)

_NAMES: dict[int, str] = {
    NO_ITEM: "No item",
    **{s: "Crumbled wall" for s in range(WALL_CRUMBLED1, WALL_CRUMBLED4 + 1)},
    **{s: "Bookshelf" for s in BOOKSHELVES},
    CHAIR_LEFT: "Chair",
    TABLE: "Table",
    CHAIR_RIGHT: "Chair",
    **{s: "Farm" for s in range(FARM_SINGLE_EMPTY, FARM_RIGHT_WHEAT4 + 1)},
    WHEAT: "Wheat",
    EMPTY_BARREL: "Empty barrel",
    FILLED_BARREL: "Filled barrel",
    **{s: "Bar" for s in (BAR_H, BAR_V, BAR_LEFT, BAR_RIGHT, BAR_TOP_LEFT, BAR_TOP_RIGHT)},
    BAR_DRINKS_LEFT: "Bar Drinks",
    BAR_DRINKS_RIGHT: "Bar Drinks",
    BAR_STOOL: "Stool",
    BED_RED1: "Bed",
    BED_RED2: "Bed",
}

_HARVESTABLE = frozenset(
    (FARM_LEFT_WHEAT4, FARM_MIDDLE_WHEAT4, FARM_RIGHT_WHEAT4, FARM_SINGLE_WHEAT4)
)
_BED_TOPS = frozenset((BED_RED1, BED_BLUE1, BED_GREEN1, BED_PURPLE1))


def item_to_string(sprite: int) -> str:
    """Human readable name of an item sprite."""
    return _NAMES.get(sprite, "unknown")


def is_item_blocking(sprite: int) -> bool:
    return sprite in _BLOCKING


def is_carriable(sprite: int) -> bool:
    return is_crumbled_wall(sprite) or is_farm_tile_harvested(sprite) or is_filled_barrel(sprite)


def is_crumbled_wall(sprite: int) -> bool:
    return WALL_CRUMBLED1 <= sprite <= WALL_CRUMBLED4


def is_bookshelf(sprite: int) -> bool:
    return BOOKSHELF_ONE <= sprite <= BOOKSHELF_TEN


def is_chair(sprite: int) -> bool:
    return sprite in (CHAIR_LEFT, CHAIR_RIGHT)


def is_library_item(sprite: int) -> bool:
    return is_chair(sprite) or sprite == TABLE or is_bookshelf(sprite)


def is_farm(sprite: int) -> bool:
    return FARM_SINGLE_EMPTY <= sprite <= FARM_RIGHT_WHEAT4


def is_farm_single(sprite: int) -> bool:
    return sprite == FARM_SINGLE_EMPTY


def is_farm_right(sprite: int) -> bool:
    return sprite == FARM_RIGHT_EMPTY


def is_farm_harvestable(sprite: int) -> bool:
    return sprite in _HARVESTABLE


def is_farm_tile_harvested(sprite: int) -> bool:
    return sprite == WHEAT


def is_empty_barrel(sprite: int) -> bool:
    return sprite == EMPTY_BARREL


def is_filled_barrel(sprite: int) -> bool:
    return sprite == FILLED_BARREL


def is_barrel(sprite: int) -> bool:
    return is_empty_barrel(sprite) or is_filled_barrel(sprite)


def is_bed(sprite: int) -> bool:
    return BED_RED1 <= sprite <= BED_PURPLE2


def is_bed_top(sprite: int) -> bool:
    return sprite in _BED_TOPS


def sprite_to_resource(sprite: int) -> Resource:
    """Resource carried by an item with the given sprite."""
    if sprite == WHEAT:
        return Resource.WHEAT
    if is_crumbled_wall(sprite):
        return Resource.ROCK
    if sprite == FILLED_BARREL:
        return Resource.BEER
    return Resource.NONE