"""Grid dimensions and conversions between tile indexes and coordinates."""

TILE_SIZE = 16
TILESET_W = 16

SCREEN_WIDTH = (36 + 10) * TILE_SIZE
SCREEN_HEIGHT = (24 + 10) * TILE_SIZE

TILES_W = SCREEN_WIDTH // TILE_SIZE
TILES_H = (SCREEN_HEIGHT // TILE_SIZE) - 2
TILES_T = TILES_W * TILES_H
TILES_BOTTOM = TILES_T - TILES_W

TPS = 30
CYCLE_LENGTH = TPS * 8


def dist(ax: int, ay: int, bx: int, by: int) -> float:
    """Manhattan distance between two grid points."""
    return float(abs(bx - ax) + abs(by - ay))


def idx_to_x(idx: int) -> int:
    """Column of a tile index."""
    return idx % TILES_W


def idx_to_y(idx: int) -> int:
    """Row of a tile index."""
    return idx // TILES_W


def idx_to_xy(idx: int) -> tuple[int, int]:
    """Column and row of a tile index."""
    return idx_to_x(idx), idx_to_y(idx)


def xy_to_idx(x: int, y: int) -> int:
    """Tile index of a column and row."""
    return x + y * TILES_W