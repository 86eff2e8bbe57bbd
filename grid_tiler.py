# grid_tiler.py
from typing import Tuple

import numpy as np

from quilt_types import Grid, Tile


def resolve_tile_size(grid_w: int, grid_h: int, repeat_w: int, repeat_h: int) -> Tuple[int, int]:
    # repeat 0 -> no repeat, the tile is the whole grid
    tile_w = min(repeat_w, grid_w) if repeat_w > 0 else grid_w
    tile_h = min(repeat_h, grid_h) if repeat_h > 0 else grid_h
    return tile_w, tile_h


def tile_grid(tile: Tile, grid_w: int, grid_h: int) -> Grid:
    """grid[r][c] = tile[r % tile_h][c % tile_w]"""
    tile_h = len(tile)
    tile_w = len(tile[0]) if tile_h else 0
    assert tile_w > 0 and tile_h > 0, "tile must not be empty"

    rows = np.arange(grid_h) % tile_h
    cols = np.arange(grid_w) % tile_w
    return [[tile[r][c] for c in cols.tolist()] for r in rows.tolist()]
