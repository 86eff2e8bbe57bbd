# tile_analyzer.py
# ------------------------------------------------------------
# Analyze a generated tile / grid and produce features:
# - how much of the tile actually follows a symmetry mode
# - whether a grid repeats with a given period
# - colors used, shape histogram
#
# Notes:
# - "Derived" cells are the ones the resolver maps to a source;
#   a tile generated at symmetry=100 matches its mode exactly.
# - Periodicity is checked on an integer id array (numpy) so
#   big grids stay cheap.
# ------------------------------------------------------------

from typing import Dict, List, Set

import numpy as np

from quilt_types import ALL_SHAPES, Block, Grid, SYMMETRY_MODES, SymmetryMode, Tile
from symmetry_source import get_symmetry_source


# =======================
# Symmetry
# =======================

def _tile_size(tile: Tile):
    h = len(tile)
    w = len(tile[0]) if h else 0
    return w, h


def symmetric_fraction(tile: Tile, mode: str) -> float:
    """
    Fraction of derived cells equal to transform(source).
    1.0 when the mode has no derived cells for this tile size.
    """
    w, h = _tile_size(tile)
    total = 0
    hits = 0
    for row in range(h):
        for col in range(w):
            src = get_symmetry_source(row, col, w, h, mode)
            if src is None:
                continue
            total += 1
            if tile[row][col] == src.transform(tile[src.src_row][src.src_col]):
                hits += 1
    if total == 0:
        return 1.0
    return hits / total


def matches_symmetry(tile: Tile, mode: str) -> bool:
    return symmetric_fraction(tile, mode) == 1.0


# =======================
# Periodicity
# =======================

def block_id_array(grid: Grid) -> np.ndarray:
    """
    Map each distinct block to a small int id.
    ids[r, c] == ids[r2, c2]  <=>  grid[r][c] == grid[r2][c2]
    """
    ids: Dict[Block, int] = {}
    h = len(grid)
    w = len(grid[0]) if h else 0
    arr = np.zeros((h, w), dtype=np.int64)
    for r, row in enumerate(grid):
        for c, b in enumerate(row):
            arr[r, c] = ids.setdefault(b, len(ids))
    return arr


def is_periodic(grid: Grid, tile_w: int, tile_h: int) -> bool:
    arr = block_id_array(grid)
    if arr.size == 0:
        return True
    h, w = arr.shape
    base = arr[:tile_h, :tile_w]
    rows = np.arange(h) % base.shape[0]
    cols = np.arange(w) % base.shape[1]
    expected = base[np.ix_(rows, cols)]
    return bool(np.array_equal(arr, expected))


# =======================
# Colors / shapes
# =======================

def colors_used(tile: Tile) -> Set[str]:
    out: Set[str] = set()
    for row in tile:
        for b in row:
            out.update(c.upper() for c in b.colors)
    return out


def shape_counts(tile: Tile) -> Dict[str, int]:
    counts = {s: 0 for s in ALL_SHAPES}
    for row in tile:
        for b in row:
            counts[b.shape] += 1
    return counts


# =======================
# Summary
# =======================

def analyze_tile(tile: Tile, mode: str = SymmetryMode.NONE) -> Dict[str, object]:
    w, h = _tile_size(tile)
    feat: Dict[str, object] = {
        "width": w,
        "height": h,
        "colors": len(colors_used(tile)),
        "shapes": shape_counts(tile),
    }
    if mode in SYMMETRY_MODES and mode != SymmetryMode.NONE:
        feat["symmetric_fraction"] = round(symmetric_fraction(tile, mode), 3)
    return feat


def best_symmetry_modes(tile: Tile) -> List[str]:
    """Modes (other than none) the tile satisfies exactly."""
    return [m for m in SYMMETRY_MODES if m != SymmetryMode.NONE and matches_symmetry(tile, m)]
