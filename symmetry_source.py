# symmetry_source.py
# ------------------------------------------------------------
# For one tile cell, decide whether it is CANONICAL (generated
# fresh) or DERIVED (copy of another cell through a transform).
#
#   get_symmetry_source(row, col, w, h, mode)
#     -> None                          canonical
#     -> SymmetrySource(sr, sc, op)    tile[row][col] = op(tile[sr][sc])
#
# Per-mode canonical regions (half = ceil(n/2), dim = min(w,h)):
#   horizontal     col < half_w
#   vertical       row < half_h
#   four-way       square: TL quadrant on/above its \ diagonal
#                  non-square: TL quadrant, other quadrants mirror
#   diagonal-tlbr  col >= row, or row outside the dim x dim square
#   diagonal-trbl  row + col < dim, or mirrored source off-tile
#   rotational     row < half_h (odd middle row has no partner)
#
# Pure function; the generator calls it more than once per cell.
# ------------------------------------------------------------

from typing import NamedTuple, Optional

from ops.mirrors import mirror_diag_tlbr, mirror_diag_trbl, mirror_h, mirror_v
from ops.rotations import BlockOp, compose, rotate_180, rotate_cw_op
from quilt_types import SymmetryMode


class SymmetrySource(NamedTuple):
    src_row: int
    src_col: int
    transform: BlockOp


def _ceil_half(n: int) -> int:
    return (n + 1) // 2


def _four_way_rect(row: int, col: int, w: int, h: int) -> Optional[SymmetrySource]:
    # non-square fallback: independent left/right + top/bottom mirrors
    half_w = _ceil_half(w)
    half_h = _ceil_half(h)
    if row < half_h and col < half_w:
        return None

    sr = row if row < half_h else h - 1 - row
    sc = col if col < half_w else w - 1 - col
    if col >= half_w and row < half_h:
        return SymmetrySource(sr, sc, mirror_h)
    if col < half_w and row >= half_h:
        return SymmetrySource(sr, sc, mirror_v)
    return SymmetrySource(sr, sc, compose(mirror_h, mirror_v))


def _four_way_square(row: int, col: int, size: int) -> Optional[SymmetrySource]:
    half = _ceil_half(size)

    # quadrant -> clockwise turns from TL
    turns = 0
    if row < half and col >= half:
        turns = 1   # TR
    elif row >= half and col >= half:
        turns = 2   # BR
    elif row >= half and col < half:
        turns = 3   # BL

    # rotate the point back into TL
    sr, sc = row, col
    if turns == 1:
        sr, sc = size - 1 - col, row
    elif turns == 2:
        sr, sc = size - 1 - row, size - 1 - col
    elif turns == 3:
        sr, sc = col, size - 1 - row

    needs_diag = False
    if sr > sc:
        sr, sc = sc, sr
        needs_diag = True

    if turns == 0 and not needs_diag:
        return None

    if needs_diag and turns:
        op = compose(rotate_cw_op(turns), mirror_diag_tlbr)
    elif needs_diag:
        op = mirror_diag_tlbr
    else:
        op = rotate_cw_op(turns)
    return SymmetrySource(sr, sc, op)


def get_symmetry_source(row: int, col: int, tile_w: int, tile_h: int, mode: str) -> Optional[SymmetrySource]:
    half_w = _ceil_half(tile_w)
    half_h = _ceil_half(tile_h)
    dim = min(tile_w, tile_h)

    if mode == SymmetryMode.HORIZONTAL:
        if col < half_w:
            return None
        return SymmetrySource(row, tile_w - 1 - col, mirror_h)

    if mode == SymmetryMode.VERTICAL:
        if row < half_h:
            return None
        return SymmetrySource(tile_h - 1 - row, col, mirror_v)

    if mode == SymmetryMode.FOUR_WAY:
        if tile_w != tile_h:
            return _four_way_rect(row, col, tile_w, tile_h)
        return _four_way_square(row, col, tile_w)

    if mode == SymmetryMode.DIAGONAL_TLBR:
        if col >= row:
            return None
        if row >= dim:
            return None  # below the square part, nothing to mirror from
        return SymmetrySource(col, row, mirror_diag_tlbr)

    if mode == SymmetryMode.DIAGONAL_TRBL:
        if row + col < dim:
            return None
        sr = dim - 1 - col
        sc = dim - 1 - row
        if sr < 0 or sc < 0 or sr >= tile_h or sc >= tile_w:
            return None
        return SymmetrySource(sr, sc, mirror_diag_trbl)

    if mode == SymmetryMode.ROTATIONAL:
        # for odd heights the middle row (half_h - 1) is already in here
        if row < half_h:
            return None
        return SymmetrySource(tile_h - 1 - row, tile_w - 1 - col, rotate_180)

    # none, or anything unrecognised
    return None


def is_canonical(row: int, col: int, tile_w: int, tile_h: int, mode: str) -> bool:
    return get_symmetry_source(row, col, tile_w, tile_h, mode) is None
