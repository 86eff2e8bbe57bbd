# block_simplifier.py
# ------------------------------------------------------------
# Merge triangles that share a color into a simpler shape.
#
#   hst  c0 == c1                      -> square
#   qst  all four equal                -> square
#   qst  two opposite halves           -> hst (rot 0 / 90)
#   qst  three equal, one odd          -> hst (rot encodes the odd side)
#   qst  one adjacent pair equal       -> hst-split (rot encodes solid corner)
#
# qst order: top, right, bottom, left. Colors compare case-insensitively.
# First rule that matches wins; the result never matches again,
# so simplify(simplify(x)) == simplify(x).
# ------------------------------------------------------------

from typing import Optional

from quilt_types import Block, Grid, ShapeType


def color_eq(a: str, b: str) -> bool:
    return a.upper() == b.upper()


def _simplify_qst(top: str, right: str, bottom: str, left: str) -> Optional[Block]:
    if color_eq(top, right) and color_eq(right, bottom) and color_eq(bottom, left):
        return Block(ShapeType.SQUARE, (top,), 0)

    # two halves along a diagonal
    if color_eq(top, right) and color_eq(bottom, left):
        return Block(ShapeType.HST, (bottom, top), 0)
    if color_eq(top, left) and color_eq(right, bottom):
        return Block(ShapeType.HST, (left, right), 90)

    # three the same, one odd
    if color_eq(top, right) and color_eq(right, bottom) and not color_eq(bottom, left):
        return Block(ShapeType.HST, (left, top), 270)
    if color_eq(right, bottom) and color_eq(bottom, left) and not color_eq(left, top):
        return Block(ShapeType.HST, (top, right), 0)
    if color_eq(bottom, left) and color_eq(left, top) and not color_eq(top, right):
        return Block(ShapeType.HST, (right, bottom), 90)
    if color_eq(left, top) and color_eq(top, right) and not color_eq(right, bottom):
        return Block(ShapeType.HST, (bottom, top), 180)

    # one adjacent pair: solid corner + two split pieces
    if color_eq(bottom, left) and not color_eq(top, right):
        return Block(ShapeType.HST_SPLIT, (bottom, top, right), 0)
    if color_eq(top, left) and not color_eq(right, bottom):
        return Block(ShapeType.HST_SPLIT, (top, right, bottom), 90)
    if color_eq(top, right) and not color_eq(bottom, left):
        return Block(ShapeType.HST_SPLIT, (top, bottom, left), 180)
    if color_eq(right, bottom) and not color_eq(left, top):
        return Block(ShapeType.HST_SPLIT, (right, left, top), 270)

    return None


def simplify_block(block: Block) -> Block:
    if block.shape == ShapeType.HST:
        c0, c1 = block.colors
        if color_eq(c0, c1):
            return Block(ShapeType.SQUARE, (c0,), 0)
        return block

    if block.shape == ShapeType.QST:
        out = _simplify_qst(*block.colors)
        if out is not None:
            return out

    return block


def simplify_grid(grid: Grid) -> Grid:
    return [[simplify_block(b) for b in row] for row in grid]
