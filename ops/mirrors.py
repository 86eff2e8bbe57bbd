# ops/mirrors.py
# ------------------------------------------------------------
# Block reflections. Each op returns a NEW block.
#
# hst colors = [bottom-left, top-right] at rotation 0
# qst colors = [top, right, bottom, left]
#
# Square / hst-split have no orientation-dependent content here,
# they pass through untouched.
# ------------------------------------------------------------

from dataclasses import replace

from quilt_types import Block, ShapeType


def mirror_h(b: Block) -> Block:
    """Left <-> right."""
    if b.shape == ShapeType.HST:
        c0, c1 = b.colors
        return replace(b, colors=(c1, c0), rotation=(450 - b.rotation) % 360)
    if b.shape == ShapeType.QST:
        t, r, btm, lf = b.colors
        return replace(b, colors=(t, lf, btm, r), rotation=(360 - b.rotation) % 360)
    return b


def mirror_v(b: Block) -> Block:
    """Top <-> bottom."""
    if b.shape == ShapeType.HST:
        # flips the diagonal, colors stay
        return replace(b, rotation=(90 - b.rotation + 360) % 360)
    if b.shape == ShapeType.QST:
        t, r, btm, lf = b.colors
        return replace(b, colors=(btm, r, t, lf), rotation=(180 - b.rotation + 360) % 360)
    return b


def mirror_diag_tlbr(b: Block) -> Block:
    """Reflect across the \\ diagonal: cell (r,c) <-> (c,r)."""
    if b.shape == ShapeType.HST:
        c0, c1 = b.colors
        return replace(b, colors=(c1, c0), rotation=(90 - b.rotation + 360) % 360)
    if b.shape == ShapeType.QST:
        # top<->left, right<->bottom
        t, r, btm, lf = b.colors
        return replace(b, colors=(lf, btm, r, t), rotation=(90 - b.rotation + 360) % 360)
    return b


def mirror_diag_trbl(b: Block) -> Block:
    """Reflect across the / diagonal: cell (r,c) <-> (N-1-c, N-1-r)."""
    if b.shape == ShapeType.HST:
        c0, c1 = b.colors
        return replace(b, colors=(c1, c0), rotation=(270 - b.rotation + 360) % 360)
    if b.shape == ShapeType.QST:
        # top<->right, left<->bottom
        t, r, btm, lf = b.colors
        return replace(b, colors=(r, t, lf, btm), rotation=(270 - b.rotation + 360) % 360)
    return b
