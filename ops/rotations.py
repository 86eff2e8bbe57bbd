# ops/rotations.py
from dataclasses import replace
from typing import Callable

from quilt_types import Block, ShapeType

BlockOp = Callable[[Block], Block]


def rotate_180(b: Block) -> Block:
    if b.shape == ShapeType.HST:
        return replace(b, rotation=(b.rotation + 180) % 360)
    if b.shape == ShapeType.QST:
        t, r, btm, lf = b.colors
        return replace(b, colors=(btm, lf, t, r), rotation=(b.rotation + 180) % 360)
    return b


def rotate_cw(b: Block, turns: int) -> Block:
    """
    Rotate by 90 deg clockwise `turns` times (negative = ccw).
    Only the rotation changes; qst slots are rotation-relative.
    Applies to every shape, squares included.
    """
    n = turns % 4
    if n == 0:
        return b
    return replace(b, rotation=(b.rotation + n * 90) % 360)


def rotate_cw_op(turns: int) -> BlockOp:
    def _op(b: Block) -> Block:
        return rotate_cw(b, turns)
    return _op


def compose(*ops: BlockOp) -> BlockOp:
    """compose(f, g)(b) == f(g(b))"""
    def _op(b: Block) -> Block:
        for op in reversed(ops):
            b = op(b)
        return b
    return _op
