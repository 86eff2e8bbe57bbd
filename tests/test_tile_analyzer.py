from ops.mirrors import mirror_h
from quilt_types import Block, ShapeType, SymmetryMode
from tile_analyzer import (
    analyze_tile,
    best_symmetry_modes,
    block_id_array,
    colors_used,
    is_periodic,
    matches_symmetry,
    shape_counts,
    symmetric_fraction,
)

A = Block(ShapeType.HST, ("#111111", "#222222"), 0)
S = Block(ShapeType.SQUARE, ("#333333",), 0)
Q = Block(ShapeType.QST, ("#111111", "#222222", "#333333", "#444444"), 90)


def test_symmetric_fraction_horizontal():
    tile = [[A, mirror_h(A)], [S, Q]]
    # row 0 matches, row 1: Q != mirror_h(S) == S
    assert symmetric_fraction(tile, SymmetryMode.HORIZONTAL) == 0.5
    assert not matches_symmetry(tile, SymmetryMode.HORIZONTAL)

    tile = [[A, mirror_h(A)], [S, S]]
    assert matches_symmetry(tile, SymmetryMode.HORIZONTAL)


def test_no_derived_cells_counts_as_symmetric():
    assert symmetric_fraction([[A]], SymmetryMode.FOUR_WAY) == 1.0
    assert symmetric_fraction([[A, Q]], SymmetryMode.NONE) == 1.0


def test_best_symmetry_modes_uniform_squares():
    tile = [[S, S], [S, S]]
    modes = best_symmetry_modes(tile)
    # plain squares survive mirrors; rotate_cw changes their rotation
    assert SymmetryMode.HORIZONTAL in modes
    assert SymmetryMode.VERTICAL in modes
    assert SymmetryMode.ROTATIONAL in modes
    assert SymmetryMode.FOUR_WAY not in modes


def test_block_id_array_equal_blocks_share_ids():
    arr = block_id_array([[A, S], [S, A]])
    assert arr[0, 0] == arr[1, 1]
    assert arr[0, 1] == arr[1, 0]
    assert arr[0, 0] != arr[0, 1]


def test_is_periodic():
    grid = [[A, S, A, S], [Q, A, Q, A], [A, S, A, S]]
    assert is_periodic(grid, 2, 2)
    assert not is_periodic(grid, 3, 2)
    assert is_periodic([], 1, 1)


def test_colors_and_shapes():
    tile = [[A, S], [Q, Q]]
    assert colors_used(tile) == {"#111111", "#222222", "#333333", "#444444"}
    assert shape_counts(tile) == {"square": 1, "hst": 1, "qst": 2, "hst-split": 0}


def test_analyze_tile_summary():
    feat = analyze_tile([[A, mirror_h(A)]], SymmetryMode.HORIZONTAL)
    assert feat["width"] == 2 and feat["height"] == 1
    assert feat["colors"] == 2
    assert feat["symmetric_fraction"] == 1.0
    assert "symmetric_fraction" not in analyze_tile([[A]], SymmetryMode.NONE)
