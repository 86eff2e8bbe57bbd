import pytest

from ops.mirrors import mirror_diag_tlbr, mirror_diag_trbl, mirror_h, mirror_v
from ops.rotations import rotate_180, rotate_cw
from quilt_types import Block, SYMMETRY_MODES, ShapeType, SymmetryMode
from symmetry_source import get_symmetry_source, is_canonical

SIZES = [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5), (4, 2), (2, 4), (3, 5), (5, 3), (6, 4), (1, 4)]

HST = Block(ShapeType.HST, ("#111111", "#222222"), 90)
QST = Block(ShapeType.QST, ("#111111", "#222222", "#333333", "#444444"), 180)


def canonical_map(w, h, mode):
    return [[is_canonical(r, c, w, h, mode) for c in range(w)] for r in range(h)]


def test_none_is_always_canonical():
    for w, h in SIZES:
        assert all(all(row) for row in canonical_map(w, h, SymmetryMode.NONE))


def test_unknown_mode_is_canonical():
    assert get_symmetry_source(3, 3, 4, 4, "spiral") is None


def test_horizontal():
    assert get_symmetry_source(0, 1, 4, 2, SymmetryMode.HORIZONTAL) is None
    src = get_symmetry_source(1, 3, 4, 2, SymmetryMode.HORIZONTAL)
    assert (src.src_row, src.src_col) == (1, 0)
    assert src.transform is mirror_h
    # odd width: middle column is canonical
    assert get_symmetry_source(0, 2, 5, 1, SymmetryMode.HORIZONTAL) is None
    assert get_symmetry_source(0, 3, 5, 1, SymmetryMode.HORIZONTAL).src_col == 1


def test_vertical():
    assert get_symmetry_source(1, 0, 2, 3, SymmetryMode.VERTICAL) is None
    src = get_symmetry_source(2, 1, 2, 3, SymmetryMode.VERTICAL)
    assert (src.src_row, src.src_col) == (0, 1)
    assert src.transform is mirror_v


def test_four_way_square_canonical_region():
    assert canonical_map(4, 4, SymmetryMode.FOUR_WAY) == [
        [True, True, False, False],
        [False, True, False, False],
        [False, False, False, False],
        [False, False, False, False],
    ]


def test_four_way_square_sources():
    # below the diagonal in TL: diagonal mirror only
    src = get_symmetry_source(1, 0, 4, 4, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 1)
    assert src.transform(QST) == mirror_diag_tlbr(QST)

    # TR corner rotates the TL corner one turn
    src = get_symmetry_source(0, 3, 4, 4, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 0)
    assert src.transform(HST) == rotate_cw(HST, 1)

    # TR (0,2) rotates back to (1,0), which needs the diagonal mirror first
    src = get_symmetry_source(0, 2, 4, 4, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 1)
    assert src.transform(HST) == rotate_cw(mirror_diag_tlbr(HST), 1)

    src = get_symmetry_source(3, 3, 4, 4, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 0)
    assert src.transform(HST) == rotate_cw(HST, 2)

    src = get_symmetry_source(3, 0, 4, 4, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 0)
    assert src.transform(HST) == rotate_cw(HST, 3)


def test_four_way_rect_fallback():
    # 4 wide x 2 high
    assert get_symmetry_source(0, 1, 4, 2, SymmetryMode.FOUR_WAY) is None

    src = get_symmetry_source(0, 2, 4, 2, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col, src.transform) == (0, 1, mirror_h)

    src = get_symmetry_source(1, 0, 4, 2, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col, src.transform) == (0, 0, mirror_v)

    src = get_symmetry_source(1, 3, 4, 2, SymmetryMode.FOUR_WAY)
    assert (src.src_row, src.src_col) == (0, 0)
    assert src.transform(QST) == mirror_h(mirror_v(QST))


def test_diagonal_tlbr():
    assert get_symmetry_source(0, 2, 3, 3, SymmetryMode.DIAGONAL_TLBR) is None
    assert get_symmetry_source(1, 1, 3, 3, SymmetryMode.DIAGONAL_TLBR) is None
    src = get_symmetry_source(2, 0, 3, 3, SymmetryMode.DIAGONAL_TLBR)
    assert (src.src_row, src.src_col, src.transform) == (0, 2, mirror_diag_tlbr)

    # 3 wide x 5 high: rows 3,4 are outside the 3x3 square
    assert get_symmetry_source(4, 0, 3, 5, SymmetryMode.DIAGONAL_TLBR) is None
    assert get_symmetry_source(3, 1, 3, 5, SymmetryMode.DIAGONAL_TLBR) is None


def test_diagonal_trbl():
    assert get_symmetry_source(0, 2, 3, 3, SymmetryMode.DIAGONAL_TRBL) is None
    src = get_symmetry_source(2, 2, 3, 3, SymmetryMode.DIAGONAL_TRBL)
    assert (src.src_row, src.src_col, src.transform) == (0, 0, mirror_diag_trbl)
    src = get_symmetry_source(1, 2, 3, 3, SymmetryMode.DIAGONAL_TRBL)
    assert (src.src_row, src.src_col) == (0, 1)

    # 5 wide x 3 high: dim=3, (0,4) mirrors to (-2, 2) -> off tile
    assert get_symmetry_source(0, 4, 5, 3, SymmetryMode.DIAGONAL_TRBL) is None
    src = get_symmetry_source(2, 4, 5, 3, SymmetryMode.DIAGONAL_TRBL)
    assert src is None


def test_rotational_odd_middle_row_is_canonical():
    assert canonical_map(3, 3, SymmetryMode.ROTATIONAL) == [
        [True, True, True],
        [True, True, True],
        [False, False, False],
    ]
    src = get_symmetry_source(2, 0, 3, 3, SymmetryMode.ROTATIONAL)
    assert (src.src_row, src.src_col, src.transform) == (0, 2, rotate_180)


@pytest.mark.parametrize("mode", SYMMETRY_MODES)
@pytest.mark.parametrize("w,h", SIZES)
def test_sources_are_canonical_and_in_bounds(mode, w, h):
    for r in range(h):
        for c in range(w):
            src = get_symmetry_source(r, c, w, h, mode)
            if src is None:
                continue
            assert 0 <= src.src_row < h and 0 <= src.src_col < w
            assert (src.src_row, src.src_col) != (r, c)
            assert is_canonical(src.src_row, src.src_col, w, h, mode)


@pytest.mark.parametrize("mode", SYMMETRY_MODES)
def test_resolver_is_pure(mode):
    first = canonical_map(5, 5, mode)
    second = canonical_map(5, 5, mode)
    assert first == second


@pytest.mark.parametrize("mode", SYMMETRY_MODES)
def test_tiny_tiles_are_all_canonical(mode):
    assert canonical_map(1, 1, mode) == [[True]]
