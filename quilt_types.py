# quilt_types.py
# ------------------------------------------------------------
# Shared data model for quilt generation:
# - ShapeType / SymmetryMode / ColorCountMode string constants
# - Block: one drawable cell (immutable, compared by value)
# - QuiltConfig: everything one generate call reads
#
# Slot order:
#   square    [fill]
#   hst       [bottom-left, top-right]       (at rotation 0)
#   qst       [top, right, bottom, left]
#   hst-split [solid half, split a, split b]
# ------------------------------------------------------------

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from palettes import BASE_PALETTES


class ShapeType:
    SQUARE = "square"
    HST = "hst"
    QST = "qst"
    HST_SPLIT = "hst-split"


# random generation only ever draws from these; hst-split comes from simplify
GENERATABLE_SHAPES: Tuple[str, ...] = (ShapeType.SQUARE, ShapeType.HST, ShapeType.QST)
ALL_SHAPES: Tuple[str, ...] = GENERATABLE_SHAPES + (ShapeType.HST_SPLIT,)

SLOT_COUNT: Dict[str, int] = {
    ShapeType.SQUARE: 1,
    ShapeType.HST: 2,
    ShapeType.QST: 4,
    ShapeType.HST_SPLIT: 3,
}

ROTATIONS: Tuple[int, ...] = (0, 90, 180, 270)


class SymmetryMode:
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FOUR_WAY = "four-way"
    DIAGONAL_TLBR = "diagonal-tlbr"
    DIAGONAL_TRBL = "diagonal-trbl"
    ROTATIONAL = "rotational"


SYMMETRY_MODES: Tuple[str, ...] = (
    SymmetryMode.NONE,
    SymmetryMode.HORIZONTAL,
    SymmetryMode.VERTICAL,
    SymmetryMode.FOUR_WAY,
    SymmetryMode.DIAGONAL_TLBR,
    SymmetryMode.DIAGONAL_TRBL,
    SymmetryMode.ROTATIONAL,
)


class ColorCountMode:
    MAX = "max"
    EXACT = "exact"


@dataclass(frozen=True)
class Block:
    shape: str
    colors: Tuple[str, ...]
    rotation: int = 0

    def __post_init__(self):
        # accept any sequence, store a tuple so blocks stay hashable
        if not isinstance(self.colors, tuple):
            object.__setattr__(self, "colors", tuple(self.colors))
        assert self.shape in SLOT_COUNT, f"unknown shape {self.shape!r}"
        assert len(self.colors) == SLOT_COUNT[self.shape], (
            f"{self.shape} needs {SLOT_COUNT[self.shape]} colors, got {len(self.colors)}"
        )
        assert self.rotation in ROTATIONS, f"bad rotation {self.rotation!r}"


Tile = List[List[Block]]
Grid = List[List[Block]]


def _default_enabled() -> Dict[str, bool]:
    return {s: True for s in GENERATABLE_SHAPES}


def _default_ratios() -> Dict[str, int]:
    return {ShapeType.SQUARE: 33, ShapeType.HST: 34, ShapeType.QST: 33}


def _default_palette() -> List[str]:
    return list(BASE_PALETTES[0].colors)


@dataclass
class QuiltConfig:
    grid_width: int = 4
    grid_height: int = 4
    repeat_width: int = 4
    repeat_height: int = 4
    seed: int = 0
    symmetry: float = 75
    symmetry_mode: str = SymmetryMode.FOUR_WAY
    enabled_shapes: Dict[str, bool] = field(default_factory=_default_enabled)
    shape_ratios: Dict[str, int] = field(default_factory=_default_ratios)
    palette: List[str] = field(default_factory=_default_palette)
    palette_color_count: int = 6
    color_count_mode: str = ColorCountMode.MAX


def default_config(seed: int = 0) -> QuiltConfig:
    return QuiltConfig(seed=seed)
