# tile_generator.py
# ------------------------------------------------------------
# Seed + config -> repeat tile -> full grid.
#
#   1) random fill, row-major (shape, rotation, one pick per slot)
#   2) exact color mode: force unused palette colors into
#      canonical slots (BEFORE symmetry so they propagate)
#   3) per derived cell: next()*100 < symmetry -> copy source
#
# Every rng draw happens in a fixed order, so the same config
# always gives the same grid.
# ------------------------------------------------------------

import logging
import math
from collections import Counter
from dataclasses import replace
from typing import List, Sequence, Tuple

from grid_tiler import resolve_tile_size, tile_grid
from quilt_types import (
    Block,
    ColorCountMode,
    Grid,
    QuiltConfig,
    ROTATIONS,
    SLOT_COUNT,
    SYMMETRY_MODES,
    SymmetryMode,
    Tile,
)
from seeded_random import SeededRandom
from shape_pool import build_weighted_shape_pool
from symmetry_source import get_symmetry_source

logger = logging.getLogger(__name__)

Slot = Tuple[int, int, int]  # (row, col, color index)


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


def random_block(rng: SeededRandom, pool: Sequence[str], palette_colors: Sequence[str]) -> Block:
    shape = rng.pick(pool)
    rotation = rng.pick(ROTATIONS)
    colors = [rng.pick(palette_colors) for _ in range(SLOT_COUNT[shape])]
    return Block(shape, tuple(colors), rotation)


def ensure_all_colors_used(
    tile: Tile,
    palette_colors: Sequence[str],
    rng: SeededRandom,
    symmetry_mode: str,
) -> None:
    """
    Make every palette color appear in at least one canonical slot.

    Only canonical cells are touched; derived cells get their colors
    from the symmetry pass afterwards. Mutates `tile` in place.
    """
    tile_h = len(tile)
    tile_w = len(tile[0]) if tile_h else 0

    used = set()
    slots: List[Slot] = []
    for row in range(tile_h):
        for col in range(tile_w):
            if get_symmetry_source(row, col, tile_w, tile_h, symmetry_mode) is not None:
                continue
            block = tile[row][col]
            for ci, c in enumerate(block.colors):
                used.add(c.upper())
                slots.append((row, col, ci))

    unused = [c for c in palette_colors if c.upper() not in used]
    if not unused:
        return

    # Fisher-Yates on the shared rng
    for i in range(len(slots) - 1, 0, -1):
        j = int(rng.next() * (i + 1))
        slots[i], slots[j] = slots[j], slots[i]

    # never overwrite the last canonical occurrence of a color
    counts = Counter(tile[r][c].colors[ci].upper() for r, c, ci in slots)
    placed = 0
    for row, col, ci in slots:
        if placed >= len(unused):
            break
        block = tile[row][col]
        current = block.colors[ci].upper()
        if counts[current] <= 1:
            continue
        counts[current] -= 1
        color = unused[placed]
        colors = list(block.colors)
        colors[ci] = color
        tile[row][col] = replace(block, colors=tuple(colors))
        counts[color.upper()] += 1
        placed += 1

    if placed < len(unused):
        logger.warning("exact colors: placed %d of %d missing colors, only %d canonical slots",
                       placed, len(unused), len(slots))


def generate_tile(
    tile_w: int,
    tile_h: int,
    symmetry: float,
    symmetry_mode: str,
    rng: SeededRandom,
    pool: Sequence[str],
    palette_colors: Sequence[str],
    exact_colors: bool = False,
) -> Tile:
    tile: Tile = [
        [random_block(rng, pool, palette_colors) for _ in range(tile_w)]
        for _ in range(tile_h)
    ]

    if exact_colors:
        ensure_all_colors_used(tile, palette_colors, rng, symmetry_mode)

    if symmetry_mode == SymmetryMode.NONE:
        return tile

    for row in range(tile_h):
        for col in range(tile_w):
            src = get_symmetry_source(row, col, tile_w, tile_h, symmetry_mode)
            if src is None:
                continue
            # strict <: 0 never copies, 100 always does
            if rng.next() * 100 < symmetry:
                tile[row][col] = src.transform(tile[src.src_row][src.src_col])

    return tile


def resolve_palette_colors(palette: Sequence[str], color_count: int) -> List[str]:
    assert len(palette) > 0, "palette must not be empty"
    if isinstance(color_count, float) and not math.isfinite(color_count):
        logger.warning("palette_color_count %s is not finite, using all %d colors", color_count, len(palette))
        return list(palette)
    n = _clamp(int(color_count), 1, len(palette))
    if n != color_count:
        logger.warning("palette_color_count %s clamped to %d", color_count, n)
    return list(palette[:n])


def _check_dim(name: str, v) -> int:
    assert isinstance(v, int) and not isinstance(v, bool), f"{name} must be an int, got {v!r}"
    assert v >= 0, f"{name} must not be negative, got {v!r}"
    return int(v)


def generate_grid(config: QuiltConfig) -> Grid:
    """
    Build the full grid for `config`.

    Out-of-range settings are clamped (and logged), not rejected:
    this runs on every UI change and must not crash on a plausible
    config. Negative or non-int dimensions are caller bugs and
    trip an assertion.
    """
    grid_w = _check_dim("grid_width", config.grid_width)
    grid_h = _check_dim("grid_height", config.grid_height)
    rep_w = _check_dim("repeat_width", config.repeat_width)
    rep_h = _check_dim("repeat_height", config.repeat_height)

    if grid_w < 1 or grid_h < 1:
        logger.warning("grid %dx%d clamped to at least 1x1", grid_w, grid_h)
        grid_w = max(1, grid_w)
        grid_h = max(1, grid_h)

    symmetry = _clamp(config.symmetry, 0, 100)
    if symmetry != config.symmetry:
        logger.warning("symmetry %s clamped to %s", config.symmetry, symmetry)

    mode = config.symmetry_mode
    if mode not in SYMMETRY_MODES:
        logger.warning("unknown symmetry mode %r, using none", mode)
        mode = SymmetryMode.NONE

    color_mode = config.color_count_mode
    if color_mode not in (ColorCountMode.MAX, ColorCountMode.EXACT):
        logger.warning("unknown color count mode %r, using max", color_mode)
        color_mode = ColorCountMode.MAX

    rng = SeededRandom(config.seed)
    palette_colors = resolve_palette_colors(config.palette, config.palette_color_count)
    pool = build_weighted_shape_pool(config.enabled_shapes, config.shape_ratios)
    tile_w, tile_h = resolve_tile_size(grid_w, grid_h, rep_w, rep_h)

    tile = generate_tile(
        tile_w,
        tile_h,
        symmetry,
        mode,
        rng,
        pool,
        palette_colors,
        exact_colors=(color_mode == ColorCountMode.EXACT),
    )
    logger.debug("seed=%s tile=%dx%d mode=%s symmetry=%s colors=%d",
                 config.seed, tile_w, tile_h, mode, symmetry, len(palette_colors))

    return tile_grid(tile, grid_w, grid_h)


generate = generate_grid
