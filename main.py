# main.py
import logging
from pathlib import Path
from typing import Dict, List

from block_simplifier import simplify_grid
from generation_names import generate_name
from grid_tiler import resolve_tile_size
from parse_designs import DesignResult, build_grids_text, parse_designs
from quilt_types import QuiltConfig, default_config
from tile_analyzer import analyze_tile, best_symmetry_modes, is_periodic
from tile_generator import generate_grid

# =========================
# HARD CODED CONFIG
# =========================

INPUT_TXT = r"designs/input_designs.txt"
OUTPUT_TXT = r"designs/output_grids.txt"

TARGET_DESIGN = 0      # 0 = all designs; else specific id
SIMPLIFY = True        # merge same-color triangles before writing
FALLBACK_SEED = 20260102

LOG_LEVEL = logging.WARNING

# =========================


def _tile_of(cfg: QuiltConfig, grid):
    tw, th = resolve_tile_size(
        max(1, cfg.grid_width), max(1, cfg.grid_height), cfg.repeat_width, cfg.repeat_height
    )
    return [row[:tw] for row in grid[:th]], tw, th


def run(designs: Dict[int, QuiltConfig], simplify: bool = SIMPLIFY, target: int = 0) -> List[DesignResult]:
    ids = sorted(designs.keys())
    if target > 0:
        ids = [target] if target in designs else []

    out: List[DesignResult] = []
    for did in ids:
        cfg = designs[did]
        grid = generate_grid(cfg)

        tile, tw, th = _tile_of(cfg, grid)
        feat = analyze_tile(tile, cfg.symmetry_mode)
        feat["best_modes"] = "/".join(best_symmetry_modes(tile)) or "none"
        if not is_periodic(grid, tw, th):
            print(f"[WARN] design={did} grid is not periodic with tile {tw}x{th}")

        if simplify:
            grid = simplify_grid(grid)

        out.append(DesignResult(did, generate_name(cfg.seed), cfg, grid, feat))
    return out


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    in_path = Path(INPUT_TXT)
    out_path = Path(OUTPUT_TXT)

    if in_path.exists():
        designs = parse_designs(in_path.read_text(encoding="utf-8"))
    else:
        print(f"[WARN] {in_path} not found, using one default design (seed={FALLBACK_SEED})")
        designs = {1: default_config(seed=FALLBACK_SEED)}

    results = run(designs, simplify=SIMPLIFY, target=TARGET_DESIGN)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(build_grids_text(results), encoding="utf-8")
    print(f"[DONE] wrote: {out_path}")
    print(f"[DONE] designs={len(results)} simplify={int(SIMPLIFY)}")


if __name__ == "__main__":
    main()
