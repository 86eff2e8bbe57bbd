# parse_designs.py
# ------------------------------------------------------------
# Design file format (one block per design):
#
#   design=1
#   size=8x8            grid width x height
#   repeat=4x4          0 = no repeat
#   seed=2024
#   symmetry=75
#   mode=four-way
#   shapes=square:33,hst:34,qst:33   (unlisted shapes are disabled)
#   palette=Earthy      or  palette=#112233,#445566,...
#                       or  palette=3   (catalog index, wraps)
#   colors=6
#   color_mode=max      max | exact
#
# "#" starts a comment at line start or after whitespace,
# so "#RRGGBB" values survive.
# ------------------------------------------------------------

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from palettes import find_palette, palette_by_index
from quilt_types import GENERATABLE_SHAPES, Grid, QuiltConfig, default_config

_COMMENT_RE = re.compile(r"(^|\s)#.*$")


@dataclass
class DesignResult:
    design_id: int
    name: str
    config: QuiltConfig
    grid: Grid
    features: Dict[str, object] = field(default_factory=dict)


def strip_comment(raw: str) -> str:
    return _COMMENT_RE.sub("", raw).strip()


def parse_size(s: str) -> Optional[Tuple[int, int]]:
    s = s.strip().replace("X", "x").replace("*", "x").replace(",", "x")
    parts = [p.strip() for p in s.split("x") if p.strip()]
    if len(parts) >= 2:
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None
    return None


def parse_shapes(s: str) -> Optional[Tuple[Dict[str, bool], Dict[str, int]]]:
    enabled = {shape: False for shape in GENERATABLE_SHAPES}
    ratios = {shape: 0 for shape in GENERATABLE_SHAPES}
    found = False
    for chunk in [c.strip() for c in s.split(",") if c.strip()]:
        name, _, weight = chunk.partition(":")
        name = name.strip().lower()
        if name not in enabled:
            continue
        try:
            w = int(weight) if weight.strip() else 1
        except ValueError:
            continue
        enabled[name] = True
        ratios[name] = w
        found = True
    if not found:
        return None
    return enabled, ratios


def parse_palette(s: str) -> Optional[List[str]]:
    if s.strip().isdecimal():
        return list(palette_by_index(int(s)).colors)
    named = find_palette(s)
    if named is not None:
        return list(named.colors)
    colors = [c.strip() for c in s.split(",") if c.strip()]
    return colors or None


def _apply(cfg: QuiltConfig, key: str, val: str) -> None:
    if key == "size":
        wh = parse_size(val)
        if wh is not None:
            cfg.grid_width, cfg.grid_height = wh
    elif key == "repeat":
        wh = parse_size(val)
        if wh is not None:
            cfg.repeat_width, cfg.repeat_height = wh
        elif val.strip() == "0":
            cfg.repeat_width, cfg.repeat_height = 0, 0
    elif key == "seed":
        try:
            cfg.seed = int(val)
        except ValueError:
            pass
    elif key == "symmetry":
        try:
            cfg.symmetry = float(val) if "." in val else int(val)
        except ValueError:
            pass
    elif key == "mode":
        cfg.symmetry_mode = val.strip().lower()
    elif key == "shapes":
        parsed = parse_shapes(val)
        if parsed is not None:
            cfg.enabled_shapes, cfg.shape_ratios = parsed
    elif key == "palette":
        colors = parse_palette(val)
        if colors is not None:
            cfg.palette = colors
    elif key == "colors":
        try:
            cfg.palette_color_count = int(val)
        except ValueError:
            pass
    elif key == "color_mode":
        cfg.color_count_mode = val.strip().lower()


def parse_designs(txt: str) -> Dict[int, QuiltConfig]:
    out: Dict[int, QuiltConfig] = {}
    cur_id: Optional[int] = None
    cur: Optional[QuiltConfig] = None

    for raw in txt.splitlines():
        line = strip_comment(raw)
        if not line or "=" not in line:
            continue

        key, val = line.split("=", 1)
        key = key.strip().lower()
        val = val.strip()

        if key == "design":
            if cur is not None:
                out[cur_id] = cur
            try:
                cur_id = int(val)
            except ValueError:
                cur_id, cur = None, None
                continue
            cur = default_config()
            continue

        if cur is None:
            continue
        _apply(cur, key, val)

    if cur is not None:
        out[cur_id] = cur
    return out


# =======================
# Output
# =======================

def encode_block(b) -> str:
    return f"{b.shape}:{b.rotation}:{','.join(b.colors)}"


def build_grids_text(results: List[DesignResult]) -> str:
    results = sorted(results, key=lambda r: r.design_id)
    lines: List[str] = []
    for res in results:
        cfg = res.config
        header = f"# --- Design {res.design_id}: {res.name} ---"
        if res.features:
            header += " " + ", ".join(f"{k}={v}" for k, v in res.features.items())
        lines.append(header)
        lines.append(f"design={res.design_id}")
        lines.append(f"size={cfg.grid_width}x{cfg.grid_height}")
        lines.append(f"repeat={cfg.repeat_width}x{cfg.repeat_height}")
        lines.append(f"seed={cfg.seed}")
        lines.append(f"symmetry={cfg.symmetry}")
        lines.append(f"mode={cfg.symmetry_mode}")
        shapes = ",".join(
            f"{s}:{cfg.shape_ratios.get(s, 0)}" for s in GENERATABLE_SHAPES if cfg.enabled_shapes.get(s)
        )
        if shapes:
            lines.append(f"shapes={shapes}")
        lines.append(f"palette={','.join(cfg.palette)}")
        lines.append(f"colors={cfg.palette_color_count}")
        lines.append(f"color_mode={cfg.color_count_mode}")
        for ri, row in enumerate(res.grid):
            lines.append(f"row{ri}= " + "; ".join(encode_block(b) for b in row))
        lines.append("")
    return "\n".join(lines)
