# shape_pool.py
import logging
from typing import Dict, List

from quilt_types import GENERATABLE_SHAPES, ShapeType

logger = logging.getLogger(__name__)


def build_weighted_shape_pool(enabled_shapes: Dict[str, bool], shape_ratios: Dict[str, int]) -> List[str]:
    """
    Flat sampling pool: each enabled shape appears `weight` times.

    Only GENERATABLE_SHAPES are walked, so hst-split is never sampled
    even if a caller flags it as enabled.
    """
    pool: List[str] = []
    for shape in GENERATABLE_SHAPES:
        if not enabled_shapes.get(shape, False):
            continue
        weight = int(shape_ratios.get(shape, 0))
        pool.extend([shape] * max(0, weight))

    if not pool:
        logger.warning("empty shape pool (enabled=%s ratios=%s), falling back to square",
                       enabled_shapes, shape_ratios)
        pool.append(ShapeType.SQUARE)
    return pool
