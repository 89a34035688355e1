"""
Shape Layer
===========

Bounded Context: Pure-form comparison of a drawing and a reference glyph.

Responsibilities:
- Downsample rasters to a fixed grid (position/scale removed)
- Mean squared error of ink density
- NO positional rules (handled by zones)
"""

from fourline_grading.shape.comparator import (
    MAX_SCORE,
    MIN_SHAPE_POINTS,
    ShapeComparator,
    ShapeMeasurement,
    compare_shapes,
    score_rasters,
)
from fourline_grading.shape.downsample import GRID_SIZE, downsample

__all__ = [
    "GRID_SIZE",
    "MAX_SCORE",
    "MIN_SHAPE_POINTS",
    "ShapeComparator",
    "ShapeMeasurement",
    "compare_shapes",
    "downsample",
    "score_rasters",
]
