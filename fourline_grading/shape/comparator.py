"""
Shape Comparator Module
=======================

Pixel-level form comparison of the user's drawing against the reference
glyph: both rasters are normalized to their own content box,
downsampled, and compared by mean squared error of ink density.

Design:
- Single metric (MSE), no skeleton or stroke-order analysis
- Degenerate inputs score 1.0 (maximal dissimilarity), never raise
- Rasters live only for the duration of one measurement
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional

from fourline_grading.geometry.strokes import StrokeSet
from fourline_grading.rendering.raster import Raster, RasterRenderer
from fourline_grading.schemas.common import BBox
from fourline_grading.shape.downsample import downsample
from fourline_grading.zones.catalog import LetterSpec

logger = logging.getLogger(__name__)

MAX_SCORE = 1.0
# Fewer captured points than this cannot form a comparable shape
MIN_SHAPE_POINTS = 5


def compare_shapes(reference_grid: np.ndarray, user_grid: np.ndarray) -> float:
    """
    Mean squared difference of ink density between two grids.

    Ink density is ``1 - luminance / 255``.

    Returns:
        Score in [0, 1]: 0 for identical ink, 1 for fully disjoint ink

    Raises:
        ValueError: If the grids differ in shape
    """
    if reference_grid.shape != user_grid.shape:
        raise ValueError(
            f"Grid shapes differ: {reference_grid.shape} vs {user_grid.shape}"
        )

    reference_ink = 1.0 - reference_grid.astype(np.float64) / 255.0
    user_ink = 1.0 - user_grid.astype(np.float64) / 255.0
    mse = float(np.mean((reference_ink - user_ink) ** 2))
    return min(max(mse, 0.0), MAX_SCORE)


@dataclass(frozen=True)
class ShapeMeasurement:
    """
    Outcome of one shape comparison.

    Attributes:
        score: MSE in [0, 1]
        degenerate: True when a raster had no usable content box
        reference_bbox: Reference content box (if any)
        user_bbox: User content box (if any)
    """
    score: float
    degenerate: bool = False
    reference_bbox: Optional[BBox] = None
    user_bbox: Optional[BBox] = None


def score_rasters(reference: Raster, user: Raster, grid_size: int) -> ShapeMeasurement:
    """Compare two rasters; degenerate boxes score MAX_SCORE."""
    if reference.is_degenerate or user.is_degenerate:
        return ShapeMeasurement(
            score=MAX_SCORE,
            degenerate=True,
            reference_bbox=reference.bbox,
            user_bbox=user.bbox,
        )

    score = compare_shapes(
        downsample(reference.buffer, reference.bbox, grid_size),
        downsample(user.buffer, user.bbox, grid_size),
    )
    return ShapeMeasurement(score=score, reference_bbox=reference.bbox, user_bbox=user.bbox)


class ShapeComparator:
    """
    Renders, downsamples and compares a letter against an attempt.

    Usage:
        comparator = ShapeComparator(RasterRenderer(config))
        mse = comparator.score(get_letter_spec("o"), strokes)
    """

    def __init__(self, renderer: RasterRenderer):
        self.renderer = renderer

    def measure(self, letter_spec: LetterSpec, strokes: StrokeSet) -> ShapeMeasurement:
        if strokes.point_count < MIN_SHAPE_POINTS:
            logger.debug("Only %d points captured; shape scored as %.1f", strokes.point_count, MAX_SCORE)
            return ShapeMeasurement(score=MAX_SCORE, degenerate=True)

        reference = self.renderer.render_reference(letter_spec)
        user = self.renderer.render_user(strokes)
        return score_rasters(reference, user, self.renderer.render.grid_size)

    def score(self, letter_spec: LetterSpec, strokes: StrokeSet) -> float:
        return self.measure(letter_spec, strokes).score
