"""
Zone Classifier Module
======================

Geometry-only grading: does the drawing sit in the right notebook rows?

Design:
- Stateless (guides injected, nothing cached between calls)
- Gates in fixed order: emptiness, size, then category band rules
- First violated rule decides the verdict (no aggregation)
- Never raises for drawing input; every outcome is a GradingResult
"""

import logging
from typing import Optional

from fourline_grading.geometry.guides import DEFAULT_GUIDES, NotebookGuides
from fourline_grading.geometry.strokes import PointCloud
from fourline_grading.schemas.result import FailZone, GradingResult
from fourline_grading.zones.catalog import LetterSpec
from fourline_grading.zones.rules import (
    EMPTY_REASON,
    TOO_SMALL_REASON,
    rules_for,
)
from fourline_grading.zones.stats import CloudStats

logger = logging.getLogger(__name__)

MIN_POINTS = 15


class ZoneClassifier:
    """
    Evaluates a PointCloud against a letter's band rules.

    Usage:
        classifier = ZoneClassifier(guides=config.guides)
        result = classifier.classify(spec, cloud, 400, 400)
    """

    def __init__(self, guides: NotebookGuides = DEFAULT_GUIDES, min_points: int = MIN_POINTS):
        """
        Args:
            guides: Shared notebook guide lines
            min_points: Sparse-input threshold (fewer points -> empty)
        """
        if min_points < 1:
            raise ValueError(f"min_points must be >= 1, got {min_points}")
        self.guides = guides
        self.min_points = min_points

    def classify(
        self,
        letter_spec: LetterSpec,
        point_cloud: PointCloud,
        canvas_width: int,
        canvas_height: int,
    ) -> GradingResult:
        """
        Grade the position and size of a drawing.

        Args:
            letter_spec: Target letter
            point_cloud: All captured points of the attempt
            canvas_width: Canvas width (pixels)
            canvas_height: Canvas height (pixels)

        Returns:
            GradingResult (pass, or the first violated rule)
        """
        if len(point_cloud) < self.min_points:
            return GradingResult.failure(EMPTY_REASON, FailZone.EMPTY)

        stats = CloudStats.from_cloud(point_cloud, canvas_width, canvas_height)
        category = rules_for(letter_spec)

        if category.size_gate.is_too_small(stats, letter_spec.min_height_ratio):
            return GradingResult.failure(TOO_SMALL_REASON, FailZone.TOO_SMALL)

        violation = category.first_violation(stats, self.guides)
        if violation is not None:
            logger.debug(
                "Letter %r broke %s rule (%s)",
                letter_spec.char, type(violation).__name__, violation.fail_zone.value,
            )
            return GradingResult.failure(violation.reason, violation.fail_zone)

        return GradingResult.success(category.success_reason)


def classify(
    letter_spec: LetterSpec,
    point_cloud: PointCloud,
    canvas_width: int,
    canvas_height: int,
    guides: Optional[NotebookGuides] = None,
) -> GradingResult:
    """Zone check with the default (or given) guide lines."""
    return ZoneClassifier(guides=guides or DEFAULT_GUIDES).classify(
        letter_spec, point_cloud, canvas_width, canvas_height
    )
