"""
Grading Orchestrator Module
===========================

Bounded Context: Two-stage grading of one letter attempt.

Flow (per attempt):

    Idle -> ZoneCheck -> Fail(reason)
                      -> ShapeCheck -> Fail(shape mismatch)
                                    -> Pass

Design:
- Zone check first; on failure return at once (no rasterization)
- Shape check only for geometrically valid input
- The point cloud and the rasters come from the same StrokeSet
- Synchronous, no shared mutable state between attempts
- Never raises for drawing input
"""

from typing import Optional, Union

from fourline_grading.config import DEFAULT_CONFIG, GradingConfig, GradingMode
from fourline_grading.geometry.guides import NotebookGuides
from fourline_grading.geometry.strokes import StrokeSet
from fourline_grading.logging import LogEvent, StructuredLogger, create_logger
from fourline_grading.rendering.raster import RasterRenderer
from fourline_grading.schemas.common import BBox
from fourline_grading.schemas.result import FailZone, GradingResult
from fourline_grading.shape.comparator import ShapeComparator
from fourline_grading.zones.catalog import LetterSpec, get_letter_spec
from fourline_grading.zones.classifier import ZoneClassifier


def shape_mismatch_reason(letter_spec: LetterSpec) -> str:
    return f"The shape of '{letter_spec.char}' looks a little different. Follow the guide and try again!"


def _bbox_dict(bbox: Optional[BBox]) -> Optional[dict]:
    return bbox.to_dict() if bbox is not None else None


class LetterGrader:
    """
    Orchestrates the zone check and the shape check.

    Usage:
        grader = LetterGrader(GradingConfig.from_yaml(path))
        result = grader.grade_letter("A", strokes, mode=GradingMode.QUIZ)
    """

    def __init__(
        self,
        config: GradingConfig = DEFAULT_CONFIG,
        logger: Optional[StructuredLogger] = None,
        classifier: Optional[ZoneClassifier] = None,
        comparator: Optional[ShapeComparator] = None,
    ):
        """
        Args:
            config: Grading configuration (canvas, guides, thresholds)
            logger: Structured logger (default: component "grader")
            classifier: Zone classifier (default: built from config guides)
            comparator: Shape comparator (default: built from config)
        """
        self.config = config
        self.logger = logger or create_logger("grader")
        self.classifier = classifier or ZoneClassifier(guides=config.guides)
        self.comparator = comparator or ShapeComparator(RasterRenderer(config))

    def grade(
        self,
        letter_spec: LetterSpec,
        strokes: StrokeSet,
        mse_threshold: float,
    ) -> GradingResult:
        """
        Run both checks for one attempt.

        Args:
            letter_spec: Target letter
            strokes: Snapshot of the attempt's strokes
            mse_threshold: Shape scores above this fail the attempt

        Returns:
            Zone failure, shape failure, or the zone check's pass result
        """
        metadata = {"letter": letter_spec.char, "strokes": len(strokes), "points": strokes.point_count}
        self.logger.debug(LogEvent.GRADE_STARTED, "Grading attempt", metadata)

        zone_result = self.classifier.classify(
            letter_spec,
            strokes.point_cloud(),
            self.config.canvas_width,
            self.config.canvas_height,
        )
        if not zone_result.passed:
            self.logger.info(
                LogEvent.GRADE_ZONE_FAILED,
                "Zone check failed",
                {**metadata, "fail_zone": zone_result.fail_zone.value},
            )
            return zone_result

        measurement = self.comparator.measure(letter_spec, strokes)
        if measurement.degenerate:
            self.logger.warning(
                LogEvent.SHAPE_DEGENERATE,
                "Raster without usable content box",
                {
                    **metadata,
                    "reference_bbox": _bbox_dict(measurement.reference_bbox),
                    "user_bbox": _bbox_dict(measurement.user_bbox),
                },
            )
        self.logger.debug(
            LogEvent.SHAPE_SCORED,
            f"{letter_spec.char!r} MSE = {measurement.score:.4f}",
            {**metadata, "mse": round(measurement.score, 4), "threshold": mse_threshold},
        )

        if measurement.score > mse_threshold:
            self.logger.info(
                LogEvent.GRADE_SHAPE_FAILED,
                "Shape differs from reference",
                {**metadata, "mse": round(measurement.score, 4), "threshold": mse_threshold},
            )
            return GradingResult.failure(shape_mismatch_reason(letter_spec), FailZone.WRONG_AREA)

        self.logger.info(
            LogEvent.GRADE_PASSED,
            "Letter accepted",
            {**metadata, "mse": round(measurement.score, 4)},
        )
        return zone_result

    def grade_letter(
        self,
        letter: Union[str, LetterSpec],
        strokes: StrokeSet,
        mode: GradingMode = GradingMode.PRACTICE,
    ) -> GradingResult:
        """Grade by letter character and context, using configured thresholds."""
        spec = letter if isinstance(letter, LetterSpec) else get_letter_spec(letter)
        return self.grade(spec, strokes, self.config.threshold_for(mode))

    def classify(self, letter: Union[str, LetterSpec], strokes: StrokeSet) -> GradingResult:
        """Zone check only."""
        spec = letter if isinstance(letter, LetterSpec) else get_letter_spec(letter)
        return self.classifier.classify(
            spec, strokes.point_cloud(), self.config.canvas_width, self.config.canvas_height
        )


def grade(
    letter_spec: LetterSpec,
    stroke_set: StrokeSet,
    canvas_width: int,
    canvas_height: int,
    mse_threshold: float,
    guides: Optional[NotebookGuides] = None,
    logger: Optional[StructuredLogger] = None,
) -> GradingResult:
    """Full two-stage check with default render settings."""
    config = GradingConfig(
        canvas_wh=(canvas_width, canvas_height),
        guides=guides or DEFAULT_CONFIG.guides,
        practice_mse_threshold=DEFAULT_CONFIG.practice_mse_threshold,
        quiz_mse_threshold=DEFAULT_CONFIG.quiz_mse_threshold,
        render=DEFAULT_CONFIG.render,
    )
    return LetterGrader(config, logger=logger).grade(letter_spec, stroke_set, mse_threshold)
