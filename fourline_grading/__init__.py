"""
Fourline Letter Grader v1.0
===========================

Bounded Context: Grading single handwritten Latin letters on a
four-line practice notebook.

Design Philosophy:
- Separation of Concerns: Geometry, Zones, Rendering, Shape separated
- Two checks: cheap positional rules first, pixel shape comparison second
- Every bad drawing becomes a result with feedback, never an exception
- Guide lines are one shared value (rendering and rules agree by construction)

Architecture:

    fourline_grading/
    ├── geometry/          # Guide lines, strokes, point clouds (immutable)
    ├── zones/             # Letter catalog, band rules, ZoneClassifier
    ├── rendering/         # RasterRenderer, NotebookVisualizer
    ├── shape/             # Downsampler, ShapeComparator (MSE)
    ├── schemas/           # BBox, GradingResult, FailZone
    ├── logging/           # Structured JSON logging
    ├── config.py          # GradingConfig (YAML)
    └── grader.py          # Orchestration

Usage:

    from fourline_grading import (
        GradingConfig, GradingMode, LetterGrader, StrokeSet, get_letter_spec, classify,
    )

    strokes = StrokeSet.from_json_like([[{"x": 150, "y": 80}, {"x": 200, "y": 220}]])

    # 1. Zone check only
    result = classify(get_letter_spec("A"), strokes.point_cloud(), 400, 400)

    # 2. Full grading
    grader = LetterGrader(GradingConfig.from_yaml("config/grading.yaml"))
    result = grader.grade_letter("A", strokes, mode=GradingMode.QUIZ)
    result.to_dict()  # {'pass': False, 'reason': '...', 'failZone': 'empty'}
"""

# Geometry Layer (immutable)
from fourline_grading.geometry import (
    DEFAULT_GUIDES,
    GuideLine,
    NotebookGuides,
    PointCloud,
    Stroke,
    StrokeSet,
)

# Schemas
from fourline_grading.schemas import BBox, FailZone, GradingResult, LetterStatus

# Zones Layer
from fourline_grading.zones import (
    LETTER_CATALOG,
    LetterCase,
    LetterCatalogError,
    LetterCategory,
    LetterSpec,
    ZoneClassifier,
    classify,
    get_letter_spec,
)

# Rendering Layer
from fourline_grading.rendering import NotebookVisualizer, RasterRenderer

# Shape Layer
from fourline_grading.shape import ShapeComparator, compare_shapes, downsample

# Configuration + Orchestration
from fourline_grading.config import GradingConfig, GradingMode, RenderConfig
from fourline_grading.grader import LetterGrader, grade

__all__ = [
    # Geometry
    "DEFAULT_GUIDES",
    "GuideLine",
    "NotebookGuides",
    "PointCloud",
    "Stroke",
    "StrokeSet",
    # Schemas
    "BBox",
    "FailZone",
    "GradingResult",
    "LetterStatus",
    # Zones
    "LETTER_CATALOG",
    "LetterCase",
    "LetterCatalogError",
    "LetterCategory",
    "LetterSpec",
    "ZoneClassifier",
    "classify",
    "get_letter_spec",
    # Rendering
    "NotebookVisualizer",
    "RasterRenderer",
    # Shape
    "ShapeComparator",
    "compare_shapes",
    "downsample",
    # Config + Orchestration
    "GradingConfig",
    "GradingMode",
    "RenderConfig",
    "LetterGrader",
    "grade",
]

__version__ = "1.0.0"
