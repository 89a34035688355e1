"""
Geometry Layer
==============

Bounded Context: Canvas geometry and captured strokes.

Responsibilities:
- Notebook guide lines (shared by rendering and grading)
- Stroke / StrokeSet / PointCloud value types
- NO grading, NO rendering

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from fourline_grading.geometry.guides import (
    DEFAULT_GUIDES,
    GuideLine,
    Level,
    NotebookGuides,
)
from fourline_grading.geometry.strokes import PointCloud, Stroke, StrokePoint, StrokeSet

__all__ = [
    "DEFAULT_GUIDES",
    "GuideLine",
    "Level",
    "NotebookGuides",
    "PointCloud",
    "Stroke",
    "StrokePoint",
    "StrokeSet",
]
