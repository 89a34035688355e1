"""
Grading Schemas
===============

Value types exchanged with collaborators.

Public API
----------
    BBox: Content bounding box (pixels)
    FailZone: Failure tag enum
    GradingResult: Immutable verdict
    LetterStatus: Per-letter progress state
"""

from .common import BBox
from .result import FailZone, GradingResult, LetterStatus

__all__ = [
    "BBox",
    "FailZone",
    "GradingResult",
    "LetterStatus",
]
