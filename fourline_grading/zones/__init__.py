"""
Zones Layer
===========

Bounded Context: Letter positioning on the four-line notebook.

Responsibilities:
- Letter catalog (52 LetterSpecs, category table)
- Band rules as data (per category)
- Zone classification of a PointCloud
- NO rasterization, NO shape comparison
"""

from fourline_grading.zones.catalog import (
    LETTER_CATALOG,
    LetterCase,
    LetterCatalogError,
    LetterCategory,
    LetterSpec,
    build_catalog,
    get_letter_spec,
    validate_catalog,
)
from fourline_grading.zones.classifier import MIN_POINTS, ZoneClassifier, classify
from fourline_grading.zones.rules import CATEGORY_RULES, CategoryRules
from fourline_grading.zones.stats import CloudStats

__all__ = [
    "CATEGORY_RULES",
    "CategoryRules",
    "CloudStats",
    "LETTER_CATALOG",
    "LetterCase",
    "LetterCatalogError",
    "LetterCategory",
    "LetterSpec",
    "MIN_POINTS",
    "ZoneClassifier",
    "build_catalog",
    "classify",
    "get_letter_spec",
    "validate_catalog",
]
