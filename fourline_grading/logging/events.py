"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (component.action)

Event Naming Convention:
    <component>.<action>

    component: grade, shape, config, error

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, metadata.letter, metadata.mse
    | filter event = "grade.shape_failed"
    | stats count() by metadata.letter
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - grade.*: Orchestrator decisions
    - shape.*: Shape comparison measurements
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Grading Events ==========
    GRADE_STARTED = "grade.started"
    """Grading attempt received."""

    GRADE_PASSED = "grade.passed"
    """Attempt passed both checks."""

    GRADE_ZONE_FAILED = "grade.zone_failed"
    """Attempt rejected by the zone check (shape check skipped)."""

    GRADE_SHAPE_FAILED = "grade.shape_failed"
    """Attempt passed the zone check but the shape differs."""

    # ========== Shape Events ==========
    SHAPE_SCORED = "shape.scored"
    """Shape dissimilarity measured."""

    SHAPE_DEGENERATE = "shape.degenerate"
    """A raster had no usable bounding box; scored as 1.0."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Grading configuration loaded and validated."""

    # ========== Error Events ==========
    CONFIG_INVALID = "error.config_invalid"
    """Configuration failed validation."""
