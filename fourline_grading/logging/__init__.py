"""
Structured Logging for Fourline Grading
=======================================

Bounded Context: Observability

JSON-structured logging for grading decisions.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from fourline_grading.logging import StructuredLogger, LogEvent
    >>> logger = StructuredLogger(component="grader")
    >>> logger.info(
    ...     event=LogEvent.GRADE_ZONE_FAILED,
    ...     message="Zone check failed",
    ...     metadata={'letter': 'g', 'fail_zone': 'wrongArea'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
