"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Design:
- JSON output (one object per record)
- Wraps Python's logging module (thread-safe)
- Contextual metadata (letter, mode, mse, ...)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="grader")
    >>> logger.info(
    ...     event=LogEvent.GRADE_PASSED,
    ...     message="Letter accepted",
    ...     metadata={'letter': 'A', 'mse': 0.12}
    ... )

Output:
    {
        "timestamp": "2026-10-19T09:30:45.123456+00:00",
        "level": "INFO",
        "component": "grader",
        "event": "grade.passed",
        "message": "Letter accepted",
        "metadata": {"letter": "A", "mse": 0.12}
    }
"""

import copy
import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "grader", "cli")
        logger: Underlying Python logger instance
        context: Metadata merged into every record (see ``bind``)
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "grader")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: fourline_grading.<component>)
        """
        self.component = component
        self.context: Dict[str, Any] = {}
        self.logger_name = logger_name or f"fourline_grading.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def bind(self, **context: Any) -> "StructuredLogger":
        """
        Child logger that adds ``context`` to every record's metadata.

        Shares the underlying Python logger (and so its level and handlers).

        Example:
            >>> quiz_logger = logger.bind(mode="quiz", session="s-42")
        """
        child = copy.copy(self)
        child.context = {**self.context, **context}
        return child

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception for ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if self.context or metadata:
            log_entry['metadata'] = {**self.context, **(metadata or {})}

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(
            log_level,
            json.dumps(log_entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded grading config",
            ...     metadata={'path': 'config/grading.yaml'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log WARNING level message."""
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     GradingConfig.from_yaml(path)
            ... except ValueError as e:
            ...     logger.error(
            ...         event=LogEvent.CONFIG_INVALID,
            ...         message="Invalid grading config",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)

    def set_level(self, level: int) -> None:
        """Change logging level dynamically."""
        self.logger.setLevel(level)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter: StructuredLogger already renders JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("grader", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
