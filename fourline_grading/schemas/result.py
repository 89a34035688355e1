"""
Grading Result Schema
=====================

Bounded Context: Verdict handed to UI and persistence collaborators.

Design:
- GradingResult is built fresh per grading call and never mutated
- Wire keys follow the drawing app: ``pass``, ``reason``, ``failZone``
- FailZone values are the camelCase tags the UI switches on
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class FailZone(str, Enum):
    """Why an attempt failed, as a coarse category for UI feedback."""
    TOO_LOW = "tooLow"
    TOO_SMALL = "tooSmall"
    EMPTY = "empty"
    WRONG_AREA = "wrongArea"


class LetterStatus(str, Enum):
    """Per-letter progress state written by the persistence collaborator."""
    PASS = "pass"
    ATTEMPT = "attempt"


@dataclass(frozen=True)
class GradingResult:
    """
    Immutable verdict for one grading attempt.

    Attributes:
        passed: True when the drawing is accepted
        reason: Child-facing feedback message
        fail_zone: Failure tag (None when passed)

    Example:
        >>> GradingResult.failure("Too small!", FailZone.TOO_SMALL).to_dict()
        {'pass': False, 'reason': 'Too small!', 'failZone': 'tooSmall'}
    """
    passed: bool
    reason: str
    fail_zone: Optional[FailZone] = None

    def __post_init__(self):
        if self.passed and self.fail_zone is not None:
            raise ValueError("A passing result cannot carry a fail_zone")
        if self.fail_zone is not None:
            object.__setattr__(self, "fail_zone", FailZone(self.fail_zone))

    @classmethod
    def success(cls, reason: str) -> "GradingResult":
        return cls(passed=True, reason=reason)

    @classmethod
    def failure(cls, reason: str, fail_zone: FailZone) -> "GradingResult":
        return cls(passed=False, reason=reason, fail_zone=fail_zone)

    @property
    def letter_status(self) -> LetterStatus:
        """Progress update for this attempt: ``pass`` or ``attempt``."""
        return LetterStatus.PASS if self.passed else LetterStatus.ATTEMPT

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the collaborator wire shape."""
        data: Dict[str, Any] = {"pass": self.passed, "reason": self.reason}
        if self.fail_zone is not None:
            data["failZone"] = self.fail_zone.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GradingResult":
        """Deserialize from the wire shape.

        Raises:
            ValueError: If required keys missing or failZone unknown
        """
        try:
            fail_zone = data.get("failZone")
            return cls(
                passed=bool(data["pass"]),
                reason=str(data["reason"]),
                fail_zone=FailZone(fail_zone) if fail_zone is not None else None,
            )
        except KeyError as e:
            raise ValueError(f"Missing required GradingResult field: {e}")
