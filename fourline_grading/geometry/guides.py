"""
Notebook Guide Lines
====================

The four horizontal rulings of the practice notebook, expressed as
fractions of the canvas height.

Design:
- One immutable value shared by rendering and grading
- Zone tolerances are written relative to a guide line (``Level``),
  never as raw literals
- Validation at construction (fail fast)

Layout (top to bottom):

    L1 ───────────  capital top
    L2 - - - - - -  x-height top
    L3 ───────────  baseline (red)
    L4 ───────────  descender bottom
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GuideLine(str, Enum):
    """Identifier of one notebook ruling."""
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"
    L4 = "l4"


@dataclass(frozen=True)
class NotebookGuides:
    """
    Immutable guide-line positions (fractions of canvas height).

    Attributes:
        l1: Capital-letter top line
        l2: Lowercase x-height line
        l3: Baseline
        l4: Descender line

    Invariants:
        0 < l1 < l2 < l3 < l4 < 1
    """

    l1: float = 0.185
    l2: float = 0.395
    l3: float = 0.605
    l4: float = 0.815

    def __post_init__(self):
        """Validate ordering."""
        positions = self.as_tuple()
        if not all(0.0 < p < 1.0 for p in positions):
            raise ValueError(f"Guide positions must be in (0, 1), got {positions}")
        if not all(a < b for a, b in zip(positions, positions[1:])):
            raise ValueError(f"Guide positions must be strictly increasing, got {positions}")

    def position(self, line: GuideLine) -> float:
        """Fractional position of a guide line."""
        return getattr(self, GuideLine(line).value)

    def pixel_y(self, line: GuideLine, canvas_height: int) -> float:
        """Guide line position in canvas pixels."""
        return self.position(line) * canvas_height

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.l1, self.l2, self.l3, self.l4)

    def to_dict(self) -> dict:
        return {line.value: self.position(line) for line in GuideLine}

    @classmethod
    def from_dict(cls, data: dict) -> "NotebookGuides":
        """
        Build guides from a mapping with keys l1..l4.

        Missing keys keep their default position.
        """
        unknown = set(data) - {line.value for line in GuideLine}
        if unknown:
            raise ValueError(f"Unknown guide line keys: {sorted(unknown)}")
        return cls(**{key: float(value) for key, value in data.items()})


@dataclass(frozen=True)
class Level:
    """
    A vertical position defined relative to a guide line.

    Example:
        >>> Level(GuideLine.L2, 0.06).resolve(NotebookGuides())
        0.455...
    """

    line: GuideLine
    offset: float = 0.0

    def resolve(self, guides: NotebookGuides) -> float:
        return guides.position(self.line) + self.offset

    def __str__(self) -> str:
        if self.offset == 0:
            return self.line.name
        sign = "+" if self.offset > 0 else "-"
        return f"{self.line.name}{sign}{abs(self.offset):g}"


DEFAULT_GUIDES = NotebookGuides()
