"""
Common Schema Types
===================

Bounded Context: Shared Data Structures

Design Principles:
- Immutability: frozen=True prevents accidental mutation
- Validation: Constructor validates invariants
- Serialization: to_dict() for JSON log metadata

Types:
- BBox: Content bounding box in canvas pixels
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Optional


@dataclass(frozen=True)
class BBox:
    """
    Immutable bounding box representation.

    Coordinates are absolute canvas pixels, origin top-left.

    Attributes:
        x: Left edge x-coordinate (pixels)
        y: Top edge y-coordinate (pixels)
        width: Box width (pixels)
        height: Box height (pixels)

    Invariants:
        - width > 0
        - height > 0

    Degenerate extents are never represented as a BBox; use
    ``BBox.from_edges`` which returns None for them.

    Example:
        >>> BBox.from_edges(10, 20, 60, 90)
        BBox(x=10, y=20, width=50, height=70)
        >>> BBox.from_edges(10, 20, 10, 90) is None
        True
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Validate invariants."""
        if self.width <= 0:
            raise ValueError(f"BBox width must be > 0, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"BBox height must be > 0, got {self.height}")

    @classmethod
    def from_edges(cls, x0: float, y0: float, x1: float, y1: float) -> Optional["BBox"]:
        """Build from edges; None when the box has no positive area."""
        width, height = x1 - x0, y1 - y0
        if width <= 0 or height <= 0:
            return None
        return cls(x=x0, y=y0, width=width, height=height)

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    @property
    def x1(self) -> float:
        return self.x + self.width

    @property
    def y1(self) -> float:
        return self.y + self.height

    def pixel_edges(self) -> tuple:
        """Integer (x0, y0, x1, y1) covering the box, outward-rounded."""
        return (
            int(math.floor(self.x)),
            int(math.floor(self.y)),
            int(math.ceil(self.x1)),
            int(math.ceil(self.y1)),
        )

    @property
    def area(self) -> float:
        """Bounding box area in square pixels."""
        return self.width * self.height
