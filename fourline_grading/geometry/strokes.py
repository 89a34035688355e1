"""
Stroke Capture Types
====================

Immutable representations of what the drawing surface captured for one
grading attempt.

Design:
- Frozen dataclasses, coordinates stored as tuples (hashable, immutable)
- Fail-fast validation (empty stroke, non-finite coordinates)
- PointCloud is derived from a StrokeSet, never built independently by
  the grader, so both checks always see the same attempt
"""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence, Tuple

StrokePoint = Tuple[float, float]


def _coerce_point(raw: Any) -> StrokePoint:
    """Accept ``{"x": .., "y": ..}`` mappings or ``(x, y)`` pairs."""
    if isinstance(raw, dict):
        try:
            x, y = raw["x"], raw["y"]
        except KeyError as e:
            raise ValueError(f"Missing point coordinate: {e}")
    else:
        try:
            x, y = raw
        except (TypeError, ValueError):
            raise ValueError(f"Point must be an (x, y) pair, got {raw!r}")

    try:
        point = (float(x), float(y))
    except (TypeError, ValueError):
        raise ValueError(f"Point coordinates must be numbers, got {raw!r}")
    if not all(math.isfinite(v) for v in point):
        raise ValueError(f"Point coordinates must be finite, got {point}")
    return point


@dataclass(frozen=True)
class Stroke:
    """
    Ordered points between one pointer-down and pointer-up.

    A single-point stroke is a tap and renders as a dot.

    Attributes:
        points: Tuple of (x, y) canvas-pixel coordinates
    """

    points: Tuple[StrokePoint, ...]

    def __post_init__(self):
        """Normalize and validate points."""
        points = tuple(_coerce_point(p) for p in self.points)
        if not points:
            raise ValueError("Stroke must contain at least one point")
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_dot(self) -> bool:
        return len(self.points) == 1

    def as_array(self) -> np.ndarray:
        """Nx2 float array of the stroke points."""
        return np.asarray(self.points, dtype=np.float64).reshape(-1, 2)


@dataclass(frozen=True, eq=False)
class PointCloud:
    """
    Flattened points of a StrokeSet (stroke boundaries dropped).

    Attributes:
        points: Read-only Nx2 float array
    """

    points: np.ndarray

    def __post_init__(self):
        points = np.asarray(self.points, dtype=np.float64).reshape(-1, 2)
        points.flags.writeable = False
        object.__setattr__(self, "points", points)

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def xs(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def ys(self) -> np.ndarray:
        return self.points[:, 1]

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "PointCloud":
        coerced = [_coerce_point(p) for p in points]
        return cls(points=np.asarray(coerced, dtype=np.float64).reshape(-1, 2))


@dataclass(frozen=True)
class StrokeSet:
    """
    All strokes of one grading attempt, in capture order.

    May be empty (nothing drawn yet); the zone check turns that into an
    ``empty`` verdict.
    """

    strokes: Tuple[Stroke, ...] = field(default_factory=tuple)

    def __post_init__(self):
        strokes = tuple(
            s if isinstance(s, Stroke) else Stroke(points=tuple(s))
            for s in self.strokes
        )
        object.__setattr__(self, "strokes", strokes)

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self):
        return iter(self.strokes)

    @property
    def point_count(self) -> int:
        return sum(len(s) for s in self.strokes)

    def point_cloud(self) -> PointCloud:
        """Flatten every stroke into a single PointCloud."""
        if not self.strokes:
            return PointCloud(points=np.empty((0, 2), dtype=np.float64))
        return PointCloud(points=np.vstack([s.as_array() for s in self.strokes]))

    @classmethod
    def from_json_like(cls, data: Sequence[Sequence[Any]]) -> "StrokeSet":
        """
        Build from the drawing surface's capture format.

        Args:
            data: List of strokes; each stroke is a list of ``{"x", "y"}``
                  objects or ``[x, y]`` pairs

        Raises:
            ValueError: If a stroke is empty or a point is malformed
        """
        if not isinstance(data, (list, tuple)):
            raise ValueError(f"Stroke data must be a list of strokes, got {type(data).__name__}")
        for index, stroke in enumerate(data):
            if not isinstance(stroke, (list, tuple)):
                raise ValueError(f"Stroke {index} must be a list of points, got {type(stroke).__name__}")
        return cls(strokes=tuple(Stroke(points=tuple(stroke)) for stroke in data))

    def to_json_like(self) -> list:
        return [[{"x": x, "y": y} for x, y in s.points] for s in self.strokes]
