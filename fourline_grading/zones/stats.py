"""
Point-cloud statistics used by the band rules.
"""

import numpy as np
from dataclasses import dataclass

from fourline_grading.geometry.strokes import PointCloud


@dataclass(frozen=True, eq=False)
class CloudStats:
    """
    Extent of a PointCloud in raw pixels plus normalized y-ratios.

    Attributes:
        count: Number of points
        min_y, max_y: Vertical extent (pixels)
        width, height: Bounding box size (pixels)
        canvas_width, canvas_height: Canvas size (pixels)
        y_ratios: Every point's y divided by canvas height
    """

    count: int
    min_y: float
    max_y: float
    width: float
    height: float
    canvas_width: int
    canvas_height: int
    y_ratios: np.ndarray

    @classmethod
    def from_cloud(cls, cloud: PointCloud, canvas_width: int, canvas_height: int) -> "CloudStats":
        """Compute statistics; the cloud must hold at least one point."""
        if len(cloud) == 0:
            raise ValueError("Cannot compute statistics of an empty point cloud")
        if canvas_width <= 0 or canvas_height <= 0:
            raise ValueError(f"Canvas size must be positive, got {(canvas_width, canvas_height)}")

        xs, ys = cloud.xs, cloud.ys
        min_y, max_y = float(ys.min()), float(ys.max())
        y_ratios = ys / canvas_height
        y_ratios.flags.writeable = False
        return cls(
            count=len(cloud),
            min_y=min_y,
            max_y=max_y,
            width=float(xs.max() - xs.min()),
            height=max_y - min_y,
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            y_ratios=y_ratios,
        )

    @property
    def min_y_ratio(self) -> float:
        return self.min_y / self.canvas_height

    @property
    def max_y_ratio(self) -> float:
        return self.max_y / self.canvas_height

    @property
    def width_ratio(self) -> float:
        return self.width / self.canvas_width

    @property
    def height_ratio(self) -> float:
        return self.height / self.canvas_height

    def fraction_below(self, level: float) -> float:
        """Share of points lower on the page than ``level`` (y > level)."""
        return float(np.count_nonzero(self.y_ratios > level)) / self.count

    def fraction_above(self, level: float) -> float:
        """Share of points higher on the page than ``level`` (y < level)."""
        return float(np.count_nonzero(self.y_ratios < level)) / self.count

    def fraction_between(self, top: float, bottom: float) -> float:
        """Share of points with top <= y <= bottom."""
        inside = (self.y_ratios >= top) & (self.y_ratios <= bottom)
        return float(np.count_nonzero(inside)) / self.count
