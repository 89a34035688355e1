"""
Configuration schema for the letter grader.

Defines canvas geometry, the shared notebook guide lines, rasterization
parameters and the shape-mismatch thresholds for each grading context.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Tuple
import yaml

from fourline_grading.geometry.guides import NotebookGuides


class GradingMode(str, Enum):
    """Grading context; quiz is stricter than untimed practice."""
    PRACTICE = "practice"
    QUIZ = "quiz"


@dataclass(frozen=True)
class RenderConfig:
    """
    Rasterization parameters for the shape check.

    Font sizes are fractions of canvas height; the reference glyph sits on
    the L3 guide line (baseline).
    """

    grid_size: int = 20
    user_ink_width: int = 24
    user_dot_radius: int = 15
    user_bbox_padding: int = 10
    luminance_threshold: int = 128
    capital_font_ratio: float = 0.58
    lowercase_font_ratio: float = 0.45
    font_stroke_ratio: float = 0.08  # bold weight relative to font size
    curve_samples: int = 8  # points per quadratic smoothing segment

    def __post_init__(self):
        """Validate render configuration."""
        if not 2 <= self.grid_size <= 256:
            raise ValueError(f"grid_size must be in [2, 256], got {self.grid_size}")

        if self.user_ink_width < 1:
            raise ValueError(f"user_ink_width must be >= 1, got {self.user_ink_width}")

        if self.user_dot_radius < 1:
            raise ValueError(f"user_dot_radius must be >= 1, got {self.user_dot_radius}")

        if self.user_bbox_padding < 0:
            raise ValueError(f"user_bbox_padding must be >= 0, got {self.user_bbox_padding}")

        if not 1 <= self.luminance_threshold <= 255:
            raise ValueError(
                f"luminance_threshold must be in [1, 255], got {self.luminance_threshold}"
            )

        for name in ("capital_font_ratio", "lowercase_font_ratio"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")

        if not 0.0 < self.font_stroke_ratio < 0.5:
            raise ValueError(f"font_stroke_ratio must be in (0, 0.5), got {self.font_stroke_ratio}")

        if self.curve_samples < 1:
            raise ValueError(f"curve_samples must be >= 1, got {self.curve_samples}")


@dataclass(frozen=True)
class GradingConfig:
    """
    Main configuration for grading.

    Loaded from YAML and validated at startup. Immutable after
    construction (frozen dataclass).
    """

    canvas_wh: Tuple[int, int] = (400, 400)  # (width, height)
    guides: NotebookGuides = field(default_factory=NotebookGuides)
    practice_mse_threshold: float = 0.32
    quiz_mse_threshold: float = 0.28
    render: RenderConfig = field(default_factory=RenderConfig)

    def __post_init__(self):
        """Validate grading configuration."""
        width, height = self.canvas_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"canvas_wh must have positive dimensions, got {self.canvas_wh}"
            )
        if width > 4096 or height > 4096:
            raise ValueError(
                f"canvas_wh dimensions too large (max 4096x4096), got {self.canvas_wh}"
            )

        for name in ("practice_mse_threshold", "quiz_mse_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0.0, 1.0], got {value}")

    @property
    def canvas_width(self) -> int:
        return self.canvas_wh[0]

    @property
    def canvas_height(self) -> int:
        return self.canvas_wh[1]

    def threshold_for(self, mode: GradingMode) -> float:
        """Shape-mismatch MSE threshold for a grading context."""
        if GradingMode(mode) is GradingMode.QUIZ:
            return self.quiz_mse_threshold
        return self.practice_mse_threshold

    @classmethod
    def from_dict(cls, data: dict) -> "GradingConfig":
        """Build from a parsed YAML mapping; missing keys keep defaults."""
        data = data or {}
        known = {"canvas_wh", "guides", "practice_mse_threshold", "quiz_mse_threshold", "render"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown grading config keys: {sorted(unknown)}")

        kwargs = {}
        if "canvas_wh" in data:
            kwargs["canvas_wh"] = tuple(int(v) for v in data["canvas_wh"])
        if "guides" in data:
            kwargs["guides"] = NotebookGuides.from_dict(data["guides"] or {})
        if "render" in data:
            kwargs["render"] = RenderConfig(**(data["render"] or {}))
        for name in ("practice_mse_threshold", "quiz_mse_threshold"):
            if name in data:
                kwargs[name] = float(data[name])

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "GradingConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            canvas_wh: [400, 400]  # [width, height]

            guides:
              l1: 0.185
              l2: 0.395
              l3: 0.605
              l4: 0.815

            practice_mse_threshold: 0.32
            quiz_mse_threshold: 0.28

            render:
              grid_size: 20
              user_ink_width: 24
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Grading config must be a mapping, got {type(data).__name__}")

        return cls.from_dict(data or {})


DEFAULT_CONFIG = GradingConfig()
