"""
Notebook Visualizer Module
==========================

Debug overlay of a grading attempt: the four guide lines, the ghost
reference letter, the user's strokes, the user bbox and the verdict.

Design:
- Stateless rendering (pure functions over a BGR frame)
- Guide positions come from the same NotebookGuides the grader uses
- Uses supervision drawing utilities

Dependencies:
- supervision (draw utilities, Color, Point, Rect)
- numpy (arrays)
"""

import numpy as np
import supervision as sv
from typing import Optional

from fourline_grading.geometry.guides import GuideLine
from fourline_grading.geometry.strokes import StrokeSet
from fourline_grading.rendering.raster import RasterRenderer, blank_canvas
from fourline_grading.schemas.result import GradingResult
from fourline_grading.zones.catalog import LetterSpec


class NotebookVisualizer:
    """
    Stateless visualizer for grading attempts.

    Usage:
        visualizer = NotebookVisualizer(RasterRenderer(config))
        frame = visualizer.draw_attempt(spec, strokes, result)
        cv2.imwrite("attempt.png", frame)
    """

    def __init__(
        self,
        renderer: RasterRenderer,
        guide_color: sv.Color = sv.Color.from_hex("#9CA3AF"),
        baseline_color: sv.Color = sv.Color.from_hex("#EF4444"),
        ink_color: sv.Color = sv.Color.from_hex("#1E1B4B"),
        error_ink_color: sv.Color = sv.Color.from_hex("#EF4444"),
        ghost_color: sv.Color = sv.Color(r=100, g=150, b=255),
        bbox_color: sv.Color = sv.Color.from_hex("#22C55E"),
        guide_thickness: int = 2,
        ink_width: int = 10,
        dot_radius: int = 3,
        dash_length: int = 10,
        dash_gap: int = 7,
        ghost_opacity: float = 0.3,
        text_scale: float = 0.5,
        text_thickness: int = 1,
        text_padding: int = 6,
    ):
        """
        Initialize visualizer with style configuration.

        Args:
            renderer: Renderer sharing the grader's canvas geometry
            guide_color: L1, L2 and L4 line color
            baseline_color: L3 line color
            ink_color: Stroke color for passing / ungraded attempts
            error_ink_color: Stroke color for failed attempts
            ghost_color: Tint of the reference letter
            bbox_color: User bbox outline color
            ink_width: Live-drawing stroke width
            dot_radius: Live-drawing tap radius
            dash_length, dash_gap: L2 dash pattern (pixels)
            ghost_opacity: Opacity of the reference letter (0-1)
        """
        self.renderer = renderer
        self.guide_color = guide_color
        self.baseline_color = baseline_color
        self.ink_color = ink_color
        self.error_ink_color = error_ink_color
        self.ghost_color = ghost_color
        self.bbox_color = bbox_color
        self.guide_thickness = guide_thickness
        self.ink_width = ink_width
        self.dot_radius = dot_radius
        self.dash_length = dash_length
        self.dash_gap = dash_gap
        self.ghost_opacity = ghost_opacity
        self.text_scale = text_scale
        self.text_thickness = text_thickness
        self.text_padding = text_padding

    def blank_frame(self) -> np.ndarray:
        width, height = self.renderer.config.canvas_wh
        return np.full((height, width, 3), 255, dtype=np.uint8)

    def draw_guides(self, frame: np.ndarray) -> np.ndarray:
        """Draw L1..L4: solid grey, dashed grey, red baseline, solid grey."""
        config = self.renderer.config
        width = config.canvas_width

        for line in GuideLine:
            y = int(round(config.guides.pixel_y(line, config.canvas_height)))
            if line is GuideLine.L2:
                frame = self._draw_dashed_line(frame, y, width)
                continue

            color = self.baseline_color if line is GuideLine.L3 else self.guide_color
            frame = sv.draw_line(
                scene=frame,
                start=sv.Point(x=0, y=y),
                end=sv.Point(x=width, y=y),
                color=color,
                thickness=self.guide_thickness,
            )
        return frame

    def _draw_dashed_line(self, frame: np.ndarray, y: int, width: int) -> np.ndarray:
        step = self.dash_length + self.dash_gap
        for x in range(0, width, step):
            frame = sv.draw_line(
                scene=frame,
                start=sv.Point(x=x, y=y),
                end=sv.Point(x=min(x + self.dash_length, width), y=y),
                color=self.guide_color,
                thickness=self.guide_thickness,
            )
        return frame

    def draw_ghost_letter(self, frame: np.ndarray, letter_spec: LetterSpec) -> np.ndarray:
        """Blend the reference glyph into the frame as a translucent tint."""
        mask = self.renderer.draw_reference(blank_canvas(self.renderer.config.canvas_wh), letter_spec)
        alpha = ((255 - mask.astype(np.float32)) / 255.0 * self.ghost_opacity)[..., None]
        tint = np.array(self.ghost_color.as_bgr(), dtype=np.float32)
        blended = frame.astype(np.float32) * (1 - alpha) + tint * alpha
        return blended.round().astype(np.uint8)

    def draw_strokes(self, frame: np.ndarray, strokes: StrokeSet, failed: bool = False) -> np.ndarray:
        color = self.error_ink_color if failed else self.ink_color
        return self.renderer.draw_strokes(
            frame,
            strokes,
            color=color.as_bgr(),
            ink_width=self.ink_width,
            dot_radius=self.dot_radius,
        )

    def draw_user_bbox(self, frame: np.ndarray, strokes: StrokeSet) -> np.ndarray:
        bbox = self.renderer.stroke_bbox(strokes)
        if bbox is None:
            return frame
        x0, y0, x1, y1 = bbox.pixel_edges()
        return sv.draw_rectangle(
            scene=frame,
            rect=sv.Rect(x=x0, y=y0, width=x1 - x0, height=y1 - y0),
            color=self.bbox_color,
            thickness=1,
        )

    def draw_verdict(self, frame: np.ndarray, result: GradingResult) -> np.ndarray:
        if result.passed:
            label = "PASS"
        elif result.fail_zone is not None:
            label = f"FAIL ({result.fail_zone.value})"
        else:
            label = "FAIL"
        width, height = self.renderer.config.canvas_wh
        return sv.draw_text(
            scene=frame,
            text=label,
            text_anchor=sv.Point(x=width // 2, y=height - 20),
            text_color=sv.Color(r=255, g=255, b=255),
            text_scale=self.text_scale,
            text_thickness=self.text_thickness,
            text_padding=self.text_padding,
            background_color=self.ink_color if result.passed else self.error_ink_color,
        )

    def draw_attempt(
        self,
        letter_spec: LetterSpec,
        strokes: StrokeSet,
        result: Optional[GradingResult] = None,
        show_guide: bool = True,
        show_bbox: bool = True,
    ) -> np.ndarray:
        """
        Compose the full overlay for one attempt.

        Returns:
            HxWx3 BGR frame
        """
        frame = self.draw_guides(self.blank_frame())
        if show_guide:
            frame = self.draw_ghost_letter(frame, letter_spec)

        failed = result is not None and not result.passed
        frame = self.draw_strokes(frame, strokes, failed=failed)

        if show_bbox:
            frame = self.draw_user_bbox(frame, strokes)
        if result is not None:
            frame = self.draw_verdict(frame, result)
        return frame
