"""
Raster Renderer Module
======================

Rasterizes the reference glyph and the user's strokes into same-sized
grayscale buffers (white background, black ink) for shape comparison.

Design:
- Stateless rendering (fresh buffer per call, owned by the caller)
- Reference bbox from a pixel scan (precise)
- User bbox from the point cloud plus padding (cheap, no pixel scan)
- Degenerate boxes are reported as ``bbox=None``, never raised

Dependencies:
- opencv (putText, polylines, circle)
- numpy (buffers)
"""

import cv2
import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from fourline_grading.config import DEFAULT_CONFIG, GradingConfig
from fourline_grading.geometry.guides import GuideLine
from fourline_grading.geometry.strokes import StrokeSet
from fourline_grading.schemas.common import BBox
from fourline_grading.zones.catalog import LetterSpec

INK = 0
PAPER = 255

FONT_FACE = cv2.FONT_HERSHEY_DUPLEX
# Cap height of a display face as a share of its font size
CAP_HEIGHT_RATIO = 0.7

# Letters drawn from strokes instead of FONT_FACE, whose capital I is a
# bare bar narrower than the capital size gate. Points are in cap-height
# units, origin at the top-left of the glyph box.
STROKE_GLYPHS = {
    "I": (
        ((0.0, 0.0), (0.5, 0.0)),
        ((0.25, 0.0), (0.25, 1.0)),
        ((0.0, 1.0), (0.5, 1.0)),
    ),
}


@dataclass(frozen=True, eq=False)
class Raster:
    """
    A rendered canvas and its content bounding box.

    Attributes:
        buffer: HxW uint8 luminance (255 = paper, 0 = ink)
        bbox: Tight content box, or None when degenerate/empty
    """

    buffer: np.ndarray
    bbox: Optional[BBox]

    @property
    def is_degenerate(self) -> bool:
        return self.bbox is None


def smooth_stroke(points: np.ndarray, samples: int = 8) -> np.ndarray:
    """
    Quadratic-midpoint smoothing of a polyline.

    Each input point becomes the control point of a quadratic curve ending
    at the midpoint to the next one; the path closes with a straight
    segment to the last point.

    Args:
        points: Nx2 array (N >= 2)
        samples: Points sampled per curve segment

    Returns:
        Mx2 float array of the smoothed path
    """
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(points) < 2:
        return points.copy()

    t = np.linspace(0.0, 1.0, samples + 1)[1:, None]
    path = [points[:1]]
    start = points[0]
    for prev, curr in zip(points[:-1], points[1:]):
        end = (prev + curr) / 2.0
        curve = (1 - t) ** 2 * start + 2 * (1 - t) * t * prev + t ** 2 * end
        path.append(curve)
        start = end
    path.append(points[-1:])
    return np.vstack(path)


def blank_canvas(canvas_wh: Tuple[int, int]) -> np.ndarray:
    width, height = canvas_wh
    return np.full((height, width), PAPER, dtype=np.uint8)


class RasterRenderer:
    """
    Renders reference and user rasters with shared canvas geometry.

    Usage:
        renderer = RasterRenderer(config)
        reference = renderer.render_reference(get_letter_spec("A"))
        user = renderer.render_user(strokes)
    """

    def __init__(self, config: GradingConfig = DEFAULT_CONFIG):
        self.config = config
        self.render = config.render

    def glyph_metrics(self, letter_spec: LetterSpec) -> Tuple[int, int]:
        """
        Cap height and stroke thickness (pixels) for a letter's case.

        Returns:
            (cap_height, thickness)
        """
        ratio = (
            self.render.capital_font_ratio
            if letter_spec.is_uppercase
            else self.render.lowercase_font_ratio
        )
        font_px = ratio * self.config.canvas_height
        thickness = max(1, int(round(font_px * self.render.font_stroke_ratio)))
        cap_height = max(1, int(round(font_px * CAP_HEIGHT_RATIO)))
        return cap_height, thickness

    def reference_font(self, letter_spec: LetterSpec) -> Tuple[float, int]:
        """
        Font scale and stroke thickness for a letter's case.

        Returns:
            (font_scale, thickness) for cv2.putText
        """
        cap_height, thickness = self.glyph_metrics(letter_spec)
        scale = cv2.getFontScaleFromHeight(FONT_FACE, cap_height, thickness)
        return scale, thickness

    def baseline_y(self) -> int:
        return int(round(self.config.guides.pixel_y(GuideLine.L3, self.config.canvas_height)))

    def draw_reference(self, canvas: np.ndarray, letter_spec: LetterSpec, color=INK) -> np.ndarray:
        """Draw the glyph centered horizontally on the L3 baseline."""
        if letter_spec.char in STROKE_GLYPHS:
            return self.draw_stroke_glyph(canvas, letter_spec, color)

        scale, thickness = self.reference_font(letter_spec)
        (text_width, _), _ = cv2.getTextSize(letter_spec.char, FONT_FACE, scale, thickness)
        origin = (int(round((self.config.canvas_width - text_width) / 2)), self.baseline_y())
        cv2.putText(canvas, letter_spec.char, origin, FONT_FACE, scale, color, thickness, cv2.LINE_AA)
        return canvas

    def draw_stroke_glyph(self, canvas: np.ndarray, letter_spec: LetterSpec, color=INK) -> np.ndarray:
        """Draw a letter from STROKE_GLYPHS, scaled to the cap height."""
        cap_height, thickness = self.glyph_metrics(letter_spec)
        strokes = STROKE_GLYPHS[letter_spec.char]
        glyph_width = max(x for stroke in strokes for x, _ in stroke) * cap_height
        left = (self.config.canvas_width - glyph_width) / 2
        top = self.baseline_y() - cap_height

        polylines = [
            np.array(
                [(left + x * cap_height, top + y * cap_height) for x, y in stroke]
            ).round().astype(np.int32).reshape(-1, 1, 2)
            for stroke in strokes
        ]
        cv2.polylines(canvas, polylines, False, color, thickness, cv2.LINE_AA)
        return canvas

    def draw_strokes(
        self,
        canvas: np.ndarray,
        strokes: StrokeSet,
        color=INK,
        ink_width: Optional[int] = None,
        dot_radius: Optional[int] = None,
    ) -> np.ndarray:
        """Draw every stroke as a thick rounded polyline; taps as discs."""
        ink_width = ink_width or self.render.user_ink_width
        dot_radius = dot_radius or self.render.user_dot_radius

        for stroke in strokes:
            if stroke.is_dot:
                x, y = stroke.points[0]
                cv2.circle(canvas, (int(round(x)), int(round(y))), dot_radius, color, -1, cv2.LINE_AA)
                continue

            path = smooth_stroke(stroke.as_array(), self.render.curve_samples)
            polyline = np.round(path).astype(np.int32).reshape(-1, 1, 2)
            cv2.polylines(canvas, [polyline], False, color, ink_width, cv2.LINE_AA)
        return canvas

    def render_reference(self, letter_spec: LetterSpec) -> Raster:
        """Render the reference glyph and scan for its dark-pixel bbox."""
        buffer = self.draw_reference(blank_canvas(self.config.canvas_wh), letter_spec)
        return Raster(buffer=buffer, bbox=self.ink_bbox(buffer))

    def render_user(self, strokes: StrokeSet) -> Raster:
        """Render the user's strokes; bbox comes from the point cloud."""
        buffer = self.draw_strokes(blank_canvas(self.config.canvas_wh), strokes)
        return Raster(buffer=buffer, bbox=self.stroke_bbox(strokes))

    def ink_bbox(self, buffer: np.ndarray) -> Optional[BBox]:
        """Box spanned by pixels darker than the luminance threshold."""
        ys, xs = np.nonzero(buffer < self.render.luminance_threshold)
        if xs.size == 0:
            return None
        return BBox.from_edges(int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def stroke_bbox(self, strokes: StrokeSet) -> Optional[BBox]:
        """Point-cloud extent plus padding, clamped to the canvas."""
        cloud = strokes.point_cloud()
        if len(cloud) == 0:
            return None

        pad = self.render.user_bbox_padding
        width, height = self.config.canvas_wh
        x0 = max(0.0, float(cloud.xs.min()) - pad)
        y0 = max(0.0, float(cloud.ys.min()) - pad)
        x1 = min(float(width), float(cloud.xs.max()) + pad)
        y1 = min(float(height), float(cloud.ys.max()) + pad)
        return BBox.from_edges(x0, y0, x1, y1)
