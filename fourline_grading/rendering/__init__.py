"""
Rendering Layer
===============

Bounded Context: Rasterization and drawing.

Responsibilities:
- Rasterize reference glyphs and user strokes for shape comparison
- Content bounding boxes (pixel scan / point cloud)
- Debug overlays of attempts (guides, ghost letter, strokes, verdict)

Non-responsibilities:
- Zone rules (handled by zones)
- Scoring (handled by shape)

Design:
- Stateless drawing functions
- opencv for rasterization, supervision for overlays
"""

from fourline_grading.rendering.raster import Raster, RasterRenderer, smooth_stroke
from fourline_grading.rendering.visualizer import NotebookVisualizer

__all__ = [
    "NotebookVisualizer",
    "Raster",
    "RasterRenderer",
    "smooth_stroke",
]
