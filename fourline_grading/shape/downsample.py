"""
Downsampler
===========

Crop a raster to its content box and rescale it to a small square grid,
discarding absolute position and scale.
"""

import cv2
import numpy as np

from fourline_grading.schemas.common import BBox

GRID_SIZE = 20
WHITE = 255


def downsample(buffer: np.ndarray, bbox: BBox, grid_size: int = GRID_SIZE) -> np.ndarray:
    """
    Resample ``buffer`` inside ``bbox`` to a ``grid_size`` square grid.

    The box is stretched to the whole grid (scale, not crop-then-pad).
    Parts of the box outside the buffer read as white paper.

    Args:
        buffer: HxW uint8 luminance raster
        bbox: Content box in buffer pixels
        grid_size: Output resolution

    Returns:
        grid_size x grid_size uint8 luminance grid
    """
    height, width = buffer.shape[:2]
    x0, y0, x1, y1 = bbox.pixel_edges()

    crop = buffer[max(y0, 0):min(y1, height), max(x0, 0):min(x1, width)]
    if crop.size == 0:
        return np.full((grid_size, grid_size), WHITE, dtype=np.uint8)

    top, left = max(0, -y0), max(0, -x0)
    bottom, right = max(0, y1 - height), max(0, x1 - width)
    if top or bottom or left or right:
        crop = cv2.copyMakeBorder(crop, top, bottom, left, right, cv2.BORDER_CONSTANT, value=WHITE)

    return cv2.resize(crop, (grid_size, grid_size), interpolation=cv2.INTER_AREA)
