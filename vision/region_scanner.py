"""
Region Scanner - Flash Fishing Bot
===================================
Tight bounding box of all pixels matching a color predicate.

find_bounding_box() is the reference scan: it walks every pixel once and
folds matches into a running min/max, never collecting the matches.
find_color_bounding_box() gives the same answer for a ColorRange using
numpy row/column reductions and is the one the control loop calls.
"""

from typing import Callable, Optional

import numpy as np

from config.defaults import ColorRange
from .color_detector import ColorDetector
from .pixel_buffer import BoundingBox, PixelBuffer


def find_bounding_box(buffer: PixelBuffer, predicate: Callable) -> Optional[BoundingBox]:
    """
    Smallest box containing every pixel for which predicate(pixel) is True.

    Args:
        buffer (PixelBuffer): Frame to scan
        predicate (callable): pixel -> bool, pixel is an RGB(A) sequence

    Returns:
        BoundingBox in buffer-local coordinates, or None if nothing matched
    """
    min_x = min_y = max_x = max_y = -1
    found = False

    for y, row in enumerate(buffer.pixels):
        for x, pixel in enumerate(row):
            if not predicate(pixel):
                continue
            if not found:
                min_x, min_y, max_x, max_y = x, y, x, y
                found = True
                continue
            if x < min_x:
                min_x = x
            elif x > max_x:
                max_x = x
            # Rows are visited in order, so y only grows
            max_y = y

    if not found:
        return None
    return BoundingBox(min_x, min_y, max_x, max_y)


def find_color_bounding_box(buffer: PixelBuffer, color_range: ColorRange, detector=None) -> Optional[BoundingBox]:
    """
    Vectorised find_bounding_box() for a ColorRange predicate.

    Args:
        buffer (PixelBuffer): Frame to scan
        color_range (ColorRange): Inclusive RGB bounds
        detector (ColorDetector): Optional detector providing range_mask()

    Returns:
        BoundingBox in buffer-local coordinates, or None if nothing matched
    """
    if detector is None:
        detector = ColorDetector()

    mask = detector.range_mask(buffer.pixels, color_range)
    rows = np.flatnonzero(mask.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(mask.any(axis=0))
    return BoundingBox(int(cols[0]), int(rows[0]), int(cols[-1]), int(rows[-1]))
