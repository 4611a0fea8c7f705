"""
Pixel Buffer - Flash Fishing Bot
=================================
Captured frame and bounding box types shared by the vision modules.

All pixel arrays are RGB(A) channel order (mss BGRA frames are converted
by ScreenCapture), indexed [y, x, channel].
"""

from typing import NamedTuple, Optional

import numpy as np


class BoundingBox(NamedTuple):
    """
    Axis-aligned box given by the coordinates of its extreme pixels.

    Coordinates are inclusive, so a box covering pixels 5..15 on both axes
    has width == height == 10.
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    def expanded(self, margin):
        """Box grown by margin pixels on every side (may leave the buffer)."""
        return BoundingBox(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    def offset(self, dx, dy):
        return BoundingBox(self.min_x + dx, self.min_y + dy, self.max_x + dx, self.max_y + dy)


class PixelBuffer:
    """
    One captured frame of the region of interest.

    The underlying array is made read-only; a buffer is classified once
    and then dropped.
    """

    __slots__ = ("pixels", "left", "top")

    def __init__(self, pixels, left=0, top=0):
        """
        Args:
            pixels (numpy.ndarray): (height, width, 3|4) RGB(A) array
            left (int): Screen X of pixel [0, 0]
            top (int): Screen Y of pixel [0, 0]
        """
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] < 3:
            raise ValueError(f"Expected (height, width, 3|4) array, got shape {pixels.shape}")
        if pixels.flags.writeable:
            pixels = pixels.copy()
            pixels.flags.writeable = False
        self.pixels = pixels
        self.left = int(left)
        self.top = int(top)

    @classmethod
    def from_bgra(cls, bgra, left=0, top=0):
        """Build a buffer from an mss BGRA array (drops alpha, swaps to RGB)."""
        bgra = np.asarray(bgra)
        return cls(bgra[:, :, 2::-1], left, top)

    @property
    def width(self):
        return self.pixels.shape[1]

    @property
    def height(self):
        return self.pixels.shape[0]

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel(self, x, y):
        """(R, G, B) at buffer-local (x, y)."""
        value = self.pixels[y, x]
        return int(value[0]), int(value[1]), int(value[2])

    def to_screen(self, box: Optional[BoundingBox]) -> Optional[BoundingBox]:
        """Translate a buffer-local box to screen coordinates."""
        if box is None:
            return None
        return box.offset(self.left, self.top)

    def __repr__(self):
        return f"PixelBuffer({self.width}x{self.height} @ {self.left},{self.top})"
