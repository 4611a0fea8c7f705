"""
Color Detector - Flash Fishing Bot
===================================
Pixel color range checks for the minigame marker and the bite flash.

All colors are in RGB format (not BGR). Range bounds are inclusive.
"""

import numpy as np

from config.defaults import ColorRange, RED_RANGE, WHITE_RANGE


class ColorDetector:
    """
    Color range matching utilities.

    Holds the RED (marker) and WHITE (flash) ranges; both default to the
    values in config.defaults and can be overridden from settings.
    """

    def __init__(self, red_range: ColorRange = RED_RANGE, white_range: ColorRange = WHITE_RANGE):
        self.red_range = red_range
        self.white_range = white_range

    def is_color_in_range(self, color, min_color, max_color):
        """
        Check if a color is within a range.

        Args:
            color (tuple): (R, G, B) or (R, G, B, A) color to check
            min_color (tuple): (R, G, B) minimum bounds
            max_color (tuple): (R, G, B) maximum bounds

        Returns:
            bool: True if every channel is within [min, max], False otherwise
        """
        if color is None or min_color is None or max_color is None:
            return False

        try:
            return (min_color[0] <= color[0] <= max_color[0] and
                    min_color[1] <= color[1] <= max_color[1] and
                    min_color[2] <= color[2] <= max_color[2])
        except (IndexError, TypeError):
            return False

    def matches(self, color, color_range: ColorRange):
        return self.is_color_in_range(color, color_range.lower, color_range.upper)

    def is_red(self, color):
        return self.matches(color, self.red_range)

    def is_white(self, color):
        return self.matches(color, self.white_range)

    def range_mask(self, pixels, color_range: ColorRange):
        """
        Boolean mask of pixels inside color_range.

        Args:
            pixels (numpy.ndarray): (height, width, 3|4) RGB(A) array
            color_range (ColorRange): Inclusive bounds

        Returns:
            numpy.ndarray: (height, width) bool array
        """
        rgb = pixels[:, :, :3]
        lower = np.asarray(color_range.lower, dtype=rgb.dtype)
        upper = np.asarray(color_range.upper, dtype=rgb.dtype)
        return np.all((rgb >= lower) & (rgb <= upper), axis=2)
