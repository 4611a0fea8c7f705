# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Validation utilities for the capture region

import logging

from core.exceptions import ConfigurationError

logger = logging.getLogger('FishingBot')


def roi_from_corners(corner1, corner2):
    """Build an area dict from two opposite corners in any order

    Args:
        corner1: (x, y) first corner
        corner2: (x, y) opposite corner

    Returns:
        dict with 'x', 'y', 'width', 'height'
    """
    x1, y1 = int(corner1[0]), int(corner1[1])
    x2, y2 = int(corner2[0]), int(corner2[1])
    return {
        'x': min(x1, x2),
        'y': min(y1, y2),
        'width': abs(x2 - x1),
        'height': abs(y2 - y1),
    }


def validate_area_coords(coords, screen_width=None, screen_height=None):
    """Validate area coordinates dict with x, y, width, height

    Screen bounds are only checked when given.
    """
    if coords is None:
        return False
    if not isinstance(coords, dict):
        return False

    required_keys = ['x', 'y', 'width', 'height']
    if not all(key in coords for key in required_keys):
        return False

    try:
        x, y = int(coords['x']), int(coords['y'])
        w, h = int(coords['width']), int(coords['height'])
        if w <= 0 or h <= 0:
            return False
        if screen_width is not None and (x < 0 or (x + w) > screen_width):
            return False
        if screen_height is not None and (y < 0 or (y + h) > screen_height):
            return False
        return True
    except (ValueError, TypeError):
        return False


def require_valid_roi(coords, screen_width=None, screen_height=None):
    """Raise ConfigurationError unless coords is a usable capture region"""
    if not validate_area_coords(coords, screen_width, screen_height):
        logger.error(f"Invalid capture region: {coords}")
        raise ConfigurationError(
            f"Capture region must have positive width and height inside the screen, got {coords}"
        )
    return coords
