"""
Screen Capture - Flash Fishing Bot
===================================
Region capture using a single, lazily created mss instance.

The mss instance is reused across ticks and recreated after a failure.
Failures surface as CaptureError so the control loop can back off.
"""

import logging
import threading

import mss
import numpy as np

from core.exceptions import CaptureError
from .pixel_buffer import PixelBuffer

logger = logging.getLogger("FishingBot")


class ScreenCapture:
    """
    Captures the region of interest as a PixelBuffer.

    All coordinates are absolute screen coordinates; regions are area
    dicts with 'x', 'y', 'width', 'height' keys.
    """

    def __init__(self, area_coords=None):
        """
        Args:
            area_coords (dict): Default region to capture
        """
        self.area_coords = area_coords

        # Thread-safe mss instance creation
        self._mss_instance = None
        self._mss_lock = threading.Lock()

    def _get_mss_instance(self):
        """Get or create mss instance (thread-safe)."""
        with self._mss_lock:
            if self._mss_instance is None:
                self._mss_instance = mss.mss()
            return self._mss_instance

    def _reset_mss_instance(self):
        """Reset mss instance (thread-safe)."""
        with self._mss_lock:
            if self._mss_instance is not None:
                try:
                    self._mss_instance.close()
                except Exception as e:
                    logger.debug(f"[ScreenCapture] mss close failed: {e}")
                self._mss_instance = None

    def capture_region(self, area_coords=None):
        """
        Capture a screen region.

        Args:
            area_coords (dict): Region to capture (default: self.area_coords)

        Returns:
            PixelBuffer: RGB frame whose origin is the region's top-left corner

        Raises:
            CaptureError: If no region is set or the grab fails
        """
        coords = area_coords or self.area_coords
        if not coords:
            raise CaptureError("No capture area configured")

        x, y = coords["x"], coords["y"]
        width, height = coords["width"], coords["height"]
        monitor = {"left": x, "top": y, "width": width, "height": height}

        # mss keeps per-thread DC handles; one retry after a reset covers
        # an instance created on another thread
        max_retries = 2
        for attempt in range(max_retries):
            try:
                screenshot = self._get_mss_instance().grab(monitor)
                return PixelBuffer.from_bgra(np.array(screenshot), left=x, top=y)
            except AttributeError as e:
                if "srcdc" not in str(e) and "_local" not in str(e):
                    raise
                logger.debug(
                    f"[ScreenCapture] Thread-local DC error (attempt {attempt+1}/{max_retries}), resetting mss..."
                )
                self._reset_mss_instance()
                if attempt == max_retries - 1:
                    raise CaptureError(
                        f"capture failed at ({x},{y},{width},{height}): {e}"
                    ) from e
            except Exception as e:
                self._reset_mss_instance()
                raise CaptureError(
                    f"capture failed at ({x},{y},{width},{height}): {e}"
                ) from e

        raise CaptureError(f"capture failed at ({x},{y},{width},{height})")

    def cleanup(self):
        """Close the mss instance if it exists."""
        self._reset_mss_instance()
