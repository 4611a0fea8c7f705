"""
Vision Module - Flash Fishing Bot
==================================
Screen capture and color signal detection.

Modules:
    - screen_capture: Region capture with mss
    - pixel_buffer: PixelBuffer frame and BoundingBox types
    - color_detector: Inclusive RGB range checks
    - region_scanner: Bounding box of matching pixels
    - signal_classifier: ui_active / bite_detected from a frame

Usage:
    from vision import ScreenCapture, SignalClassifier

    capture = ScreenCapture({"x": 800, "y": 400, "width": 300, "height": 60})
    result = SignalClassifier().classify(capture.capture_region())
"""

from .pixel_buffer import PixelBuffer, BoundingBox
from .color_detector import ColorDetector
from .region_scanner import find_bounding_box, find_color_bounding_box
from .signal_classifier import SignalClassifier, ClassificationResult
from .screen_capture import ScreenCapture

__all__ = [
    'PixelBuffer',
    'BoundingBox',
    'ColorDetector',
    'find_bounding_box',
    'find_color_bounding_box',
    'SignalClassifier',
    'ClassificationResult',
    'ScreenCapture',
]
