"""
Signal Classifier - Flash Fishing Bot
======================================
Turns a captured frame into the two signals the state machine needs:

    ui_active      the red marker box is larger than min_box_size on both axes
    bite_detected  more than bite_ratio_threshold of the ring around the
                   marker (box grown by ring_margin) is white

Only the border ring of the grown box is sampled, never its interior.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .color_detector import ColorDetector
from .pixel_buffer import BoundingBox, PixelBuffer
from .region_scanner import find_color_bounding_box

logger = logging.getLogger("FishingBot")


@dataclass(frozen=True)
class ClassificationResult:
    ui_active: bool
    bite_detected: bool
    box: Optional[BoundingBox] = None


def iter_ring(box: BoundingBox) -> Iterator[Tuple[int, int]]:
    """Yield each (x, y) on the border of box exactly once, corners included."""
    for x in range(box.min_x, box.max_x + 1):
        yield x, box.min_y
        if box.max_y != box.min_y:
            yield x, box.max_y
    for y in range(box.min_y + 1, box.max_y):
        yield box.min_x, y
        if box.max_x != box.min_x:
            yield box.max_x, y


class SignalClassifier:
    """Derives ui_active / bite_detected from a PixelBuffer."""

    def __init__(
        self,
        detector: Optional[ColorDetector] = None,
        min_box_size: int = 8,
        ring_margin: int = 2,
        bite_ratio_threshold: float = 0.5,
    ):
        self.detector = detector or ColorDetector()
        self.min_box_size = min_box_size
        self.ring_margin = ring_margin
        self.bite_ratio_threshold = bite_ratio_threshold

    @classmethod
    def from_settings(cls, settings_manager):
        """Build a classifier from SettingsManager color ranges and detection settings"""
        ranges = settings_manager.load_color_ranges()
        detection = settings_manager.load_detection_settings()
        return cls(
            detector=ColorDetector(red_range=ranges["red"], white_range=ranges["white"]),
            min_box_size=int(detection["min_box_size"]),
            ring_margin=int(detection["ring_margin"]),
            bite_ratio_threshold=float(detection["bite_ratio_threshold"]),
        )

    def find_marker(self, buffer: PixelBuffer) -> Optional[BoundingBox]:
        return find_color_bounding_box(buffer, self.detector.red_range, self.detector)

    def is_ui_active(self, box: Optional[BoundingBox]) -> bool:
        if box is None:
            return False
        return box.width > self.min_box_size and box.height > self.min_box_size

    def ring_white_ratio(self, buffer: PixelBuffer, box: BoundingBox) -> Optional[float]:
        """
        Fraction of in-buffer ring pixels that are white.

        Returns:
            float in [0, 1], or None if no ring pixel lies inside the buffer
        """
        total = 0
        white = 0
        for x, y in iter_ring(box.expanded(self.ring_margin)):
            if not buffer.contains(x, y):
                continue
            total += 1
            if self.detector.is_white(buffer.pixel(x, y)):
                white += 1

        if total == 0:
            return None
        return white / total

    def is_surrounded_by_white(self, buffer: PixelBuffer, box: BoundingBox) -> bool:
        ratio = self.ring_white_ratio(buffer, box)
        if ratio is None:
            return False
        return ratio > self.bite_ratio_threshold

    def classify(self, buffer: PixelBuffer) -> ClassificationResult:
        """Scan for the red marker and evaluate both signals."""
        box = self.find_marker(buffer)
        ui_active = self.is_ui_active(box)
        bite = ui_active and self.is_surrounded_by_white(buffer, box)
        return ClassificationResult(ui_active=ui_active, bite_detected=bite, box=box)
