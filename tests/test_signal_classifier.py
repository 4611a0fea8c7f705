"""
Test suite for vision/signal_classifier.py
===========================================
Tests for the ui_active size filter and the white-ring bite heuristic.
"""

import numpy as np
import pytest

from vision.pixel_buffer import BoundingBox, PixelBuffer
from vision.signal_classifier import SignalClassifier, iter_ring

RED = (230, 30, 30)
WHITE = (250, 250, 250)

# Red marker 10x10 (pixels 10..20) in a 40x40 frame; ring is 8..22 -> 56 pixels
MARKER = (10, 10, 20, 20)


def ring_coords(x0, y0, x1, y1):
    """Border of an inclusive rectangle, sorted"""
    return sorted(
        (x, y)
        for y in range(y0, y1 + 1)
        for x in range(x0, x1 + 1)
        if x in (x0, x1) or y in (y0, y1)
    )


def make_frame(size=40, marker=MARKER, white_pixels=()):
    pixels = np.zeros((size, size, 3), dtype=np.uint8)
    if marker is not None:
        x0, y0, x1, y1 = marker
        pixels[y0:y1 + 1, x0:x1 + 1] = RED
    for x, y in white_pixels:
        pixels[y, x] = WHITE
    return PixelBuffer(pixels)


def frame_with_white_ring(count):
    ring = ring_coords(8, 8, 22, 22)
    assert len(ring) == 56
    return make_frame(white_pixels=ring[:count])


class TestUiActive:
    """Tests for the bounding box size filter"""

    def test_ten_by_ten_is_active(self):
        """Red in [5,5]-[15,15] of a 20x20 frame"""
        classifier = SignalClassifier()
        result = classifier.classify(make_frame(size=20, marker=(5, 5, 15, 15)))
        assert result.box == BoundingBox(5, 5, 15, 15)
        assert result.ui_active == True

    def test_five_by_five_is_inactive(self):
        classifier = SignalClassifier()
        result = classifier.classify(make_frame(size=20, marker=(5, 5, 10, 10)))
        assert result.ui_active == False
        assert result.bite_detected == False

    def test_threshold_is_strict(self):
        classifier = SignalClassifier()
        assert classifier.is_ui_active(BoundingBox(0, 0, 8, 20)) == False
        assert classifier.is_ui_active(BoundingBox(0, 0, 9, 9)) == True

    def test_both_axes_must_exceed(self):
        classifier = SignalClassifier()
        assert classifier.is_ui_active(BoundingBox(0, 0, 30, 3)) == False

    def test_no_marker_is_inactive(self):
        classifier = SignalClassifier()
        result = classifier.classify(make_frame(marker=None))
        assert result.box is None
        assert result.ui_active == False
        assert classifier.is_ui_active(None) == False

    def test_custom_min_size(self):
        classifier = SignalClassifier(min_box_size=3)
        assert classifier.is_ui_active(BoundingBox(0, 0, 4, 4)) == True


class TestBiteDetection:
    """Tests for the white ring ratio"""

    def test_exactly_half_white_is_not_a_bite(self):
        classifier = SignalClassifier()
        frame = frame_with_white_ring(28)
        assert classifier.ring_white_ratio(frame, BoundingBox(*MARKER)) == pytest.approx(0.5)
        assert classifier.classify(frame).bite_detected == False

    def test_just_over_half_white_is_a_bite(self):
        classifier = SignalClassifier()
        frame = frame_with_white_ring(29)
        assert classifier.ring_white_ratio(frame, BoundingBox(*MARKER)) > 0.5
        assert classifier.classify(frame).bite_detected == True

    def test_eighty_percent_white_is_a_bite(self):
        classifier = SignalClassifier()
        result = classifier.classify(frame_with_white_ring(45))
        assert result.ui_active == True
        assert result.bite_detected == True

    def test_no_white_is_not_a_bite(self):
        classifier = SignalClassifier()
        assert classifier.classify(make_frame()).bite_detected == False

    def test_interior_white_is_ignored(self):
        """White between the marker and the ring does not count"""
        inner = ring_coords(9, 9, 21, 21)
        classifier = SignalClassifier()
        frame = make_frame(white_pixels=inner)
        assert classifier.ring_white_ratio(frame, BoundingBox(*MARKER)) == 0.0
        assert classifier.classify(frame).bite_detected == False

    def test_ring_clipped_to_buffer(self):
        """Marker in the corner: only the in-frame part of the ring is sampled"""
        visible = [(12, y) for y in range(0, 13)] + [(x, 12) for x in range(0, 12)]
        frame = make_frame(size=20, marker=(0, 0, 10, 10), white_pixels=visible)
        classifier = SignalClassifier()
        assert classifier.ring_white_ratio(frame, BoundingBox(0, 0, 10, 10)) == 1.0
        assert classifier.classify(frame).bite_detected == True

    def test_ring_fully_outside_buffer_is_not_a_bite(self):
        frame = make_frame(size=12, marker=(0, 0, 11, 11))
        classifier = SignalClassifier()
        assert classifier.ring_white_ratio(frame, BoundingBox(0, 0, 11, 11)) is None
        result = classifier.classify(frame)
        assert result.ui_active == True
        assert result.bite_detected == False

    def test_bite_requires_active_ui(self):
        """A small marker fully ringed in white is still not a bite"""
        ring = ring_coords(3, 3, 9, 9)
        frame = make_frame(size=20, marker=(5, 5, 7, 7), white_pixels=ring)
        result = SignalClassifier().classify(frame)
        assert result.ui_active == False
        assert result.bite_detected == False


class TestClassifierProperties:
    """Tests for determinism and ring iteration"""

    def test_classify_is_idempotent(self):
        classifier = SignalClassifier()
        frame = frame_with_white_ring(40)
        assert classifier.classify(frame) == classifier.classify(frame)

    def test_iter_ring_visits_border_once(self):
        coords = list(iter_ring(BoundingBox(8, 8, 22, 22)))
        assert len(coords) == len(set(coords)) == 56
        assert sorted(coords) == ring_coords(8, 8, 22, 22)

    def test_iter_ring_degenerate_line(self):
        assert sorted(iter_ring(BoundingBox(0, 0, 2, 0))) == [(0, 0), (1, 0), (2, 0)]


class TestFromSettings:
    """Tests for building the classifier from settings"""

    def test_defaults(self):
        from config.settings_manager import SettingsManager

        classifier = SignalClassifier.from_settings(SettingsManager())
        assert classifier.min_box_size == 8
        assert classifier.ring_margin == 2
        assert classifier.bite_ratio_threshold == 0.5
        assert classifier.detector.red_range.lower == (200, 0, 0)
