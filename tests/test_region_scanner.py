"""
Test suite for vision/region_scanner.py
========================================
Tests for bounding box search over a frame.
"""

import numpy as np
import pytest

from config.defaults import RED_RANGE
from vision.color_detector import ColorDetector
from vision.pixel_buffer import BoundingBox, PixelBuffer
from vision.region_scanner import find_bounding_box, find_color_bounding_box

RED = (230, 30, 30)


def make_buffer(width, height, red_boxes=(), channels=3):
    """Black frame with inclusive red rectangles (x0, y0, x1, y1)"""
    pixels = np.zeros((height, width, channels), dtype=np.uint8)
    for x0, y0, x1, y1 in red_boxes:
        pixels[y0:y1 + 1, x0:x1 + 1, :3] = RED
    return PixelBuffer(pixels)


def scan_both(buffer):
    detector = ColorDetector()
    streamed = find_bounding_box(buffer, detector.is_red)
    vectorised = find_color_bounding_box(buffer, RED_RANGE, detector)
    assert streamed == vectorised
    return streamed


class TestBoundingBox:
    """Tests for the minimal bounding box"""

    def test_single_region_exact_box(self):
        buffer = make_buffer(20, 20, [(5, 5, 15, 15)])
        assert scan_both(buffer) == BoundingBox(5, 5, 15, 15)

    def test_no_match_returns_none(self):
        buffer = make_buffer(20, 20)
        assert scan_both(buffer) is None

    def test_single_pixel(self):
        buffer = make_buffer(10, 10, [(3, 7, 3, 7)])
        box = scan_both(buffer)
        assert box == BoundingBox(3, 7, 3, 7)
        assert box.width == 0 and box.height == 0

    def test_edge_pixels_included(self):
        buffer = make_buffer(12, 9, [(0, 0, 0, 0), (11, 8, 11, 8)])
        assert scan_both(buffer) == BoundingBox(0, 0, 11, 8)

    def test_separate_regions_enclosed(self):
        buffer = make_buffer(30, 30, [(2, 20, 4, 22), (18, 3, 25, 6)])
        assert scan_both(buffer) == BoundingBox(2, 3, 25, 22)

    def test_box_inside_buffer(self):
        buffer = make_buffer(16, 8, [(0, 0, 15, 7)])
        box = scan_both(buffer)
        assert buffer.contains(box.min_x, box.min_y)
        assert buffer.contains(box.max_x, box.max_y)

    def test_rgba_buffer(self):
        buffer = make_buffer(10, 10, [(1, 2, 6, 8)], channels=4)
        assert scan_both(buffer) == BoundingBox(1, 2, 6, 8)

    def test_custom_predicate(self):
        buffer = make_buffer(10, 10, [(4, 4, 5, 5)])
        box = find_bounding_box(buffer, lambda pixel: pixel[0] == 0)
        assert box == BoundingBox(0, 0, 9, 9)


class TestPixelBuffer:
    """Tests for frame helpers used by the scanner"""

    def test_buffer_is_read_only(self):
        buffer = make_buffer(4, 4)
        with pytest.raises(ValueError):
            buffer.pixels[0, 0] = (1, 2, 3)

    def test_source_array_not_shared(self):
        pixels = np.zeros((2, 2, 3), dtype=np.uint8)
        buffer = PixelBuffer(pixels)
        pixels[0, 0] = RED
        assert buffer.pixel(0, 0) == (0, 0, 0)

    def test_from_bgra_swaps_channels(self):
        bgra = np.zeros((1, 1, 4), dtype=np.uint8)
        bgra[0, 0] = (10, 20, 30, 255)
        buffer = PixelBuffer.from_bgra(bgra, left=100, top=50)
        assert buffer.pixel(0, 0) == (30, 20, 10)
        assert (buffer.left, buffer.top) == (100, 50)

    def test_to_screen_offsets_box(self):
        buffer = PixelBuffer(np.zeros((5, 5, 3), dtype=np.uint8), left=100, top=40)
        assert buffer.to_screen(BoundingBox(1, 2, 3, 4)) == BoundingBox(101, 42, 103, 44)
        assert buffer.to_screen(None) is None

    def test_rejects_flat_array(self):
        with pytest.raises(ValueError):
            PixelBuffer(np.zeros((5, 5), dtype=np.uint8))
