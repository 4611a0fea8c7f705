# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Default configuration values for the flash fishing bot
# Every tunable constant lives here; settings files only override these

from typing import NamedTuple, Tuple


class ColorRange(NamedTuple):
    """Inclusive per-channel RGB interval (lower, upper)."""

    lower: Tuple[int, int, int]
    upper: Tuple[int, int, int]

    def contains(self, pixel):
        """True if pixel's R, G and B all lie in [lower, upper]. Alpha is ignored."""
        return (
            self.lower[0] <= pixel[0] <= self.upper[0]
            and self.lower[1] <= pixel[1] <= self.upper[1]
            and self.lower[2] <= pixel[2] <= self.upper[2]
        )


# Signal marker of the minigame bar
RED_RANGE = ColorRange(lower=(200, 0, 0), upper=(255, 100, 100))
# Flash drawn around the marker on a bite
WHITE_RANGE = ColorRange(lower=(220, 220, 220), upper=(255, 255, 255))

DEFAULT_SETTINGS = {
    "color_ranges": {
        "red": {"lower": list(RED_RANGE.lower), "upper": list(RED_RANGE.upper)},
        "white": {"lower": list(WHITE_RANGE.lower), "upper": list(WHITE_RANGE.upper)},
    },
    "detection_settings": {
        "min_box_size": 8,  # px, width AND height must exceed this
        "ring_margin": 2,  # px the red box is grown by before sampling the ring
        "bite_ratio_threshold": 0.5,  # strict: ratio must be greater
    },
    "timing_settings": {
        "tick_interval": 0.05,
        "idle_timeout": 180.0,  # 3 minutes without a round -> re-cast
        "cast_settle_delay": 2.0,
        "click_settle_delay": 0.5,
        "capture_backoff": 1.0,
        # Extra random wait before each cast, [min, max] seconds. 0/0 disables it.
        "recast_delay_range": [0.0, 0.0],
    },
    "input_settings": {
        "mouse_button": "right",
        "cast_on_start": True,
    },
    "hotkeys": {
        "pause": "p",
        "exit": "f12",
    },
}
