# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Centralized settings manager
# Read-only: an optional JSON file overrides config/defaults.py, nothing is written back

import copy
import json
import logging
import os
import threading

from core.exceptions import ConfigurationError
from .defaults import DEFAULT_SETTINGS, ColorRange

logger = logging.getLogger("FishingBot")


def _deep_merge(base, overrides):
    """Return a copy of base with overrides applied recursively (dicts only)"""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class SettingsManager:
    """Centralized settings access for the fishing bot

    Every load_*() returns a section of DEFAULT_SETTINGS with the user's
    overrides applied. A missing settings file simply means "use defaults".
    """

    def __init__(self, settings_file: str = None):
        """Initialize settings manager

        Args:
            settings_file: Path to an optional JSON overrides file
        """
        self.settings_file = settings_file
        self._data = {}  # In-memory cache
        self._lock = threading.Lock()  # Thread-safe access
        self._load_all()

    def _load_all(self):
        """Load overrides from file and merge them over the defaults"""
        overrides = {}
        if self.settings_file and os.path.exists(self.settings_file):
            try:
                with open(self.settings_file, "r", encoding="utf-8") as f:
                    overrides = json.load(f)
                logger.info(f"Settings loaded from: {self.settings_file}")
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Failed to parse settings file {self.settings_file}: {e}"
                ) from e
            if not isinstance(overrides, dict):
                raise ConfigurationError("Settings file must contain a JSON object")
        elif self.settings_file:
            logger.info(f"No settings file at {self.settings_file}, using defaults")

        self._data = _deep_merge(DEFAULT_SETTINGS, overrides)

    def _section(self, name):
        """Copy of a merged top-level section, which must be a JSON object"""
        with self._lock:
            section = copy.deepcopy(self._data.get(name))
        if not isinstance(section, dict):
            raise ConfigurationError(f"Settings section '{name}' must be an object, got {section!r}")
        return section

    # ========================================================================
    # SECTION LOADERS
    # ========================================================================

    def load_color_ranges(self):
        """Load the RED and WHITE color ranges

        Returns:
            dict: {"red": ColorRange, "white": ColorRange}
        """
        raw = self._section("color_ranges")
        return {name: self._to_color_range(name, raw.get(name)) for name in ("red", "white")}

    def load_detection_settings(self):
        """Load box size threshold, ring margin and bite ratio"""
        settings = self._section("detection_settings")
        try:
            settings["min_box_size"] = int(settings["min_box_size"])
            settings["ring_margin"] = int(settings["ring_margin"])
            settings["bite_ratio_threshold"] = float(settings["bite_ratio_threshold"])
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid detection settings: {settings}") from e

        if settings["min_box_size"] < 0 or settings["ring_margin"] < 1:
            raise ConfigurationError(
                "min_box_size must be >= 0 and ring_margin must be >= 1"
            )
        ratio = settings["bite_ratio_threshold"]
        if not 0.0 <= ratio < 1.0:
            raise ConfigurationError(f"bite_ratio_threshold out of range: {ratio}")
        return settings

    def load_timing_settings(self):
        """Load tick, timeout, settle and backoff delays (seconds)"""
        settings = self._section("timing_settings")

        for key, value in settings.items():
            if key == "recast_delay_range":
                continue
            try:
                settings[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"{key} must be a number of seconds, got {value!r}") from e
            if settings[key] < 0:
                raise ConfigurationError(f"{key} must not be negative: {value}")
        if settings["tick_interval"] <= 0:
            raise ConfigurationError("tick_interval must be positive")

        raw_range = settings["recast_delay_range"]
        error = f"recast_delay_range must be [min, max] seconds, got {raw_range!r}"
        if not isinstance(raw_range, (list, tuple)):
            raise ConfigurationError(error)
        try:
            low, high = (float(v) for v in raw_range)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(error) from e
        if low < 0 or high < low:
            raise ConfigurationError(
                f"recast_delay_range must be [min, max] with 0 <= min <= max, got {[low, high]}"
            )
        settings["recast_delay_range"] = (low, high)
        return settings

    def load_input_settings(self):
        """Load mouse button and start-up behaviour"""
        settings = self._section("input_settings")
        if settings.get("mouse_button") not in ("left", "right", "middle"):
            raise ConfigurationError(f"Unknown mouse button: {settings.get('mouse_button')}")
        return settings

    def load_hotkeys(self):
        """Load pause/exit hotkeys (lower-case key names)"""
        hotkeys = self._section("hotkeys")
        return {name: str(key).lower() for name, key in hotkeys.items() if key}

    def get_loop_settings(self):
        """Flat settings dict handed to FishingCycle"""
        settings = {}
        settings.update(self.load_timing_settings())
        settings.update(self.load_input_settings())
        return settings

    @staticmethod
    def _to_color_range(name, raw):
        try:
            lower = tuple(int(v) for v in raw["lower"])
            upper = tuple(int(v) for v in raw["upper"])
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid color range '{name}': {raw}") from e

        if len(lower) != 3 or len(upper) != 3:
            raise ConfigurationError(f"Color range '{name}' needs 3 channels per bound")
        for lo, hi in zip(lower, upper):
            if not 0 <= lo <= hi <= 255:
                raise ConfigurationError(
                    f"Color range '{name}' bounds must satisfy 0 <= lower <= upper <= 255"
                )
        return ColorRange(lower, upper)
