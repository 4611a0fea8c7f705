# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Services Module - Stats Manager
# In-memory session counters; nothing is written to disk

import logging
import threading
from datetime import datetime

logger = logging.getLogger("FishingBot")

COUNTERS = (
    "casts",
    "clicks",
    "rounds",
    "capture_failures",
    "injection_failures",
)


class StatsManager:
    """
    Session statistics for one bot run

    Casts and clicks go through the same mouse primitive but are counted
    separately.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.session_start = None
        self._counts = dict.fromkeys(COUNTERS, 0)

    def start_session(self):
        """Reset all counters and stamp the session start"""
        with self._lock:
            self.session_start = datetime.now()
            self._counts = dict.fromkeys(COUNTERS, 0)
        logger.info(f"Stats session started at {self.session_start:%H:%M:%S}")

    def _increment(self, name):
        with self._lock:
            self._counts[name] += 1
            return self._counts[name]

    def record_cast(self):
        return self._increment("casts")

    def record_click(self):
        return self._increment("clicks")

    def record_round(self):
        return self._increment("rounds")

    def record_capture_failure(self):
        return self._increment("capture_failures")

    def record_injection_failure(self):
        return self._increment("injection_failures")

    def get_session_stats(self):
        """Snapshot of all counters plus session duration in seconds"""
        with self._lock:
            stats = dict(self._counts)
            start = self.session_start
        stats["duration"] = (datetime.now() - start).total_seconds() if start else 0.0
        return stats

    def format_summary(self):
        stats = self.get_session_stats()
        minutes, seconds = divmod(int(stats["duration"]), 60)
        hours, minutes = divmod(minutes, 60)
        return (
            f"Session {hours:02d}:{minutes:02d}:{seconds:02d} | "
            f"rounds {stats['rounds']} | casts {stats['casts']} | clicks {stats['clicks']} | "
            f"capture errors {stats['capture_failures']} | click errors {stats['injection_failures']}"
        )
