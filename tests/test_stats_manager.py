"""
Test suite for services/stats_manager.py
=========================================
Tests for in-memory session counters.
"""

from services.stats_manager import StatsManager


class TestStatsManager:
    """Tests for counters and summary"""

    def test_counters_start_at_zero(self):
        stats = StatsManager().get_session_stats()
        assert stats["casts"] == 0
        assert stats["clicks"] == 0
        assert stats["duration"] == 0.0

    def test_casts_and_clicks_counted_separately(self):
        stats = StatsManager()
        stats.start_session()
        stats.record_cast()
        stats.record_click()
        stats.record_click()

        snapshot = stats.get_session_stats()
        assert snapshot["casts"] == 1
        assert snapshot["clicks"] == 2

    def test_start_session_resets(self):
        stats = StatsManager()
        stats.record_round()
        stats.record_capture_failure()
        stats.start_session()
        snapshot = stats.get_session_stats()
        assert snapshot["rounds"] == 0
        assert snapshot["capture_failures"] == 0

    def test_summary_mentions_counters(self):
        stats = StatsManager()
        stats.start_session()
        stats.record_injection_failure()
        summary = stats.format_summary()
        assert summary.startswith("Session 00:00:0")
        assert "click errors 1" in summary
