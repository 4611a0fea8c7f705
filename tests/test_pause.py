"""
Test suite for core/pause.py
=============================
Tests for the shared pause flag.
"""

import threading

from core.pause import PauseController


class TestPauseController:
    """Tests for toggle / set / notification"""

    def test_starts_unpaused(self):
        assert PauseController().is_paused() == False

    def test_toggle_flips(self):
        pause = PauseController()
        assert pause.toggle() == True
        assert pause.is_paused() == True
        assert pause.toggle() == False
        assert pause.is_paused() == False

    def test_on_change_called_with_new_value(self):
        seen = []
        pause = PauseController(on_change=seen.append)
        pause.toggle()
        pause.toggle()
        assert seen == [True, False]

    def test_set_paused_only_notifies_on_change(self):
        seen = []
        pause = PauseController(on_change=seen.append)
        assert pause.set_paused(False) == False
        assert pause.set_paused(True) == True
        assert pause.set_paused(True) == False
        assert seen == [True]

    def test_callback_error_does_not_break_toggle(self):
        def broken(paused):
            raise RuntimeError("display gone")

        pause = PauseController(on_change=broken)
        assert pause.toggle() == True
        assert pause.is_paused() == True

    def test_callback_runs_without_lock_held(self):
        """Reading the flag from the callback must not deadlock"""
        reads = []
        pause = PauseController()
        pause._on_change = lambda paused: reads.append(pause.is_paused())
        pause.toggle()
        assert reads == [True]

    def test_concurrent_toggles(self):
        pause = PauseController()
        threads = [threading.Thread(target=lambda: [pause.toggle() for _ in range(100)]) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        # 400 toggles -> back to the initial state
        assert pause.is_paused() == False
