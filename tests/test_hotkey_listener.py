"""
Test suite for input/hotkey_listener.py
========================================
Tests for key name parsing and hotkey dispatch (no real keyboard hook).
"""

import pytest

pytest.importorskip("pynput.keyboard")

from core.pause import PauseController
from input.hotkey_listener import HotkeyListener, key_name


class CharKey:
    def __init__(self, char):
        self.char = char


class SpecialKey:
    def __init__(self, name):
        self.name = name

    def __str__(self):
        return f"Key.{self.name}"


class TestKeyName:
    """Tests for key normalisation"""

    def test_char_key_lowercased(self):
        assert key_name(CharKey("P")) == "p"

    def test_special_key(self):
        assert key_name(SpecialKey("f12")) == "f12"

    def test_char_none_falls_back_to_str(self):
        key = CharKey(None)
        assert key_name(key) == str(key).lower().replace("key.", "")


class TestDispatch:
    """Tests for on_press handling"""

    def test_pause_key_toggles(self):
        pause = PauseController()
        listener = HotkeyListener(pause, {"pause": "p", "exit": "f12"})

        listener.on_press(CharKey("p"))
        assert pause.is_paused() == True
        listener.on_press(CharKey("P"))
        assert pause.is_paused() == False

    def test_exit_key_calls_callback(self):
        exits = []
        pause = PauseController()
        listener = HotkeyListener(pause, {"pause": "p", "exit": "f12"}, on_exit=lambda: exits.append(1))

        listener.on_press(SpecialKey("f12"))
        assert exits == [1]
        assert pause.is_paused() == False

    def test_other_keys_ignored(self):
        pause = PauseController()
        listener = HotkeyListener(pause, {"pause": "p"})
        listener.on_press(CharKey("x"))
        listener.on_press(SpecialKey("space"))
        assert pause.is_paused() == False

    def test_handler_error_is_contained(self):
        def broken():
            raise RuntimeError("boom")

        listener = HotkeyListener(PauseController(), {"exit": "q"}, on_exit=broken)
        listener.on_press(CharKey("q"))

    def test_describe(self):
        listener = HotkeyListener(PauseController(), {"pause": "p", "exit": "f12"})
        assert listener.describe() == "pause=[P], exit=[F12]"

    def test_stop_without_start(self):
        HotkeyListener(PauseController()).stop()
