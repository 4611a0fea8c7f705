"""
Input Module - Flash Fishing Bot
=================================
Low-level input: click injection and the global hotkey hook.

Modules:
    - mouse_controller: MouseController.click() via pyautogui
    - hotkey_listener: HotkeyListener (pynput) toggling the pause flag

Usage:
    from input.mouse_controller import MouseController
    from input.hotkey_listener import HotkeyListener

    mouse = MouseController(button="right")
    mouse.click()

Submodules are imported explicitly: pyautogui and pynput need a display
at import time.
"""

__all__ = [
    'mouse_controller',
    'hotkey_listener',
]
