"""
Mouse Controller - Flash Fishing Bot
=====================================
The single input primitive of the bot: a click at the current cursor
position. Casting the line and reeling on a bite both use it.
"""

import time

import pyautogui

from core.exceptions import InjectionError

VALID_BUTTONS = ("left", "right", "middle")


class MouseController:
    """
    Click injection using pyautogui.

    The cursor is never moved; the game reacts to the button wherever the
    mouse currently is.
    """

    def __init__(self, button="right", hold_delay=0.05):
        """
        Args:
            button (str): 'left', 'right' or 'middle' (default: 'right')
            hold_delay (float): Seconds between press and release
        """
        if button not in VALID_BUTTONS:
            raise ValueError(f"Unknown mouse button: {button}")
        self.button = button
        self.hold_delay = hold_delay

    def click(self, button=None):
        """
        Press and release a mouse button.

        Args:
            button (str): Override the default button

        Raises:
            InjectionError: If pyautogui fails (failsafe corner, no display...)
        """
        button = button or self.button
        try:
            pyautogui.mouseDown(button=button)
            time.sleep(self.hold_delay)
            pyautogui.mouseUp(button=button)
        except Exception as e:
            raise InjectionError(f"{button} click failed: {e}") from e

    def position(self):
        """Current cursor position as (x, y)."""
        x, y = pyautogui.position()
        return int(x), int(y)
