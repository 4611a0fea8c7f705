"""
Hotkey Listener - Flash Fishing Bot
====================================
Global keyboard hook (pynput) that drives the pause flag.

pynput delivers key presses on its own thread. The listener never
touches the control loop directly: the pause key toggles the shared
PauseController and the exit key calls the on_exit callback.
"""

import logging

from pynput.keyboard import Listener

logger = logging.getLogger("FishingBot")


def key_name(key):
    """Normalise a pynput key to a lower-case name ('p', 'f12', 'space')."""
    try:
        return key.char.lower() if hasattr(key, "char") else str(key).lower().replace("key.", "")
    except AttributeError:
        # KeyCode without a printable char
        return str(key).lower().replace("key.", "")


class HotkeyListener:
    """Maps global key presses to pause toggles and shutdown requests."""

    def __init__(self, pause_controller, hotkeys=None, on_exit=None):
        """
        Args:
            pause_controller: PauseController toggled by the pause key
            hotkeys (dict): {'pause': 'p', 'exit': 'f12'}
            on_exit (callable): Called when the exit key is pressed
        """
        self.pause_controller = pause_controller
        self.hotkeys = hotkeys or {"pause": "p"}
        self.on_exit = on_exit
        self.listener = None

    def on_press(self, key):
        """Handle a key press (runs on the pynput thread)"""
        name = key_name(key)
        try:
            if name == self.hotkeys.get("pause"):
                self.pause_controller.toggle()
            elif name == self.hotkeys.get("exit") and self.on_exit is not None:
                logger.info(f"Exit hotkey [{name.upper()}] pressed")
                self.on_exit()
        except Exception as e:
            # An exception here would kill the pynput thread
            logger.error(f"Hotkey handler error: {e}", exc_info=True)

    def start(self):
        """Start the global hook on its own thread"""
        if self.listener is not None:
            return
        self.listener = Listener(on_press=self.on_press)
        self.listener.daemon = True
        self.listener.start()
        logger.info(f"Hotkeys active: {self.describe()}")

    def stop(self):
        """Stop the hook; safe to call more than once"""
        if self.listener is not None:
            self.listener.stop()
            self.listener = None

    def describe(self):
        return ", ".join(f"{action}=[{key.upper()}]" for action, key in self.hotkeys.items())
