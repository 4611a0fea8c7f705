"""
PauseController - shared pause flag

The hotkey thread writes the flag (toggle), the control loop only reads
it. The lock is held just for the read/write itself; notifications are
emitted after it is released.
"""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger("FishingBot")


class PauseController:
    """Thread-safe pause flag with change notification."""

    def __init__(self, on_change: Optional[Callable[[bool], None]] = None, paused: bool = False):
        """
        Args:
            on_change: Optional callback(paused) run after every change
            paused: Initial state
        """
        self._paused = paused
        self._lock = threading.Lock()
        self._on_change = on_change

    def is_paused(self) -> bool:
        with self._lock:
            return self._paused

    def toggle(self) -> bool:
        """Flip the flag. Returns the new value."""
        with self._lock:
            self._paused = not self._paused
            paused = self._paused
        self._notify(paused)
        return paused

    def set_paused(self, paused: bool) -> bool:
        """Set the flag explicitly. Returns True if it changed."""
        with self._lock:
            changed = self._paused != paused
            self._paused = paused
        if changed:
            self._notify(paused)
        return changed

    def _notify(self, paused: bool):
        logger.info("Bot paused" if paused else "Bot resumed")
        if self._on_change is not None:
            try:
                self._on_change(paused)
            except Exception as e:
                logger.error(f"Pause callback error: {e}")
