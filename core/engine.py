"""
FishingEngine - Bot Lifecycle Orchestrator

Starts the control loop (FishingCycle.main_loop) on a worker thread,
owns the running flag the loop polls at every sleep, and guarantees a
clean shutdown.

What it does NOT do:
    - Detection (delegates to FishingCycle / SignalClassifier)
    - Input (delegates to FishingCycle / MouseController)
    - Pause handling (PauseController is read by FishingCycle directly)

Usage:
    engine = FishingEngine(fishing_cycle, logger)
    engine.start()  # Starts background thread
    engine.wait()   # Blocks until stop() or the loop exits
    engine.stop()   # Clean shutdown, waits for thread
"""

import logging
import threading
import time
from typing import Optional

from core.state import MacroState


class FishingEngine:
    """
    Control loop lifecycle orchestrator.

    The engine owns:
        - Engine state (STOPPED/RUNNING/etc)
        - Running flag (thread-safe)
        - Worker thread
        - Lifecycle callbacks
    """

    def __init__(
        self,
        fishing_cycle,
        logger: Optional[logging.Logger] = None,
        callbacks: Optional[dict] = None,
    ):
        """
        Args:
            fishing_cycle: FishingCycle instance (main_loop(running_flag_fn))
            logger: Optional logger for engine events
            callbacks: Optional dict of callbacks:
                - on_state_change: (old_state, new_state) -> None
                - on_start: () -> None
                - on_stop: () -> None
                - on_error: (exception) -> None
        """
        self._fishing_cycle = fishing_cycle
        self._logger = logger or logging.getLogger("FishingBot")
        self._callbacks = callbacks or {}

        self._state = MacroState.STOPPED
        self._state_lock = threading.Lock()

        self._worker_thread: Optional[threading.Thread] = None
        self._running = False
        self._running_lock = threading.Lock()

        self._start_time: Optional[float] = None

    # ========== PUBLIC API ==========

    def start(self) -> bool:
        """
        Start the control loop on a background thread.

        Returns:
            True if started, False if already running or the thread failed
        """
        with self._state_lock:
            if not self._state.can_start:
                self._logger.warning(f"Cannot start: engine is {self._state}")
                return False
            self._set_state(MacroState.STARTING)

        try:
            with self._running_lock:
                self._running = True

            self._worker_thread = threading.Thread(
                target=self._worker_loop,
                name="FishingEngine-Worker",
                daemon=True,
            )
            self._start_time = time.time()
            self._worker_thread.start()

            with self._state_lock:
                # The worker may already have failed and set ERROR
                if self._state is MacroState.STARTING:
                    self._set_state(MacroState.RUNNING)

            if "on_start" in self._callbacks:
                self._callbacks["on_start"]()

            self._logger.info("FishingEngine started")
            return True

        except Exception as e:
            self._logger.error(f"Failed to start engine: {e}", exc_info=True)
            with self._running_lock:
                self._running = False
            with self._state_lock:
                self._set_state(MacroState.ERROR)
            if "on_error" in self._callbacks:
                self._callbacks["on_error"](e)
            return False

    def stop(self, timeout: float = 5.0) -> bool:
        """
        Signal the control loop to stop and wait for the worker.

        Args:
            timeout: Maximum seconds to wait for the thread

        Returns:
            True if stopped cleanly, False on timeout
        """
        with self._state_lock:
            if not self._state.can_stop:
                return True  # Already stopped
            self._set_state(MacroState.STOPPING)

        with self._running_lock:
            self._running = False

        self._logger.info("Stop signal sent, waiting for worker thread...")

        timed_out = False
        worker = self._worker_thread
        if worker and worker.is_alive() and worker is not threading.current_thread():
            worker.join(timeout=timeout)
            if worker.is_alive():
                # A hung capture/click call cannot be interrupted
                self._logger.warning(
                    f"Worker thread did not stop within {timeout}s (daemon, will die on exit)"
                )
                timed_out = True

        self._worker_thread = None
        self._start_time = None

        with self._state_lock:
            self._set_state(MacroState.STOPPED)

        if "on_stop" in self._callbacks:
            self._callbacks["on_stop"]()

        if not timed_out:
            self._logger.info("FishingEngine stopped cleanly")
        return not timed_out

    def request_stop(self):
        """Clear the running flag without joining (safe from any thread)"""
        with self._running_lock:
            self._running = False

    def wait(self, poll_interval: float = 0.2):
        """Block the calling thread until the worker exits"""
        while True:
            worker = self._worker_thread
            if worker is None or not worker.is_alive():
                return
            worker.join(timeout=poll_interval)

    def is_running(self) -> bool:
        """Thread-safe running flag, polled by the control loop"""
        with self._running_lock:
            return self._running

    def get_state(self) -> MacroState:
        with self._state_lock:
            return self._state

    def get_uptime(self) -> Optional[float]:
        """Uptime in seconds if running, None if stopped"""
        if self._start_time and self.is_running():
            return time.time() - self._start_time
        return None

    # ========== INTERNAL ==========

    def _worker_loop(self):
        """Runs FishingCycle.main_loop() on the worker thread."""
        self._logger.debug("Worker thread started")

        try:
            self._fishing_cycle.main_loop(self.is_running)

        except Exception as e:
            self._logger.error(f"Worker thread exception: {e}", exc_info=True)
            with self._state_lock:
                self._set_state(MacroState.ERROR)
            if "on_error" in self._callbacks:
                self._callbacks["on_error"](e)

        finally:
            with self._running_lock:
                self._running = False
            self._logger.debug("Worker thread exited")

    def _set_state(self, new_state: MacroState):
        """
        Internal state transition with callback.

        Must be called while holding _state_lock.
        """
        old_state = self._state
        self._state = new_state

        self._logger.debug(f"Engine state: {old_state} -> {new_state}")

        if "on_state_change" in self._callbacks:
            try:
                self._callbacks["on_state_change"](old_state, new_state)
            except Exception as e:
                self._logger.error(f"State change callback error: {e}")
