"""
Fishing Cycle Module
--------------------------------
The control loop: capture -> classify -> decide -> act, once per tick.

Architecture:
- FishingCycle receives all dependencies via constructor (dependency injection)
- tick() runs exactly one pipeline pass and returns the Action taken
- main_loop() repeats tick() until the running flag drops

Every sleep goes through interruptible_sleep so a stop request is seen
within one poll step. Capture and click calls themselves have no timeout:
a hang inside mss or pyautogui stalls the tick.
"""

import logging
import random
import time

from core.exceptions import CaptureError, InjectionError
from core.state import Action, BotState
from utils.timing import interruptible_sleep


class FishingCycle:
    """
    Main fishing loop orchestration.

    Reads the pause flag, never writes it.
    """

    def __init__(
        self,
        vision,
        input_ctrl,
        state_machine,
        pause_controller,
        settings,
        callbacks=None,
        logger=None,
        stats_manager=None,
        clock=time.monotonic,
    ):
        """
        Initialize FishingCycle with all dependencies.

        Args:
            vision: Vision bundle (screen, classifier)
            input_ctrl: Input bundle (mouse)
            state_machine: FishingStateMachine instance
            pause_controller: PauseController shared with the hotkey listener
            settings: Dict with area_coords, delays and input flags
            callbacks: Optional dict (get_running, interruptible_sleep, set_status)
            logger: Logger instance for logging
            stats_manager: StatsManager instance for action counters
            clock: Monotonic time source for tick pacing
        """
        # Vision components
        self.screen = vision["screen"]
        self.classifier = vision["classifier"]

        # Input components
        self.mouse = input_ctrl["mouse"]

        self.state_machine = state_machine
        self.pause_controller = pause_controller
        self.stats = stats_manager
        self.logger = logger or logging.getLogger("FishingBot")
        self._clock = clock

        # Area coordinates
        self.area_coords = settings.get("area_coords")

        # Delays and timing
        self.tick_interval = settings.get("tick_interval", 0.05)
        self.cast_settle_delay = settings.get("cast_settle_delay", 2.0)
        self.click_settle_delay = settings.get("click_settle_delay", 0.5)
        self.capture_backoff = settings.get("capture_backoff", 1.0)
        self.recast_delay_range = tuple(settings.get("recast_delay_range", (0.0, 0.0)))

        # Flags
        self.cast_on_start = settings.get("cast_on_start", True)

        # Callbacks
        self.callbacks = callbacks or {}
        self.get_running = self.callbacks.get("get_running", lambda: True)
        self.set_status = self.callbacks.get("set_status", self._print_status)
        self._sleep = self.callbacks.get("interruptible_sleep")

    @property
    def running(self):
        return self.get_running()

    def interruptible_sleep(self, duration):
        """Sleep unless stopped. Returns False if interrupted."""
        if duration <= 0:
            return self.running
        if self._sleep is not None:
            return self._sleep(duration)
        return interruptible_sleep(duration, self.get_running)

    @staticmethod
    def _print_status(text):
        print(f"\r{text:<60}", end="", flush=True)

    # ========== LOOP ==========

    def main_loop(self, running_flag_fn=None):
        """Run ticks until the running flag drops"""
        if running_flag_fn is not None:
            self.get_running = running_flag_fn

        self.logger.info("[Main Loop] Fishing loop started")
        if self.stats:
            self.stats.start_session()

        if self.cast_on_start:
            self.set_status("Casting to start...")
            settle = self._perform(Action.CAST)
            if not self.interruptible_sleep(settle):
                return
        self.state_machine.reset_timer()
        self.set_status("Waiting for a fishing round...")

        while self.running:
            self.tick()

        self.logger.info("[Main Loop] Fishing loop stopped")

    def tick(self):
        """
        One capture -> classify -> decide -> act pass.

        Returns:
            Action taken, or None if the tick was skipped (paused or capture failed)
        """
        tick_start = self._clock()

        if self.pause_controller.is_paused():
            self.interruptible_sleep(self.tick_interval)
            return None

        try:
            buffer = self.screen.capture_region(self.area_coords)
        except CaptureError as e:
            self.logger.warning(f"[Capture] {e} - retrying in {self.capture_backoff:.1f}s")
            if self.stats:
                self.stats.record_capture_failure()
            self.interruptible_sleep(self.capture_backoff)
            return None

        result = self.classifier.classify(buffer)
        previous_state = self.state_machine.state
        action = self.state_machine.step(result)
        self._report(previous_state, self.state_machine.state, action)

        settle = self._perform(action)
        work_time = self._clock() - tick_start

        if not self.interruptible_sleep(settle):
            return action
        self.interruptible_sleep(self.tick_interval - work_time)
        return action

    # ========== ACTIONS ==========

    def _perform(self, action):
        """
        Send the click for an action.

        Returns:
            Settle delay in seconds (0 when nothing was sent)
        """
        if action is Action.NONE:
            return 0.0

        if action is Action.CAST:
            low, high = self.recast_delay_range
            if high > 0:
                delay = random.uniform(low, high)
                self.logger.debug(f"[Cast] Waiting {delay:.2f}s before casting")
                if not self.interruptible_sleep(delay):
                    return 0.0

        try:
            self.mouse.click()
        except InjectionError as e:
            self.logger.error(f"[{action}] {e}")
            if self.stats:
                self.stats.record_injection_failure()
            if action is Action.CAST:
                self.state_machine.expire_timer()
            return 0.0

        if action is Action.CAST:
            if self.stats:
                self.stats.record_cast()
            return self.cast_settle_delay

        if self.stats:
            self.stats.record_click()
        return self.click_settle_delay

    def _report(self, previous_state, state, action):
        if previous_state is BotState.IDLE and state is BotState.FISHING:
            self.logger.info("[Round] Minigame detected, fishing")
            self.set_status("Round detected! Fishing...")
            if self.stats:
                self.stats.record_round()
        elif action is Action.CLICK:
            self.logger.info("[Bite] Flash detected, clicking")
            self.set_status("Bite! Clicking...")
        elif action is Action.CAST and previous_state is BotState.FISHING:
            self.logger.info("[Round] Minigame ended, re-casting")
            self.set_status("Round over. Re-casting...")
        elif action is Action.CAST:
            self.logger.info(
                f"[Timeout] No round for {self.state_machine.idle_timeout:.0f}s, re-casting"
            )
            self.set_status("Idle timeout. Re-casting...")
