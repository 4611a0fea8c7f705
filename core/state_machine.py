"""
FishingStateMachine - Idle/Fishing decision logic

Pure transition function plus a small stateful wrapper that owns the
current BotState and the time of the last cast. No capture or input
dependencies, so every transition can be tested in isolation.

Transition table:

    IDLE     ui active                      -> FISHING, none
    IDLE     ui inactive, elapsed > timeout -> IDLE,    cast (timer reset)
    IDLE     ui inactive, elapsed <= timeout-> IDLE,    none
    FISHING  ui active, bite                -> FISHING, click
    FISHING  ui active, no bite             -> FISHING, none
    FISHING  ui inactive                    -> IDLE,    cast (timer reset)
"""

import logging
import time
from typing import Callable, NamedTuple, Optional

from core.state import Action, BotState

DEFAULT_IDLE_TIMEOUT = 180.0


class Transition(NamedTuple):
    state: BotState
    action: Action


def next_transition(
    state: BotState,
    ui_active: bool,
    bite_detected: bool,
    elapsed: float,
    idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
) -> Transition:
    """
    Map (state, classification, elapsed time) to (next state, action).

    Args:
        state: Current BotState
        ui_active: Minigame bar visible this tick
        bite_detected: Bite flash seen this tick (ignored unless ui_active)
        elapsed: Seconds since the last cast
        idle_timeout: Seconds in IDLE before a safety re-cast

    Returns:
        Transition(state, action)
    """
    if state is BotState.IDLE:
        if ui_active:
            return Transition(BotState.FISHING, Action.NONE)
        if elapsed > idle_timeout:
            return Transition(BotState.IDLE, Action.CAST)
        return Transition(BotState.IDLE, Action.NONE)

    if state is BotState.FISHING:
        if not ui_active:
            return Transition(BotState.IDLE, Action.CAST)
        if bite_detected:
            return Transition(BotState.FISHING, Action.CLICK)
        return Transition(BotState.FISHING, Action.NONE)

    raise ValueError(f"Unknown bot state: {state!r}")


class FishingStateMachine:
    """
    Stateful wrapper around next_transition().

    Owns the current state and last_action_time; the timer is reset
    whenever a CAST is emitted.
    """

    def __init__(
        self,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
        logger: Optional[logging.Logger] = None,
    ):
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._logger = logger or logging.getLogger("FishingBot")
        self.state = BotState.IDLE
        self.last_action_time = clock()

    def elapsed(self) -> float:
        """Seconds since the last cast (or since construction/reset)"""
        return self._clock() - self.last_action_time

    def reset_timer(self):
        self.last_action_time = self._clock()

    def expire_timer(self):
        """Mark the cast as overdue so the next idle tick casts again"""
        self.last_action_time = self._clock() - self.idle_timeout - 1.0

    def step(self, result) -> Action:
        """
        Feed one tick's classification and return the action to perform.

        Args:
            result: Object with ui_active and bite_detected attributes

        Returns:
            Action for this tick
        """
        ui_active = bool(result.ui_active)
        bite = ui_active and bool(result.bite_detected)
        elapsed = self.elapsed()

        transition = next_transition(
            self.state, ui_active, bite, elapsed, self.idle_timeout
        )

        if transition.state is not self.state:
            self._logger.debug(f"Bot state: {self.state} -> {transition.state}")
        elif transition.action is Action.CAST:
            self._logger.debug(f"Idle for {elapsed:.0f}s (> {self.idle_timeout:.0f}s)")

        self.state = transition.state
        if transition.action is Action.CAST:
            self.reset_timer()
        return transition.action
