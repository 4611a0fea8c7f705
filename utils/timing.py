# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Timing and sleep utilities

import time

POLL_STEP = 0.1  # Stop flag is checked at least this often


def interruptible_sleep(duration, running_flag_fn, step=POLL_STEP):
    """Sleep that can be interrupted by checking a running flag

    Args:
        duration: Sleep duration in seconds
        running_flag_fn: Callable that returns True if should continue, False to interrupt
        step: Longest single sleep between flag checks

    Returns:
        True if completed full duration, False if interrupted
    """
    end = time.monotonic() + duration
    while True:
        if not running_flag_fn():
            return False
        remaining = end - time.monotonic()
        if remaining <= 0:
            return True
        time.sleep(min(step, remaining))
