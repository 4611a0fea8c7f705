# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Flash Fishing Bot - entry point
# Sets up the capture region, wires the components and runs until Ctrl+C or the exit hotkey

import argparse
import logging
import sys

from automation import FishingCycle
from config import SettingsManager
from core import ConfigurationError, FishingEngine, FishingStateMachine, MacroState, PauseController
from input.hotkey_listener import HotkeyListener
from input.mouse_controller import MouseController
from services import LoggingService, StatsManager
from utils import require_valid_roi, roi_from_corners
from vision import ScreenCapture, SignalClassifier


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Watches the fishing minigame bar and clicks on bites."
    )
    parser.add_argument(
        "--roi",
        nargs=4,
        type=int,
        metavar=("X1", "Y1", "X2", "Y2"),
        help="Capture region corners; asked interactively when omitted",
    )
    parser.add_argument("--settings", help="JSON file overriding the default settings")
    parser.add_argument("--log-file", help="Log file path (default: fishing_bot.log)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def setup_roi_interactively(mouse):
    """Ask the user to point at two corners of the minigame bar"""
    print("\n--- Define the fishing bar region ---")
    input("Move the mouse to the TOP-LEFT corner of the bar and press Enter...")
    top_left = mouse.position()
    print(f"Top-left corner saved: {top_left}")
    input("Move the mouse to the BOTTOM-RIGHT corner of the bar and press Enter...")
    bottom_right = mouse.position()
    print(f"Bottom-right corner saved: {bottom_right}")
    return roi_from_corners(top_left, bottom_right)


def print_pause_status(paused):
    if paused:
        print("\r⏸️  Bot paused. Press the pause key to resume.          ", end="", flush=True)
    else:
        print("\r▶️  Bot resumed...                                      ", end="", flush=True)


def main(argv=None):
    args = parse_args(argv)
    logger = LoggingService(
        log_file=args.log_file,
        log_level=logging.DEBUG if args.verbose else logging.INFO,
    ).get_logger()

    try:
        settings_manager = SettingsManager(args.settings)
        classifier = SignalClassifier.from_settings(settings_manager)
        loop_settings = settings_manager.get_loop_settings()
        hotkeys = settings_manager.load_hotkeys()

        mouse = MouseController(button=loop_settings["mouse_button"])
        if args.roi:
            x1, y1, x2, y2 = args.roi
            area_coords = roi_from_corners((x1, y1), (x2, y2))
        else:
            area_coords = setup_roi_interactively(mouse)
        require_valid_roi(area_coords)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    logger.info(f"Capture region: {area_coords}")
    loop_settings["area_coords"] = area_coords

    screen = ScreenCapture(area_coords)
    stats = StatsManager()
    pause_controller = PauseController(on_change=print_pause_status)
    state_machine = FishingStateMachine(
        idle_timeout=loop_settings["idle_timeout"], logger=logger
    )
    fishing_cycle = FishingCycle(
        vision={"screen": screen, "classifier": classifier},
        input_ctrl={"mouse": mouse},
        state_machine=state_machine,
        pause_controller=pause_controller,
        settings=loop_settings,
        logger=logger,
        stats_manager=stats,
    )
    engine = FishingEngine(fishing_cycle, logger)
    listener = HotkeyListener(pause_controller, hotkeys, on_exit=engine.request_stop)

    listener.start()
    if not engine.start():
        listener.stop()
        return 1

    print(f">>> Bot running. {listener.describe()} | Ctrl+C in this terminal to quit.")
    try:
        engine.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        failed = engine.get_state() is MacroState.ERROR
        engine.stop()
        listener.stop()
        screen.cleanup()
        print()
        logger.info(stats.format_summary())

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
