"""
Core Module - Fishing Bot Lifecycle and Decisions

This module owns bot state, the Idle/Fishing decision logic, the shared
pause flag and thread control, WITHOUT any:
- Vision/detection logic
- Input/control logic

Components:
    - engine: FishingEngine (worker thread lifecycle)
    - state: MacroState, BotState and Action enums
    - state_machine: next_transition() and FishingStateMachine
    - pause: PauseController (hotkey-driven pause flag)
    - exceptions: Error taxonomy (capture, injection, configuration)

Usage:
    from core import FishingEngine, FishingStateMachine, PauseController

    engine = FishingEngine(fishing_cycle, logger)
    engine.start()
    # ... bot runs in background thread ...
    engine.stop()
"""

from core.state import MacroState, BotState, Action
from core.exceptions import (
    EngineException,
    ConfigurationError,
    CaptureError,
    InjectionError,
)
from core.state_machine import FishingStateMachine, Transition, next_transition
from core.pause import PauseController
from core.engine import FishingEngine

__all__ = [
    'FishingEngine',
    'FishingStateMachine',
    'PauseController',
    'Transition',
    'next_transition',
    'MacroState',
    'BotState',
    'Action',
    'EngineException',
    'ConfigurationError',
    'CaptureError',
    'InjectionError',
]
