"""
Automation Module - Flash Fishing Bot
======================================
The control loop that ties vision, decisions and input together.

Modules:
    - fishing_cycle: FishingCycle (tick / main_loop)

Usage:
    from automation import FishingCycle

    cycle = FishingCycle(vision, input_ctrl, state_machine, pause, settings)
    cycle.tick()
"""

from .fishing_cycle import FishingCycle

__all__ = [
    'FishingCycle',
]
