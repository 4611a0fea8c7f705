"""
State Definitions

Engine lifecycle states, bot decision states and the actions the
state machine can request.
"""

from enum import Enum, auto


class MacroState(Enum):
    """Engine execution states"""

    STOPPED = auto()    # Engine is stopped, no worker thread
    STARTING = auto()   # Engine is initializing (transitional)
    RUNNING = auto()    # Control loop is ticking
    STOPPING = auto()   # Engine is shutting down (transitional)
    ERROR = auto()      # Control loop died with an unexpected error

    def __str__(self):
        return self.name.title()

    @property
    def can_start(self):
        """Returns True if engine can be started from this state"""
        return self in (MacroState.STOPPED, MacroState.ERROR)

    @property
    def can_stop(self):
        """Returns True if engine can be stopped from this state"""
        return self in (MacroState.STARTING, MacroState.RUNNING)


class BotState(Enum):
    """Fishing decision states"""

    IDLE = auto()       # Line cast, waiting for the minigame bar to appear
    FISHING = auto()    # Minigame bar visible, watching for bites

    def __str__(self):
        return self.name.title()


class Action(Enum):
    """Input requested by the state machine for the current tick"""

    NONE = auto()
    CAST = auto()
    CLICK = auto()

    def __str__(self):
        return self.name.lower()
