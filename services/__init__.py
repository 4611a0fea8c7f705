# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Services Module - Public Interface

from .stats_manager import StatsManager
from .logging_service import LoggingService

__all__ = [
    "StatsManager",
    "LoggingService",
]
