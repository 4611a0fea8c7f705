# Copyright (C) 2026 BPS
# This file is part of BPS Fishing Macro.
#
# Services Module - Logging Service
# File + console logging for the bot, one shared "FishingBot" logger

import logging
import os
import sys

LOGGER_NAME = 'FishingBot'


class LoggingService:
    """
    Centralized logging service

    Configures the root handlers once (file + console) and hands out the
    shared FishingBot logger used by every module.
    """

    def __init__(self, log_file: str = None, log_level: int = logging.INFO):
        """
        Initialize logging service

        Args:
            log_file: Path to log file (default: fishing_bot.log next to the app)
            log_level: Logging level (default: INFO)
        """
        if log_file is None:
            log_file = os.path.join(
                os.path.dirname(os.path.dirname(os.path.abspath(__file__))) if not getattr(sys, 'frozen', False)
                else os.path.dirname(sys.executable),
                'fishing_bot.log'
            )

        self.log_file = log_file
        self.log_level = log_level
        self.logger = None
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging with file and console handlers"""
        logging.basicConfig(
            level=self.log_level,
            format='%(asctime)s | %(levelname)s | %(message)s',
            handlers=[
                logging.FileHandler(self.log_file, encoding='utf-8'),
                logging.StreamHandler()
            ],
            force=True,
        )
        self.logger = logging.getLogger(LOGGER_NAME)

    def get_logger(self):
        """Get the logger instance"""
        return self.logger
