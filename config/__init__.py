# Config module for the flash fishing bot

from .settings_manager import SettingsManager
from .defaults import ColorRange, RED_RANGE, WHITE_RANGE, DEFAULT_SETTINGS

__all__ = ['SettingsManager', 'ColorRange', 'RED_RANGE', 'WHITE_RANGE', 'DEFAULT_SETTINGS']
