"""
Core Exceptions

Custom exceptions for bot lifecycle control and error handling.
"""


class EngineException(Exception):
    """Base exception for FishingEngine errors"""
    pass


class ConfigurationError(EngineException):
    """
    Raised for unusable configuration (zero-size ROI, malformed settings).

    Fatal: raised before the control loop starts.
    """
    pass


class CaptureError(EngineException):
    """
    Raised when the region cannot be captured.

    Transient (e.g. display reconfiguration). The control loop logs it,
    backs off and retries on the next tick.
    """
    pass


class InjectionError(EngineException):
    """Raised when a click could not be sent. Logged, never fatal."""
    pass
