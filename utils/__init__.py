# Utils module for the flash fishing bot

from .timing import interruptible_sleep
from .validators import (
    roi_from_corners,
    validate_area_coords,
    require_valid_roi,
)

__all__ = [
    'interruptible_sleep',
    'roi_from_corners',
    'validate_area_coords',
    'require_valid_roi',
]
