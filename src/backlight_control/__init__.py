from __future__ import annotations

from backlight_control.brightness import (
    SYSFS_BACKLIGHT,
    UNPARSABLE,
    BacklightError,
    Brightness,
    UnparsableValueError,
)

__version__ = "0.1.0"

__all__ = [
    "SYSFS_BACKLIGHT",
    "UNPARSABLE",
    "BacklightError",
    "Brightness",
    "UnparsableValueError",
    "__version__",
]
