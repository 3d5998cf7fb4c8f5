"""funcplay: functional-programming idioms as small composable functions."""

from funcplay.core import ORIGIN, Point, Region, Settings

__all__ = [
    "Point",
    "ORIGIN",
    "Region",
    "Settings",
]

__version__ = "0.1.0"
