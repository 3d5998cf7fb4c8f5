"""Core value types and configuration."""

from funcplay.core.types import ORIGIN, Distance, NonNegativeDistance, Point, Region
from funcplay.core.config import Settings

__all__ = [
    "Point",
    "ORIGIN",
    "Distance",
    "NonNegativeDistance",
    "Region",
    "Settings",
]
