"""Reusable type definitions for funcplay.

This module provides the value types shared by the functional combinators.

Type Aliases:
    Distance: A real scalar used as a radius or threshold.
    NonNegativeDistance: A distance constrained to be ``>= 0``.
    Region: A predicate over points, ``Callable[[Point], bool]``.

Classes:
    Point: Immutable pair of finite real coordinates.
"""

import math
import typing as tp

import annotated_types as at
from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Point",
    "ORIGIN",
    "Distance",
    "NonNegativeDistance",
    "Region",
]

Distance = float

# A distance that must be zero or positive (used for configured thresholds)
NonNegativeDistance = tp.Annotated[float, at.Ge(0)]


class Point(BaseModel):
    """A point in the plane.

    Points are frozen, hashable and compare by value. Coordinates must be
    finite; NaN and infinities are rejected at construction time. The results
    of ``+`` and ``-`` are not re-validated, so arithmetic near the float
    limits yields infinite coordinates instead of raising.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., allow_inf_nan=False, description="Horizontal coordinate.")
    y: float = Field(..., allow_inf_nan=False, description="Vertical coordinate.")

    def __init__(self, x: float, y: float, **data: tp.Any) -> None:
        super().__init__(x=x, y=y, **data)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        # Sums of finite coordinates may overflow to inf; skip validation
        return Point.model_construct(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point.model_construct(x=self.x - other.x, y=self.y - other.y)

    def norm(self) -> float:
        """Euclidean distance from the origin."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance between two points.

        Args:
            other: The other point.

        Returns:
            The non-negative distance between ``self`` and ``other``.
        """
        return math.hypot(self.x - other.x, self.y - other.y)


ORIGIN = Point(0.0, 0.0)

# A Region is an implicit area: a membership test rather than boundary data
Region = tp.Callable[[Point], bool]
