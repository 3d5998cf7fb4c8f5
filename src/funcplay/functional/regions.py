"""Region algebra: combinators over point predicates.

A region is represented implicitly, as a function that answers whether a point
belongs to it. Instead of writing one large function for a specific geometric
question, small regions are built and then combined into new ones:

    - **circle**: Disc of a given radius around the origin or a center
    - **shift**: Translate a region
    - **invert**: Complement of a region
    - **intersection**: Points in both regions
    - **union**: Points in either region
    - **difference**: Points in the first region but not the second

Every combinator returns a new closure and never mutates its inputs, so the
result is a pure function of the point it is applied to.

Examples:
    >>> from funcplay.core.types import Point
    >>> from funcplay.functional.regions import circle, difference, shift
    >>>
    >>> ring = difference(circle(5.0), circle(2.0))
    >>> ring(Point(3.0, 0.0))
    True
    >>> shift(Point(10.0, 0.0), ring)(Point(10.0, 0.0))
    False
"""

import math
import typing as tp

import numpy as np

from funcplay.core.types import ORIGIN, Distance, Point, Region
from funcplay.logger.logger import logger

__all__ = [
    "circle",
    "shift",
    "invert",
    "intersection",
    "union",
    "difference",
    "rasterize",
]


def circle(radius: Distance, center: Point = ORIGIN) -> Region:
    """Disc of ``radius`` around ``center`` (boundary included).

    A negative radius is accepted and gives an empty region, since no
    distance is negative.

    Args:
        radius: Radius of the disc.
        center: Center of the disc. Defaults to the origin.

    Returns:
        Region that is true for points at distance ``<= radius`` from ``center``.
    """

    def region(point: Point) -> bool:
        return math.hypot(point.x - center.x, point.y - center.y) <= radius

    return region


def shift(offset: Point, region: Region) -> Region:
    """Translate ``region`` by ``offset``.

    The returned region tests ``region`` against ``point - offset``.

    Args:
        offset: Translation vector.
        region: Region to move.

    Returns:
        The translated region.
    """

    def shifted(point: Point) -> bool:
        return region(point - offset)

    return shifted


def invert(region: Region) -> Region:
    """Complement of ``region``."""

    def inverted(point: Point) -> bool:
        return not region(point)

    return inverted


def intersection(region1: Region, region2: Region) -> Region:
    """Points that belong to both regions."""

    def both(point: Point) -> bool:
        return region1(point) and region2(point)

    return both


def union(region1: Region, region2: Region) -> Region:
    """Points that belong to at least one of the regions."""

    def either(point: Point) -> bool:
        return region1(point) or region2(point)

    return either


def difference(region: Region, minus_region: Region) -> Region:
    """Points in ``region`` that are not in ``minus_region``."""
    return intersection(region, invert(minus_region))


def rasterize(
    region: Region,
    xs: tp.Union[tp.Sequence[float], np.ndarray],
    ys: tp.Union[tp.Sequence[float], np.ndarray],
) -> np.ndarray:
    """Sample a region on a rectangular grid.

    Args:
        region: Region to sample.
        xs: 1-D array of x coordinates (columns).
        ys: 1-D array of y coordinates (rows).

    Returns:
        Boolean mask of shape ``(len(ys), len(xs))`` where
        ``mask[j, i] == region(Point(xs[i], ys[j]))``.

    Raises:
        ValueError: If ``xs`` or ``ys`` is not one-dimensional.
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if xs.ndim != 1 or ys.ndim != 1:
        raise ValueError(
            f"xs and ys must be 1-D arrays, got shapes {xs.shape} and {ys.shape}"
        )

    mask = np.array(
        [[region(Point(float(x), float(y))) for x in xs] for y in ys],
        dtype=bool,
    ).reshape(len(ys), len(xs))

    logger.debug(
        f"Rasterized region on {len(xs)}x{len(ys)} grid, {int(mask.sum())} cells inside"
    )
    return mask
