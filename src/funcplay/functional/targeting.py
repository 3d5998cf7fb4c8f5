"""Range checks for a ship deciding whether it may engage a target.

The same question is answered twice. ``in_range_guarded`` computes the
distances by hand; ``in_range_region`` builds the answer from the region
combinators only. The ship may fire when the target is:

    - within ``range_`` of the ship,
    - not closer than ``min_distance`` to the ship,
    - not closer than ``min_distance`` to the friendly ship.

Note:
    The region version treats the guard discs as closed, so a target at
    exactly ``min_distance`` is rejected there and accepted by the guarded
    version. Both agree everywhere else.
"""

from typing import Optional

from funcplay.core.types import Distance, Point, Region
from funcplay.functional.regions import circle, difference, shift

__all__ = [
    "DEFAULT_MIN_DISTANCE",
    "in_range",
    "in_range_guarded",
    "in_range_region",
    "in_range_regions",
]

DEFAULT_MIN_DISTANCE: Distance = 2.0


def in_range(target: Point, range_: Distance) -> bool:
    """Whether ``target`` is within ``range_`` of the origin."""
    return target.norm() <= range_


def in_range_guarded(
    target: Point,
    own_position: Point,
    friendly: Point,
    range_: Distance,
    min_distance: Optional[Distance] = None,
) -> bool:
    """Range check with explicit distance arithmetic.

    Args:
        target: Position of the target.
        own_position: Position of the ship.
        friendly: Position of the friendly ship.
        range_: Firing range of the ship.
        min_distance: Guard distance. Defaults to ``DEFAULT_MIN_DISTANCE``.

    Returns:
        True if the target may be engaged.
    """
    if min_distance is None:
        min_distance = DEFAULT_MIN_DISTANCE

    target_distance = own_position.distance_to(target)
    friendly_distance = friendly.distance_to(target)

    return (
        target_distance <= range_
        and target_distance >= min_distance
        and friendly_distance >= min_distance
    )


def in_range_region(
    own_position: Point,
    friendly: Point,
    range_: Distance,
    min_distance: Optional[Distance] = None,
) -> Region:
    """The engageable area as a region.

    Args:
        own_position: Position of the ship.
        friendly: Position of the friendly ship.
        range_: Firing range of the ship.
        min_distance: Guard distance. Defaults to ``DEFAULT_MIN_DISTANCE``.

    Returns:
        Region containing every point the ship may fire at.
    """
    if min_distance is None:
        min_distance = DEFAULT_MIN_DISTANCE

    range_region = difference(circle(range_), circle(min_distance))
    target_region = shift(own_position, range_region)
    friendly_region = shift(friendly, circle(min_distance))
    return difference(target_region, friendly_region)


def in_range_regions(
    target: Point,
    own_position: Point,
    friendly: Point,
    range_: Distance,
    min_distance: Optional[Distance] = None,
) -> bool:
    """Range check answered by :func:`in_range_region`."""
    return in_range_region(own_position, friendly, range_, min_distance)(target)
