import math

import pytest
from pydantic import ValidationError
from funcplay.core.types import ORIGIN, Point


def test_point_positional_and_keyword_construction():
    assert Point(1.0, 2.0) == Point(x=1.0, y=2.0)
    assert Point(1, 2).x == 1.0


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(ValidationError):
        p.x = 5.0


def test_point_is_hashable():
    assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


def test_point_arithmetic():
    a = Point(3.0, 4.0)
    b = Point(1.0, -1.0)
    assert a - b == Point(2.0, 5.0)
    assert a + b == Point(4.0, 3.0)
    assert (a - b) + b == a


def test_point_distances():
    assert Point(3.0, 4.0).norm() == 5.0
    assert ORIGIN.norm() == 0.0
    assert Point(4.0, 5.0).distance_to(Point(1.0, 1.0)) == 5.0
    assert Point(1.0, 1.0).distance_to(Point(4.0, 5.0)) == 5.0


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "abc", None])
def test_point_rejects_invalid_coordinates(bad):
    with pytest.raises(ValidationError):
        Point(bad, 0.0)
    with pytest.raises(ValidationError):
        Point(0.0, bad)


def test_point_arithmetic_overflow_does_not_raise():
    diff = Point(1e308, 0.0) - Point(-1e308, 0.0)
    assert math.isinf(diff.x)
    assert diff.norm() == math.inf
    assert math.isinf((Point(1e308, 0.0) + Point(1e308, 0.0)).x)
    assert Point(1e308, 0.0).distance_to(Point(-1e308, 0.0)) == math.inf
