"""Hand-rolled sequence combinators.

The helpers at the bottom of this module start out as specialised loops
(increment every element, double every element, sum, concatenate) and are then
expressed through three generic traversals:

    - ``map_seq``: transform every element
    - ``filter_seq``: keep the elements that pass a check
    - ``reduce_seq``: fold the elements into a single value, left to right

Each traversal makes a single pass and never mutates its input.
"""

import typing as tp

__all__ = [
    "map_seq",
    "filter_seq",
    "reduce_seq",
    "increment_all",
    "double_all",
    "is_even_all",
    "sum_all",
    "concatenate",
    "sum_by_reduce",
    "concatenate_by_reduce",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
R = tp.TypeVar("R")


def map_seq(xs: tp.Iterable[T], f: tp.Callable[[T], U]) -> tp.List[U]:
    """Apply ``f`` to every element of ``xs``.

    Args:
        xs: Input sequence.
        f: Transform applied to each element.

    Returns:
        New list with ``f(x)`` for each ``x``, in input order.
    """
    result: tp.List[U] = []
    for x in xs:
        result.append(f(x))
    return result


def filter_seq(xs: tp.Iterable[T], check: tp.Callable[[T], bool]) -> tp.List[T]:
    """Keep the elements of ``xs`` for which ``check`` is true.

    Args:
        xs: Input sequence.
        check: Predicate applied to each element.

    Returns:
        New list with the accepted elements, in input order.
    """
    result: tp.List[T] = []
    for x in xs:
        if check(x):
            result.append(x)
    return result


def reduce_seq(
    xs: tp.Iterable[T], initial: R, combine: tp.Callable[[R, T], R]
) -> R:
    """Fold ``xs`` from the left.

    Computes ``combine(...combine(combine(initial, xs[0]), xs[1])..., xs[-1])``.

    Args:
        xs: Input sequence.
        initial: Starting accumulator, returned unchanged for empty input.
        combine: Function of ``(accumulator, element)`` returning the new
            accumulator.

    Returns:
        The final accumulator.
    """
    result = initial
    for x in xs:
        result = combine(result, x)
    return result


def increment_all(xs: tp.Iterable[int]) -> tp.List[int]:
    return map_seq(xs, lambda x: x + 1)


def double_all(xs: tp.Iterable[int]) -> tp.List[int]:
    return map_seq(xs, lambda x: x * 2)


def is_even_all(xs: tp.Iterable[int]) -> tp.List[bool]:
    return map_seq(xs, lambda x: x % 2 == 0)


def sum_all(xs: tp.Iterable[int]) -> int:
    """Sum with an explicit loop (compare ``sum_by_reduce``)."""
    result = 0
    for x in xs:
        result += x
    return result


def concatenate(xs: tp.Iterable[str]) -> str:
    """Concatenate with an explicit loop (compare ``concatenate_by_reduce``)."""
    result = ""
    for x in xs:
        result += x
    return result


def sum_by_reduce(xs: tp.Iterable[int]) -> int:
    return reduce_seq(xs, 0, lambda result, x: result + x)


def concatenate_by_reduce(xs: tp.Iterable[str]) -> str:
    return reduce_seq(xs, "", lambda result, x: result + x)
