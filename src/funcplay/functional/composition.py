"""First-class functions: currying and composition.

Functions are values like any other: they can be returned from functions,
partially applied, and chained. ``add`` and ``add_curried`` compute the same
thing; the curried version takes its arguments one at a time.

``compose`` chains unary functions left to right, and :class:`Composable`
offers the same thing as an operator::

    pipeline = Composable(str.strip) >> str.lower >> len
    pipeline("  Hello ")  # 5
"""

import functools
import typing as tp

__all__ = [
    "add",
    "add_curried",
    "curry",
    "uncurry",
    "compose",
    "Composable",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")
C = tp.TypeVar("C")


def add(x: int, y: int) -> int:
    return x + y


def add_curried(x: int) -> tp.Callable[[int], int]:
    def add_x(y: int) -> int:
        return x + y

    return add_x


def _require_callable(*functions: tp.Any) -> None:
    for f in functions:
        if not callable(f):
            raise TypeError(f"Expected a callable, got {type(f).__name__}")


def curry(f: tp.Callable[[A, B], C]) -> tp.Callable[[A], tp.Callable[[B], C]]:
    """Turn a two-argument function into a chain of one-argument functions.

    Args:
        f: Function of two positional arguments.

    Returns:
        Function ``x -> (y -> f(x, y))``.

    Raises:
        TypeError: If ``f`` is not callable.
    """
    _require_callable(f)

    @functools.wraps(f)
    def curried(x: A) -> tp.Callable[[B], C]:
        def apply_y(y: B) -> C:
            return f(x, y)

        return apply_y

    return curried


def uncurry(g: tp.Callable[[A], tp.Callable[[B], C]]) -> tp.Callable[[A, B], C]:
    """Inverse of :func:`curry`: ``uncurry(g)(x, y) == g(x)(y)``."""
    _require_callable(g)

    @functools.wraps(g)
    def uncurried(x: A, y: B) -> C:
        return g(x)(y)

    return uncurried


def compose(*functions: tp.Callable[[tp.Any], tp.Any]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose unary functions left to right.

    ``compose(f, g, h)(x) == h(g(f(x)))``. With no arguments the result is
    the identity function.

    Raises:
        TypeError: If any argument is not callable.
    """
    _require_callable(*functions)

    def composed(value: tp.Any) -> tp.Any:
        for f in functions:
            value = f(value)
        return value

    return composed


class Composable:
    """Unary callable that composes with ``>>``.

    ``(Composable(f) >> g)(x) == g(f(x))``. The right-hand side may be a plain
    callable or another :class:`Composable`.
    """

    def __init__(self, function: tp.Callable[[tp.Any], tp.Any]):
        _require_callable(function)
        self.function = function

    def __call__(self, value: tp.Any) -> tp.Any:
        return self.function(value)

    def __rshift__(self, other: tp.Callable[[tp.Any], tp.Any]) -> "Composable":
        if not callable(other):
            return NotImplemented
        return Composable(compose(self.function, other))

    def __rrshift__(self, other: tp.Callable[[tp.Any], tp.Any]) -> "Composable":
        if not callable(other):
            return NotImplemented
        return Composable(compose(other, self.function))

    def __repr__(self) -> str:
        return f"Composable({self.function!r})"
