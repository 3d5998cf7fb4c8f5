"""Helpers for values that may be absent (``None``)."""

import typing as tp

__all__ = ["or_else", "map_optional"]

T = tp.TypeVar("T")
U = tp.TypeVar("U")


def or_else(value: tp.Optional[T], fallback: tp.Callable[[], T]) -> T:
    """Return ``value`` unless it is ``None``, else ``fallback()``.

    ``fallback`` is only called when ``value`` is absent, so it may be
    expensive or have side effects. Falsy values such as ``0`` or ``""`` are
    present and returned as is.

    Args:
        value: Primary value, possibly ``None``.
        fallback: Zero-argument callable producing the default.

    Returns:
        ``value`` or the computed default.
    """
    if value is not None:
        return value
    return fallback()


def map_optional(value: tp.Optional[T], f: tp.Callable[[T], U]) -> tp.Optional[U]:
    """Apply ``f`` to a present value; propagate ``None`` otherwise."""
    if value is None:
        return None
    return f(value)
