"""Walkthrough of the funcplay combinators.

Evaluates a fixed sequence of example expressions and logs each result, the
way one would poke at them in an interactive session::

    python -m funcplay
"""

import typing as tp
from typing import Optional

from funcplay.core.config import Settings
from funcplay.core.types import Point
from funcplay.functional.arrays import (
    concatenate,
    concatenate_by_reduce,
    double_all,
    filter_seq,
    increment_all,
    is_even_all,
    map_seq,
    sum_all,
    sum_by_reduce,
)
from funcplay.functional.composition import Composable, add, add_curried, curry
from funcplay.functional.optionals import or_else
from funcplay.functional.regions import circle, difference, rasterize, shift
from funcplay.functional.targeting import (
    in_range,
    in_range_guarded,
    in_range_regions,
)
from funcplay.logger.logger import logger, setup_logger

__all__ = ["run_playground", "main"]

INT_ARRAY = [1, 2, 3, 4]
PLAYERS = ["Kareem", "Malone", "Kobe", "Jordan"]


def run_playground(settings: Optional[Settings] = None) -> tp.Dict[str, tp.Any]:
    """Evaluate the walkthrough.

    Args:
        settings: Settings to use. Defaults to ``Settings()``.

    Returns:
        Mapping of example label to its result, in evaluation order.
    """
    settings = settings or Settings()
    min_distance = settings.min_distance

    own = Point(0.0, 0.0)
    friendly = Point(5.0, 0.0)
    target = Point(0.0, 6.0)
    ring = difference(circle(3.0), circle(1.0))

    results: tp.Dict[str, tp.Any] = {
        "in_range": in_range(Point(1.0, 1.0), 2.0),
        "in_range_guarded": in_range_guarded(target, own, friendly, 10.0, min_distance),
        "in_range_regions": in_range_regions(target, own, friendly, 10.0, min_distance),
        "ring_contains_2_0": ring(Point(2.0, 0.0)),
        "shifted_ring_contains_2_0": shift(Point(5.0, 0.0), ring)(Point(2.0, 0.0)),
        "ring_mask": rasterize(ring, range(-3, 4), range(-3, 4)).astype(int).tolist(),
        "add": add(1, 2),
        "add_curried": add_curried(1)(2),
        "curry_add": curry(add)(1)(2),
        "composed": (Composable(increment_all) >> double_all >> sum_all)(INT_ARRAY),
        "increment_all": increment_all(INT_ARRAY),
        "double_all": double_all(INT_ARRAY),
        "is_even_all": is_even_all(INT_ARRAY),
        "greater_than_two": map_seq(INT_ARRAY, lambda x: x > 2),
        "players_ending_in_e": filter_seq(PLAYERS, lambda name: name.endswith("e")),
        "sum_all": sum_all(INT_ARRAY),
        "sum_by_reduce": sum_by_reduce(INT_ARRAY),
        "concatenate": concatenate(PLAYERS),
        "concatenate_by_reduce": concatenate_by_reduce(PLAYERS),
        "or_else_present": or_else(settings.min_distance, lambda: 0.0),
        "or_else_absent": or_else(None, lambda: min_distance * 2),
    }

    for label, value in results.items():
        logger.info(f"{label}: {value}")

    return results


def main() -> None:
    """Entry point for ``python -m funcplay``."""
    settings = Settings.load()
    setup_logger(level=settings.log_level)
    logger.info(f"Running playground with min_distance={settings.min_distance}")
    run_playground(settings)
