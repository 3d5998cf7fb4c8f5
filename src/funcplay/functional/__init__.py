"""Functional primitives for funcplay.

This package provides small, stateless, side-effect-free functions (region
predicates, sequence traversals, optional handling, currying and composition)
meant to be combined into larger ones.
"""

from funcplay.functional.arrays import filter_seq, map_seq, reduce_seq
from funcplay.functional.composition import Composable, compose, curry, uncurry
from funcplay.functional.optionals import map_optional, or_else
from funcplay.functional.regions import (
    circle,
    difference,
    intersection,
    invert,
    rasterize,
    shift,
    union,
)

__all__ = [
    "circle",
    "shift",
    "invert",
    "intersection",
    "union",
    "difference",
    "rasterize",
    "map_seq",
    "filter_seq",
    "reduce_seq",
    "or_else",
    "map_optional",
    "curry",
    "uncurry",
    "compose",
    "Composable",
]
