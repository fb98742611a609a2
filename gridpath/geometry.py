"""
Geometry primitives: grid points and the distance functions used as heuristics.
"""
from __future__ import annotations
import math
from typing import Callable, Iterator, NamedTuple


class Point(NamedTuple):
    """Integer grid coordinate; compares and hashes like an ``(x, y)`` tuple."""

    x: int
    y: int


# Estimate of the remaining cost from the first point to the second
Heuristic = Callable[[Point, Point], float]


def manhattan_distance(a: Point, b: Point) -> float:
    """Manhattan distance; admissible and consistent for 4-directional unit steps."""
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance; admissible but a looser guide on a 4-connected grid."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def neighbors(p: Point) -> Iterator[Point]:
    """Yield the cardinal neighbours of ``p`` (no diagonals)."""
    x, y = p
    for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        yield Point(x + dx, y + dy)
