"""Planar points and the orientation predicates used by the Graham scan."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point on the Cartesian plane."""

    x: float
    y: float


def angle_orientation(prev: Point, top: Point, nxt: Point) -> int:
    """Return the turn direction from ``prev -> top`` towards ``nxt``.

    0 means collinear, 1 clockwise and -1 counter-clockwise.
    """
    value = (top.y - prev.y) * (nxt.x - top.x) - (top.x - prev.x) * (nxt.y - top.y)
    if value == 0:
        return 0
    return 1 if value > 0 else -1


def compare_polar_order(p0: Point, p1: Point, p2: Point) -> bool:
    """Return True if ``p1`` comes before ``p2`` in polar order around ``p0``.

    Collinear points are ordered by their distance from ``p0``, closest first.
    """
    orientation = angle_orientation(p0, p1, p2)
    if orientation == 0:
        return euclidean_distance(p0, p1) < euclidean_distance(p0, p2)
    return orientation == -1


def euclidean_distance(p1: Point, p2: Point) -> float:
    """Return the straight-line distance between two points."""
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)