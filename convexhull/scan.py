"""Graham scan convex hull with a slow and a fast angular sort."""

from __future__ import annotations

from collections.abc import Iterable

from .geom import Point, angle_orientation
from .sorting import insertion_sort, merge_sort
from .stack import Stack


def get_reference_point(points: Iterable[Point]) -> list[Point]:
    """Return the points with the reference point swapped to the front.

    The reference point has the lowest y, ties broken by the lowest x.
    """
    items = list(points)
    if not items:
        raise ValueError("no points given")
    index, _ = min(enumerate(items), key=lambda pair: (pair[1].y, pair[1].x))
    items[0], items[index] = items[index], items[0]
    return items


def graham_scan_convex_hull(points: Iterable[Point]) -> list[Point]:
    """Return the hull of points already sorted, reference point first."""
    items = list(points)
    if len(items) < 3:
        raise ValueError("at least three points are needed for a convex hull")

    stack = Stack(len(items))
    for point in items[:3]:
        stack.push(point)

    for point in items[3:]:
        while len(stack) >= 2 and angle_orientation(stack.next_to_top(), stack.top(), point) != -1:
            stack.pop()
        stack.push(point)
    return list(stack)


def graham_scan_slow(points: Iterable[Point]) -> list[Point]:
    """Graham scan using insertion sort for the angular ordering."""
    ordered = get_reference_point(points)
    p0 = ordered[0]
    return graham_scan_convex_hull([p0, *insertion_sort(p0, ordered[1:])])


def graham_scan_fast(points: Iterable[Point]) -> list[Point]:
    """Graham scan using merge sort for the angular ordering."""
    ordered = get_reference_point(points)
    p0 = ordered[0]
    return graham_scan_convex_hull([p0, *merge_sort(p0, ordered[1:])])