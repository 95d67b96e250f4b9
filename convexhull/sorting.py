"""Sorting points by polar angle around a reference point."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .geom import Point, compare_polar_order


def merge_sort(p0: Point, points: Iterable[Point]) -> list[Point]:
    """Return ``points`` sorted by polar angle around ``p0`` using merge sort.

    ``points`` must not contain the reference point itself.
    """
    items = list(points)
    if len(items) <= 1:
        return items

    mid = (len(items) - 1) // 2 + 1
    left = deque(merge_sort(p0, items[:mid]))
    right = deque(merge_sort(p0, items[mid:]))

    merged: list[Point] = []
    while left and right:
        if compare_polar_order(p0, left[0], right[0]):
            merged.append(left.popleft())
        else:
            merged.append(right.popleft())
    merged.extend(left)
    merged.extend(right)
    return merged


def insertion_sort(p0: Point, points: Iterable[Point]) -> list[Point]:
    """Return ``points`` sorted by polar angle around ``p0`` using insertion sort.

    ``points`` must not contain the reference point itself.
    """
    result: list[Point] = []
    for key in points:
        pos = len(result)
        while pos > 0 and not compare_polar_order(p0, result[pos - 1], key):
            pos -= 1
        result.insert(pos, key)
    return result