"""A bounded LIFO stack of points."""

from __future__ import annotations

from collections.abc import Iterator

from .geom import Point

MAX_SIZE = 32768


class StackOverflowError(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading or removing from a stack with too few elements."""


class Stack:
    """A stack of points with a fixed capacity."""

    def __init__(self, capacity: int = MAX_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Point] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, point: Point) -> None:
        """Push ``point`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow: cannot push")
        self._items.append(point)

    def pop(self) -> Point:
        """Remove and return the top point."""
        if self.is_empty():
            raise StackUnderflowError("stack underflow: cannot pop")
        return self._items.pop()

    def top(self) -> Point:
        """Return the top point without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty: no top element")
        return self._items[-1]

    def next_to_top(self) -> Point:
        """Return the point just below the top."""
        if len(self._items) < 2:
            raise StackUnderflowError("stack has no next-to-top element")
        return self._items[-2]

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Point]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))