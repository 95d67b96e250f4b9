"""Processor-time stopwatch reporting milliseconds."""

from __future__ import annotations

import time


class Timer:
    """Measures elapsed processor time between ``start`` and ``stop``."""

    def __init__(self) -> None:
        self._start: float | None = None
        self.elapsed_ms: float | None = None

    def start(self) -> None:
        """Start (or restart) the timer."""
        self.elapsed_ms = None
        self._start = time.process_time()

    def stop(self) -> float:
        """Stop the timer and return the elapsed time in milliseconds."""
        if self._start is None:
            raise RuntimeError("timer was not started")
        self.elapsed_ms = 1000.0 * (time.process_time() - self._start)
        self._start = None
        return self.elapsed_ms

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()