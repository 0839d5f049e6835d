"""A monotonic stopwatch measuring in nanoseconds."""

from __future__ import annotations

import time


class Timer:
    """Measures the time between ``start`` and ``stop`` in nanoseconds."""

    def __init__(self) -> None:
        self.elapsed = 0
        self._start: int | None = None

    def start(self) -> None:
        """Start (or restart) the measurement."""
        self._start = time.perf_counter_ns()

    def stop(self) -> int:
        """Stop the measurement and return the elapsed nanoseconds."""
        if self._start is None:
            raise RuntimeError("timer was stopped before it was started")
        self.elapsed = time.perf_counter_ns() - self._start
        return self.elapsed

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()