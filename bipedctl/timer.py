"""Monotonic stopwatch."""

from __future__ import annotations

import time


class Timer:
    """Measures time elapsed on the monotonic clock; starts when created."""

    def __init__(self):
        self._start_ns = 0
        self.start()

    def start(self) -> None:
        """Restart the timer."""
        self._start_ns = time.monotonic_ns()

    def elapsed_ns(self) -> int:
        """Nanoseconds since the last start."""
        return time.monotonic_ns() - self._start_ns

    def elapsed_ms(self) -> float:
        """Milliseconds since the last start."""
        return self.elapsed_ns() / 1.0e6

    def elapsed_seconds(self) -> float:
        """Seconds since the last start."""
        return self.elapsed_ns() / 1.0e9