"""Millisecond clock sources."""

import time


class MonotonicClock:
    """Reads ``time.monotonic_ns()`` truncated to whole milliseconds."""

    def now(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Hand-driven clock for tests and simulations."""

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def now(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        if ms < 0:
            raise ValueError("cannot advance by a negative amount")
        self._now += ms
        return self._now

    def set(self, ms: int) -> None:
        """Jump to an absolute reading. May move backwards."""
        self._now = ms
