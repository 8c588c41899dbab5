"""Time sources for Wait and Timing actions."""

import time
from datetime import timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float:
        """Current time in seconds on a monotonic scale."""


class MonotonicClock:
    """Real time, read from ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()


class FakeClock:
    """A clock that only moves when told to. For tests and replays."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float | timedelta) -> float:
        """Move forward by ``seconds`` and return the new time."""
        self._now += to_seconds(seconds)
        return self._now

    def set(self, seconds: float) -> None:
        self._now = seconds


def to_seconds(duration: float | timedelta) -> float:
    """Normalize a duration given as seconds or a timedelta."""
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)
