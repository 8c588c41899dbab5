"""Tests for the clock sources."""

from datetime import timedelta

from routine import FakeClock, MonotonicClock
from routine.clock import to_seconds


class TestFakeClock:
    def test_starts_where_told(self):
        assert FakeClock().now() == 0.0
        assert FakeClock(start=12.5).now() == 12.5

    def test_advance(self):
        clock = FakeClock()
        assert clock.advance(1.5) == 1.5
        assert clock.advance(timedelta(seconds=2)) == 3.5
        assert clock.now() == 3.5

    def test_set(self):
        clock = FakeClock()
        clock.set(42)
        assert clock.now() == 42


class TestMonotonicClock:
    def test_never_goes_backwards(self):
        clock = MonotonicClock()
        first = clock.now()
        assert clock.now() >= first


class TestToSeconds:
    def test_numbers(self):
        assert to_seconds(3) == 3.0
        assert isinstance(to_seconds(3), float)

    def test_timedelta(self):
        assert to_seconds(timedelta(minutes=1, milliseconds=500)) == 60.5
