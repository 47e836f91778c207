"""
Injectable clocks.

Scheduling code asks a clock for the current time instead of calling
`datetime.now` directly, so tests can pin and advance time.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        ...


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC, as stored timestamps are
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    A clock that only moves when told to.

    Args:
        start: Initial time (defaults to the current UTC time; naive
            values are read as UTC)
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = _as_utc(start) if start is not None else datetime.now(timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, value: datetime) -> None:
        self._now = _as_utc(value)

    def advance(self, delta: timedelta) -> datetime:
        self._now = self._now + delta
        return self._now


_default_clock = SystemClock()


def default_clock() -> Clock:
    return _default_clock
