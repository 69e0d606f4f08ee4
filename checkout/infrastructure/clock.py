"""
Clock implementations.

SystemClock for production, FixedClock for tests and demos.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from checkout.application.interfaces import Clock


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    """
    Deterministic clock that only moves when told to.

    Example:
        >>> clock = FixedClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        >>> clock.advance(timedelta(hours=2))
    """

    def __init__(self, current: Optional[datetime] = None):
        current = current or datetime(2024, 1, 1, tzinfo=timezone.utc)
        if current.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        self._current = current

    def now(self) -> datetime:
        return self._current

    def set(self, current: datetime) -> None:
        """Jump to an absolute time."""
        self._current = current

    def advance(self, delta: timedelta) -> None:
        """Move time forward by ``delta``."""
        self._current = self._current + delta
