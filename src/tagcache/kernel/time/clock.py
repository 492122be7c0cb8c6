"""Kernel time – Clock protocol + implementations.

TTL expiry in the in-memory store is evaluated against a :class:`Clock`, so
tests move time forward with :meth:`FrozenClock.advance` instead of sleeping.
"""
from __future__ import annotations

import time
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: wall-clock source used for entry expiry."""

    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Production clock backed by :func:`time.time`."""

    def now(self) -> datetime:
        return datetime.fromtimestamp(time.time(), UTC)

    def timestamp(self) -> float:
        return time.time()


class FrozenClock:
    """Test clock that only moves when told to.

    Args:
        fixed: Starting instant; must be timezone-aware.
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock needs a timezone-aware datetime")
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def advance(self, **delta: float) -> datetime:
        """Move forward by ``timedelta(**delta)`` and return the new instant."""
        step = timedelta(**delta)
        if step < timedelta(0):
            raise ValueError("FrozenClock cannot move backwards")
        self._fixed += step
        return self._fixed


def expires_at(clock: Clock, seconds: float | None) -> float | None:
    """Absolute expiry timestamp for a TTL of *seconds*; ``None`` means never."""
    if seconds is None:
        return None
    return clock.timestamp() + seconds


def is_expired(clock: Clock, deadline: float | None) -> bool:
    """An entry is gone once ``now >= deadline`` (a zero TTL expires at once)."""
    return deadline is not None and clock.timestamp() >= deadline


__all__ = ["Clock", "FrozenClock", "SystemClock", "expires_at", "is_expired"]
