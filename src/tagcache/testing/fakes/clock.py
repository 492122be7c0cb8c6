"""Testing fakes – FakeClock factory for TTL-driven tests."""
from __future__ import annotations

from datetime import UTC, datetime

from tagcache.kernel.time import FrozenClock

DEFAULT_START = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def FakeClock(start: datetime | float | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` for driving ``InMemoryStore`` expiry.

    *start* may be an aware datetime or a Unix timestamp (the unit Redis TTLs
    are counted in); it defaults to :data:`DEFAULT_START`.
    """
    if start is None:
        return FrozenClock(DEFAULT_START)
    if isinstance(start, datetime):
        return FrozenClock(start)
    return FrozenClock(datetime.fromtimestamp(start, tz=UTC))


__all__ = ["DEFAULT_START", "FakeClock"]
