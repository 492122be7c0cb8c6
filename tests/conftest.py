"""Shared fixtures: an in-memory store on a frozen clock behind a facade."""
from __future__ import annotations

import pytest

from tagcache.application.cache import CacheFacade
from tagcache.config.settings import CacheSettings
from tagcache.kernel.time import FrozenClock
from tagcache.testing.fakes import CollectingErrorSink, FakeClock, InMemoryStore


@pytest.fixture
def clock() -> FrozenClock:
    return FakeClock()


@pytest.fixture
def store(clock: FrozenClock) -> InMemoryStore:
    return InMemoryStore(clock=clock)


@pytest.fixture
def sink() -> CollectingErrorSink:
    return CollectingErrorSink()


@pytest.fixture
def cache(store: InMemoryStore, sink: CollectingErrorSink) -> CacheFacade:
    return CacheFacade(CacheSettings(), store=store, error_sink=sink)


@pytest.fixture
def strict_cache(store: InMemoryStore, sink: CollectingErrorSink) -> CacheFacade:
    return CacheFacade(CacheSettings(mode="strict"), store=store, error_sink=sink)
