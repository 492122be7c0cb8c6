"""Unit tests for the in-memory testing fakes."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from tagcache.kernel.cache import ErrorSink, Store, Transaction
from tagcache.testing import CollectingErrorSink, FakeClock, InMemoryStore


# ---------------------------------------------------------------------------
# FakeClock
# ---------------------------------------------------------------------------


class TestFakeClock:
    def test_pinned_and_advanceable(self) -> None:
        clock = FakeClock()
        start = clock.timestamp()
        clock.advance(minutes=1)
        assert clock.timestamp() - start == 60
        assert clock.now().year == 2026

    def test_configurable_start(self) -> None:
        assert FakeClock(1_700_000_000).timestamp() == 1_700_000_000
        start = datetime(2030, 6, 1, tzinfo=UTC)
        assert FakeClock(start).now() == start


# ---------------------------------------------------------------------------
# InMemoryStore
# ---------------------------------------------------------------------------


class TestInMemoryStore:
    def test_satisfies_ports(self) -> None:
        store = InMemoryStore()
        assert isinstance(store, Store)
        assert isinstance(store.begin_transaction(), Transaction)
        assert isinstance(CollectingErrorSink(), ErrorSink)

    def test_ttl_expiry(self) -> None:
        clock = FakeClock()
        store = InMemoryStore(clock=clock)
        store.set_with_ttl("k", b"v", 30)
        assert store.ttl("k") == 30
        clock.advance(seconds=29)
        assert store.get("k") == b"v"
        clock.advance(seconds=1)
        assert store.get("k") is None
        assert store.keys() == []

    def test_delete_counts_distinct_live_keys(self) -> None:
        store = InMemoryStore()
        store.set_many({"a": b"1", "b": b"2"})
        assert store.delete("a", "a", "missing") == 1
        assert store.exists("a", "b") == 1

    def test_sets_share_keyspace(self) -> None:
        store = InMemoryStore()
        store.set_add("s", "x")
        with pytest.raises(TypeError):
            store.get("s")
        assert store.get_many(["s"]) == [None]
        assert store.exists("s") == 1

    def test_emptied_set_is_removed(self) -> None:
        store = InMemoryStore()
        assert store.set_add("s", "x", "y", "x") == 2
        assert store.set_remove("s", "x", "y", "z") == 2
        assert store.keys() == []
        assert store.set_members("s") == set()

    def test_inject_failure_records_call(self) -> None:
        store = InMemoryStore()
        store.inject_failure("get", lambda: TimeoutError("slow"))
        with pytest.raises(TimeoutError):
            store.get("k")
        assert store.calls == ["get"]
        store.clear_failures()
        assert store.get("k") is None

    def test_default_failure_is_connection_error(self) -> None:
        store = InMemoryStore()
        store.inject_failure("set")
        with pytest.raises(ConnectionError):
            store.set("k", b"v")

    def test_flush_namespace(self) -> None:
        store = InMemoryStore()
        store.set("a", b"1")
        store.set_add("s", "a")
        assert store.flush_namespace() is True
        assert store.keys() == []


# ---------------------------------------------------------------------------
# InMemoryTransaction
# ---------------------------------------------------------------------------


class TestInMemoryTransaction:
    def test_commit_returns_ordered_results(self) -> None:
        store = InMemoryStore()
        tx = store.begin_transaction()
        tx.set("a", b"1").set_add("s", "a").get_many(["a", "b"]).set_members("s")
        assert tx.commit() == [None, 1, [b"1", None], {"a"}]

    def test_nothing_applied_before_commit(self) -> None:
        store = InMemoryStore()
        store.begin_transaction().set("a", b"1")
        assert store.keys() == []

    def test_failure_rolls_back_everything(self) -> None:
        store = InMemoryStore()
        store.set("keep", b"1")
        tx = store.begin_transaction()
        tx.delete("keep").set("new", b"2").get("s")
        store.set_add("s", "m")
        with pytest.raises(TypeError):
            tx.commit()
        assert store.keys() == ["keep", "s"]
        assert store.get("keep") == b"1"
