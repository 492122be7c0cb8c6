"""Integration tests for the Redis store behind CacheFacade.

Uses testcontainers to spawn a real Redis instance.
Run with: pytest tests/integration/test_redis.py -m integration -v
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest
from testcontainers.redis import RedisContainer

from tagcache.adapters.redis import connect_redis, reset_pools
from tagcache.application.cache import CacheFacade
from tagcache.config.settings import CacheSettings
from tagcache.kernel.errors import OperationFailureError

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


@pytest.fixture(scope="module")
def redis_endpoint() -> Iterator[tuple[str, int]]:
    with RedisContainer() as container:
        yield container.get_container_host_ip(), int(container.get_exposed_port(container.port))


def _settings(endpoint: tuple[str, int], **overrides: object) -> CacheSettings:
    host, port = endpoint
    return CacheSettings(host=host, port=port, timeout=5.0, **overrides)  # type: ignore[arg-type]


@pytest.fixture
def cache(redis_endpoint: tuple[str, int]) -> Iterator[CacheFacade]:
    facade = CacheFacade(_settings(redis_endpoint, database="it"))
    yield facade
    facade.clear()
    facade.close()
    reset_pools()


# ---------------------------------------------------------------------------
# Facade over a real server
# ---------------------------------------------------------------------------


class TestRedisFacadeIntegration:
    def test_connects_lazily(self, cache: CacheFacade) -> None:
        assert cache.connected is False
        assert cache.enabled is True
        assert cache.connected is True

    def test_save_load_round_trip(self, cache: CacheFacade) -> None:
        assert cache.save("a", {"x": 1}, ttl=60, tags=["g1"]) is True
        assert cache.load("a") == {"x": 1}
        assert cache.store is not None
        assert cache.store.client.ttl("it:a") > 0  # type: ignore[attr-defined]

    def test_load_many_order_and_fallback(self, cache: CacheFacade) -> None:
        cache.save_many({"a": 1, "b": 2})
        result = cache.load_many(["b", "missing", "a"], on_miss=lambda _c, key: f"fallback:{key}")
        assert result == [2, "fallback:missing", 1]

    def test_delete_by_tags(self, cache: CacheFacade) -> None:
        cache.save("a", {"x": 1}, tags=["g1"])
        cache.save("b", {"x": 2}, tags=["g1", "g2"])
        cache.save("c", {"x": 3}, tags=["g2"])
        assert cache.delete_by_tags("g1") == 2
        assert cache.delete_by_tags("g1") == 0
        assert cache.has_many("a", "b", "c") == 1

    def test_delete_many_cleans_memberships(self, cache: CacheFacade) -> None:
        cache.save("a", 1, tags=["g"])
        assert cache.delete_many(["a"], key_tags={"a": ["g"]}) == 1
        assert cache.store is not None
        assert cache.store.set_members("cache.tag.g") == set()

    def test_transaction(self, cache: CacheFacade) -> None:
        results = cache.process_transaction([
            ("set", ("k", cache.codec.encode("v"))),
            ("exists", "k"),
            ("set_add", ("cache.tag.t", "k")),
        ])
        assert results == [True, 1, 1]
        assert cache.load("k") == "v"
        assert cache.delete_by_tags("t") == 1

    def test_clear_only_touches_namespace(self, cache: CacheFacade, redis_endpoint: tuple[str, int]) -> None:
        other = CacheFacade(_settings(redis_endpoint, name="other", database="other"))
        other.save("a", 1)
        cache.save("a", 2, tags=["g"])
        assert cache.clear() is True
        assert cache.has("a") is False
        assert other.load("a") == 1
        other.clear()
        other.close()

    def test_strict_mode_surfaces_wrongtype(self, redis_endpoint: tuple[str, int]) -> None:
        strict = CacheFacade(_settings(redis_endpoint, database="strict", mode="strict"))
        strict.save("plain", 1)
        strict.store.set_add("set", "x")  # type: ignore[union-attr]
        with pytest.raises(OperationFailureError):
            strict.load("set")
        strict.clear()
        strict.close()


class TestRedisConnectIntegration:
    def test_unreachable_server_degrades(self) -> None:
        facade = CacheFacade(CacheSettings(host="127.0.0.1", port=1, timeout=0.2))
        assert facade.save("a", 1) is False
        assert facade.load("a", on_miss=lambda _c, _k: "fallback") == "fallback"
        assert facade.installed is True
        assert facade.connected is False

    def test_persistent_connections_share_pool(self, redis_endpoint: tuple[str, int]) -> None:
        settings = _settings(redis_endpoint, persistent=True)
        first = connect_redis(settings)
        second = connect_redis(settings)
        assert first.client.connection_pool is second.client.connection_pool
        first.close()
        second.close()
        reset_pools()
