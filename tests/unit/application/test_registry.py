"""Unit tests for CacheRegistry."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tagcache.application.cache import CacheFacade, CacheRegistry
from tagcache.config.settings import CacheSettings, EnvSettingsLoader
from tagcache.testing.fakes import InMemoryStore


def _factory() -> MagicMock:
    return MagicMock(side_effect=lambda settings: CacheFacade(settings, store=InMemoryStore()))


class TestCacheRegistry:
    def test_get_builds_once_per_name(self) -> None:
        factory = _factory()
        registry = CacheRegistry(factory=factory)
        first = registry.get()
        assert registry.get("default") is first
        factory.assert_called_once()
        assert first.name == "default"

    def test_unknown_name_gets_default_settings(self) -> None:
        registry = CacheRegistry(factory=_factory())
        assert registry.get("reports").settings == CacheSettings(name="reports")

    def test_settings_from_iterable(self) -> None:
        settings = CacheSettings(name="users", database="users", tag_prefix="u.")
        registry = CacheRegistry([settings], factory=_factory())
        assert registry.get("users").settings is settings

    def test_settings_from_mapping(self) -> None:
        settings = CacheSettings(name="users")
        registry = CacheRegistry({"users": settings}, factory=_factory())
        assert registry.get("users").settings is settings

    def test_configure_before_first_use(self) -> None:
        registry = CacheRegistry(factory=_factory())
        registry.configure(CacheSettings(name="x", mode="strict"))
        assert registry.get("x").settings.strict is True

    def test_configure_after_use_rejected(self) -> None:
        registry = CacheRegistry(factory=_factory())
        registry.get("x")
        with pytest.raises(ValueError):
            registry.configure(CacheSettings(name="x"))

    def test_register_and_duplicate(self) -> None:
        registry = CacheRegistry()
        facade = CacheFacade(CacheSettings(name="manual"), store=InMemoryStore())
        registry.register(facade)
        assert registry.get("manual") is facade
        with pytest.raises(ValueError):
            registry.register(facade)

    def test_names_contains_len(self) -> None:
        registry = CacheRegistry(factory=_factory())
        registry.get("b")
        registry.get("a")
        assert registry.names() == ["a", "b"]
        assert "a" in registry
        assert "zzz" not in registry
        assert len(registry) == 2

    def test_contains_and_len_hold_the_lock(self) -> None:
        registry = CacheRegistry(factory=_factory())
        registry.get("a")
        lock = MagicMock()
        registry._lock = lock  # noqa: SLF001
        assert "a" in registry
        assert len(registry) == 1
        assert lock.__enter__.call_count == 2

    def test_close_closes_every_facade(self) -> None:
        stores = [InMemoryStore(), InMemoryStore()]
        registry = CacheRegistry()
        for name, store in zip(("a", "b"), stores):
            registry.register(CacheFacade(CacheSettings(name=name), store=store))
        registry.close()
        assert all(store.closed for store in stores)
        assert len(registry) == 0

    def test_independent_namespaces(self) -> None:
        registry = CacheRegistry(factory=_factory())
        registry.get("a").save("k", 1)
        assert registry.get("b").load("k") is None

    def test_from_environment(self) -> None:
        loader = EnvSettingsLoader({"TAGCACHE_HOST": "main", "TAGCACHE_JOBS_DATABASE": "jobs"})
        registry = CacheRegistry.from_environment(["default", "jobs"], [loader], factory=_factory())
        assert registry.get().settings.host == "main"
        assert registry.get("jobs").settings.key_prefix == "jobs:"
