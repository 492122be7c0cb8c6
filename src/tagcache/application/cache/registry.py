"""Application cache – CacheRegistry (one facade per connection name)."""
from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping, Sequence

from tagcache.application.cache.facade import CacheFacade
from tagcache.config.settings import CacheSettings, EnvSettingsLoader, SettingsFactory, SettingsLoader
from tagcache.observability.logging import get_logger

__all__ = ["CacheRegistry"]

logger = get_logger(__name__)

FacadeFactory = Callable[[CacheSettings], CacheFacade]


class CacheRegistry:
    """Host-owned map from connection name to :class:`CacheFacade`.

    Facades are built lazily on first :meth:`get` from the settings registered
    for that name (or ``CacheSettings(name=name)`` when none were given).

    Args:
        settings: Per-name settings, as a mapping or an iterable of
            :class:`CacheSettings` (keyed by their ``name``).
        factory: Builds a facade from settings; defaults to
            :meth:`CacheFacade.from_settings`.
    """

    def __init__(
        self,
        settings: Mapping[str, CacheSettings] | Iterable[CacheSettings] | None = None,
        factory: FacadeFactory | None = None,
    ) -> None:
        if isinstance(settings, Mapping):
            self._settings: dict[str, CacheSettings] = dict(settings)
        else:
            self._settings = {s.name: s for s in settings or ()}
        self._factory = factory or CacheFacade.from_settings
        self._instances: dict[str, CacheFacade] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_environment(
        cls,
        names: Iterable[str] = ("default",),
        loaders: Sequence[SettingsLoader] | None = None,
        factory: FacadeFactory | None = None,
    ) -> CacheRegistry:
        """Build settings for *names* from ``TAGCACHE_*`` variables (or *loaders*)."""
        settings = SettingsFactory.create_all(names, loaders or [EnvSettingsLoader()])
        return cls(settings, factory)

    def configure(self, settings: CacheSettings) -> None:
        """Register settings for ``settings.name`` before its facade is built."""
        with self._lock:
            if settings.name in self._instances:
                raise ValueError(f"Cache '{settings.name}' is already instantiated")
            self._settings[settings.name] = settings

    def get(self, name: str = "default") -> CacheFacade:
        with self._lock:
            facade = self._instances.get(name)
            if facade is None:
                settings = self._settings.get(name) or CacheSettings(name=name)
                facade = self._factory(settings)
                self._instances[name] = facade
                logger.debug("cache.registry_created", cache=name)
            return facade

    def register(self, facade: CacheFacade) -> None:
        with self._lock:
            if facade.name in self._instances:
                raise ValueError(f"Cache '{facade.name}' is already registered")
            self._instances[facade.name] = facade

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._instances)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._instances

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def close(self) -> None:
        """Close every facade and forget them."""
        with self._lock:
            instances = list(self._instances.values())
            self._instances.clear()
        for facade in instances:
            facade.close()
