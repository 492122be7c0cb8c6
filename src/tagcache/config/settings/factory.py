"""Config settings – SettingsFactory (layered sources -> CacheSettings)."""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from tagcache.config.settings.cache import DEFAULT_NAME, CacheSettings, setting_names
from tagcache.config.settings.loaders import SettingsLoader, build_settings
from tagcache.config.validation import ConfigError, UnknownSettingError
from tagcache.observability.logging import get_logger

logger = get_logger(__name__)


class SettingsFactory:
    """Layer several loaders and explicit overrides into :class:`CacheSettings`.

    Loaders are consulted in order and later ones win per field; *overrides*
    win over every loader.  A loader whose source is broken (it raises
    :class:`ConfigError`) is logged and skipped so the remaining sources still
    apply.
    """

    @staticmethod
    def create(
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
        *,
        name: str = DEFAULT_NAME,
    ) -> CacheSettings:
        """Build the settings for connection *name*.

        Raises:
            UnknownSettingError: *overrides* names a field that does not exist.
            InvalidSettingValueError: the merged values fail validation.
        """
        overrides = dict(overrides or {})
        known = setting_names()
        for key in overrides:
            if key not in known:
                raise UnknownSettingError(key)

        merged: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                merged.update(loader.values(name))
            except ConfigError as exc:
                logger.warning(
                    "cache.settings_source_skipped",
                    cache=name,
                    loader=type(loader).__name__,
                    reason=exc.message,
                )
        merged.update(overrides)
        merged["name"] = name
        return build_settings(merged)

    @classmethod
    def create_all(
        cls,
        names: Iterable[str],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> list[CacheSettings]:
        """Build settings for several connection names, e.g. to seed a registry."""
        per_name = overrides or {}
        return [cls.create(loaders, per_name.get(n), name=n) for n in dict.fromkeys(names)]


__all__ = ["SettingsFactory"]
