"""Config settings – EnvSettingsLoader, DotenvSettingsLoader.

The default connection reads ``TAGCACHE_<FIELD>``; a named connection reads
``TAGCACHE_<NAME>_<FIELD>`` (``sessions`` -> ``TAGCACHE_SESSIONS_HOST``).
Loaders only report the fields their source actually sets, so several
sources can be layered by :class:`~tagcache.config.settings.factory.SettingsFactory`.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from tagcache.config.settings.cache import DEFAULT_NAME, CacheSettings
from tagcache.config.validation import ConfigError, InvalidSettingValueError

ENV_PREFIX = "TAGCACHE"

_OPTIONAL_SUFFIX = " | None"
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def env_prefix(name: str = DEFAULT_NAME) -> str:
    if name == DEFAULT_NAME:
        return f"{ENV_PREFIX}_"
    return f"{ENV_PREFIX}_{name.upper().replace('-', '_').replace('.', '_')}_"


def build_settings(values: Mapping[str, Any]) -> CacheSettings:
    """Construct :class:`CacheSettings`, turning constructor errors into :class:`ConfigError`."""
    try:
        return CacheSettings(**values)
    except ConfigError:
        raise
    except Exception as exc:
        raise ConfigError(f"Failed to build cache settings: {exc}", cause=exc) from exc


def _coerce(value: str, type_hint: Any) -> Any:  # noqa: PLR0911
    # Annotations are strings under ``from __future__ import annotations``.
    if isinstance(type_hint, str) and type_hint.endswith(_OPTIONAL_SUFFIX):
        if value == "":
            return None
        type_hint = type_hint[: -len(_OPTIONAL_SUFFIX)]
    if type_hint in (bool, "bool"):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {value!r}")
    if type_hint in (int, "int"):
        return int(value)
    if type_hint in (float, "float"):
        return float(value)
    return value


class SettingsLoader(abc.ABC):
    """Port: read cache settings for one connection name from a source."""

    @abc.abstractmethod
    def values(self, name: str = DEFAULT_NAME) -> dict[str, Any]:
        """Return the fields this source sets for *name*, already coerced."""

    def load(self, name: str = DEFAULT_NAME) -> CacheSettings:
        return build_settings({**self.values(name), "name": name})


class EnvSettingsLoader(SettingsLoader):
    """Read ``TAGCACHE_*`` variables from *environ* (``os.environ`` by default)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, name: str = DEFAULT_NAME) -> dict[str, Any]:
        environ = self._environ if self._environ is not None else os.environ
        prefix = env_prefix(name)
        found: dict[str, Any] = {}
        for field in dataclasses.fields(CacheSettings):
            if field.name == "name":
                continue
            env_key = f"{prefix}{field.name.upper()}"
            raw = environ.get(env_key)
            if raw is None:
                continue
            try:
                found[field.name] = _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(env_key, raw, str(exc)) from exc
        return found


class DotenvSettingsLoader(EnvSettingsLoader):
    """Read a ``.env`` file without touching ``os.environ``.

    With ``override=False`` real environment variables win over the file.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        super().__init__()
        self._env_file = env_file
        self._override = override

    def values(self, name: str = DEFAULT_NAME) -> dict[str, Any]:
        from dotenv import dotenv_values

        file_values = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            self._environ = {**os.environ, **file_values}
        else:
            self._environ = {**file_values, **os.environ}
        return super().values(name)


__all__ = [
    "ENV_PREFIX",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "SettingsLoader",
    "build_settings",
    "env_prefix",
]
