"""Config settings – CacheSettings (connection + error policy)."""
from __future__ import annotations

import dataclasses
from enum import Enum

from tagcache.config.validation import InvalidSettingValueError


class OperatingMode(str, Enum):
    """How swallowed errors are treated at the facade boundary."""

    STRICT = "strict"
    LENIENT = "lenient"


DEFAULT_NAME = "default"


@dataclasses.dataclass
class CacheSettings:
    """Connection parameters and behaviour switches for one named cache.

    Loaded from ``TAGCACHE_*`` environment variables (``TAGCACHE_<NAME>_*``
    for a named connection) by
    :class:`~tagcache.config.settings.loaders.EnvSettingsLoader`.

    ``database`` is a namespace, not the redis db index: when non-empty every
    key is stored as ``"<database>:<key>"``.  ``db`` selects the redis logical
    database.
    """

    name: str = DEFAULT_NAME
    host: str = "127.0.0.1"
    port: int = 6379
    db: int = 0
    database: str = ""
    password: str | None = None
    timeout: float = 0.5
    read_timeout: float | None = None
    persistent: bool = False
    tag_prefix: str = "cache.tag."
    mode: str = OperatingMode.LENIENT.value
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidSettingValueError("name", self.name, "must not be empty")
        if not 0 < self.port < 65536:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.db < 0:
            raise InvalidSettingValueError("db", self.db, "must not be negative")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.read_timeout is not None and self.read_timeout <= 0:
            raise InvalidSettingValueError("read_timeout", self.read_timeout, "must be positive")
        if not self.tag_prefix:
            raise InvalidSettingValueError("tag_prefix", self.tag_prefix, "must not be empty")
        try:
            self.mode = OperatingMode(self.mode).value
        except ValueError:
            raise InvalidSettingValueError(
                "mode", self.mode, "expected 'strict' or 'lenient'"
            ) from None

    @property
    def operating_mode(self) -> OperatingMode:
        return OperatingMode(self.mode)

    @property
    def strict(self) -> bool:
        return self.operating_mode is OperatingMode.STRICT

    @property
    def key_prefix(self) -> str:
        """Namespace prefix applied to every stored key."""
        return f"{self.database}:" if self.database else ""


def setting_names() -> frozenset[str]:
    """Field names accepted by :class:`CacheSettings`."""
    return frozenset(f.name for f in dataclasses.fields(CacheSettings))


__all__ = ["DEFAULT_NAME", "CacheSettings", "OperatingMode", "setting_names"]
