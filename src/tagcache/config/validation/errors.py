"""Config validation errors – raised while building :class:`CacheSettings`."""
from __future__ import annotations

from tagcache.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Cache configuration is invalid or could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is unusable (bad port, unknown mode...)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Cache setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class UnknownSettingError(ConfigError):
    """A setting name does not match any :class:`CacheSettings` field."""

    default_code = "unknown_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Unknown cache setting '{setting_name}'", detail={"setting": setting_name})
        self.setting_name = setting_name


__all__ = ["ConfigError", "InvalidSettingValueError", "UnknownSettingError"]
