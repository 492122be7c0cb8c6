"""Config – 12-factor cache settings, loaders and validation errors."""

from tagcache.config.settings import (
    CacheSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    OperatingMode,
    SettingsFactory,
    SettingsLoader,
)
from tagcache.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    UnknownSettingError,
)

__all__ = [
    "CacheSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "OperatingMode",
    "SettingsFactory",
    "SettingsLoader",
    "UnknownSettingError",
]
