"""Config settings – 12-factor env-based cache configuration."""
from tagcache.config.settings.cache import DEFAULT_NAME, CacheSettings, OperatingMode, setting_names
from tagcache.config.settings.factory import SettingsFactory
from tagcache.config.settings.loaders import (
    ENV_PREFIX,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    env_prefix,
)

__all__ = [
    "DEFAULT_NAME",
    "ENV_PREFIX",
    "CacheSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "OperatingMode",
    "SettingsFactory",
    "SettingsLoader",
    "env_prefix",
    "setting_names",
]
