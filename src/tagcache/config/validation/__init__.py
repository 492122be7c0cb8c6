"""Config validation errors."""
from tagcache.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    UnknownSettingError,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "UnknownSettingError"]
