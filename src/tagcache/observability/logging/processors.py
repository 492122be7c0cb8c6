"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({"password", "secret", "token"})

_MASK = "***"


class RedactProcessor:
    """Mask sensitive values before an event is rendered.

    Connection settings carry the backend password, and error details may
    embed them; any key listed in *fields* is masked, including keys inside
    nested mappings (e.g. a logged ``settings`` dict).
    """

    def __init__(self, fields: frozenset[str] = DEFAULT_SENSITIVE_FIELDS) -> None:
        self._fields = frozenset(f.lower() for f in fields)

    def _scrub(self, values: Mapping[str, Any]) -> dict[str, Any]:
        clean: dict[str, Any] = {}
        for key, value in values.items():
            if value is not None and str(key).lower() in self._fields:
                clean[key] = _MASK
            elif isinstance(value, Mapping):
                clean[key] = self._scrub(value)
            else:
                clean[key] = value
        return clean

    def __call__(self, _logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        return self._scrub(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for *name*, pre-bound with *initial_values*.

    Modules call it once at import time (``logger = get_logger(__name__)``);
    the returned proxy picks up whatever configuration
    :class:`~tagcache.observability.logging.factory.JsonLoggerFactory` applies
    later.
    """
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "RedactProcessor", "get_logger"]
