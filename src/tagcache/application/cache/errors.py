"""Application cache – error policy (strict vs. lenient) and error sinks."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from tagcache.config.settings import OperatingMode
from tagcache.kernel.cache import ErrorSink
from tagcache.kernel.errors import BaseError, OperationFailureError
from tagcache.observability.logging import get_logger

__all__ = ["ErrorPolicy", "LoggingErrorSink"]

logger = get_logger(__name__)


class LoggingErrorSink:
    """Default sink: one structured ``cache.error`` log line per swallowed error."""

    def __init__(self, log: Any = None) -> None:
        self._log = log or logger

    def report(self, error: BaseException, context: Mapping[str, Any]) -> None:
        code = getattr(error, "code", type(error).__name__)
        self._log.error("cache.error", error_code=code, exc_info=error, **dict(context))


class ErrorPolicy:
    """Decides what happens to an error caught at a facade method boundary.

    Lenient mode reports the error to the sink and lets the caller return its
    documented failure value; strict mode re-raises it.
    """

    def __init__(self, mode: OperatingMode | str = OperatingMode.LENIENT, sink: ErrorSink | None = None) -> None:
        self._mode = OperatingMode(mode)
        self._sink: ErrorSink = sink or LoggingErrorSink()

    @property
    def mode(self) -> OperatingMode:
        return self._mode

    @property
    def strict(self) -> bool:
        return self._mode is OperatingMode.STRICT

    @property
    def sink(self) -> ErrorSink:
        return self._sink

    def handle(self, error: BaseError, **context: Any) -> None:
        if self.strict:
            raise error
        self._sink.report(error, context)

    def wrap(self, operation: str, exc: Exception) -> BaseError:
        """Return *exc* as a :class:`BaseError`, wrapping raw store exceptions."""
        if isinstance(exc, BaseError):
            return exc
        return OperationFailureError(operation, f"Store operation '{operation}' failed: {exc}", cause=exc)
