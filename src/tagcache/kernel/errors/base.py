"""Root error class for the tagcache error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error tagcache raises or reports.

    ``code`` is a stable slug suitable for log queries; ``detail`` holds the
    structured context of the failure (key, operation, endpoint...).

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context merged into :meth:`to_dict`.
        cause: Original exception, also chained as ``__cause__``.
    """

    default_code: str = "tagcache_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured logs and error sinks."""
        payload: dict[str, Any] = {
            "type": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


def with_detail(kwargs: dict[str, Any], **context: Any) -> dict[str, Any]:
    """Return *kwargs* with *context* merged under any caller-supplied ``detail``."""
    kwargs["detail"] = {**context, **(kwargs.get("detail") or {})}
    return kwargs


__all__ = ["BaseError", "with_detail"]
