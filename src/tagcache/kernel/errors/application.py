"""Application-layer errors – failures raised by caller-supplied code."""

from __future__ import annotations

from typing import Any

from tagcache.kernel.errors.base import BaseError, with_detail


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class CallbackFailureError(ApplicationError):
    """A miss-recovery callback raised while computing a value for *key*."""

    default_code = "callback_failure"

    def __init__(self, key: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Miss callback failed for key '{key}'", **with_detail(kwargs, key=key))
        self.key = key


__all__ = ["ApplicationError", "CallbackFailureError"]
