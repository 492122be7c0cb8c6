"""Infrastructure errors – backend availability, store I/O and codec failures."""

from __future__ import annotations

from typing import Any

from tagcache.kernel.errors.base import BaseError, with_detail


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not caused by caller code."""

    default_code = "infrastructure_error"


class BackendUnavailableError(InfrastructureError):
    """The backend client library is not installed."""

    default_code = "backend_unavailable"

    def __init__(self, backend: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Backend '{backend}' is not available", **with_detail(kwargs, backend=backend))
        self.backend = backend


class ConnectFailureError(InfrastructureError):
    """The connect attempt to the backend failed."""

    default_code = "connect_failure"

    def __init__(self, resource: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **with_detail(kwargs, resource=resource))
        self.resource = resource


class OperationFailureError(InfrastructureError):
    """A single store call failed after a successful connection."""

    default_code = "operation_failure"

    def __init__(self, operation: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Store operation '{operation}' failed", **with_detail(kwargs, operation=operation))
        self.operation = operation


class SerializationError(InfrastructureError):
    """Failed to encode or decode a cached value."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        if payload_type is not None:
            with_detail(kwargs, payload_type=payload_type)
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "BackendUnavailableError",
    "ConnectFailureError",
    "InfrastructureError",
    "OperationFailureError",
    "SerializationError",
]
