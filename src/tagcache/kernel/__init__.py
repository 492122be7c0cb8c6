"""Kernel – framework-agnostic errors, clock and cache ports."""

from tagcache.kernel.errors import (
    ApplicationError,
    BackendUnavailableError,
    BaseError,
    CallbackFailureError,
    ConnectFailureError,
    InfrastructureError,
    OperationFailureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BackendUnavailableError",
    "BaseError",
    "CallbackFailureError",
    "ConnectFailureError",
    "InfrastructureError",
    "OperationFailureError",
    "SerializationError",
]
