"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── CallbackFailureError
    └── InfrastructureError      (infrastructure.py)
        ├── BackendUnavailableError
        ├── ConnectFailureError
        ├── OperationFailureError
        └── SerializationError
"""

from tagcache.kernel.errors.application import ApplicationError, CallbackFailureError
from tagcache.kernel.errors.base import BaseError
from tagcache.kernel.errors.infrastructure import (
    BackendUnavailableError,
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
