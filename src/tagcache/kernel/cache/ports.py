"""Kernel cache – Store, Transaction, Codec and ErrorSink ports.

The facade never talks to a concrete backend: anything implementing
:class:`Store` (Redis, the in-memory fake, …) can sit underneath it.
Values cross the port boundary as ``bytes``; keys and set members as ``str``.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

# Verb names accepted by ``CacheFacade.process_transaction``.
TRANSACTION_VERBS: frozenset[str] = frozenset(
    {
        "get",
        "get_many",
        "set",
        "set_with_ttl",
        "set_many",
        "delete",
        "exists",
        "set_add",
        "set_remove",
        "set_members",
    }
)


@runtime_checkable
class Transaction(Protocol):
    """Queued batch of store verbs applied atomically on :meth:`commit`.

    Each verb only records the call; results are returned by ``commit`` in
    the order the verbs were queued.
    """

    def get(self, key: str) -> Any: ...
    def get_many(self, keys: Sequence[str]) -> Any: ...
    def set(self, key: str, value: bytes) -> Any: ...
    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> Any: ...
    def set_many(self, mapping: Mapping[str, bytes]) -> Any: ...
    def delete(self, *keys: str) -> Any: ...
    def exists(self, *keys: str) -> Any: ...
    def set_add(self, set_key: str, *members: str) -> Any: ...
    def set_remove(self, set_key: str, *members: str) -> Any: ...
    def set_members(self, set_key: str) -> Any: ...
    def commit(self) -> list[Any]: ...


@runtime_checkable
class Store(Protocol):
    """Port: remote key-value store with sets and atomic batches."""

    def get(self, key: str) -> bytes | None: ...
    def get_many(self, keys: Sequence[str]) -> list[bytes | None]: ...
    def set(self, key: str, value: bytes) -> None: ...
    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> None: ...
    def set_many(self, mapping: Mapping[str, bytes]) -> None: ...
    def delete(self, *keys: str) -> int: ...
    def exists(self, *keys: str) -> int: ...
    def set_add(self, set_key: str, *members: str) -> int: ...
    def set_remove(self, set_key: str, *members: str) -> int: ...
    def set_members(self, set_key: str) -> set[str]: ...
    def flush_namespace(self) -> bool: ...
    def begin_transaction(self) -> Transaction: ...
    def close(self) -> None: ...


@runtime_checkable
class Codec(Protocol):
    """Port: value <-> bytes. Failures raise ``SerializationError``."""

    def encode(self, value: Any) -> bytes: ...
    def decode(self, data: bytes) -> Any: ...


@runtime_checkable
class ErrorSink(Protocol):
    """Port: receives swallowed errors together with call context."""

    def report(self, error: BaseException, context: Mapping[str, Any]) -> None: ...


__all__ = ["TRANSACTION_VERBS", "Codec", "ErrorSink", "Store", "Transaction"]
