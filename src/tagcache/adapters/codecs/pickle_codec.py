"""Codec adapters – PickleCodec (default).

Round-trips arbitrary Python values.  Only use it against a store that
untrusted parties cannot write to.
"""
from __future__ import annotations

import pickle
from typing import Any

from tagcache.kernel.errors import SerializationError


class PickleCodec:
    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def encode(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            raise SerializationError(
                f"Cannot pickle value: {exc}", payload_type=type(value).__name__, cause=exc
            ) from exc

    def decode(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)  # noqa: S301
        except Exception as exc:  # noqa: BLE001 – unpickling can raise almost anything
            raise SerializationError(f"Cannot unpickle payload: {exc}", payload_type="pickle", cause=exc) from exc


__all__ = ["PickleCodec"]
