"""Codec adapters – JsonCodec."""
from __future__ import annotations

import json
from typing import Any

from tagcache.kernel.errors import SerializationError


class JsonCodec:
    """JSON serialiser; portable across languages.

    Values JSON cannot represent (dates, sets, custom objects) raise
    :class:`SerializationError` rather than being stringified.
    """

    def encode(self, value: Any) -> bytes:
        try:
            return json.dumps(value).encode()
        except (TypeError, ValueError) as exc:
            raise SerializationError(
                f"Cannot encode value as JSON: {exc}", payload_type=type(value).__name__, cause=exc
            ) from exc

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (UnicodeDecodeError, ValueError) as exc:
            raise SerializationError(f"Cannot decode JSON payload: {exc}", payload_type="json", cause=exc) from exc


__all__ = ["JsonCodec"]
