"""Redis adapter – RedisStore and RedisTransaction.

Every key (entries and tag sets) is stored under the configured namespace
prefix; set members are stored as plain key names so they can be passed
straight back to :meth:`RedisStore.delete`.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from tagcache.observability.logging import get_logger

logger = get_logger(__name__)

_GLOB_SPECIAL = frozenset("*?[]\\")
_UNLINK_CHUNK = 500


def _glob_escape(text: str) -> str:
    return "".join(f"\\{ch}" if ch in _GLOB_SPECIAL else ch for ch in text)


def _decode_members(members: Any) -> set[str]:
    return {m.decode() if isinstance(m, bytes) else str(m) for m in members or ()}


def _identity(value: Any) -> Any:
    return value


class RedisStore:
    """Synchronous ``redis-py`` client behind the :class:`Store` port.

    Args:
        client: A connected ``redis.Redis`` (``decode_responses=False``).
        namespace: Prefix prepended to every key, e.g. ``"shop:"``.
    """

    def __init__(self, client: Any, namespace: str = "") -> None:
        self._client = client
        self._namespace = namespace

    @property
    def client(self) -> Any:
        return self._client

    @property
    def namespace(self) -> str:
        return self._namespace

    def _k(self, key: str) -> str:
        return f"{self._namespace}{key}"

    def get(self, key: str) -> bytes | None:
        return self._client.get(self._k(key))

    def get_many(self, keys: Sequence[str]) -> list[bytes | None]:
        if not keys:
            return []
        return list(self._client.mget([self._k(k) for k in keys]))

    def set(self, key: str, value: bytes) -> None:
        self._client.set(self._k(key), value)

    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> None:
        self._client.setex(self._k(key), seconds, value)

    def set_many(self, mapping: Mapping[str, bytes]) -> None:
        if mapping:
            self._client.mset({self._k(k): v for k, v in mapping.items()})

    def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(self._client.delete(*(self._k(k) for k in keys)))

    def exists(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(self._client.exists(*(self._k(k) for k in keys)))

    def set_add(self, set_key: str, *members: str) -> int:
        if not members:
            return 0
        return int(self._client.sadd(self._k(set_key), *members))

    def set_remove(self, set_key: str, *members: str) -> int:
        if not members:
            return 0
        return int(self._client.srem(self._k(set_key), *members))

    def set_members(self, set_key: str) -> set[str]:
        return _decode_members(self._client.smembers(self._k(set_key)))

    def flush_namespace(self) -> bool:
        """``FLUSHDB`` without a namespace; SCAN + batched UNLINK with one."""
        if not self._namespace:
            return bool(self._client.flushdb())
        removed = 0
        chunk: list[Any] = []
        for key in self._client.scan_iter(match=f"{_glob_escape(self._namespace)}*", count=_UNLINK_CHUNK):
            chunk.append(key)
            if len(chunk) >= _UNLINK_CHUNK:
                removed += int(self._client.unlink(*chunk))
                chunk = []
        if chunk:
            removed += int(self._client.unlink(*chunk))
        logger.info("cache.namespace_flushed", namespace=self._namespace, removed=removed)
        return True

    def begin_transaction(self) -> RedisTransaction:
        return RedisTransaction(self._client.pipeline(transaction=True), self._k)

    def close(self) -> None:
        self._client.close()


class RedisTransaction:
    """``MULTI``/``EXEC`` pipeline exposing the store verbs.

    Verbs only queue commands; :meth:`commit` executes them and converts each
    raw reply the same way the matching :class:`RedisStore` method would.
    """

    def __init__(self, pipeline: Any, key_fn: Callable[[str], str]) -> None:
        self._pipe = pipeline
        self._k = key_fn
        self._converters: list[Callable[[Any], Any]] = []

    def _queue(self, converter: Callable[[Any], Any]) -> RedisTransaction:
        self._converters.append(converter)
        return self

    def get(self, key: str) -> RedisTransaction:
        self._pipe.get(self._k(key))
        return self._queue(_identity)

    def get_many(self, keys: Sequence[str]) -> RedisTransaction:
        self._pipe.mget([self._k(k) for k in keys])
        return self._queue(list)

    def set(self, key: str, value: bytes) -> RedisTransaction:
        self._pipe.set(self._k(key), value)
        return self._queue(bool)

    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> RedisTransaction:
        self._pipe.setex(self._k(key), seconds, value)
        return self._queue(bool)

    def set_many(self, mapping: Mapping[str, bytes]) -> RedisTransaction:
        self._pipe.mset({self._k(k): v for k, v in mapping.items()})
        return self._queue(bool)

    def delete(self, *keys: str) -> RedisTransaction:
        self._pipe.delete(*(self._k(k) for k in keys))
        return self._queue(int)

    def exists(self, *keys: str) -> RedisTransaction:
        self._pipe.exists(*(self._k(k) for k in keys))
        return self._queue(int)

    def set_add(self, set_key: str, *members: str) -> RedisTransaction:
        self._pipe.sadd(self._k(set_key), *members)
        return self._queue(int)

    def set_remove(self, set_key: str, *members: str) -> RedisTransaction:
        self._pipe.srem(self._k(set_key), *members)
        return self._queue(int)

    def set_members(self, set_key: str) -> RedisTransaction:
        self._pipe.smembers(self._k(set_key))
        return self._queue(_decode_members)

    def commit(self) -> list[Any]:
        replies = self._pipe.execute()
        return [convert(reply) for convert, reply in zip(self._converters, replies)]


__all__ = ["RedisStore", "RedisTransaction"]
