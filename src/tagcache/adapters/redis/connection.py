"""Redis adapter – connect_redis (settings -> connected RedisStore)."""
from __future__ import annotations

import threading
from typing import Any

from tagcache.adapters.redis.store import RedisStore
from tagcache.config.settings import CacheSettings
from tagcache.kernel.errors import BackendUnavailableError, ConnectFailureError
from tagcache.observability.logging import get_logger

logger = get_logger(__name__)

# Shared pools for ``persistent=True`` settings, keyed by endpoint.
_pools: dict[tuple[str, int, int], Any] = {}
_pools_lock = threading.Lock()


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise BackendUnavailableError(
            "redis", "Install 'tagcache[redis]' to use the Redis store", cause=exc
        ) from exc


def redis_available() -> bool:
    """Return ``True`` if the ``redis`` package is installed."""
    try:
        _require_redis()
    except BackendUnavailableError:
        return False
    return True


def _client_kwargs(settings: CacheSettings) -> dict[str, Any]:
    return {
        "host": settings.host,
        "port": settings.port,
        "db": settings.db,
        "password": settings.password,
        "socket_connect_timeout": settings.timeout,
        "socket_timeout": settings.read_timeout,
    }


def _shared_pool(redis: Any, settings: CacheSettings) -> Any:
    endpoint = (settings.host, settings.port, settings.db)
    with _pools_lock:
        pool = _pools.get(endpoint)
        if pool is None:
            pool = redis.ConnectionPool(**_client_kwargs(settings))
            _pools[endpoint] = pool
        return pool


def reset_pools() -> None:
    """Disconnect and forget every shared pool (useful for testing)."""
    with _pools_lock:
        pools = list(_pools.values())
        _pools.clear()
    for pool in pools:
        pool.disconnect()


def connect_redis(settings: CacheSettings) -> RedisStore:
    """Build a client from *settings*, ``PING`` it and wrap it in a store.

    Raises:
        BackendUnavailableError: ``redis`` is not installed.
        ConnectFailureError: the server could not be reached.
    """
    redis = _require_redis()
    if settings.persistent:
        client = redis.Redis(connection_pool=_shared_pool(redis, settings))
    else:
        client = redis.Redis(**_client_kwargs(settings))
    resource = f"{settings.host}:{settings.port}/{settings.db}"
    try:
        client.ping()
    except redis.RedisError as exc:
        client.close()
        raise ConnectFailureError(resource, f"Could not connect to '{resource}': {exc}", cause=exc) from exc
    logger.info(
        "cache.redis_connected",
        cache=settings.name,
        endpoint=resource,
        namespace=settings.key_prefix,
        persistent=settings.persistent,
    )
    return RedisStore(client, namespace=settings.key_prefix)


__all__ = ["connect_redis", "redis_available", "reset_pools"]
