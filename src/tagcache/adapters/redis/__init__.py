"""Redis adapter – Store implementation and connector."""
from tagcache.adapters.redis.connection import connect_redis, redis_available, reset_pools
from tagcache.adapters.redis.store import RedisStore, RedisTransaction

__all__ = ["RedisStore", "RedisTransaction", "connect_redis", "redis_available", "reset_pools"]
