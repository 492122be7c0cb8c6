"""
tagcache – Tag-indexed cache facade over a remote key-value store.

Import path convention::

    from tagcache.application.cache import CacheFacade, CacheRegistry
    from tagcache.config.settings import CacheSettings
    from tagcache.adapters.redis import RedisStore, connect_redis
    from tagcache.testing.fakes import InMemoryStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
