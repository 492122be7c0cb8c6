"""Application cache – tag-indexed cache facade with graceful degradation."""
from tagcache.application.cache.errors import ErrorPolicy, LoggingErrorSink
from tagcache.application.cache.facade import CacheFacade
from tagcache.application.cache.gate import DegradationGate
from tagcache.application.cache.recovery import MissRecovery, OnMiss
from tagcache.application.cache.registry import CacheRegistry
from tagcache.application.cache.selection import KeySelection
from tagcache.application.cache.tags import DEFAULT_TAG_PREFIX, TagIndex

__all__ = [
    "DEFAULT_TAG_PREFIX",
    "CacheFacade",
    "CacheRegistry",
    "DegradationGate",
    "ErrorPolicy",
    "KeySelection",
    "LoggingErrorSink",
    "MissRecovery",
    "OnMiss",
    "TagIndex",
]
