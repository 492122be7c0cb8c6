"""Kernel cache – ports consumed by the cache facade."""
from tagcache.kernel.cache.ports import (
    TRANSACTION_VERBS,
    Codec,
    ErrorSink,
    Store,
    Transaction,
)

__all__ = ["TRANSACTION_VERBS", "Codec", "ErrorSink", "Store", "Transaction"]
