"""Testing support – in-memory doubles for the cache ports.

Use in your tests::

    from tagcache.testing.fakes import FakeClock, InMemoryStore

    store = InMemoryStore(clock=FakeClock())
    cache = CacheFacade(store=store)
"""

from tagcache.testing.fakes import (
    CollectingErrorSink,
    FakeClock,
    InMemoryStore,
    InMemoryTransaction,
)

__all__ = ["CollectingErrorSink", "FakeClock", "InMemoryStore", "InMemoryTransaction"]
