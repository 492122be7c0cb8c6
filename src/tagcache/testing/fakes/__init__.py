"""Testing fakes – in-memory doubles for kernel ports."""
from tagcache.kernel.time import FrozenClock
from tagcache.testing.fakes.clock import FakeClock
from tagcache.testing.fakes.sink import CollectingErrorSink
from tagcache.testing.fakes.store import InMemoryStore, InMemoryTransaction

__all__ = [
    "CollectingErrorSink",
    "FakeClock",
    "FrozenClock",
    "InMemoryStore",
    "InMemoryTransaction",
]
