"""Kernel time – Clock port + implementations."""
from tagcache.kernel.time.clock import Clock, FrozenClock, SystemClock, expires_at, is_expired

__all__ = ["Clock", "FrozenClock", "SystemClock", "expires_at", "is_expired"]
