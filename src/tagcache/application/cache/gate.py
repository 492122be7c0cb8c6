"""Application cache – DegradationGate.

Tracks whether the facade may touch its store.  The gate is closed when the
backend library is missing, when the single connect attempt failed, or when
the host switched it off.  A closed gate is never reopened by retrying the
connection; build a new facade to try again.
"""
from __future__ import annotations

from collections.abc import Callable

from tagcache.kernel.cache import Store
from tagcache.kernel.errors import BackendUnavailableError, ConnectFailureError
from tagcache.observability.logging import get_logger

__all__ = ["DegradationGate"]

logger = get_logger(__name__)


class DegradationGate:
    """Lazily connects once and answers "may this call use the store?".

    Args:
        connector: Zero-argument callable returning a connected :class:`Store`.
            Raises :class:`BackendUnavailableError` when the backend library is
            not installed and :class:`ConnectFailureError` when connecting fails.
        store: An already connected store (skips the connect step).
        enabled: Host-level switch; ``False`` keeps the gate closed.
        name: Connection name used in log lines.
    """

    def __init__(
        self,
        connector: Callable[[], Store] | None = None,
        *,
        store: Store | None = None,
        enabled: bool = True,
        name: str = "default",
    ) -> None:
        if connector is None and store is None:
            raise ValueError("DegradationGate needs a connector or a store")
        self._connector = connector
        self._store = store
        self._name = name
        self._switch = enabled
        self._installed = True
        self._connected = store is not None
        self._attempted = store is not None

    @property
    def installed(self) -> bool:
        return self._installed

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def store(self) -> Store | None:
        return self._store

    @property
    def enabled(self) -> bool:
        """``True`` when calls may reach the store (connects on first read)."""
        return self.is_open()

    def set_enabled(self, enabled: bool) -> None:
        """Force the gate open or closed.

        Forcing it open has no effect on a facade whose connect attempt failed.
        """
        self._switch = enabled
        logger.info("cache.gate_forced", cache=self._name, enabled=enabled)

    def is_open(self) -> bool:
        if not self._switch:
            return False
        if not self._attempted:
            self.connect()
        return self._connected

    def connect(self) -> bool:
        """Run the connect attempt if it has not run yet; return ``connected``."""
        if self._connected or self._attempted:
            return self._connected
        self._attempted = True
        connector = self._connector
        if connector is None:
            raise RuntimeError(f"Cache '{self._name}' has neither a store nor a connector")
        try:
            self._store = connector()
        except BackendUnavailableError as exc:
            self._installed = False
            logger.warning("cache.backend_unavailable", cache=self._name, reason=exc.message)
            return False
        except ConnectFailureError as exc:
            logger.warning("cache.connect_failed", cache=self._name, reason=exc.message)
            return False
        except Exception as exc:  # noqa: BLE001 – any connect error degrades the cache
            logger.warning("cache.connect_failed", cache=self._name, reason=repr(exc))
            return False
        self._connected = True
        logger.info("cache.connected", cache=self._name)
        return True

    def close(self) -> None:
        """Close the store handle; the gate stays closed afterwards."""
        if self._store is not None:
            self._store.close()
        self._store = None
        self._connected = False
        self._attempted = True
