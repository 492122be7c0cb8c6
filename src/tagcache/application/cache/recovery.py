"""Application cache – MissRecovery (the ``on_miss`` callback protocol)."""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from tagcache.application.cache.errors import ErrorPolicy
from tagcache.kernel.errors import CallbackFailureError
from tagcache.observability.logging import get_logger

if TYPE_CHECKING:
    from tagcache.application.cache.facade import CacheFacade

__all__ = ["MissRecovery", "OnMiss"]

logger = get_logger(__name__)

#: ``on_miss(facade, key) -> value``.  The callback calls ``facade.save`` itself
#: if it wants the computed value cached; the facade never saves it.
OnMiss = Callable[["CacheFacade", str], Any]


class MissRecovery:
    """Invokes ``on_miss`` for absent keys, isolating failures per key."""

    def __init__(self, policy: ErrorPolicy) -> None:
        self._policy = policy

    def recover(self, facade: CacheFacade, key: str, on_miss: OnMiss | None) -> Any:
        if on_miss is None:
            return None
        logger.debug("cache.miss_recovery", cache=facade.name, key=key)
        try:
            return on_miss(facade, key)
        except Exception as exc:
            self._policy.handle(
                CallbackFailureError(key, f"Miss callback failed for key '{key}': {exc}", cause=exc),
                operation="on_miss",
                cache=facade.name,
                key=key,
            )
            return None

    def recover_many(self, facade: CacheFacade, keys: Sequence[str], on_miss: OnMiss | None) -> list[Any]:
        """Recover each key in input order; one failing key does not stop the rest."""
        return [self.recover(facade, key, on_miss) for key in keys]
