"""Application cache – CacheFacade.

The public operation surface: save / load / delete / has / clear and their
multi-key variants, tag invalidation and raw transactions.  Every method is
gated by :class:`~tagcache.application.cache.gate.DegradationGate` and
catches store failures at its own boundary, so a missing or failing backend
degrades to "always miss" instead of raising (unless the operating mode is
strict).

Usage::

    cache = CacheFacade(CacheSettings(database="shop"))
    cache.save("product:42", product, ttl=300, tags=["products"])

    def rebuild(cache, key):
        product = fetch(key)
        cache.save(key, product, ttl=300, tags=["products"])
        return product

    cache.load("product:42", on_miss=rebuild)
    cache.delete_by_tags("products")
"""
from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from tagcache.application.cache.errors import ErrorPolicy
from tagcache.application.cache.gate import DegradationGate
from tagcache.application.cache.recovery import MissRecovery, OnMiss
from tagcache.application.cache.selection import KeySelection
from tagcache.application.cache.tags import TagIndex
from tagcache.config.settings import CacheSettings
from tagcache.kernel.cache import TRANSACTION_VERBS, Codec, ErrorSink, Store
from tagcache.kernel.errors import SerializationError
from tagcache.observability.logging import get_logger

__all__ = ["CacheFacade"]

logger = get_logger(__name__)

Connector = Callable[[CacheSettings], Store]


def _default_connector(settings: CacheSettings) -> Store:
    from tagcache.adapters.redis import connect_redis  # lazy import

    return connect_redis(settings)


def _default_codec() -> Codec:
    from tagcache.adapters.codecs import PickleCodec  # lazy import

    return PickleCodec()


def _require_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError(f"Cache key must be a non-empty string, got {key!r}")


def _tag_names(tags: str | Iterable[str] | None) -> tuple[str, ...]:
    if not tags:
        return ()
    names = KeySelection.of(tags).names
    for tag in names:
        if not tag:
            raise ValueError("Cache tags must be non-empty strings")
    return names


def _as_args(args: Any) -> tuple[Any, ...]:
    # Only a tuple spreads; any other value is the verb's single argument.
    if args is None:
        return ()
    if isinstance(args, tuple):
        return args
    return (args,)


class CacheFacade:
    """Tag-indexed, failure-tolerant cache over a :class:`Store`.

    Args:
        settings: Connection parameters and behaviour switches.
        store: An already connected store.  When omitted the store is built
            lazily by *connector* on the first operation.
        connector: ``settings -> Store``; defaults to the Redis connector.
        codec: Value serialiser; defaults to :class:`PickleCodec`.
        error_sink: Receives swallowed errors in lenient mode.
    """

    def __init__(
        self,
        settings: CacheSettings | None = None,
        *,
        store: Store | None = None,
        connector: Connector | None = None,
        codec: Codec | None = None,
        error_sink: ErrorSink | None = None,
    ) -> None:
        self._settings = settings or CacheSettings()
        self._codec = codec or _default_codec()
        self._policy = ErrorPolicy(self._settings.operating_mode, error_sink)
        self._recovery = MissRecovery(self._policy)
        self._gate = DegradationGate(
            None if store is not None else functools.partial(connector or _default_connector, self._settings),
            store=store,
            enabled=self._settings.enabled,
            name=self._settings.name,
        )
        self._tag_index: TagIndex | None = None

    @classmethod
    def from_settings(cls, settings: CacheSettings) -> CacheFacade:
        return cls(settings)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._settings.name

    @property
    def settings(self) -> CacheSettings:
        return self._settings

    @property
    def codec(self) -> Codec:
        return self._codec

    @property
    def enabled(self) -> bool:
        """Whether operations reach the store; triggers the lazy connect."""
        return self._gate.is_open()

    @property
    def connected(self) -> bool:
        return self._gate.connected

    @property
    def installed(self) -> bool:
        return self._gate.installed

    @property
    def store(self) -> Store | None:
        """Raw store handle for operations outside this facade's vocabulary."""
        return self._gate.store

    def set_enabled(self, enabled: bool) -> None:
        self._gate.set_enabled(enabled)

    def connect(self) -> bool:
        return self._gate.connect()

    def close(self) -> None:
        self._gate.close()
        self._tag_index = None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(
        self,
        key: str,
        value: Any,
        ttl: int | None = None,
        tags: str | Iterable[str] | None = (),
    ) -> bool:
        """Store *value* under *key* and add *key* to every tag set.

        ``ttl=None`` means no expiry; ``ttl=0`` is handed to the store as is.
        """
        _require_key(key)
        tag_names = _tag_names(tags)
        if not self._gate.is_open():
            return False
        store = self._live_store()
        try:
            data = self._codec.encode(value)
            if ttl is None:
                store.set(key, data)
            else:
                store.set_with_ttl(key, data, ttl)
            self._tags().associate([key], tag_names)
        except Exception as exc:
            self._fail("save", exc, key=key)
            return False
        logger.debug("cache.saved", cache=self.name, key=key, ttl=ttl, tags=list(tag_names))
        return True

    def save_many(
        self,
        mapping: Mapping[str, Any] | None,
        ttl: int | None = None,
        tags: str | Iterable[str] | None = (),
    ) -> bool:
        """Store every item of *mapping*; every key gets every tag.

        Not atomic: a failure part-way leaves earlier keys and tag sets written.
        """
        if mapping is None:
            return False
        for key in mapping:
            _require_key(key)
        tag_names = _tag_names(tags)
        if not self._gate.is_open():
            return False
        if not mapping:
            return True
        store = self._live_store()
        try:
            encoded = {key: self._codec.encode(value) for key, value in mapping.items()}
            if ttl is None:
                store.set_many(encoded)
            else:
                for key, data in encoded.items():
                    store.set_with_ttl(key, data, ttl)
            self._tags().associate(list(encoded), tag_names)
        except Exception as exc:
            self._fail("save_many", exc, keys=list(mapping))
            return False
        logger.debug("cache.saved_many", cache=self.name, count=len(mapping), ttl=ttl, tags=list(tag_names))
        return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def load(self, key: str, on_miss: OnMiss | None = None) -> Any:
        """Return the cached value, or ``on_miss(self, key)`` when absent.

        Returns ``None`` for an absent key without a callback.  The callback
        result is not cached here.
        """
        if not self._gate.is_open():
            return self._recovery.recover(self, key, on_miss)
        try:
            raw = self._live_store().get(key)
        except Exception as exc:
            self._fail("get", exc, key=key)
            return self._recovery.recover(self, key, on_miss)
        if raw is None:
            logger.debug("cache.miss", cache=self.name, key=key)
            return self._recovery.recover(self, key, on_miss)
        try:
            return self._codec.decode(raw)
        except SerializationError as exc:
            self._fail("decode", exc, key=key)
            return self._recovery.recover(self, key, on_miss)

    def load_many(self, keys: str | Iterable[str], on_miss: OnMiss | None = None) -> list[Any]:
        """Return one result per key, aligned to the input order.

        Hits are decoded values; misses are ``on_miss(self, key)`` (or
        ``None``), each recovered independently in input order.
        """
        selection = KeySelection.of(keys)
        names = list(selection)
        if not self._gate.is_open():
            return self._recovery.recover_many(self, names, on_miss)
        if not names:
            return []
        try:
            raws = self._live_store().get_many(names)
        except Exception as exc:
            self._fail("get_many", exc, keys=names)
            return self._recovery.recover_many(self, names, on_miss)
        results: list[Any] = []
        for key, raw in zip(names, raws):
            if raw is None:
                results.append(self._recovery.recover(self, key, on_miss))
                continue
            try:
                results.append(self._codec.decode(raw))
            except SerializationError as exc:
                self._fail("decode", exc, key=key)
                results.append(self._recovery.recover(self, key, on_miss))
        return results

    def has(self, key: str) -> bool:
        if not self._gate.is_open():
            return False
        try:
            return int(self._live_store().exists(key)) == 1
        except Exception as exc:
            self._fail("exists", exc, key=key)
            return False

    def has_many(self, *keys: str | Iterable[str]) -> int:
        """Count how many of the given keys exist.

        Accepts ``has_many("a")``, ``has_many(["a", "b"])`` or ``has_many("a", "b")``.
        """
        names = list(KeySelection.from_args(keys))
        if not self._gate.is_open() or not names:
            return 0
        try:
            return int(self._live_store().exists(*names))
        except Exception as exc:
            self._fail("exists", exc, keys=names)
            return 0

    # ------------------------------------------------------------------
    # Deletes
    # ------------------------------------------------------------------

    def delete(self, key: str) -> bool:
        """Remove one entry; its tag memberships are left in place."""
        if not self._gate.is_open():
            return False
        try:
            return int(self._live_store().delete(key)) == 1
        except Exception as exc:
            self._fail("delete", exc, key=key)
            return False

    def delete_many(
        self,
        keys: str | Iterable[str],
        key_tags: Mapping[str, str | Iterable[str]] | None = None,
    ) -> int:
        """Remove entries and the (key, tag) memberships listed in *key_tags*.

        *key_tags* must name the tags each key was saved with; memberships it
        omits stay behind until ``delete_by_tags`` runs on that tag.
        """
        names = list(KeySelection.of(keys))
        if not self._gate.is_open():
            return 0
        deleted = 0
        try:
            if names:
                deleted = int(self._live_store().delete(*names))
        except Exception as exc:
            self._fail("delete", exc, keys=names)
            return 0
        if key_tags:
            try:
                self._tags().disassociate(key_tags)
            except Exception as exc:
                self._fail("set_remove", exc, keys=list(key_tags))
        return deleted

    def delete_by_tags(self, *tags: str | Iterable[str]) -> int:
        """Remove every key tagged with any of *tags*, plus the tag sets.

        Accepts ``delete_by_tags("a")``, ``delete_by_tags(["a", "b"])`` or
        ``delete_by_tags("a", "b")``.  Returns the number of tagged keys the
        store actually deleted.
        """
        tag_names = _tag_names(KeySelection.from_args(tags).names)
        if not self._gate.is_open() or not tag_names:
            return 0
        try:
            return self._tags().delete_by_tags(tag_names)
        except Exception as exc:
            self._fail("delete_by_tags", exc, tags=list(tag_names))
            return 0

    def clear(self) -> bool:
        """Flush every entry and tag set in this cache's namespace."""
        if not self._gate.is_open():
            return False
        try:
            result = bool(self._live_store().flush_namespace())
        except Exception as exc:
            self._fail("flush_namespace", exc)
            return False
        logger.warning("cache.cleared", cache=self.name)
        return result

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def process_transaction(
        self,
        ops: Sequence[tuple[str, Any]] | Mapping[str, Any],
    ) -> list[Any]:
        """Apply raw store verbs atomically and return their ordered results.

        *ops* is a sequence of ``(verb, args)`` pairs (or a mapping when every
        verb appears once).  A tuple *args* is spread into positional
        arguments; any other value, a list included, is passed as the single
        argument, so ``("get_many", ["a", "b"])`` reads two keys.  Verbs are
        :data:`TRANSACTION_VERBS`; values are passed as bytes, so encode with
        :attr:`codec` first.  No tag
        bookkeeping is added: include ``set_add``/``set_remove`` yourself.
        """
        items = list(ops.items()) if isinstance(ops, Mapping) else list(ops)
        for verb, _ in items:
            if verb not in TRANSACTION_VERBS:
                raise ValueError(f"Unsupported transaction verb {verb!r}")
        if not self._gate.is_open() or not items:
            return []
        try:
            tx = self._live_store().begin_transaction()
            for verb, args in items:
                getattr(tx, verb)(*_as_args(args))
            return list(tx.commit())
        except Exception as exc:
            self._fail("transaction", exc, verbs=[verb for verb, _ in items])
            return []

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _live_store(self) -> Store:
        store = self._gate.store
        if store is None:
            raise RuntimeError(f"Cache '{self.name}' has no live store")
        return store

    def _tags(self) -> TagIndex:
        if self._tag_index is None:
            self._tag_index = TagIndex(self._live_store(), self._settings.tag_prefix)
        return self._tag_index

    def _fail(self, operation: str, exc: Exception, **context: Any) -> None:
        error = self._policy.wrap(operation, exc)
        self._policy.handle(error, operation=operation, cache=self.name, **context)
