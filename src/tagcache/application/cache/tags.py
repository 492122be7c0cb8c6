"""Application cache – TagIndex.

Each tag is backed by a store set ``<tag_prefix><tag>`` whose members are
the keys saved with that tag.  There is no reverse key -> tags index: a
membership only disappears when the caller hands the exact (key, tag) pairs
to :meth:`TagIndex.disassociate`, or when the whole tag is invalidated by
:meth:`TagIndex.delete_by_tags`.  Members pointing at keys that no longer
exist are harmless; deleting them simply counts zero.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from tagcache.kernel.cache import Store
from tagcache.observability.logging import get_logger

__all__ = ["DEFAULT_TAG_PREFIX", "TagIndex"]

DEFAULT_TAG_PREFIX = "cache.tag."

logger = get_logger(__name__)


class TagIndex:
    """Maintains and queries tag -> member-key sets on a :class:`Store`."""

    def __init__(self, store: Store, prefix: str = DEFAULT_TAG_PREFIX) -> None:
        self._store = store
        self._prefix = prefix

    @property
    def prefix(self) -> str:
        return self._prefix

    def tag_key(self, tag: str) -> str:
        return f"{self._prefix}{tag}"

    def associate(self, keys: Sequence[str], tags: Iterable[str]) -> None:
        """Add every key in *keys* to the set of every tag in *tags*.

        One ``set_add`` per tag; not atomic across tags.
        """
        if not keys:
            return
        for tag in dict.fromkeys(tags):
            self._store.set_add(self.tag_key(tag), *keys)

    def resolve_members(self, tags: Iterable[str]) -> dict[str, set[str]]:
        """Return the current member keys of each tag's set."""
        return {tag: self._store.set_members(self.tag_key(tag)) for tag in dict.fromkeys(tags)}

    def disassociate(self, key_tags: Mapping[str, Iterable[str]]) -> int:
        """Remove the given (key, tag) memberships; return how many were removed."""
        grouped: dict[str, list[str]] = {}
        for key, tags in key_tags.items():
            if isinstance(tags, str):
                tags = (tags,)
            for tag in tags:
                members = grouped.setdefault(self.tag_key(tag), [])
                if key not in members:
                    members.append(key)
        removed = 0
        for set_key, members in grouped.items():
            removed += int(self._store.set_remove(set_key, *members) or 0)
        return removed

    def delete_by_tags(self, tags: Iterable[str]) -> int:
        """Delete the tag sets and every key they list, in one bulk delete.

        Returns the number of member keys removed; the tag sets themselves
        are not counted.  A non-empty set always exists in the store, so the
        sets that had members are subtracted from the store's delete count.

        Membership is read first and deleted afterwards; a key tagged between
        the two round-trips survives this call.
        """
        doomed: dict[str, None] = {}
        live_sets = 0
        tag_list = list(dict.fromkeys(tags))
        for tag, members in self.resolve_members(tag_list).items():
            doomed[self.tag_key(tag)] = None
            if members:
                live_sets += 1
            for member in sorted(members):
                doomed[member] = None
        if not doomed:
            return 0
        deleted = max(int(self._store.delete(*doomed)) - live_sets, 0)
        logger.info("cache.tags_invalidated", tags=tag_list, candidates=len(doomed), deleted=deleted)
        return deleted
