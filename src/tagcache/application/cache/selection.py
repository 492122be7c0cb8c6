"""Application cache – KeySelection (single name vs. sequence of names)."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Literal

__all__ = ["KeySelection"]


@dataclass(frozen=True)
class KeySelection:
    """Canonical ordered sequence of keys (or tag names) built at the API boundary.

    ``kind`` records whether the caller passed one name or many; the core
    only ever iterates ``names``.  A plain ``str`` is always *one* name, never
    a sequence of characters.
    """

    kind: Literal["one", "many"]
    names: tuple[str, ...]

    @classmethod
    def of(cls, value: str | Iterable[str]) -> KeySelection:
        if isinstance(value, str):
            return cls("one", (value,))
        if value is None or isinstance(value, bytes):
            raise TypeError(f"Expected a str or an iterable of str, got {type(value).__name__}")
        return cls("many", _checked(value))

    @classmethod
    def from_args(cls, args: tuple[Any, ...]) -> KeySelection:
        """Normalise variadic call arguments: ``f("a")``, ``f(["a", "b"])``, ``f("a", "b")``."""
        if len(args) == 1:
            return cls.of(args[0])
        return cls("many", _checked(args))

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __bool__(self) -> bool:
        return bool(self.names)


def _checked(values: Iterable[Any]) -> tuple[str, ...]:
    names = tuple(values)
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"Expected str, got {type(name).__name__}: {name!r}")
    return names
