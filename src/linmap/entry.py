from typing import Generic, Optional, TypeVar

import attr

from linmap.interfaces import IEntry
from linmap.obj import ENTRY_SEPARATOR, render

K = TypeVar("K")
V = TypeVar("V")


@attr.frozen(repr=False)
class Entry(IEntry[K, V], Generic[K, V]):
    """A single stored (key, value) pair.

    Entries are immutable snapshots; changing the dictionary they were taken from
    does not change them."""

    _key: K
    _value: Optional[V] = None

    def __iter__(self):
        yield self._key
        yield self._value

    def __repr__(self):
        return f"{render(self._key)}{ENTRY_SEPARATOR}{render(self._value)}"

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> Optional[V]:
        return self._value

    @staticmethod
    def of(k: K, v: Optional[V]) -> "Entry[K, V]":
        return Entry(k, v)
