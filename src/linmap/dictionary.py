import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, TypeVar, Union

from pyrsistent import PVector, pvector
from typing_extensions import Unpack

from linmap.entry import Entry
from linmap.exception import DuplicateKeyError, InvalidArgumentError, KeyNotFoundError
from linmap.interfaces import IDictionary, IEntry
from linmap.logconfig import TRACE
from linmap.obj import PrintSettings, entries_repr

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10

_NOT_FOUND = -1


class Dictionary(IDictionary[K, V]):
    """Mutable dictionary backed by two parallel lists.

    ``_keys[i]`` is always paired with ``_values[i]`` and both lists always have
    the same length. Keys are located by a linear scan comparing by identity and
    then ``==``, as the builtin containers do, so a key such as ``nan`` which is
    not equal to itself is still found. Keys need not be hashable. ``insert``,
    ``remove``, ``update``, ``lookup`` and ``contains_key`` are O(n); ``size``,
    ``is_empty`` and ``clear`` are O(1).

    The capacity hint is recorded for callers but never changes behavior; the
    dictionary grows past it as needed."""

    __slots__ = ("_keys", "_values", "_capacity")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise InvalidArgumentError(
                f"capacity must be an int, not {type(capacity).__name__}",
                argument=capacity,
            )
        if capacity < 0:
            raise InvalidArgumentError("capacity must be >= 0", argument=capacity)
        self._capacity = capacity
        self._keys: list[K] = []
        self._values: list[Optional[V]] = []

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __delitem__(self, key) -> None:
        self.remove(key)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, IDictionary):
            return NotImplemented
        if len(self._keys) != other.size():
            return False
        for k, v in zip(self._keys, self._values):
            if not other.contains_key(k):
                return False
            w = other.lookup(k)
            if not (w is v or w == v):
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key) -> Optional[V]:
        return self.lookup(key)

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return len(self._keys)

    def __repr__(self):
        return self.render()

    def __str__(self):
        return self.render()

    @property
    def capacity_hint(self) -> int:
        return self._capacity

    def _index_of(self, key: K) -> int:
        for i, k in enumerate(self._keys):
            if k is key or key == k:
                return i
        return _NOT_FOUND

    def _index_of_or_raise(self, key: K) -> int:
        idx = self._index_of(key)
        if idx == _NOT_FOUND:
            raise KeyNotFoundError(f"Key not found: {key}", key=key)
        return idx

    @staticmethod
    def _require_key(key: Any) -> None:
        if key is None:
            raise InvalidArgumentError("key must not be None")

    def insert(self, key: K, value: Optional[V]) -> None:
        self._require_key(key)
        if self._index_of(key) != _NOT_FOUND:
            raise DuplicateKeyError(f"Key already exists: {key}", key=key)
        self._keys.append(key)
        self._values.append(value)
        if len(self._keys) == self._capacity + 1:
            logger.log(
                TRACE, "Dictionary grew past its capacity hint of %d", self._capacity
            )

    def remove(self, key: K) -> Optional[V]:
        self._require_key(key)
        idx = self._index_of_or_raise(key)
        del self._keys[idx]
        return self._values.pop(idx)

    def update(self, key: K, new_value: Optional[V]) -> Optional[V]:
        self._require_key(key)
        idx = self._index_of_or_raise(key)
        old_value = self._values[idx]
        self._values[idx] = new_value
        return old_value

    def lookup(self, key: K) -> Optional[V]:
        self._require_key(key)
        return self._values[self._index_of_or_raise(key)]

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value stored under ``key`` or ``default`` if it is not
        stored. A ``None`` key is still rejected."""
        self._require_key(key)
        idx = self._index_of(key)
        if idx == _NOT_FOUND:
            return default
        return self._values[idx]

    def contains_key(self, key: K) -> bool:
        self._require_key(key)
        return self._index_of(key) != _NOT_FOUND

    def size(self) -> int:
        return len(self._keys)

    def is_empty(self) -> bool:
        return not self._keys

    def clear(self) -> None:
        if self._keys:
            logger.log(TRACE, "Clearing %d entries", len(self._keys))
        self._keys.clear()
        self._values.clear()

    def keys(self) -> list[K]:
        return list(self._keys)

    def values(self) -> list[Optional[V]]:
        return list(self._values)

    def entries(self) -> "PVector[Entry[K, V]]":
        """Return an immutable snapshot of every entry, in the same order as
        :py:meth:`keys` and :py:meth:`values` ."""
        return pvector(Entry(k, v) for k, v in zip(self._keys, self._values))

    def copy(self) -> "Dictionary[K, V]":
        """Return a new, independent dictionary holding the same entries. Keys and
        values themselves are shared, not copied."""
        new: Dictionary[K, V] = Dictionary(capacity=self._capacity)
        new._keys = list(self._keys)
        new._values = list(self._values)
        return new

    def render(self, **kwargs: Unpack[PrintSettings]) -> str:
        """Render the dictionary as ``{k1=v1, k2=v2}``, with ``None`` values shown
        as ``null``. See :py:func:`linmap.obj.entries_repr` for settings."""
        return entries_repr(zip(self._keys, self._values), "{", "}", **kwargs)


def _pairs(
    kvs: Union[Mapping[K, V], IDictionary[K, V], Iterable[tuple[K, V]]]
) -> Iterable[Any]:
    if isinstance(kvs, IDictionary):
        return zip(kvs.keys(), kvs.values())
    if isinstance(kvs, Mapping):
        return kvs.items()
    return kvs


def dictionary(
    kvs: Union[Mapping[K, V], IDictionary[K, V], Iterable[tuple[K, V]], None] = None,
    capacity: int = DEFAULT_CAPACITY,
) -> Dictionary[K, V]:
    """Creates a new dictionary from a mapping or an iterable of (key, value)
    pairs, inserted in iteration order.

    Raises as :py:meth:`Dictionary.insert` would for ``None`` or repeated keys."""
    new: Dictionary[K, V] = Dictionary(capacity=capacity)
    for pair in _pairs(kvs) if kvs is not None else ():
        try:
            k, v = pair
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                "Argument to dictionary must be a mapping or (key, value) pairs",
                argument=pair,
            ) from e
        new.insert(k, v)
    return new


def d(**kvs: V) -> Dictionary[str, V]:
    """Creates a new dictionary from keyword arguments."""
    return dictionary(kvs)


def from_entries(
    entries: Iterable[IEntry[K, V]], capacity: int = DEFAULT_CAPACITY
) -> Dictionary[K, V]:
    """Creates a new dictionary from an iterable of entries, in iteration order."""
    new: Dictionary[K, V] = Dictionary(capacity=capacity)
    for entry in entries:
        new.insert(entry.key, entry.value)
    return new


def dictionary_of(*kvs) -> Dictionary:
    """Creates a new dictionary from alternating keys and values."""
    if len(kvs) % 2 != 0:
        raise InvalidArgumentError(
            "dictionary_of requires an even number of arguments", argument=kvs
        )
    return dictionary(zip(kvs[::2], kvs[1::2]))
