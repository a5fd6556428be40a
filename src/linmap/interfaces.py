from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class IEntry(Generic[K, V], ABC):
    """``IEntry`` values are the (key, value) pairs stored by an
    :py:class:`IDictionary` ."""

    __slots__ = ()

    @property
    @abstractmethod
    def key(self) -> K:
        raise NotImplementedError()

    @property
    @abstractmethod
    def value(self) -> Optional[V]:
        raise NotImplementedError()


class IDictionary(Sized, Generic[K, V], ABC):
    """``IDictionary`` types store unique (key, value) pairs.

    Keys are matched by equality (``==``) rather than identity and must never be
    ``None``; a ``None`` key is a usage error and raises
    :py:class:`linmap.exception.InvalidArgumentError` from every operation which
    accepts a key. Values may be ``None``.

    Every operation is all-or-nothing: an operation which raises leaves the
    dictionary exactly as it was before the call."""

    __slots__ = ()

    @abstractmethod
    def insert(self, key: K, value: Optional[V]) -> None:
        """Insert a new (key, value) pair.

        Raises :py:class:`linmap.exception.DuplicateKeyError` if an equal key is
        already stored. After a successful call ``size()`` has grown by one and
        ``lookup(key)`` returns ``value``."""
        raise NotImplementedError()

    @abstractmethod
    def remove(self, key: K) -> Optional[V]:
        """Remove the pair stored under ``key`` and return its value.

        Raises :py:class:`linmap.exception.KeyNotFoundError` if ``key`` is not
        stored."""
        raise NotImplementedError()

    @abstractmethod
    def update(self, key: K, new_value: Optional[V]) -> Optional[V]:
        """Replace the value stored under ``key`` in place, returning the previous
        value. ``size()`` is unchanged.

        Raises :py:class:`linmap.exception.KeyNotFoundError` if ``key`` is not
        stored."""
        raise NotImplementedError()

    @abstractmethod
    def lookup(self, key: K) -> Optional[V]:
        """Return the value stored under ``key``.

        Raises :py:class:`linmap.exception.KeyNotFoundError` if ``key`` is not
        stored."""
        raise NotImplementedError()

    @abstractmethod
    def contains_key(self, key: K) -> bool:
        """Return True if ``key`` is stored. Absence is a normal result and never
        raises."""
        raise NotImplementedError()

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def clear(self) -> None:
        """Remove every pair. Clearing an empty dictionary is a no-op."""
        raise NotImplementedError()

    @abstractmethod
    def keys(self) -> list[K]:
        """Return a snapshot list of all keys.

        The order is unspecified, but two back-to-back calls to ``keys()`` and
        :py:meth:`values` with no mutation in between are index-parallel. Mutating
        the returned list never affects the dictionary, and vice versa."""
        raise NotImplementedError()

    @abstractmethod
    def values(self) -> list[Optional[V]]:
        """Return a snapshot list of all values, index-parallel with
        :py:meth:`keys` ."""
        raise NotImplementedError()
