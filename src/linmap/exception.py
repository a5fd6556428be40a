from typing import Any

import attr


class DictionaryError(Exception):
    """Base class for every error raised by a :py:class:`linmap.Dictionary`.

    Errors are fatal only to the single call which raised them; the dictionary
    is left exactly as it was before the call and remains fully usable."""


@attr.define(repr=False, str=False)
class InvalidArgumentError(DictionaryError, ValueError):
    """Raised for a malformed call, such as a ``None`` key or a negative capacity
    hint. The offending argument is available as ``argument``."""

    message: str
    argument: Any = None

    def __repr__(self):
        return f"linmap.exception.InvalidArgumentError({self.message!r})"

    def __str__(self):
        return self.message


@attr.define(repr=False, str=False)
class DuplicateKeyError(DictionaryError):
    """Raised when inserting a key equal to one which is already stored."""

    message: str
    key: Any = None

    def __repr__(self):
        return f"linmap.exception.DuplicateKeyError({self.message!r})"

    def __str__(self):
        return self.message


@attr.define(repr=False, str=False)
class KeyNotFoundError(DictionaryError, KeyError):
    """Raised when an operation requiring a stored key is given a key which is not
    present.

    Subclasses :py:class:`KeyError` so ``d[key]`` behaves like any other Python
    mapping, but overrides ``__str__`` since ``KeyError`` would otherwise render
    its arguments as a tuple."""

    message: str
    key: Any = None

    def __repr__(self):
        return f"linmap.exception.KeyNotFoundError({self.message!r})"

    def __str__(self):
        return self.message
