import pytest

from linmap.exception import (
    DictionaryError,
    DuplicateKeyError,
    InvalidArgumentError,
    KeyNotFoundError,
)


@pytest.mark.parametrize(
    "exc_type,bases",
    [
        (InvalidArgumentError, (DictionaryError, ValueError)),
        (DuplicateKeyError, (DictionaryError,)),
        (KeyNotFoundError, (DictionaryError, KeyError)),
    ],
)
def test_exception_hierarchy(exc_type, bases):
    for base in bases:
        assert issubclass(exc_type, base)


def test_error_kinds_are_disjoint():
    assert not issubclass(DuplicateKeyError, (ValueError, KeyError))
    assert not issubclass(InvalidArgumentError, (DuplicateKeyError, KeyError))
    assert not issubclass(KeyNotFoundError, (DuplicateKeyError, ValueError))


def test_key_not_found_str():
    e = KeyNotFoundError("Key not found: a", key="a")
    assert "Key not found: a" == str(e)
    assert "a" == e.key
    assert "linmap.exception.KeyNotFoundError('Key not found: a')" == repr(e)


def test_duplicate_key_str():
    e = DuplicateKeyError("Key already exists: a", key="a")
    assert "Key already exists: a" == str(e)
    assert "a" == e.key


def test_invalid_argument_defaults():
    e = InvalidArgumentError("key must not be None")
    assert "key must not be None" == str(e)
    assert None is e.argument
