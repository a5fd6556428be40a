from linmap.dictionary import (
    DEFAULT_CAPACITY,
    Dictionary,
    d,
    dictionary,
    dictionary_of,
    from_entries,
)
from linmap.entry import Entry
from linmap.exception import (
    DictionaryError,
    DuplicateKeyError,
    InvalidArgumentError,
    KeyNotFoundError,
)
from linmap.interfaces import IDictionary, IEntry
from linmap.obj import NULL_TOKEN

__all__ = [
    "DEFAULT_CAPACITY",
    "NULL_TOKEN",
    "Dictionary",
    "DictionaryError",
    "DuplicateKeyError",
    "Entry",
    "IDictionary",
    "IEntry",
    "InvalidArgumentError",
    "KeyNotFoundError",
    "d",
    "dictionary",
    "dictionary_of",
    "from_entries",
]
