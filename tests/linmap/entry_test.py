import attr
import pytest

from linmap.entry import Entry
from linmap.interfaces import IEntry


def test_entry_interface_membership():
    assert isinstance(Entry.of("a", "b"), IEntry)
    assert issubclass(Entry, IEntry)


def test_entry():
    e = Entry.of("a", 1)
    assert "a" == e.key
    assert 1 == e.value
    assert ("a", 1) == tuple(e)
    assert Entry("a", 1) == e
    assert Entry("a", 2) != e


def test_entry_default_value():
    assert None is Entry("a").value


def test_entry_is_immutable():
    e = Entry.of("a", 1)
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        e._key = "b"  # pylint: disable=protected-access


def test_entry_repr():
    assert "a=1" == repr(Entry.of("a", 1))
    assert "a=null" == repr(Entry.of("a", None))
