import pytest

from linmap.obj import NULL_TOKEN, entries_repr, render


@pytest.mark.parametrize(
    "s,o",
    [("null", None), ("1", 1), ("abc", "abc"), ("True", True), ("[1, 2]", [1, 2])],
)
def test_render(s: str, o):
    assert s == render(o)


def test_null_token():
    assert "null" == NULL_TOKEN


@pytest.mark.parametrize(
    "s,entries,print_length",
    [
        ("{}", [], None),
        ("{}", [], 0),
        ("{}", [], 10),
        ("{a=1}", [("a", 1)], None),
        ("{a=null}", [("a", None)], None),
        ("{a=1, b=2, c=3}", [("a", 1), ("b", 2), ("c", 3)], None),
        ("{...}", [("a", 1), ("b", 2), ("c", 3)], 0),
        ("{...}", [("a", 1), ("b", 2), ("c", 3)], -1),
        ("{a=1, ...}", [("a", 1), ("b", 2), ("c", 3)], 1),
        ("{a=1, b=2, c=3}", [("a", 1), ("b", 2), ("c", 3)], 3),
        ("{a=1, b=2, c=3}", [("a", 1), ("b", 2), ("c", 3)], 10),
        ("{a=1, b=2, c=3}", [("a", 1), ("b", 2), ("c", 3)], True),
    ],
)
def test_entries_repr(s: str, entries, print_length):
    assert s == entries_repr(entries, print_length=print_length)


def test_entries_repr_bookends():
    assert "<a=1>" == entries_repr([("a", 1)], "<", ">")
