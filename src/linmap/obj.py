from collections.abc import Iterable
from functools import singledispatch
from itertools import islice
from typing import Any, Union

from typing_extensions import TypedDict, Unpack

PrintCountSetting = Union[bool, int, None]

NULL_TOKEN = "null"
SURPASSED_PRINT_LENGTH = "..."

PRINT_LENGTH: PrintCountSetting = None
PRINT_SEPARATOR = ", "
ENTRY_SEPARATOR = "="


class PrintSettings(TypedDict, total=False):
    print_length: PrintCountSetting


@singledispatch
def render(o: Any) -> str:
    """Return the string used for a single key or value in a dictionary
    rendering."""
    return str(o)


@render.register(type(None))
def _render_none(_: None) -> str:
    return NULL_TOKEN


def entries_repr(
    entries: Iterable[tuple[Any, Any]],
    start: str = "{",
    end: str = "}",
    **kwargs: Unpack[PrintSettings],
) -> str:
    """Produce a representation of an associative collection as comma separated
    ``key=value`` items, bookended with the start and end string supplied.

    If the keyword argument ``print_length`` is an integer, at most that many
    entries will be rendered and a trailing ``...`` marks the remainder. Bools
    are not treated as a length."""
    print_length = kwargs.get("print_length", PRINT_LENGTH)

    def entry_reprs():
        for k, v in entries:
            yield f"{render(k)}{ENTRY_SEPARATOR}{render(v)}"

    trailer = []
    if isinstance(print_length, int) and not isinstance(print_length, bool):
        print_length = max(print_length, 0)
        items = list(islice(entry_reprs(), print_length + 1))
        if len(items) > print_length:
            items.pop()
            trailer.append(SURPASSED_PRINT_LENGTH)
    else:
        items = list(entry_reprs())

    return f"{start}{PRINT_SEPARATOR.join(items + trailer)}{end}"
