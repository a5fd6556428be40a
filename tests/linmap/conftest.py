import logging

import pytest

from linmap import Dictionary


@pytest.fixture(params=[3, 4, 5])
def pickle_protocol(request) -> int:
    return request.param


@pytest.fixture
def empty() -> Dictionary:
    return Dictionary()


@pytest.fixture
def abc() -> Dictionary:
    """A dictionary holding "A"=1, "B"=2 and "C" with no value."""
    d = Dictionary()
    d.insert("A", 1)
    d.insert("B", 2)
    d.insert("C", None)
    return d


@pytest.fixture
def linmap_logger():
    logger = logging.getLogger("linmap")
    level, handlers = logger.level, list(logger.handlers)
    try:
        yield logger
    finally:
        logger.setLevel(level)
        logger.handlers = handlers
