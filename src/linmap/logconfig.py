import logging
import os
from typing import Optional

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LOGGER_NAME = "linmap"
HANDLER_NAME = "linmap-default"

DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> str:
    """Get the default logging level for linmap."""
    return os.getenv("LINMAP_LOGGING_LEVEL", "WARNING")


def get_handler(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the default logging handler for linmap.

    Records are discarded unless ``LINMAP_USE_DEV_LOGGER`` is ``true``, in which
    case they are written to stderr."""
    handler = (
        logging.StreamHandler()
        if os.getenv("LINMAP_USE_DEV_LOGGER", "").lower() == "true"
        else logging.NullHandler()
    )
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[str] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Configure the linmap root logger, replacing any handler installed by an
    earlier call, and return it."""
    level = level or get_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
    logger.addHandler(get_handler(level=level, fmt=fmt))
    return logger
