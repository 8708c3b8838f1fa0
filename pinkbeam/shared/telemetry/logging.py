"""Logging configuration for the API process and the batch scripts."""

import logging
import sys

from pinkbeam.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that log every request/statement at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")


def setup_logging(level: int | None = None) -> None:
    """Configure process-wide logging to stdout.

    Level is the explicit ``level`` when given, else LOG_LEVEL from settings,
    else DEBUG when settings.debug is True and INFO otherwise. HTTP client and
    SQL statement loggers stay at WARNING unless running at DEBUG.
    """
    settings = get_settings()
    if level is None:
        if settings.log_level:
            level = logging.getLevelName(settings.log_level.upper())
        else:
            level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    if level != logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually ``__name__``)."""
    return logging.getLogger(name)
