"""Logging setup for the resume_matcher package.

Library modules obtain loggers through :func:`get_logger` so every record lands
under the ``resume_matcher`` hierarchy. Only the CLI calls
:func:`configure_logging`, which attaches a single stderr handler.
"""

import logging
import sys

LOGGER_NAME = "resume_matcher"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _level_number(level: str | None) -> int:
    # Unknown names fall back to INFO rather than failing the CLI.
    value = logging.getLevelName((level or "INFO").upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    level: str | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Attach the stderr handler and set the package log level.

    Calling this again only updates the level and format of the existing
    handler.

    Returns:
        The ``resume_matcher`` logger.
    """
    global _handler

    package_logger = logging.getLogger(LOGGER_NAME)
    log_level = _level_number(level)
    package_logger.setLevel(log_level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        package_logger.addHandler(_handler)
        package_logger.propagate = False

    _handler.setLevel(log_level)
    _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``resume_matcher`` hierarchy.

    Module names such as ``resume_matcher.matching.loader`` are used as is;
    short names like ``"matching"`` become ``resume_matcher.matching``.
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop all handlers and restore propagation to the root logger."""
    global _handler

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    _handler = None
