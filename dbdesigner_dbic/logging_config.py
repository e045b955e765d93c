"""Logging setup shared by all modules of the package."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dbdesigner_dbic"
LOG_FORMAT = "%(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``.

    Module names are accepted as is: ``dbdesigner_dbic.reader`` maps to the
    ``reader`` child of the package logger.
    """
    base = logging.getLogger(LOGGER_NAME)
    if not name or name == LOGGER_NAME:
        return base
    if name.startswith(LOGGER_NAME + "."):
        name = name[len(LOGGER_NAME) + 1 :]
    return base.getChild(name)


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Configure the package logger with a rich handler on stderr.

    Args:
        level: Log level name or number.
        console: Console to log to (a stderr console if None).

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = get_logger()
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
