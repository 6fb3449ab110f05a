"""Logging setup for command line use."""

import logging
from typing import Optional, TextIO

LOGGER_NAME = "exstatus"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG").
        stream: Stream for the handler; stderr when omitted.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
