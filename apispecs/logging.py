"""Logging utilities for the spec collection commands."""

from __future__ import annotations

import logging

_LOGGER_NAME = "apispecs"
_CONSOLE_FORMAT = "[collect-specs] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the apispecs hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging() -> logging.Logger:
    """Send apispecs INFO-and-above records to stderr for the console commands.

    Debug records (checked artifact paths, generator argv) are only emitted when
    an embedding program configures the ``apispecs`` logger at DEBUG itself.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.INFO)
    logger.propagate = False

    # Reset handlers so repeated invocations in one process do not duplicate lines.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
