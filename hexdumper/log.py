"""
Logging setup for hexdumper.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "hexdumper"


def setup_logging(
    *,
    log_file: Optional[str] = None,
    verbose: bool = False,
    console: bool = True,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        log_file: Path of a log file (None disables file logging)
        verbose: DEBUG level when True, WARNING otherwise
        console: Attach a handler writing to stderr
        log_format: Custom format string (None uses the default)

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if log_format is None:
        log_format = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"
    formatter = logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S")

    # stdout carries the dump itself
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning("Cannot create log file %s (%s)", log_file, e)

    return logger


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(LOGGER_NAME)
