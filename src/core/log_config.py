"""Logging setup (loguru). The curses screen owns the terminal, so logs go to a file whenever one is configured."""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Replace loguru's default stderr sink with a single sink at the requested level."""
    logger.remove()
    if log_file:
        logger.add(log_file, level=level, format=LOG_FORMAT)
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logger.debug(f"Logging configured: {level=}, {log_file=}")
