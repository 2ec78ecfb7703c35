"""
Logging configuration for objstore.

Backends log at DEBUG only: which backend was selected, and the bucket,
key and size of each transfer. Failures are raised to the caller and
never logged here.
"""
import logging
import sys

from objstore.config import settings

LOGGER_NAME = "objstore"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure and return the objstore logger.

    The logger outputs to stdout with a structured format including:
    - Timestamp
    - Logger name
    - Log level
    - Message

    Args:
        level: Log level name, defaults to LOG_LEVEL from settings

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    # Prevent duplicate handlers if called multiple times
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
