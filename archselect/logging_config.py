"""Logging configuration for archselect."""
import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_format: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``archselect`` logger once.

    Args:
        level: Log level name
        log_format: Override the default format

    Returns:
        The package logger
    """
    logger = logging.getLogger("archselect")

    # Don't configure if already configured
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_format or LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
