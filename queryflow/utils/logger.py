"""
Logging configuration.

Console-only: the engine runs inside an interactive session and never writes
to disk.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level logger cache
_loggers: dict = {}


def setup_logger(
    name: str = "queryflow",
    level: Optional[int] = None,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Set up a logger with a console handler.

    Args:
        name: Logger name (typically "queryflow" or a module name)
        level: Logging level (defaults to SessionConfig.log_level, which
            reads QUERYFLOW_LOG_LEVEL)
        log_to_console: Whether to output to stderr

    Returns:
        Configured logger
    """
    if name in _loggers:
        return _loggers[name]

    if level is None:
        from ..config import SessionConfig

        level = SessionConfig().log_level_value

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if log_to_console and not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger
