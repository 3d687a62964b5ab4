"""Emitter that forwards to the standard library logging module"""

import logging
from typing import Dict, Optional

from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel

# logging has no level below DEBUG; register one for VERBOSE
VERBOSE_LOGGING_LEVEL = 5
logging.addLevelName(VERBOSE_LOGGING_LEVEL, "VERBOSE")

LEVEL_TO_LOGGING: Dict[LogLevel, int] = {
    LogLevel.VERBOSE: VERBOSE_LOGGING_LEVEL,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class LoggingEmitter(LogEmitter):
    """
    Write messages to a ``logging.Logger``.

    The message and exception are passed through unchanged; the exception
    becomes the record's ``exc_info`` so handlers render its traceback.
    """

    def __init__(self, tag: str, logger: Optional[logging.Logger] = None):
        """
        Initialize logging emitter.

        Args:
            tag: Name of the target logger (used when ``logger`` is None)
            logger: Explicit target logger
        """
        self.tag = tag
        self.logger = logger or logging.getLogger(tag)

    def emit(self, level, message, exception):
        """Forward message to the target logger at the mapped level."""
        self.logger.log(LEVEL_TO_LOGGING[level], message, exc_info=exception)

    def __repr__(self) -> str:
        """String representation."""
        return f"LoggingEmitter(tag={self.tag!r})"
