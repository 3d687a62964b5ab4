"""
Base emitter interface

An emitter is a sink that receives fully assembled log messages.
"""

from abc import ABC, abstractmethod
from typing import Optional

from logger_facade.core.log_level import LogLevel


class LogEmitter(ABC):
    """
    Abstract base class for log emitters.

    Every emitter configured on a LoggerConfig receives the same assembled
    message and exception for each log call that passes the level filter.
    """

    @abstractmethod
    def emit(
        self,
        level: LogLevel,
        message: Optional[str],
        exception: Optional[BaseException],
    ) -> None:
        """
        Write a log message to the sink.

        Args:
            level: Level the message was logged at
            message: Assembled message; may be None
            exception: Exception supplied by the caller, or None
        """
        pass

    def __call__(
        self,
        level: LogLevel,
        message: Optional[str],
        exception: Optional[BaseException] = None,
    ) -> None:
        """Allow emitters to be callable."""
        self.emit(level, message, exception)
