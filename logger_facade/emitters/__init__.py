"""Emitters module - Log output sinks"""

from logger_facade.emitters.console_emitter import ConsoleEmitter
from logger_facade.emitters.logging_emitter import (
    LEVEL_TO_LOGGING,
    VERBOSE_LOGGING_LEVEL,
    LoggingEmitter,
)
from logger_facade.emitters.null_emitter import NullEmitter

__all__ = [
    "ConsoleEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "LEVEL_TO_LOGGING",
    "VERBOSE_LOGGING_LEVEL",
]
