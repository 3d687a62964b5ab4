"""
Core module for logger facade

This module contains the fundamental classes:
- Logger: Named logger that filters, formats and dispatches messages
- LoggerBuilder: Builder pattern for logger construction
- LogEmitter: Base class for output sinks
- LogLevel: Log level enumeration
- LoggerConfig: Shared, mutable configuration
- FormatErrorAction: Policy for unformattable messages
"""

from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel
from logger_facade.core.logger_config import FormatErrorAction, LoggerConfig
from logger_facade.core.message_format import MessageFormatError, format_message
from logger_facade.core.logger import Logger
from logger_facade.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEmitter",
    "LogLevel",
    "LoggerConfig",
    "FormatErrorAction",
    "MessageFormatError",
    "format_message",
]
