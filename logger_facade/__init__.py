"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Logger Facade - A lightweight named-logger facade that formats
printf-style messages and fans them out to pluggable emitters
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logger_facade.core.logger import Logger
from logger_facade.core.logger_builder import LoggerBuilder
from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel
from logger_facade.core.logger_config import FormatErrorAction, LoggerConfig
from logger_facade.core.message_format import MessageFormatError

# Import submodules (not all classes by default)
from logger_facade import emitters

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEmitter",
    "LogLevel",
    "LoggerConfig",
    "FormatErrorAction",
    "MessageFormatError",
    "emitters",
]
