"""Logger builder pattern"""

from typing import List, Optional

from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel
from logger_facade.core.logger import Logger
from logger_facade.core.logger_config import FormatErrorAction, LoggerConfig
from logger_facade.emitters.console_emitter import ConsoleEmitter
from logger_facade.emitters.logging_emitter import LoggingEmitter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._level = LogLevel.INFO
        self._format_error_action = FormatErrorAction.THROW
        self._console_enabled = False
        self._console_colored = True
        self._console_stream = None
        self._logging_tag: Optional[str] = None
        self._custom_emitters: List[LogEmitter] = []
        self._shared_config: Optional[LoggerConfig] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._level = level
        return self

    def with_format_error_action(self, action: FormatErrorAction) -> "LoggerBuilder":
        """Set what happens when a message template cannot be formatted."""
        self._format_error_action = action
        return self

    def with_console(self, colored: bool = True, stream=None) -> "LoggerBuilder":
        """Enable console output."""
        self._console_enabled = True
        self._console_colored = colored
        self._console_stream = stream
        return self

    def with_logging(self, tag: str) -> "LoggerBuilder":
        """
        Forward messages to the standard library logger named ``tag``.

        Example:
            logger = (LoggerBuilder()
                .with_name("db")
                .with_logging("myapp")
                .build())
        """
        self._logging_tag = tag
        return self

    def add_emitter(self, emitter: LogEmitter) -> "LoggerBuilder":
        """
        Add a custom emitter.

        Args:
            emitter: Emitter instance

        Returns:
            Self for method chaining
        """
        self._custom_emitters.append(emitter)
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """
        Use an existing config instead of building a new one.

        Loggers built this way share the config by reference, so later
        changes to it reach all of them. Level, format error action and
        emitter settings on this builder are ignored.

        Example:
            config = LoggerConfig.debug_config([ConsoleEmitter()])
            db = LoggerBuilder().with_name("db").with_config(config).build()
            http = LoggerBuilder().with_name("http").with_config(config).build()
        """
        self._shared_config = config
        return self

    def build_config(self) -> LoggerConfig:
        """Build and return the configuration."""
        if self._shared_config is not None:
            return self._shared_config

        emitters: List[LogEmitter] = []

        # Add console emitter
        if self._console_enabled:
            emitters.append(ConsoleEmitter(colored=self._console_colored, stream=self._console_stream))

        # Add logging emitter
        if self._logging_tag is not None:
            emitters.append(LoggingEmitter(self._logging_tag))

        # Add custom emitters
        emitters.extend(self._custom_emitters)

        return LoggerConfig(
            level=self._level,
            emitters=emitters,
            format_error_action=self._format_error_action,
        )

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self._name, self.build_config())
