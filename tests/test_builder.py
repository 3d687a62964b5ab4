"""Tests for the logger builder"""

import io
from unittest.mock import Mock

from logger_facade import FormatErrorAction, LogEmitter, Logger, LoggerBuilder, LoggerConfig, LogLevel
from logger_facade.emitters import ConsoleEmitter, LoggingEmitter, NullEmitter


class TestLoggerBuilder:
    """Test builder pattern construction."""

    def test_defaults(self):
        logger = LoggerBuilder().build()
        assert isinstance(logger, Logger)
        assert logger.name == "logger"
        assert logger.level == LogLevel.INFO
        assert logger.emitters == ()
        assert logger.config.format_error_action is FormatErrorAction.THROW

    def test_builder_pattern(self):
        stream = io.StringIO()
        custom = NullEmitter()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.DEBUG)
            .with_format_error_action(FormatErrorAction.APPEND_AS_STRING)
            .with_console(colored=False, stream=stream)
            .with_logging("builder.tests")
            .add_emitter(custom)
            .build())

        assert logger.name == "builder_test"
        assert logger.level == LogLevel.DEBUG
        assert logger.config.format_error_action is FormatErrorAction.APPEND_AS_STRING
        console, forwarding, last = logger.emitters
        assert isinstance(console, ConsoleEmitter)
        assert console.stream is stream
        assert isinstance(forwarding, LoggingEmitter)
        assert forwarding.tag == "builder.tests"
        assert last is custom

    def test_built_logger_emits(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_name("built")
            .with_level(LogLevel.VERBOSE)
            .with_console(colored=False, stream=stream)
            .build())

        logger.w("disk at %d%%", 91)
        assert stream.getvalue() == "W/built: WARNING: disk at 91%\n"

    def test_build_config(self):
        emitter = Mock(spec=LogEmitter)
        config = LoggerBuilder().with_level(LogLevel.ERROR).add_emitter(emitter).build_config()
        assert isinstance(config, LoggerConfig)
        assert config.level == LogLevel.ERROR
        assert config.emitters == (emitter,)

    def test_shared_config(self):
        emitter = Mock(spec=LogEmitter)
        config = LoggerConfig(LogLevel.WARNING, [emitter])
        db = LoggerBuilder().with_name("db").with_config(config).build()
        http = LoggerBuilder().with_name("http").with_config(config).build()

        assert db.config is config
        assert http.config is config

        config.level = LogLevel.INFO
        db.i("connected")
        http.i("listening")
        assert [c.args for c in emitter.emit.call_args_list] == [
            (LogLevel.INFO, "db: connected", None),
            (LogLevel.INFO, "http: listening", None),
        ]
