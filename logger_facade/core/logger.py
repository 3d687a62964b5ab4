"""
Main Logger class - named, level-filtered logging facade

A Logger binds a name to a shared LoggerConfig. Each call is filtered by the
config's current level, assembled as ``"<name>: [<TAG>: ]<formatted>"`` and
handed to every configured emitter in order.
"""

from __future__ import annotations
from typing import Any, Optional, Sequence, Tuple
import io
import threading

from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel
from logger_facade.core.logger_config import FormatErrorAction, LoggerConfig
from logger_facade.core.message_format import format_message

# Buffers that grew past this many characters are dropped instead of reused
MAX_RETAINED_BUFFER_SIZE = 2000

_NOT_GIVEN = object()


class _MessageBuffer(threading.local):
    """Per-thread scratch buffer for assembling messages."""

    def __init__(self):
        self.buffer = io.StringIO()
        self.in_use = False


_THREAD_LOCAL_BUFFER = _MessageBuffer()


class Logger:
    """
    Named logger that formats messages and dispatches them to emitters.

    The config is read on every call and never cached, so changing its
    level, emitters or format error action affects all later calls.

    Every logging method accepts two call forms::

        logger.i("loaded %d items", count)
        logger.e(exc, "request %s failed", request_id)

    The second form is selected when the argument before the message is an
    exception or None. The exception may also be passed as ``exception=``.
    """

    def __init__(self, name: str, config: Optional[LoggerConfig] = None):
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._name = name
        self._config = config if config is not None else LoggerConfig.default()

    @property
    def name(self) -> str:
        """Name added to the beginning of every message."""
        return self._name

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def level(self) -> LogLevel:
        """Current level threshold of the shared config."""
        return self._config.level

    @property
    def emitters(self) -> Tuple[LogEmitter, ...]:
        """Current emitters of the shared config."""
        return self._config.emitters

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Return True if a message at ``level`` would be emitted."""
        return level >= self._config.level

    def log(self, level: LogLevel, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """
        Log a message at the given level.

        Args:
            level: Level of the message
            *args: ``message, *format_args`` or
                ``exception, message, *format_args``
            exception: Exception to pass to the emitters

        Raises:
            MessageFormatError: If formatting fails and the config's
                format error action is THROW
        """
        self._log(level, *_split_args(args, exception))

    def v(self, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """Log a message with VERBOSE level."""
        self._log(LogLevel.VERBOSE, *_split_args(args, exception))

    def d(self, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """Log a message with DEBUG level."""
        self._log(LogLevel.DEBUG, *_split_args(args, exception))

    def i(self, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """Log a message with INFO level."""
        self._log(LogLevel.INFO, *_split_args(args, exception))

    def w(self, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """Log a message with WARNING level."""
        self._log(LogLevel.WARNING, *_split_args(args, exception))

    def e(self, *args: Any, exception: Any = _NOT_GIVEN) -> None:
        """Log a message with ERROR level."""
        self._log(LogLevel.ERROR, *_split_args(args, exception))

    verbose = v
    debug = d
    info = i
    warning = w
    warn = w
    error = e

    def _log(
        self,
        level: LogLevel,
        exception: Optional[BaseException],
        message: str,
        args: Sequence[Any],
    ) -> None:
        if level < self._config.level:
            return
        assembled = self._assemble_message(level, message, args)
        for emitter in self._config.emitters:
            emitter.emit(level, assembled, exception)

    def _assemble_message(self, level: LogLevel, message: str, args: Sequence[Any]) -> str:
        local = _THREAD_LOCAL_BUFFER
        if local.in_use:
            # An argument's __str__ logged while this thread was assembling
            return self._write_message(io.StringIO(), level, message, args)

        local.in_use = True
        try:
            buf = local.buffer
            buf.seek(0)
            buf.truncate()
            assembled = self._write_message(buf, level, message, args)
            if len(assembled) > MAX_RETAINED_BUFFER_SIZE:
                local.buffer = io.StringIO()
            else:
                buf.seek(0)
                buf.truncate()
            return assembled
        finally:
            local.in_use = False

    def _write_message(self, buf: io.StringIO, level: LogLevel, message: str, args: Sequence[Any]) -> str:
        buf.write(self._name)
        buf.write(": ")
        prefix = level.prefix
        if prefix is not None:
            buf.write(prefix)
            buf.write(": ")
        self._format_message(message, args, buf)
        return buf.getvalue()

    def _format_message(self, message: str, args: Sequence[Any], buf: io.StringIO) -> None:
        if self._config.format_error_action is FormatErrorAction.THROW:
            format_message(message, args, buf)
            return

        start = buf.tell()
        try:
            format_message(message, args, buf)
        except Exception:
            buf.seek(start)
            buf.truncate()
            buf.write(message)
            if args:
                buf.write(" (")
                for i, arg in enumerate(args):
                    if i > 0:
                        buf.write(", ")
                    buf.write(_str_or_error(arg))
                buf.write(")")

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name={self._name!r}, level={self.level})"


def _split_args(
    args: Tuple[Any, ...], exception: Any
) -> Tuple[Optional[BaseException], str, Tuple[Any, ...]]:
    """Separate ``([exception,] message, *format_args)``."""
    if exception is not _NOT_GIVEN:
        if not args:
            raise TypeError("missing required argument: 'message'")
        return exception, _as_template(args[0]), args[1:]

    if len(args) >= 2 and (args[0] is None or isinstance(args[0], BaseException)):
        return args[0], _as_template(args[1]), args[2:]
    if not args:
        raise TypeError("missing required argument: 'message'")
    return None, _as_template(args[0]), args[1:]


def _as_template(message: Any) -> str:
    return message if isinstance(message, str) else str(message)


def _str_or_error(arg: Any) -> str:
    try:
        return str(arg)
    except Exception as exc:
        return _describe_error(exc)


def _describe_error(exc: Exception) -> str:
    try:
        return str(exc)
    except Exception:
        return type(exc).__name__
