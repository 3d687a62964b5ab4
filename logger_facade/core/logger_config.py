"""
Logger configuration management

A LoggerConfig is shared by reference between loggers; changes made to it
are seen by every logger holding it on their next log call.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable, Optional, Tuple
import threading

from logger_facade.core.log_emitter import LogEmitter
from logger_facade.core.log_level import LogLevel


class FormatErrorAction(Enum):
    """What a logger does when a message template cannot be formatted."""

    THROW = "throw"                          # Raise to the caller, emit nothing
    APPEND_AS_STRING = "append_as_string"    # Emit the raw template plus arguments

    @classmethod
    def from_string(cls, action_str: str) -> "FormatErrorAction":
        """
        Convert string to FormatErrorAction.

        Args:
            action_str: Action name or value (case-insensitive)

        Returns:
            FormatErrorAction enum value

        Raises:
            ValueError: If action_str is not valid
        """
        name = action_str.strip().upper()
        if name == "THROW_EXCEPTION":
            name = "THROW"
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid format error action: {action_str}")


class LoggerConfig:
    """
    Logger configuration.

    Holds the minimum level, the ordered emitters and the format error
    policy. Each field is read and written under a lock, so a value is never
    observed half-updated; no atomicity is provided across fields.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.INFO,
        emitters: Iterable[LogEmitter] = (),
        format_error_action: FormatErrorAction = FormatErrorAction.THROW,
    ):
        self._lock = threading.Lock()
        self._level = _check_level(level)
        self._emitters = _check_emitters(emitters)
        self._format_error_action = _check_action(format_error_action)

    @property
    def level(self) -> LogLevel:
        """Messages below this level are discarded."""
        with self._lock:
            return self._level

    @level.setter
    def level(self, value: LogLevel) -> None:
        value = _check_level(value)
        with self._lock:
            self._level = value

    @property
    def emitters(self) -> Tuple[LogEmitter, ...]:
        """Snapshot of the emitters, in dispatch order."""
        with self._lock:
            return self._emitters

    @emitters.setter
    def emitters(self, value: Iterable[LogEmitter]) -> None:
        value = _check_emitters(value)
        with self._lock:
            self._emitters = value

    @property
    def format_error_action(self) -> FormatErrorAction:
        with self._lock:
            return self._format_error_action

    @format_error_action.setter
    def format_error_action(self, value: FormatErrorAction) -> None:
        value = _check_action(value)
        with self._lock:
            self._format_error_action = value

    def add_emitter(self, emitter: LogEmitter) -> None:
        """Append an emitter to the end of the dispatch order."""
        emitter = _check_emitter(emitter)
        with self._lock:
            self._emitters = self._emitters + (emitter,)

    def remove_emitter(self, emitter: LogEmitter) -> bool:
        """
        Remove the first occurrence of an emitter.

        Args:
            emitter: Emitter instance to remove (compared by identity)

        Returns:
            True if the emitter was found and removed
        """
        with self._lock:
            for i, candidate in enumerate(self._emitters):
                if candidate is emitter:
                    self._emitters = self._emitters[:i] + self._emitters[i + 1:]
                    return True
        return False

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls, emitters: Iterable[LogEmitter] = ()) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.VERBOSE,
            emitters=emitters,
            format_error_action=FormatErrorAction.APPEND_AS_STRING,
        )

    @classmethod
    def production_config(cls, emitters: Iterable[LogEmitter] = ()) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.WARNING,
            emitters=emitters,
            format_error_action=FormatErrorAction.APPEND_AS_STRING,
        )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LoggerConfig(level={self.level}, emitters={len(self.emitters)}, "
            f"format_error_action={self.format_error_action.name})"
        )


def _check_level(level: Optional[LogLevel]) -> LogLevel:
    if not isinstance(level, LogLevel):
        raise TypeError(f"level must be LogLevel enum, got {type(level).__name__}")
    return level


def _check_action(action: Optional[FormatErrorAction]) -> FormatErrorAction:
    if not isinstance(action, FormatErrorAction):
        raise TypeError(
            f"format_error_action must be FormatErrorAction enum, got {type(action).__name__}"
        )
    return action


def _check_emitter(emitter: LogEmitter) -> LogEmitter:
    if not callable(getattr(emitter, "emit", None)):
        raise TypeError(f"emitter must have an emit() method: {emitter!r}")
    return emitter


def _check_emitters(emitters: Iterable[LogEmitter]) -> Tuple[LogEmitter, ...]:
    if isinstance(emitters, (str, bytes)):
        raise TypeError("emitters must be a sequence of emitters")
    return tuple(_check_emitter(e) for e in emitters)
