"""Emitter that discards everything"""

from logger_facade.core.log_emitter import LogEmitter


class NullEmitter(LogEmitter):
    """Discard all messages."""

    def emit(self, level, message, exception):
        pass
