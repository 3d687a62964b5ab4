"""Console emitter with ANSI colors"""

import sys
import traceback
from datetime import datetime
from typing import Optional

from logger_facade.core.log_emitter import LogEmitter


class ConsoleEmitter(LogEmitter):
    """Write messages to console with optional colors."""

    def __init__(self, colored: bool = True, stream=None, timestamp_format: Optional[str] = None):
        """
        Initialize console emitter.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stderr)
            timestamp_format: strftime format for a leading timestamp
                (default: no timestamp)

        Example:
            emitter = ConsoleEmitter(colored=False, timestamp_format="%H:%M:%S")
            # 12:30:01 W/db: WARNING: slow query
        """
        self.colored = colored
        self.stream = stream or sys.stderr
        self.timestamp_format = timestamp_format

    def emit(self, level, message, exception):
        """Write message to console."""
        line = f"{level.name[0]}/{message}"
        if self.timestamp_format:
            line = f"{datetime.now().strftime(self.timestamp_format)} {line}"
        if exception is not None:
            trace = "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            )
            line = f"{line}\n{trace.rstrip()}"

        if self.colored:
            line = f"{level.color_code}{line}{level.reset_code}"

        self.stream.write(line + "\n")
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()
