"""
Log level enumeration

Levels are ranked VERBOSE (lowest) to ERROR (highest); filtering compares ranks.
"""

from enum import IntEnum
from typing import Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The integer value of each member is its rank, so ordinary comparison
    operators order levels by severity.
    """

    VERBOSE = 0     # Most verbose, detailed tracing
    DEBUG = 1       # Debug information
    INFO = 2        # Informational messages
    WARNING = 3     # Warning messages
    ERROR = 4       # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). The aliases ``WARN``
                and ``TRACE`` are accepted as well.

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def prefix(self) -> Optional[str]:
        """Tag inserted after the logger name, or None for untagged levels."""
        return LEVEL_PREFIXES.get(self)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.VERBOSE: "\033[37m",   # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARNING: "\033[33m",   # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Only WARNING and ERROR carry a tag in assembled messages
LEVEL_PREFIXES: Dict[LogLevel, str] = {
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
}

LEVEL_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
    "TRACE": "VERBOSE",
}
