"""
Log level enumeration

The five severity levels form a closed set. The enum value is the
importance rank, so ordering comparisons follow importance.
"""

from enum import IntEnum
from typing import Dict

LEVEL_NAME_WIDTH = 5


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Each member carries a display name, an ANSI color code and a flag
    telling console output whether to prefer stderr.
    """

    DEBUG = 0   # Not important to the normal user, hidden by default
    INFO = 1    # Certain, non-important events
    WARN = 2    # Events that do not affect the experience in any severe way
    ERROR = 3   # Issues that may hinder certain features
    FATAL = 4   # Severe issues, the program should be exited

    def __str__(self) -> str:
        """String representation of log level."""
        return self.display_name

    @property
    def importance(self) -> int:
        """Weight of the level, used to decide whether it is handled."""
        return int(self.value)

    @property
    def display_name(self) -> str:
        """Name used in generated output."""
        return LEVEL_NAMES[self]

    @property
    def ansi_color(self) -> int:
        """ANSI SGR color number used in colored output."""
        return LEVEL_COLORS[self]

    @property
    def use_stderr(self) -> bool:
        """Whether console output should go to stderr for this level."""
        return self in STDERR_LEVELS

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return f"\033[{self.ansi_color}m"

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    def is_at_least(self, other: "LogLevel") -> bool:
        """Whether this level is at least as severe as ``other``."""
        return self.importance >= other.importance

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")


def center_level_name(name: str, width: int = LEVEL_NAME_WIDTH) -> str:
    """Center ``name`` in ``width`` columns, odd padding goes to the right."""
    if len(name) >= width:
        return name

    total_padding = width - len(name)
    pad_left = total_padding // 2
    pad_right = total_padding - pad_left
    return " " * pad_left + name + " " * pad_right


LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARN: "Warn",
    LogLevel.ERROR: "Error",
    LogLevel.FATAL: "Fatal",
}

LEVEL_COLORS: Dict[LogLevel, int] = {
    LogLevel.DEBUG: 90,  # Gray
    LogLevel.INFO: 94,   # Bright blue
    LogLevel.WARN: 93,   # Bright yellow
    LogLevel.ERROR: 91,  # Bright red
    LogLevel.FATAL: 91,  # Bright red
}

STDERR_LEVELS = frozenset({LogLevel.ERROR, LogLevel.FATAL})

LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}
