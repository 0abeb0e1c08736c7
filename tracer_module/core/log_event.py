"""
Log event data structure

One immutable value per log call. Events are created by the Logger and
should not be constructed manually outside of tests.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from tracer_module.core.log_level import LogLevel
from tracer_module.core.stack_trace import StackTrace
from tracer_module.formatters.message_formatter import DEFAULT_FORMATTER


@dataclass(frozen=True)
class LogEvent:
    """
    Log event data structure.

    Contains all information about a single log occurrence.

    Attributes:
        section: Name of the section (logger) the event was created in
        level: Level of severity
        timestamp: Time of logging, local or UTC depending on the logger
        body: Brief summary of the issue
        description: Optional, more detailed description
        error: Attached error object; not a standardized type
        stack: Attached stack trace
        indentation: Align continuation lines under the timestamp column
    """

    section: str
    level: LogLevel
    timestamp: datetime
    body: str
    description: Optional[str] = None
    error: Any = field(default=None, compare=False)
    stack: Optional[StackTrace] = field(default=None, compare=False)
    indentation: bool = True

    def __post_init__(self):
        """Validate log event after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.body, str):
            object.__setattr__(self, "body", str(self.body))

    @property
    def generated_message_colored(self) -> str:
        """
        Rich output including timestamp, level and body, plus the
        description, error and stack when given. Contains ANSI codes.
        """
        return DEFAULT_FORMATTER.format_colored(self)

    @property
    def generated_message(self) -> str:
        """``generated_message_colored`` with every ANSI code removed."""
        return DEFAULT_FORMATTER.format(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation; error and stack as text
        """
        return {
            "section": self.section,
            "level": self.level.name,
            "timestamp": self.timestamp.isoformat(),
            "body": self.body,
            "description": self.description,
            "error": None if self.error is None else str(self.error),
            "stack": None if self.stack is None else str(self.stack),
        }

    def __str__(self) -> str:
        """String representation."""
        return self.generated_message
