"""
Level-based filter

Filters log events based on a log level range
"""

from typing import Optional

from tracer_module.core.log_event import LogEvent
from tracer_module.core.log_level import LogLevel
from tracer_module.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log events based on log level.

    Allows filtering by minimum and/or maximum log level. Works on top of
    the logger's own minimum level, e.g. to keep a band of levels only.
    """

    def __init__(
        self,
        min_level: Optional[LogLevel] = None,
        max_level: Optional[LogLevel] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum log level (inclusive). If None, no minimum.
            max_level: Maximum log level (inclusive). If None, no maximum.

        Example:
            # Only WARN and above
            filter = LevelFilter(min_level=LogLevel.WARN)

            # Only DEBUG to INFO
            filter = LevelFilter(min_level=LogLevel.DEBUG, max_level=LogLevel.INFO)
        """
        self.min_level = min_level
        self.max_level = max_level

    def handle(self, event: LogEvent) -> bool:
        """Check if the event's level is within the specified range."""
        if self.min_level is not None and not event.level.is_at_least(self.min_level):
            return False

        if self.max_level is not None and not self.max_level.is_at_least(event.level):
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level!s}, max={self.max_level!s})"
