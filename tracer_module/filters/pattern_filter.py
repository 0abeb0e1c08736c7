"""
Pattern-based filter using regular expressions

Filters log events based on body or description matching
"""

import re
from typing import Pattern, Union

from tracer_module.core.log_event import LogEvent
from tracer_module.filters.base_filter import BaseFilter

_FIELDS = ("body", "description")


class PatternFilter(BaseFilter):
    """
    Filter log events based on regex pattern matching.

    Can be configured to include or exclude matching events.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True,
        field: str = "body"
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, exclude matching events. If False, include only matching events.
            case_sensitive: Whether pattern matching is case-sensitive
            field: Event field to match against, "body" or "description"

        Example:
            # Only events mentioning "disk"
            filter = PatternFilter(r"disk")

            # Drop heartbeat noise
            filter = PatternFilter(r"^heartbeat", exclude=True)
        """
        if field not in _FIELDS:
            raise ValueError(f"field must be one of {_FIELDS}, got {field!r}")

        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude
        self.field = field

    def handle(self, event: LogEvent) -> bool:
        """Check if the event's field matches the pattern."""
        text = getattr(event, self.field) or ""
        matches = self.pattern.search(text) is not None

        # exclude=True drops matches, exclude=False keeps only matches
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode}, field={self.field})"
