"""
Compact formatter for minimal log output

Produces the short ``level> body`` line used by the simple console handler
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tracer_module.formatters.base_formatter import BaseFormatter

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent


class CompactFormatter(BaseFormatter):
    """
    Format log events in a compact single-line format.

    Drops timestamp, section, description, error and stack entirely.
    """

    def __init__(self, include_section: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_section: Prefix the body with the section name

        Example:
            # "info > Application started"
            formatter = CompactFormatter()

            # "info > app: Application started"
            formatter = CompactFormatter(include_section=True)
        """
        self.include_section = include_section

    def format(self, event: "LogEvent") -> str:
        """
        Format log event in compact format.

        Args:
            event: Log event to format

        Returns:
            Compact formatted string
        """
        level_name = event.level.display_name.lower().ljust(5)
        if self.include_section:
            return f"{level_name}> {event.section}: {event.body}"
        return f"{level_name}> {event.body}"

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(section={self.include_section})"
