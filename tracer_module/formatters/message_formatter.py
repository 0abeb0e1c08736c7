"""
Multi-line message formatter

Renders the header line followed by the optional description, error and
stack blocks, each aligned under a pipe column. The plain variant is
always derived from the colored one by stripping ANSI codes.
"""

from __future__ import annotations

import re
import traceback
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from tracer_module.core.log_level import center_level_name
from tracer_module.formatters.base_formatter import BaseFormatter

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent
    from tracer_module.core.stack_trace import StackFrame

ANSI_PATTERN = re.compile(r"\x1b\[[0-9]+m")
RESET = "\x1b[0m"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def strip_ansi(text: str) -> str:
    """Remove every ``ESC[<digits>m`` sequence from ``text``."""
    return ANSI_PATTERN.sub("", text)


def format_utc_offset(timestamp: datetime) -> str:
    """
    Format the UTC offset of ``timestamp`` as ``+HHMM`` / ``-HHMM``.

    Naive timestamps are treated as UTC.
    """
    offset = timestamp.utcoffset()
    total_minutes = int(offset.total_seconds() // 60) if offset else 0
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_timestamp(timestamp: datetime) -> str:
    """Format ``timestamp`` as ``yyyy-MM-dd HH:mm:ss +HHMM``."""
    return f"{timestamp.strftime(TIMESTAMP_FORMAT)} {format_utc_offset(timestamp)}"


def describe_error(error: Any) -> str:
    """
    Textual form of an attached error object.

    Exceptions render as their ``format_exception_only`` line so the type
    name is kept even when the message is empty.
    """
    if error is None:
        return ""
    if isinstance(error, BaseException):
        return "".join(
            traceback.format_exception_only(type(error), error)
        ).strip()
    return str(error).strip()


def _keep_frame(frame: "StackFrame") -> bool:
    # Fold nothing; every frame stays distinguishable
    return False


class MessageFormatter(BaseFormatter):
    """
    Format log events into the multi-line tracer layout.

    Example output (indentation enabled)::

        [2024-05-01 12:00:00 +0200] Warn : app: Disk almost full
                                    |> Line 1
                                    |  Line 2
    """

    def __init__(self, fold_predicate=None):
        """
        Initialize message formatter.

        Args:
            fold_predicate: Called per stack frame; frames it returns True
                            for are folded. Default keeps all frames.
        """
        self.fold_predicate = fold_predicate or _keep_frame

    def separator(self, event: "LogEvent", time_text: Optional[str] = None) -> str:
        """Continuation separator for ``event``."""
        if not event.indentation:
            return "\n|"
        if time_text is None:
            time_text = format_timestamp(event.timestamp)
        return "\n" + " " * (len(time_text) + 3) + "|"

    def format_colored(self, event: "LogEvent") -> str:
        """
        Render ``event`` with ANSI color codes.

        Args:
            event: Log event to format

        Returns:
            Colored multi-line string
        """
        level = event.level
        color = level.color_code
        time_text = format_timestamp(event.timestamp)

        text = (
            f"{RESET}[{time_text}] {color}{center_level_name(level.display_name)}"
            f": {event.section}: {event.body}{RESET}"
        )

        separator = self.separator(event, time_text)

        if event.description and event.description.strip():
            text += separator + "> " + event.description.replace(
                "\n", separator + "  "
            )

        error_text = describe_error(event.error)
        if error_text:
            text += self._colored_block(error_text, separator, color)

        if event.stack is not None:
            stack_text = str(
                event.stack.fold_frames(self.fold_predicate, terse=True)
            ).strip()
            if stack_text:
                text += self._colored_block(stack_text, separator, color)

        return text

    def format(self, event: "LogEvent") -> str:
        """
        Render ``event`` without color codes.

        Args:
            event: Log event to format

        Returns:
            Plain multi-line string
        """
        return strip_ansi(self.format_colored(event))

    @staticmethod
    def _colored_block(block: str, separator: str, color: str) -> str:
        body = block.replace("\n", RESET + separator + "  " + color)
        return f"{separator}- {color}{body}{RESET}"

    def __repr__(self) -> str:
        """String representation."""
        return "MessageFormatter()"


DEFAULT_FORMATTER = MessageFormatter()
