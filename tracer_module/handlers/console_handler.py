"""Console handlers with ANSI colors"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from tracer_module.formatters.compact_formatter import CompactFormatter
from tracer_module.handlers.base_handler import BaseHandler

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent


class ConsoleHandler(BaseHandler):
    """
    Write events to the console.

    Uses ``generated_message_colored`` or ``generated_message`` depending on
    ``use_colors``.
    """

    def __init__(
        self,
        use_colors: bool = True,
        use_stderr: bool = False,
        stream: Optional[TextIO] = None
    ):
        """
        Initialize console handler.

        Args:
            use_colors: Use ANSI color codes
            use_stderr: Route each level to stderr or stdout by the level's
                        ``use_stderr`` flag; otherwise everything goes to
                        ``stream``
            stream: Output stream (default: sys.stdout at write time)
        """
        self.use_colors = use_colors
        self.use_stderr = use_stderr
        self.stream = stream

    def _target(self, event: "LogEvent") -> TextIO:
        if self.use_stderr:
            return sys.stderr if event.level.use_stderr else sys.stdout
        return self.stream or sys.stdout

    def handle(self, event: "LogEvent") -> None:
        """Write log event to console."""
        if self.use_colors:
            text = event.generated_message_colored
        else:
            text = event.generated_message

        stream = self._target(event)
        stream.write(text + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush streams."""
        if self.use_stderr:
            sys.stdout.flush()
            sys.stderr.flush()
        else:
            (self.stream or sys.stdout).flush()

    def __repr__(self) -> str:
        return f"ConsoleHandler(colors={self.use_colors}, stderr={self.use_stderr})"


class SimpleConsoleHandler(BaseHandler):
    """
    Write very short ``level> body`` lines to the console.

    Meant for examples and quick scripts; prefer ConsoleHandler otherwise.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.formatter = CompactFormatter()

    def handle(self, event: "LogEvent") -> None:
        stream = self.stream or sys.stdout
        stream.write(self.formatter.format(event) + "\n")
        stream.flush()
