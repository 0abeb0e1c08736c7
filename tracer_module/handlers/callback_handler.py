"""Handler wrapping a plain function"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from tracer_module.handlers.base_handler import BaseHandler

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent


class CallbackHandler(BaseHandler):
    """
    Deliver events to a callback.

    Used by ``Logger.listen`` so plain functions can subscribe without
    writing a handler class.
    """

    def __init__(
        self,
        callback: Callable[["LogEvent"], None],
        on_dispose: Optional[Callable[[], None]] = None
    ):
        """
        Initialize callback handler.

        Args:
            callback: Called with each LogEvent
            on_dispose: Called once when the handler is disposed
        """
        if not callable(callback):
            raise TypeError("callback must be callable")
        self.callback = callback
        self.on_dispose = on_dispose

    def handle(self, event: "LogEvent") -> None:
        self.callback(event)

    def _dispose(self) -> None:
        if self.on_dispose is not None:
            self.on_dispose()

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackHandler(callback={callback_name})"
