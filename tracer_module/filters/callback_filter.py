"""
Callback-based filter

Filters log events using custom callback functions
"""

from typing import Callable

from tracer_module.core.log_event import LogEvent
from tracer_module.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log events using a custom callback function.

    Provides maximum flexibility for filtering logic.
    """

    def __init__(self, callback: Callable[[LogEvent], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes LogEvent and returns bool.
                     Should return True to deliver the event, False to discard it.

        Example:
            # Drop events without a description
            filter = CallbackFilter(lambda event: event.description is not None)

            # Complex condition
            def complex_filter(event):
                return (event.level >= LogLevel.WARN or
                        "critical" in event.body.lower())

            filter = CallbackFilter(complex_filter)
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def handle(self, event: LogEvent) -> bool:
        """
        Use callback to determine if event should pass.

        Raises:
            Exception: If callback raises an exception, it's propagated
        """
        return bool(self.callback(event))

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
