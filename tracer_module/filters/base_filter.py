"""
Base filter interface

A filter is asked right before an event is delivered whether the event
should pass. Returning False dismisses the event.
"""

from abc import ABC, abstractmethod

from tracer_module.core.log_event import LogEvent


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Example:
        class HappyFilter(BaseFilter):
            def handle(self, event):
                return "happy" in event.body

        logger = Logger("example", filters=[HappyFilter()])
    """

    @abstractmethod
    def handle(self, event: LogEvent) -> bool:
        """
        Determine if a log event should pass.

        Args:
            event: The log event to filter

        Returns:
            True if the event should be delivered, False otherwise
        """
        pass

    def __call__(self, event: LogEvent) -> bool:
        """Allow filters to be callable."""
        return self.handle(event)
