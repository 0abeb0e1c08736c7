"""
Ordered filter chain

Filters run in registration order and the first rejection stops the chain.
"""

from typing import Any, Iterator, List

from tracer_module.core.log_event import LogEvent
from tracer_module.filters.callback_filter import CallbackFilter


class FilterChain:
    """Ordered sequence of filters evaluated before delivery."""

    def __init__(self, filters=()):
        self._filters: List[Any] = []
        for log_filter in filters:
            self.add(log_filter)

    def add(self, log_filter: Any) -> Any:
        """
        Append a filter.

        Args:
            log_filter: Object with a ``handle(event) -> bool`` method, or a
                        plain callable which is wrapped in a CallbackFilter

        Returns:
            The filter as stored in the chain
        """
        if not callable(getattr(log_filter, "handle", None)):
            log_filter = CallbackFilter(log_filter)
        self._filters.append(log_filter)
        return log_filter

    def remove(self, log_filter: Any) -> bool:
        """Remove a filter, returns False if it was not in the chain."""
        for index, existing in enumerate(self._filters):
            if existing is log_filter or (
                isinstance(existing, CallbackFilter) and existing.callback is log_filter
            ):
                del self._filters[index]
                return True
        return False

    def clear(self) -> None:
        self._filters.clear()

    def evaluate(self, event: LogEvent) -> bool:
        """
        Ask each filter in order whether ``event`` passes.

        Returns:
            False at the first rejecting filter, True if all accept or the
            chain is empty
        """
        for log_filter in self._filters:
            if not log_filter.handle(event):
                return False
        return True

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._filters))

    def __repr__(self) -> str:
        return f"FilterChain(filters={self._filters!r})"
