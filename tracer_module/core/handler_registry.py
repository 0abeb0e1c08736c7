"""
Handler registry and synchronous dispatcher

Keeps the ordered list of handlers of one logger and delivers each
accepted event to all of them, in attachment order, on the calling thread.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple

from tracer_module.core.log_event import LogEvent
from tracer_module.errors import ConfigurationError, DeliveryError

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """
    Ordered collection of handlers with attach/detach lifecycle.

    A handler belongs to at most one registry at a time; ownership is
    tracked through the handler's ``owner`` attribute. Once closed, the
    registry rejects attaches and ``dispatch`` does nothing.

    Handlers removed while an event is being dispatched still receive that
    event; their dispose hook runs once the dispatch has finished.
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._handlers: List[Any] = []
        self._closed = False
        self._dispatch_depth = 0
        self._pending_disposal: List[Any] = []

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def handlers(self) -> Tuple[Any, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._handlers))

    def __contains__(self, handler: Any) -> bool:
        return any(existing is handler for existing in self._handlers)

    def attach(self, handler: Any) -> None:
        """
        Append a handler.

        Args:
            handler: Object with a ``handle(event)`` method and optionally
                     ``dispose()``

        Raises:
            ConfigurationError: If the handler is already attached here or
                                to another logger, has no ``handle`` method,
                                or the registry is closed
        """
        if self._closed:
            raise ConfigurationError(
                f"Cannot attach {handler!r}: logger '{self.name}' is disposed"
            )
        if not callable(getattr(handler, "handle", None)):
            raise ConfigurationError(f"{handler!r} has no handle() method")

        owner = getattr(handler, "owner", None)
        if owner is not None or handler in self:
            if owner is None or owner is self:
                where = "this logger"
            else:
                where = f"logger '{getattr(owner, 'name', owner)}'"
            raise ConfigurationError(f"{handler!r} is already attached to {where}")

        handler.owner = self
        self._handlers.append(handler)

    def detach(self, handler: Any) -> bool:
        """
        Dispose and remove a handler.

        Returns:
            False if the handler was not attached here
        """
        for index, existing in enumerate(self._handlers):
            if existing is handler:
                self._remove(index)
                return True
        return False

    def detach_at(self, index: int) -> Optional[Any]:
        """
        Dispose and remove the handler at ``index``.

        Out of range indices are ignored so concurrent removals do not fail.

        Returns:
            The removed handler, or None
        """
        if not -len(self._handlers) <= index < len(self._handlers):
            return None
        return self._remove(index)

    def _remove(self, index: int) -> Any:
        handler = self._handlers.pop(index)
        handler.owner = None
        if self._dispatch_depth:
            self._pending_disposal.append(handler)
        else:
            _dispose(handler)
        return handler

    def dispatch(self, event: LogEvent) -> None:
        """
        Deliver ``event`` to every handler in attachment order.

        All handlers are attempted even if some fail.

        Raises:
            DeliveryError: After the loop, if any handler raised
        """
        if self._closed:
            return

        failures = []
        self._dispatch_depth += 1
        try:
            for handler in tuple(self._handlers):
                try:
                    handler.handle(event)
                except Exception as e:
                    failures.append((handler, e))
        finally:
            self._dispatch_depth -= 1
            if not self._dispatch_depth:
                self._dispose_pending()

        if failures:
            raise DeliveryError(failures) from failures[0][1]

    def _dispose_pending(self) -> None:
        pending, self._pending_disposal = self._pending_disposal, []
        for handler in pending:
            _dispose(handler)

    def flush(self) -> None:
        """Flush every handler that supports it."""
        for handler in tuple(self._handlers):
            if hasattr(handler, "flush"):
                handler.flush()

    def dispose_all(self) -> None:
        """Dispose and remove every handler, then close the registry."""
        while self._handlers:
            self._remove(0)
        self._closed = True

    def __repr__(self) -> str:
        return f"HandlerRegistry(name='{self.name}', handlers={len(self._handlers)})"


def _dispose(handler: Any) -> None:
    """Call the handler's dispose hook, suppressing cleanup failures."""
    dispose = getattr(handler, "dispose", None)
    if dispose is None:
        return
    try:
        dispose()
    except Exception as e:
        logger.debug("Disposing handler %r failed: %s", handler, e)
