"""
Base handler interface

A handler receives every event a logger accepts. What it does with the
event is up to it: print it, save it to disk, forward it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from tracer_module.core.log_event import LogEvent


class BaseHandler(ABC):
    """
    Abstract base class for handlers.

    Subclasses implement ``handle``; handlers holding resources override
    ``_dispose``, which runs at most once.

    Example:
        class BodyPrinter(BaseHandler):
            def handle(self, event):
                print(event.body)

        logger = Logger("example", handlers=[BodyPrinter()])
    """

    # Registry currently holding this handler, set on attach
    owner: Optional[Any] = None
    _disposed: bool = False

    @abstractmethod
    def handle(self, event: "LogEvent") -> None:
        """
        Receive one log event.

        Args:
            event: The accepted log event
        """
        pass

    def dispose(self) -> None:
        """Release held resources. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        self._dispose()

    def _dispose(self) -> None:
        """Hook for subclasses holding resources."""

    @property
    def disposed(self) -> bool:
        return self._disposed

    def __call__(self, event: "LogEvent") -> None:
        """Allow handlers to be callable."""
        self.handle(event)
