"""
Error types raised by the tracer core

Level gating and filter rejection are silent drops, never errors.
"""

from typing import Any, List, Tuple


class TracerError(Exception):
    """Base class for all tracer errors."""


class ConfigurationError(TracerError, ValueError):
    """
    Invalid logger or handler configuration.

    Raised for an invalid section identifier, for attaching a handler that
    is already attached somewhere, and for contradictory handler options.
    """


class DeliveryError(TracerError):
    """
    One or more handlers failed while receiving an event.

    Raised after every attached handler has been attempted, so a failing
    handler never starves the handlers registered after it.
    """

    def __init__(self, failures: List[Tuple[Any, BaseException]]):
        self.failures = list(failures)
        handler, exc = self.failures[0]
        self.handler = handler
        if len(self.failures) == 1:
            message = f"Handler {handler!r} failed: {exc}"
        else:
            message = (
                f"{len(self.failures)} handlers failed, first was "
                f"{handler!r}: {exc}"
            )
        super().__init__(message)


class ResourceError(TracerError):
    """A file-backed handler could not open, lock or write its file."""

    def __init__(self, message: str, path: Any = None):
        super().__init__(message)
        self.path = path
