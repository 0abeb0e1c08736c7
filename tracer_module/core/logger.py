"""
Main Logger class - synchronous section logger

Builds events, gates them on the minimum level and the filter chain,
records accepted events and broadcasts them to the attached handlers.
"""

from __future__ import annotations

import atexit
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Union

from tracer_module.core.handler_registry import HandlerRegistry
from tracer_module.core.log_event import LogEvent
from tracer_module.core.log_level import LogLevel
from tracer_module.core.logger_config import LoggerConfig
from tracer_module.core.stack_trace import StackTrace
from tracer_module.errors import ConfigurationError
from tracer_module.filters.filter_chain import FilterChain
from tracer_module.handlers.callback_handler import CallbackHandler


class LoggerState(Enum):
    ACTIVE = "active"
    DISPOSED = "disposed"


class Logger:
    """
    Logger for one named section.

    Nothing is output until at least one handler is attached::

        logger = Logger("example", handlers=[ConsoleHandler()])
        logger.info("Application started")

    Only events at ``min_level`` or above are handled. Delivery is
    synchronous: every handler has run when a log call returns.
    """

    def __init__(
        self,
        section: str,
        *,
        min_level: LogLevel = LogLevel.INFO,
        indentation: bool = True,
        force_utc: bool = False,
        handlers: Iterable[Any] = (),
        filters: Iterable[Any] = ()
    ):
        """
        Initialize logger.

        Args:
            section: Identifier of this logger, e.g. ``"database"``
            min_level: Smallest level that gets handled
            indentation: Align continuation lines under the timestamp
            force_utc: Use UTC instead of local time for timestamps
            handlers: Handlers to attach, in delivery order
            filters: Filters to apply, in evaluation order

        Raises:
            ConfigurationError: If the section is invalid or a handler is
                                already attached elsewhere
        """
        self._config = LoggerConfig(
            section=section,
            min_level=min_level,
            indentation=indentation,
            force_utc=force_utc,
        )
        self._registry = HandlerRegistry(self._config.section)
        self._filters = FilterChain(filters)
        self._logs: List[LogEvent] = []
        self._logs_generated: List[str] = []
        self._lock = threading.RLock()
        self._state = LoggerState.ACTIVE
        self._metrics = {"logged": 0, "dropped": 0, "filtered": 0}

        try:
            for handler in handlers:
                self._registry.attach(handler)
        except ConfigurationError:
            # Release what was attached so the handlers stay usable
            for handler in self._registry:
                handler.owner = None
            raise

        atexit.register(self.dispose)

    @classmethod
    def from_config(
        cls,
        config: LoggerConfig,
        handlers: Iterable[Any] = (),
        filters: Iterable[Any] = ()
    ) -> "Logger":
        """Create a logger from a LoggerConfig."""
        return cls(
            config.section,
            min_level=config.min_level,
            indentation=config.indentation,
            force_utc=config.force_utc,
            handlers=handlers,
            filters=filters,
        )

    # Configuration

    @property
    def section(self) -> str:
        return self._config.section

    @property
    def min_level(self) -> LogLevel:
        return self._config.min_level

    @min_level.setter
    def min_level(self, level: Union[LogLevel, str]) -> None:
        if isinstance(level, str):
            try:
                level = LogLevel.from_string(level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        elif not isinstance(level, LogLevel):
            raise ConfigurationError("min_level must be LogLevel or level name")
        self._config.min_level = level

    @property
    def indentation(self) -> bool:
        return self._config.indentation

    @indentation.setter
    def indentation(self, enabled: bool) -> None:
        self._config.indentation = bool(enabled)

    @property
    def force_utc(self) -> bool:
        return self._config.force_utc

    @property
    def state(self) -> LoggerState:
        return self._state

    @property
    def disposed(self) -> bool:
        return self._state is LoggerState.DISPOSED

    # History

    @property
    def history(self) -> List[LogEvent]:
        """All events accepted in this session, oldest first."""
        with self._lock:
            return list(self._logs)

    @property
    def transcript(self) -> str:
        """Plain generated messages of ``history``, one per line."""
        with self._lock:
            return "".join(self._logs_generated)

    # Handlers and filters

    @property
    def handlers(self) -> tuple:
        return self._registry.handlers

    @property
    def filters(self) -> tuple:
        return tuple(self._filters)

    def add_handler(self, handler: Any) -> None:
        """
        Attach a handler.

        Raises:
            ConfigurationError: If the handler is already attached to a
                                logger or this logger is disposed
        """
        with self._lock:
            self._registry.attach(handler)

    def remove_handler(self, handler: Any) -> bool:
        """Dispose and detach a handler, returns False if not attached."""
        with self._lock:
            return self._registry.detach(handler)

    def remove_handler_at(self, index: int) -> Optional[Any]:
        """Dispose and detach the handler at ``index``; out of range is ignored."""
        with self._lock:
            return self._registry.detach_at(index)

    def add_filter(self, log_filter: Any) -> None:
        """
        Add a log filter.

        Args:
            log_filter: Filter with handle(event) method, or a callable
        """
        with self._lock:
            self._filters.add(log_filter)

    def remove_filter(self, log_filter: Any) -> bool:
        with self._lock:
            return self._filters.remove(log_filter)

    def listen(self, callback: Callable[[LogEvent], None]) -> CallbackHandler:
        """
        Subscribe a plain function to accepted events.

        Returns:
            The CallbackHandler wrapping ``callback``
        """
        handler = CallbackHandler(callback)
        self.add_handler(handler)
        return handler

    def ignore(self, callback: Callable[[LogEvent], None]) -> bool:
        """
        Unsubscribe a function added with ``listen``.

        ``callback`` has to be the exact function passed to ``listen``.

        Returns:
            False if no such subscription exists
        """
        with self._lock:
            for handler in self._registry:
                if isinstance(handler, CallbackHandler) and handler.callback is callback:
                    return self._registry.detach(handler)
        return False

    # Logging

    def _create_event(
        self,
        level: LogLevel,
        body: str,
        description: Optional[str],
        error: Any,
        stack: Any
    ) -> LogEvent:
        if self._config.force_utc:
            timestamp = datetime.now(timezone.utc)
        else:
            timestamp = datetime.now().astimezone()

        return LogEvent(
            section=self._config.section,
            level=level,
            timestamp=timestamp,
            body=str(body).strip(),
            description=None if description is None else description.strip(),
            error=error,
            stack=StackTrace.from_value(stack),
            indentation=self._config.indentation,
        )

    def log(
        self,
        level: LogLevel,
        body: str,
        description: Optional[str] = None,
        error: Any = None,
        stack: Any = None
    ) -> None:
        """
        Create a raw log event.

        Prefer the level methods: debug, info, warn, error, fatal.

        Raises:
            DeliveryError: If a handler failed; the event is still recorded
                           and every other handler has received it
        """
        with self._lock:
            if self._state is LoggerState.DISPOSED:
                return

            event = self._create_event(level, body, description, error, stack)

            if not event.level.is_at_least(self._config.min_level):
                self._metrics["dropped"] += 1
                return

            if not self._filters.evaluate(event):
                self._metrics["filtered"] += 1
                return

            self._logs.append(event)
            self._logs_generated.append(event.generated_message + "\n")
            self._metrics["logged"] += 1

            self._registry.dispatch(event)

    def debug(self, body: str, description: Optional[str] = None) -> None:
        """Log information not important to the normal user."""
        self.log(LogLevel.DEBUG, body, description=description)

    def info(self, body: str, description: Optional[str] = None) -> None:
        """Log information for certain, non-important events."""
        self.log(LogLevel.INFO, body, description=description)

    def warn(
        self,
        body: str,
        description: Optional[str] = None,
        error: Any = None,
        stack: Any = None
    ) -> None:
        """Log events that do not affect the experience in any severe way."""
        self.log(LogLevel.WARN, body, description=description, error=error, stack=stack)

    def error(
        self,
        body: str,
        description: Optional[str] = None,
        error: Any = None,
        stack: Any = None
    ) -> None:
        """Log issues that may hinder certain features, but not the whole product."""
        self.log(LogLevel.ERROR, body, description=description, error=error, stack=stack)

    def fatal(
        self,
        body: str,
        description: Optional[str] = None,
        error: Any = None,
        stack: Any = None
    ) -> None:
        """Log severe issues that drastically limit the experience."""
        self.log(LogLevel.FATAL, body, description=description, error=error, stack=stack)

    warning = warn
    critical = fatal

    # Lifecycle

    def flush(self) -> None:
        """Flush all handlers that buffer output."""
        with self._lock:
            self._registry.flush()

    def dispose(self) -> None:
        """
        Dispose and detach every handler.

        Log calls made afterwards are ignored. Safe to call more than once.
        """
        with self._lock:
            if self._state is LoggerState.DISPOSED:
                return
            self._state = LoggerState.DISPOSED
            self._registry.dispose_all()
        atexit.unregister(self.dispose)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"Logger(section='{self.section}', min_level={self.min_level.name}, "
            f"state={self._state.value})"
        )
