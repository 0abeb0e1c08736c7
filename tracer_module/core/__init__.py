"""
Core module for tracer

This module contains the fundamental classes:
- Logger: Section logger driving gating, filtering and dispatch
- LoggerBuilder: Builder pattern for logger construction
- LogEvent: Immutable log event
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- HandlerRegistry: Ordered handler registry and dispatcher
- StackTrace: Normalized stack trace
"""

from tracer_module.core.log_level import LogLevel
from tracer_module.core.stack_trace import StackFrame, StackTrace
from tracer_module.core.log_event import LogEvent
from tracer_module.core.handler_registry import HandlerRegistry
from tracer_module.core.logger_config import LoggerConfig
from tracer_module.core.logger import Logger, LoggerState
from tracer_module.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LoggerState",
    "LogEvent",
    "LogLevel",
    "LoggerConfig",
    "HandlerRegistry",
    "StackFrame",
    "StackTrace",
]
