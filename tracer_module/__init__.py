"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Tracer - A simple, synchronous section logger with colored multi-line
output, filters and pluggable handlers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from tracer_module.core.logger import Logger
from tracer_module.core.logger_builder import LoggerBuilder
from tracer_module.core.log_event import LogEvent
from tracer_module.core.log_level import LogLevel
from tracer_module.core.logger_config import LoggerConfig
from tracer_module.core.stack_trace import StackTrace
from tracer_module.errors import (
    ConfigurationError,
    DeliveryError,
    ResourceError,
    TracerError,
)

# Import submodules (not all classes by default)
from tracer_module import filters
from tracer_module import formatters
from tracer_module import handlers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEvent",
    "LogLevel",
    "LoggerConfig",
    "StackTrace",
    "TracerError",
    "ConfigurationError",
    "DeliveryError",
    "ResourceError",
    "filters",
    "formatters",
    "handlers",
]
