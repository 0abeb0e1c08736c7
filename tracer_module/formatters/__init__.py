"""
Log formatters module

Provides the multi-line message formatter and the compact formatter.
"""

from tracer_module.formatters.base_formatter import BaseFormatter
from tracer_module.formatters.message_formatter import (
    MessageFormatter,
    format_timestamp,
    format_utc_offset,
    strip_ansi,
)
from tracer_module.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "MessageFormatter",
    "CompactFormatter",
    "format_timestamp",
    "format_utc_offset",
    "strip_ansi",
]
