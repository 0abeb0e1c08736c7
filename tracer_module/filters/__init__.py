"""
Log filters module

Provides the filter chain and ready-made filter implementations.
"""

from tracer_module.filters.base_filter import BaseFilter
from tracer_module.filters.callback_filter import CallbackFilter
from tracer_module.filters.filter_chain import FilterChain
from tracer_module.filters.level_filter import LevelFilter
from tracer_module.filters.pattern_filter import PatternFilter
from tracer_module.filters.section_filter import SectionFilter

__all__ = [
    "BaseFilter",
    "CallbackFilter",
    "FilterChain",
    "LevelFilter",
    "PatternFilter",
    "SectionFilter",
]
