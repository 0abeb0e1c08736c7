"""Section-based filter"""

from tracer_module.core.log_event import LogEvent
from tracer_module.filters.base_filter import BaseFilter


class SectionFilter(BaseFilter):
    """Pass only events created in one of the given sections."""

    def __init__(self, *sections: str):
        if not sections:
            raise ValueError("at least one section is required")
        self.sections = frozenset(section.strip() for section in sections)

    def handle(self, event: LogEvent) -> bool:
        return event.section in self.sections

    def __repr__(self) -> str:
        return f"SectionFilter(sections={sorted(self.sections)})"
