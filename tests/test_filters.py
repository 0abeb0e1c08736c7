"""Tests for filters and the filter chain"""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from tracer_module import LogEvent, LogLevel
from tracer_module.filters import (
    BaseFilter,
    CallbackFilter,
    FilterChain,
    LevelFilter,
    PatternFilter,
    SectionFilter,
)


def make_event(level=LogLevel.INFO, body="Test", section="app", description=None):
    return LogEvent(
        section=section,
        level=level,
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        body=body,
        description=description,
    )


class TestLevelFilter:
    """Test LevelFilter class."""

    def test_min_level(self):
        log_filter = LevelFilter(min_level=LogLevel.WARN)
        assert log_filter.handle(make_event(LogLevel.INFO)) is False
        assert log_filter.handle(make_event(LogLevel.WARN)) is True
        assert log_filter.handle(make_event(LogLevel.FATAL)) is True

    def test_max_level(self):
        log_filter = LevelFilter(max_level=LogLevel.INFO)
        assert log_filter.handle(make_event(LogLevel.DEBUG)) is True
        assert log_filter.handle(make_event(LogLevel.INFO)) is True
        assert log_filter.handle(make_event(LogLevel.WARN)) is False

    def test_no_bounds(self):
        assert LevelFilter().handle(make_event(LogLevel.DEBUG)) is True

    def test_repr(self):
        assert "Warn" in repr(LevelFilter(min_level=LogLevel.WARN))


class TestPatternFilter:
    """Test PatternFilter class."""

    def test_include(self):
        log_filter = PatternFilter(r"disk")
        assert log_filter.handle(make_event(body="disk full")) is True
        assert log_filter.handle(make_event(body="cpu hot")) is False

    def test_exclude(self):
        log_filter = PatternFilter(r"^heartbeat", exclude=True)
        assert log_filter.handle(make_event(body="heartbeat ok")) is False
        assert log_filter.handle(make_event(body="started")) is True

    def test_case_insensitive(self):
        log_filter = PatternFilter(r"disk", case_sensitive=False)
        assert log_filter.handle(make_event(body="DISK full")) is True

    def test_description_field(self):
        log_filter = PatternFilter(r"retry", field="description")
        assert log_filter.handle(make_event(description="will retry")) is True
        assert log_filter.handle(make_event()) is False

    def test_invalid_field(self):
        with pytest.raises(ValueError):
            PatternFilter(r"x", field="section")


class TestCallbackFilter:
    """Test CallbackFilter class."""

    def test_callback(self):
        log_filter = CallbackFilter(lambda event: event.body.startswith("ok"))
        assert log_filter(make_event(body="ok then")) is True
        assert log_filter(make_event(body="nope")) is False

    def test_not_callable(self):
        with pytest.raises(TypeError):
            CallbackFilter("not callable")

    def test_exception_propagates(self):
        def broken(event):
            raise RuntimeError("filter failed")

        with pytest.raises(RuntimeError):
            CallbackFilter(broken).handle(make_event())


class TestSectionFilter:
    """Test SectionFilter class."""

    def test_sections(self):
        log_filter = SectionFilter("db", "cache")
        assert log_filter.handle(make_event(section="db")) is True
        assert log_filter.handle(make_event(section="web")) is False

    def test_requires_section(self):
        with pytest.raises(ValueError):
            SectionFilter()


class TestFilterChain:
    """Test ordered evaluation."""

    def test_empty_chain_accepts(self):
        assert FilterChain().evaluate(make_event()) is True

    def test_short_circuit(self):
        first = Mock()
        first.handle.return_value = False
        second = Mock()
        second.handle.return_value = True

        chain = FilterChain([first, second])
        assert chain.evaluate(make_event()) is False
        first.handle.assert_called_once()
        second.handle.assert_not_called()

    def test_all_accept(self):
        calls = []

        class Recording(BaseFilter):
            def __init__(self, name):
                self.name = name

            def handle(self, event):
                calls.append(self.name)
                return True

        chain = FilterChain([Recording("a"), Recording("b")])
        assert chain.evaluate(make_event()) is True
        assert calls == ["a", "b"]

    def test_plain_callable_wrapped(self):
        def only_warn(event):
            return event.level >= LogLevel.WARN

        chain = FilterChain()
        stored = chain.add(only_warn)
        assert isinstance(stored, CallbackFilter)
        assert chain.evaluate(make_event(LogLevel.INFO)) is False

    def test_remove(self):
        def keep(event):
            return True

        level_filter = LevelFilter(min_level=LogLevel.ERROR)
        chain = FilterChain([level_filter, keep])
        assert chain.remove(keep) is True
        assert chain.remove(level_filter) is True
        assert chain.remove(level_filter) is False
        assert len(chain) == 0
