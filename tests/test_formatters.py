"""Tests for message rendering"""

from datetime import datetime, timedelta, timezone

import pytest

from tracer_module import LogEvent, LogLevel
from tracer_module.core.stack_trace import StackFrame, StackTrace
from tracer_module.formatters import (
    CompactFormatter,
    MessageFormatter,
    format_timestamp,
    format_utc_offset,
    strip_ansi,
)
from tracer_module.formatters.message_formatter import describe_error

PLUS_TWO = timezone(timedelta(hours=2))
STAMP = datetime(2024, 5, 1, 12, 0, 0, tzinfo=PLUS_TWO)
# len("2024-05-01 12:00:00 +0200") + 3
SEP = "\n" + " " * 28 + "|"


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    # Terse stack paths are relative to the working directory
    monkeypatch.chdir(tmp_path)


def make_event(level=LogLevel.WARN, body="Disk almost full", **kwargs):
    kwargs.setdefault("timestamp", STAMP)
    return LogEvent(section="app", level=level, body=body, **kwargs)


class TestTimestamp:
    """Test timestamp and offset formatting."""

    def test_positive_offset(self):
        assert format_timestamp(STAMP) == "2024-05-01 12:00:00 +0200"

    def test_negative_offset_with_minutes(self):
        tz = timezone(-timedelta(hours=5, minutes=30))
        assert format_utc_offset(datetime(2024, 1, 1, tzinfo=tz)) == "-0530"

    def test_negative_offset_below_one_hour(self):
        tz = timezone(-timedelta(minutes=30))
        assert format_utc_offset(datetime(2024, 1, 1, tzinfo=tz)) == "-0030"

    def test_utc(self):
        assert format_utc_offset(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "+0000"

    def test_naive_treated_as_utc(self):
        assert format_utc_offset(datetime(2024, 1, 1)) == "+0000"


class TestMessageFormatter:
    """Test the multi-line layout."""

    def test_header_colored(self):
        event = make_event()
        assert event.generated_message_colored == (
            "\x1b[0m[2024-05-01 12:00:00 +0200] \x1b[93mWarn : app: Disk almost full\x1b[0m"
        )

    def test_header_plain(self):
        assert make_event().generated_message == (
            "[2024-05-01 12:00:00 +0200] Warn : app: Disk almost full"
        )

    def test_level_name_centered(self):
        event = make_event(level=LogLevel.DEBUG)
        assert "] Debug: app:" in event.generated_message
        event = make_event(level=LogLevel.INFO)
        assert "] Info : app:" in event.generated_message

    def test_multiline_description_aligned(self):
        event = make_event(description="Line 1\nLine 2")
        lines = event.generated_message.split("\n")
        assert lines[1] == " " * 28 + "|> Line 1"
        assert lines[2] == " " * 28 + "|  Line 2"
        assert lines[1].index("|") == lines[2].index("|")

    def test_description_without_indentation(self):
        event = make_event(description="Line 1\nLine 2", indentation=False)
        assert event.generated_message.endswith("\n|> Line 1\n|  Line 2")

    def test_empty_description_adds_nothing(self):
        event = make_event(description="")
        assert event.generated_message == make_event().generated_message

    @pytest.mark.parametrize("description", ["   ", "\n \t"])
    def test_blank_description_adds_nothing(self, description):
        event = make_event(description=description)
        assert event.generated_message == make_event().generated_message
        assert event.generated_message_colored == make_event().generated_message_colored

    def test_exception_error(self):
        event = make_event(error=ValueError("boom"))
        assert event.generated_message.endswith(SEP + "- ValueError: boom")
        assert event.generated_message_colored.endswith(
            SEP + "- \x1b[93mValueError: boom\x1b[0m"
        )

    def test_exception_without_message_keeps_type(self):
        event = make_event(error=KeyError())
        assert event.generated_message.endswith(SEP + "- KeyError")

    def test_multiline_error_recolored_per_line(self):
        event = make_event(level=LogLevel.ERROR, error="first\nsecond")
        assert event.generated_message_colored.endswith(
            SEP + "- \x1b[91mfirst\x1b[0m" + SEP + "  \x1b[91msecond\x1b[0m"
        )
        assert event.generated_message.endswith(SEP + "- first" + SEP + "  second")

    def test_error_is_trimmed(self):
        event = make_event(error="  spaced out \n")
        assert event.generated_message.endswith(SEP + "- spaced out")

    @pytest.mark.parametrize("error", ["", "   ", None])
    def test_empty_error_treated_as_absent(self, error):
        assert make_event(error=error).generated_message == make_event().generated_message

    def test_stack_rendered(self):
        stack = StackTrace([
            StackFrame("/srv/a.py", 3, "main"),
            StackFrame("/srv/b.py", 10, "run"),
        ])
        event = make_event(stack=stack)
        assert event.generated_message.endswith(
            SEP + "- /srv/a.py line 3   main" + SEP + "  /srv/b.py line 10  run"
        )

    def test_empty_stack_treated_as_absent(self):
        event = make_event(stack=StackTrace())
        assert event.generated_message == make_event().generated_message

    def test_block_order(self):
        event = make_event(
            description="desc",
            error="err",
            stack=StackTrace([StackFrame("/srv/a.py", 1, "main")]),
        )
        text = event.generated_message
        assert text.index("|> desc") < text.index("|- err") < text.index("|- /srv/a.py")

    def test_custom_fold_predicate(self):
        stack = StackTrace([
            StackFrame("/lib/x.py", 1, "x"),
            StackFrame("/lib/y.py", 2, "y"),
        ])
        formatter = MessageFormatter(fold_predicate=lambda frame: True)
        text = formatter.format(make_event(stack=stack))
        assert "<folded>" in text
        assert "/lib/y.py" not in text

    def test_plain_is_stripped_colored(self):
        events = [
            make_event(),
            make_event(level=LogLevel.FATAL, description="a\nb", error=RuntimeError("x\ny")),
            make_event(
                level=LogLevel.DEBUG,
                indentation=False,
                stack=StackTrace([StackFrame("/srv/a.py", 1, "main")]),
            ),
        ]
        for event in events:
            assert event.generated_message == strip_ansi(event.generated_message_colored)
            assert "\x1b" not in event.generated_message

    def test_formatter_callable(self):
        formatter = MessageFormatter()
        event = make_event()
        assert formatter(event) == event.generated_message


class TestStripAnsi:
    """Test ANSI code removal."""

    def test_strips_sgr_codes(self):
        assert strip_ansi("\x1b[0m\x1b[93mhi\x1b[0m") == "hi"

    def test_keeps_other_escapes(self):
        assert strip_ansi("\x1b[1;31mhi") == "\x1b[1;31mhi"


class TestDescribeError:
    """Test error text extraction."""

    def test_exception(self):
        assert describe_error(RuntimeError("broken")) == "RuntimeError: broken"

    def test_plain_object(self):
        assert describe_error(42) == "42"

    def test_none(self):
        assert describe_error(None) == ""


class TestCompactFormatter:
    """Test compact formatter."""

    def test_format(self):
        assert CompactFormatter().format(make_event(level=LogLevel.INFO, body="hello")) == (
            "info > hello"
        )

    def test_full_width_level(self):
        assert CompactFormatter().format(make_event(level=LogLevel.ERROR, body="x")) == "error> x"

    def test_include_section(self):
        formatter = CompactFormatter(include_section=True)
        assert formatter.format(make_event(level=LogLevel.WARN, body="x")) == "warn > app: x"
