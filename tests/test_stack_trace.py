"""Tests for stack trace normalization"""

import os
import sys
import traceback

import pytest

from tracer_module.core.stack_trace import StackFrame, StackTrace


def _raise_value_error():
    raise ValueError("boom")


def _caught():
    try:
        _raise_value_error()
    except ValueError as e:
        return e


class TestStackTraceFromValue:
    """Test accepted stack shapes."""

    def test_none(self):
        assert StackTrace.from_value(None) is None

    def test_from_exception(self):
        trace = StackTrace.from_value(_caught())
        members = [frame.member for frame in trace]
        assert members == ["_caught", "_raise_value_error"]

    def test_from_traceback(self):
        error = _caught()
        trace = StackTrace.from_value(error.__traceback__)
        assert len(trace) == 2
        assert trace.frames[-1].member == "_raise_value_error"

    def test_from_stack_summary(self):
        summary = traceback.extract_stack()
        trace = StackTrace.from_value(summary)
        assert len(trace) == len(summary)

    def test_from_exception_without_traceback(self):
        trace = StackTrace.from_value(ValueError("never raised"))
        assert len(trace) == 0
        assert str(trace) == ""

    def test_stack_trace_passthrough(self):
        trace = StackTrace([StackFrame("a.py", 1, "main")])
        assert StackTrace.from_value(trace) is trace

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            StackTrace.from_value("not a stack")

    def test_current(self):
        trace = StackTrace.current()
        assert trace.frames[-1].member == "test_current"


class TestStackTraceRendering:
    """Test folding and text output."""

    def test_str_aligns_members(self):
        trace = StackTrace([
            StackFrame("/srv/a.py", 3, "main"),
            StackFrame("/srv/b.py", 10, "run"),
        ])
        assert str(trace) == (
            "/srv/a.py line 3   main\n"
            "/srv/b.py line 10  run\n"
        )

    def test_frame_without_line(self):
        assert StackFrame("<string>", None, "f").location == "<string>"

    def test_fold_keep_all(self):
        trace = StackTrace([
            StackFrame("/srv/a.py", 1, "a"),
            StackFrame("/srv/b.py", 2, "b"),
        ])
        assert trace.fold_frames(lambda frame: False) == trace

    def test_fold_collapses_runs(self):
        trace = StackTrace([
            StackFrame("/srv/app.py", 1, "main"),
            StackFrame("/lib/x.py", 2, "x"),
            StackFrame("/lib/y.py", 3, "y"),
            StackFrame("/srv/app.py", 9, "handler"),
        ])
        folded = trace.fold_frames(lambda frame: frame.path.startswith("/lib"))
        assert [frame.member for frame in folded] == ["main", "<folded>", "handler"]
        assert folded.frames[1].path == "/lib/x.py"

    def test_terse_shortens_paths_under_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = os.path.join(os.getcwd(), "pkg", "mod.py")
        trace = StackTrace([StackFrame(path, 4, "go")])
        terse = trace.fold_frames(lambda frame: False, terse=True)
        assert terse.frames[0].path == os.path.join("pkg", "mod.py")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX paths")
    def test_terse_keeps_paths_outside_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        trace = StackTrace([StackFrame("/definitely/elsewhere.py", 4, "go")])
        terse = trace.fold_frames(lambda frame: False, terse=True)
        assert terse.frames[0].path == "/definitely/elsewhere.py"
