"""
Normalized stack traces

Accepts the different shapes a Python stack can arrive in and turns them
into one ordered, immutable sequence of frames.
"""

from __future__ import annotations

import os
import sys
import traceback
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable, Iterator, Optional, Tuple

FOLDED_MEMBER = "<folded>"


@dataclass(frozen=True)
class StackFrame:
    """A single frame of a stack trace."""

    path: str
    line: Optional[int]
    member: str

    @property
    def location(self) -> str:
        """Path and line of the frame, e.g. ``app/main.py line 12``."""
        if self.line is None:
            return self.path
        return f"{self.path} line {self.line}"

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> "StackFrame":
        return cls(summary.filename, summary.lineno, summary.name)


class StackTrace:
    """
    Ordered sequence of frames, outermost call first.

    Instances are immutable; folding returns a new trace.
    """

    def __init__(self, frames=()):
        self._frames: Tuple[StackFrame, ...] = tuple(frames)

    @property
    def frames(self) -> Tuple[StackFrame, ...]:
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[StackFrame]:
        return iter(self._frames)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackTrace):
            return NotImplemented
        return self._frames == other._frames

    def __hash__(self) -> int:
        return hash(self._frames)

    @classmethod
    def from_value(cls, value: Any) -> Optional["StackTrace"]:
        """
        Normalize a stack given in any supported shape.

        Args:
            value: StackTrace, traceback object, StackSummary, list of
                   FrameSummary, exception (its ``__traceback__`` is used)
                   or None

        Returns:
            StackTrace, or None when value is None

        Raises:
            TypeError: If value has an unsupported type
        """
        if value is None:
            return None
        if isinstance(value, StackTrace):
            return value
        if isinstance(value, BaseException):
            value = value.__traceback__
            if value is None:
                return cls()
        if isinstance(value, TracebackType):
            value = traceback.extract_tb(value)
        if isinstance(value, (list, tuple)):
            if all(isinstance(item, traceback.FrameSummary) for item in value):
                return cls(StackFrame.from_summary(item) for item in value)
        raise TypeError(
            f"Unsupported stack type: {type(value).__name__}"
        )

    @classmethod
    def current(cls, skip: int = 0) -> "StackTrace":
        """
        Capture the stack of the caller.

        Args:
            skip: Number of innermost caller frames to leave out
        """
        summary = traceback.extract_stack(sys._getframe(1))
        if skip:
            summary = summary[:-skip]
        return cls(StackFrame.from_summary(item) for item in summary)

    def fold_frames(
        self,
        predicate: Callable[[StackFrame], bool],
        terse: bool = False,
    ) -> "StackTrace":
        """
        Collapse every run of consecutive frames matching ``predicate``.

        A folded run keeps the path and line of its first frame and is
        labeled ``<folded>``. With ``terse``, paths under the working
        directory are shown relative to it.
        """
        folded = []
        for frame in self._frames:
            if predicate(frame):
                if folded and folded[-1].member == FOLDED_MEMBER:
                    continue
                frame = StackFrame(frame.path, frame.line, FOLDED_MEMBER)
            folded.append(frame)

        if terse:
            folded = [
                StackFrame(_shorten_path(f.path), f.line, f.member)
                for f in folded
            ]
        return StackTrace(folded)

    def __str__(self) -> str:
        if not self._frames:
            return ""
        longest = max(len(frame.location) for frame in self._frames)
        return "".join(
            f"{frame.location.ljust(longest)}  {frame.member}\n"
            for frame in self._frames
        )

    def __repr__(self) -> str:
        return f"StackTrace(frames={len(self._frames)})"


def _shorten_path(path: str) -> str:
    try:
        relative = os.path.relpath(path)
    except ValueError:
        # Different drive on Windows
        return path
    if relative.startswith(os.pardir):
        return path
    return relative
