"""Call stack capture and formatting."""

from __future__ import annotations

import inspect
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from types import FrameType

UNKNOWN = "unknown"
_DEPTH = 32


@dataclass(frozen=True)
class Frame:
    """One call site: qualified function name, source file and line."""

    name: str = UNKNOWN
    file: str = UNKNOWN
    line: int = 0

    def marshal_text(self) -> str:
        """Return 'name file:line' on one line, or 'unknown'."""
        if self.name == UNKNOWN:
            return self.name
        return f"{self.name} {self.file}:{self.line}"

    def short(self) -> str:
        """Return 'basename:line'."""
        return f"{os.path.basename(self.file)}:{self.line}"

    def detailed(self) -> str:
        """Return the function name, then the full path and line on a tabbed line."""
        return f"{self.name}\n\t{self.file}:{self.line}"

    def __str__(self) -> str:
        return self.short()


def _frame_of(frame: FrameType) -> Frame:
    code = frame.f_code
    module = inspect.getmodulename(code.co_filename) or UNKNOWN
    qualname = getattr(code, "co_qualname", code.co_name)
    return Frame(name=f"{module}.{qualname}", file=code.co_filename, line=frame.f_lineno)


def callers(skip: int = 0) -> list[Frame]:
    """Capture up to 32 frames, innermost first, starting at the caller after skipping skip frames."""
    try:
        frame: FrameType | None = sys._getframe(1 + skip)
    except ValueError:
        return []
    frames: list[Frame] = []
    while frame is not None and len(frames) < _DEPTH:
        frames.append(_frame_of(frame))
        frame = frame.f_back
    return frames


def funcname(name: str) -> str:
    """Strip the path and package prefix from a qualified function name."""
    name = name[name.rfind("/") + 1:]
    return name[name.find(".") + 1:]


def format_stack(frames: Iterable[Frame]) -> str:
    """Render frames in detail, each preceded by a newline."""
    return "".join(f"\n{frame.detailed()}" for frame in frames)