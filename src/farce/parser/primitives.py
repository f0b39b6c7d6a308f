"""Line-level recognizers shared by the screenplay element parsers.

Every recognizer takes the full input text and a position, and returns a
``Match`` holding the recognized value and the position just past the
consumed input, or ``None`` when the input at that position does not match.
Recognizers never mutate anything, so they can be combined freely and tried
one after another from the same position.
"""

from __future__ import annotations

import re
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")

LINE_TERMINATOR = re.compile(r"\r\n|\n")
_LINE_END = re.compile(r"\r\n|\n|\Z")
_LINE_BODY = re.compile(r"[^\r\n]*")


class Match(NamedTuple, Generic[T]):
    """A successful recognition: the value and where the input continues."""

    value: T
    end: int


def line_end(text: str, pos: int) -> Match[str] | None:
    """Match a line terminator or the end of input."""
    m = _LINE_END.match(text, pos)
    if m is None:
        return None
    return Match(m.group(), m.end())


def _line_body(text: str, pos: int) -> str:
    m = _LINE_BODY.match(text, pos)
    return m.group() if m else ""


def non_blank_line(text: str, pos: int) -> Match[str] | None:
    """Match the rest of a line that is not entirely whitespace.

    The terminator itself is not consumed, but it must be present (or the
    input must end) right after the line content.
    """
    line = _line_body(text, pos)
    end = pos + len(line)
    if not line.strip() or line_end(text, end) is None:
        return None
    return Match(line, end)


def non_blank_lines(text: str, pos: int) -> Match[list[str]] | None:
    """Match one or more consecutive non-blank lines with their terminators."""
    lines: list[str] = []
    while True:
        line = non_blank_line(text, pos)
        if line is None:
            break
        lines.append(line.value)
        pos = line.end
        terminator = line_end(text, pos)
        if terminator is None or not terminator.value:
            break
        pos = terminator.end
    if not lines:
        return None
    return Match(lines, pos)


def skip_blank_lines(text: str, pos: int) -> int:
    """Skip empty and whitespace-only lines, returning the new position."""
    while pos < len(text):
        body = _line_body(text, pos)
        if body.strip():
            break
        terminator = line_end(text, pos + len(body))
        if terminator is None:
            break
        pos = terminator.end
    return pos


def line_and_column(text: str, pos: int) -> tuple[int, int]:
    """Return the 1-based line and column of a position, for diagnostics."""
    line = text.count("\n", 0, pos) + 1
    column = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return line, column
