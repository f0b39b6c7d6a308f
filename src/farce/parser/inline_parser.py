"""Inline emphasis for Fountain text.

Markdown-like directives, see https://fountain.io/syntax#section-emphasis::

    *italics*
    **bold**
    ***bold italics***
    _underline_

A directive opens with its fence and closes at the first later occurrence of
the same fence. Its interior is parsed again for nested directives. A fence
that is never closed stays literal text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Text:
    """A run of plain text."""

    text: str


@dataclass(frozen=True, init=False)
class Directive:
    """An emphasis span wrapping nested expressions."""

    fence: ClassVar[str] = ""

    children: tuple[Expression, ...]

    def __init__(self, children: Sequence[Expression] = ()) -> None:
        object.__setattr__(self, "children", tuple(children))


class Italic(Directive):
    fence = "*"


class Bold(Directive):
    fence = "**"


class BoldItalic(Directive):
    fence = "***"


class Underline(Directive):
    fence = "_"


Expression = Text | Italic | Bold | BoldItalic | Underline

# Longest fence first, otherwise "***" would open an italic span
DIRECTIVES: tuple[type[Directive], ...] = (BoldItalic, Bold, Italic, Underline)


def _match_directive(text: str, pos: int, end: int) -> tuple[Directive, int] | None:
    """Try each directive anchored at ``pos`` inside ``text[:end]``.

    Returns the directive node and the position after its closing fence.
    """
    for directive in DIRECTIVES:
        fence = directive.fence
        if not text.startswith(fence, pos, end):
            continue
        inner_start = pos + len(fence)
        close = text.find(fence, inner_start, end)
        if close < 0:
            continue
        return directive(_parse_span(text, inner_start, close)), close + len(fence)
    return None


def _parse_span(text: str, start: int, end: int) -> list[Expression]:
    output: list[Expression] = []
    plain_start = start
    pos = start
    while pos < end:
        matched = _match_directive(text, pos, end)
        if matched is None:
            pos += 1
            continue
        if plain_start < pos:
            output.append(Text(text[plain_start:pos]))
        node, pos = matched
        output.append(node)  # type: ignore[arg-type]
        plain_start = pos
    if plain_start < end:
        output.append(Text(text[plain_start:end]))
    return output


def parse_inline(text: str) -> list[Expression]:
    """Parse a span of text, counting anything outside a directive as plain text.

    Args:
        text: Free text from a dialogue or action element

    Returns:
        Expressions in source order; empty for empty text
    """
    return _parse_span(text, 0, len(text))
