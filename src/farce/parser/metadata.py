"""Title page (metadata block) recognizer.

A title page is a run of ``Key: value`` fields at the very start of the
input, ended by a blank line or the end of input. A field with nothing after
the colon takes its value from the indented lines that follow::

    Title: Big Fish
    Credit: written by
    Notes:
        FINAL PRODUCTION DRAFT
        includes post-production dialogue

Recognizing a title page is speculative: when any line of the block fails to
parse as a field, the whole block is rejected and the caller treats the input
as having no title page.
"""

from __future__ import annotations

import re

from farce.parser.fountain_models import Metadata
from farce.parser.primitives import Match, skip_blank_lines

_SIMPLE_FIELD = re.compile(r"([^:\s][^:\r\n]*): ([^\r\n]*)(?:\r\n|\n)")
_MULTILINE_KEY = re.compile(r"([^:\s][^:\r\n]*):[ \t]*(?:\r\n|\n)")
_CONTINUATION_LINE = re.compile(r"[ \t]+(\S[^\r\n]*)(?:\r\n|\n)")
_BLANK_LINE = re.compile(r"[ \t]*(?:\r\n|\n|\Z)")


def parse_simple_field(text: str, pos: int) -> Match[tuple[str, str]] | None:
    """Match a one-line field such as ``Author: John August``."""
    m = _SIMPLE_FIELD.match(text, pos)
    if m is None:
        return None
    return Match((m.group(1), m.group(2)), m.end())


def parse_multiline_field(text: str, pos: int) -> Match[tuple[str, str]] | None:
    """Match a ``Key:`` line followed by one or more indented value lines."""
    key = _MULTILINE_KEY.match(text, pos)
    if key is None:
        return None
    lines: list[str] = []
    pos = key.end()
    while (line := _CONTINUATION_LINE.match(text, pos)) is not None:
        lines.append(line.group(1))
        pos = line.end()
    if not lines:
        return None
    return Match((key.group(1), "\n".join(lines)), pos)


def parse_field(text: str, pos: int) -> Match[tuple[str, str]] | None:
    """Match one title page field.

    A key with nothing but whitespace after the colon takes the indented lines
    below it when there are any, and is an empty field otherwise.
    """
    return parse_multiline_field(text, pos) or parse_simple_field(text, pos)


def parse_metadata_block(text: str, pos: int = 0) -> Match[Metadata] | None:
    """Match a complete title page, including the blank lines after it.

    Fields are collected in order, so a repeated key keeps its last value.
    """
    fields: dict[str, str] = {}
    while (field := parse_field(text, pos)) is not None:
        key, value = field.value
        fields[key] = value
        pos = field.end
    if not fields:
        return None
    # The block must end at a blank line or at the end of input
    if _BLANK_LINE.match(text, pos) is None:
        return None
    return Match(Metadata(fields), skip_blank_lines(text, pos))
