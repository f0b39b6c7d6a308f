"""Recognizers for the screenplay body elements.

Each recognizer matches one element starting exactly at the given position.
``ELEMENT_PARSERS`` lists them in the order they must be tried: dialogue
before plain action, or every cue line would be read as action, and centered
action before plain action, or the ``>`` would be read as prose.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from farce.parser.fountain_models import (
    Action,
    Dialogue,
    Element,
    PageBreak,
    SceneHeading,
    SceneMarker,
)
from farce.parser.primitives import (
    LINE_TERMINATOR,
    Match,
    line_end,
    non_blank_lines,
)

ElementParser = Callable[[str, int], "Match[Element] | None"]

_SCENE_HEADING = re.compile(r"(INT|EXT)\.[ \t]*([^\r\n]*)")
_CHARACTER_NAME = re.compile(r"[A-Z0-9 ]*")
_HORIZONTAL_SPACE = re.compile(r"[ \t]*")
# For now a character extension can't contain parentheses or span lines
_CHARACTER_EXTENSION = re.compile(r"\(([^()\r\n]+)\)[ \t]*")
_CENTERED_ACTION = re.compile(r">([^<\r\n]+)<")
_PAGE_BREAK = re.compile(r"={3,}")


def parse_scene_heading(text: str, pos: int) -> Match[Element] | None:
    """Match a slug line like ``EXT. A field in England``."""
    m = _SCENE_HEADING.match(text, pos)
    if m is None:
        return None
    end = line_end(text, m.end())
    if end is None:
        return None
    heading = SceneHeading(marker=SceneMarker(m.group(1)), text=m.group(2).strip())
    return Match(heading, end.end)


def parse_character_cue(text: str, pos: int) -> Match[tuple[str, list[str]]] | None:
    """Match a cue line such as ``WILL (V.O.) (CONT'D)`` up to its terminator.

    Names are limited to capital letters, digits and spaces, and must contain
    at least one letter or digit.
    """
    name = _CHARACTER_NAME.match(text, pos)
    if name is None or not name.group().strip():
        return None
    pos = _HORIZONTAL_SPACE.match(text, name.end()).end()  # type: ignore[union-attr]
    extensions: list[str] = []
    while (extension := _CHARACTER_EXTENSION.match(text, pos)) is not None:
        extensions.append(extension.group(1))
        pos = extension.end()
    terminator = LINE_TERMINATOR.match(text, pos)
    if terminator is None:
        return None
    return Match((name.group().strip(), extensions), terminator.end())


def parse_dialogue(text: str, pos: int) -> Match[Element] | None:
    """Match a cue line followed by one or more lines of speech."""
    cue = parse_character_cue(text, pos)
    if cue is None:
        return None
    lines = non_blank_lines(text, cue.end)
    if lines is None:
        return None
    name, extensions = cue.value
    dialogue = Dialogue(
        character_name=name,
        character_extensions=tuple(extensions),
        text=" ".join(lines.value),
    )
    return Match(dialogue, lines.end)


def parse_page_break(text: str, pos: int) -> Match[Element] | None:
    """Match a line of three or more ``=``."""
    m = _PAGE_BREAK.match(text, pos)
    if m is None:
        return None
    end = line_end(text, m.end())
    if end is None:
        return None
    return Match(PageBreak(), end.end)


def parse_centered_action(text: str, pos: int) -> Match[Element] | None:
    """Match a single line wrapped in ``>`` and ``<``."""
    m = _CENTERED_ACTION.match(text, pos)
    if m is None:
        return None
    end = line_end(text, m.end())
    if end is None:
        return None
    return Match(Action(text=m.group(1).strip(), is_centered=True), end.end)


def parse_action(text: str, pos: int) -> Match[Element] | None:
    """Match any run of non-blank lines as action."""
    lines = non_blank_lines(text, pos)
    if lines is None:
        return None
    return Match(Action(text="\n".join(lines.value)), lines.end)


ELEMENT_PARSERS: tuple[ElementParser, ...] = (
    parse_scene_heading,
    parse_dialogue,
    parse_page_break,
    parse_centered_action,
    parse_action,
)


def parse_element(text: str, pos: int) -> Match[Element] | None:
    """Match the first element alternative that fits at ``pos``."""
    for parser in ELEMENT_PARSERS:
        result = parser(text, pos)
        if result is not None:
            return result
    return None
