"""Fountain screenplay format parser for farce."""

from __future__ import annotations

from .fountain_models import (
    Action,
    Dialogue,
    Document,
    Element,
    Metadata,
    PageBreak,
    SceneHeading,
    SceneMarker,
)
from .fountain_parser import FountainParser, ParseIssue, ParseResult, parse_document
from .inline_parser import (
    Bold,
    BoldItalic,
    Expression,
    Italic,
    Text,
    Underline,
    parse_inline,
)

__all__ = [
    "Action",
    "Bold",
    "BoldItalic",
    "Dialogue",
    "Document",
    "Element",
    "Expression",
    "FountainParser",
    "Italic",
    "Metadata",
    "PageBreak",
    "ParseIssue",
    "ParseResult",
    "SceneHeading",
    "SceneMarker",
    "Text",
    "Underline",
    "parse_document",
    "parse_inline",
]
