"""Data models for Fountain screenplay parsing."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from farce.utils.text import truncate_string

# Characters that appear in rendered boilerplate even when absent from the text
BOILERPLATE_CHARS = "INTEXT._ ()"


class SceneMarker(str, Enum):
    """Interior or exterior prefix of a scene heading."""

    INT = "INT"
    EXT = "EXT"


@dataclass(frozen=True)
class SceneHeading:
    """A slug line such as ``INT. KITCHEN - DAY``."""

    marker: SceneMarker
    text: str

    def __str__(self) -> str:
        return f"{self.marker.value}: {truncate_string(self.text)}"

    def to_dict(self) -> dict[str, Any]:
        return {"type": "scene_heading", "marker": self.marker.value, "text": self.text}


@dataclass(frozen=True)
class Dialogue:
    """A character cue with its extensions and the spoken text."""

    character_name: str
    character_extensions: tuple[str, ...]
    text: str

    @property
    def character_line(self) -> str:
        """The cue line as written, e.g. ``FRED (V.O.) (CONT'D)``."""
        if not self.character_extensions:
            return self.character_name
        extensions = ") (".join(self.character_extensions)
        return f"{self.character_name} ({extensions})"

    @property
    def num_words(self) -> int:
        return len(self.text.split())

    def __str__(self) -> str:
        return f"{self.character_name}: {truncate_string(self.text)}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "dialogue",
            "character_name": self.character_name,
            "character_extensions": list(self.character_extensions),
            "text": self.text,
        }


@dataclass(frozen=True)
class Action:
    """Narrative text outside dialogue, optionally centered."""

    text: str
    is_centered: bool = False

    @property
    def num_words(self) -> int:
        return len(self.text.split())

    def to_dict(self) -> dict[str, Any]:
        return {"type": "action", "text": self.text, "is_centered": self.is_centered}


@dataclass(frozen=True)
class PageBreak:
    """An explicit page break marker."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "page_break"}


Element = SceneHeading | Dialogue | Action | PageBreak


@dataclass(frozen=True)
class Metadata(Mapping[str, str]):
    """Title page key/value fields.

    Built from the fields in source order, so a repeated key keeps the
    value of its last occurrence.
    """

    fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Metadata):
            return dict(self.fields) == dict(other.fields)
        return NotImplemented

    def to_dict(self) -> dict[str, str]:
        return dict(self.fields)


@dataclass(frozen=True)
class Document:
    """A parsed screenplay: optional title page plus elements in source order."""

    metadata: Metadata | None = None
    elements: tuple[Element, ...] = ()

    def has_metadata(self) -> bool:
        return self.metadata is not None

    def get_metadata_field(self, name: str) -> str | None:
        """Return a title page field, or None when absent."""
        if self.metadata is None:
            return None
        return self.metadata.get(name)

    def get_title(self) -> str | None:
        return self.get_metadata_field("Title")

    def get_all_chars(self) -> frozenset[str]:
        """Return every character a rendering of this document can use.

        Typesetters use this to decide which glyphs to embed. Newlines are
        left out.
        """
        chars: set[str] = set(BOILERPLATE_CHARS)
        for element in self.elements:
            if isinstance(element, SceneHeading):
                chars.update(element.text)
            elif isinstance(element, Dialogue):
                chars.update(element.character_line)
                chars.update(element.text)
            elif isinstance(element, Action):
                chars.update(element.text)
        chars.discard("\n")
        chars.discard("\r")
        return frozenset(chars)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict() if self.metadata is not None else None,
            "elements": [element.to_dict() for element in self.elements],
        }
