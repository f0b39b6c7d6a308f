"""Screenplay statistics: who speaks how much, and how scenes break down."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from farce.parser.fountain_models import (
    Action,
    Dialogue,
    Document,
    SceneHeading,
    SceneMarker,
)


@dataclass
class CharacterStats:
    """Dialogue totals for one character."""

    num_speeches: int = 0
    num_words: int = 0


@dataclass
class ScreenplayStats:
    """Counts aggregated over a whole document."""

    num_dialogues: int = 0
    num_dialogue_words: int = 0
    num_actions: int = 0
    num_action_words: int = 0
    num_scenes: int = 0
    num_int_scenes: int = 0
    num_ext_scenes: int = 0
    characters: dict[str, CharacterStats] = field(default_factory=dict)

    @property
    def num_characters(self) -> int:
        return len(self.characters)

    def top_characters(
        self, limit: int | None = None
    ) -> list[tuple[str, CharacterStats]]:
        """Characters ordered by words spoken, most first, ties by name."""
        ranked = sorted(
            self.characters.items(), key=lambda item: (-item[1].num_words, item[0])
        )
        return ranked if limit is None else ranked[:limit]

    def to_dict(self, limit: int | None = None) -> dict[str, Any]:
        return {
            "characters": self.num_characters,
            "dialogues": self.num_dialogues,
            "dialogue_words": self.num_dialogue_words,
            "actions": self.num_actions,
            "action_words": self.num_action_words,
            "scenes": self.num_scenes,
            "interior_scenes": self.num_int_scenes,
            "exterior_scenes": self.num_ext_scenes,
            "top_characters": [
                {
                    "name": name,
                    "words": stats.num_words,
                    "dialogue_sections": stats.num_speeches,
                }
                for name, stats in self.top_characters(limit)
            ],
        }


def compute_stats(document: Document) -> ScreenplayStats:
    """Aggregate dialogue, action and scene counts for a document."""
    stats = ScreenplayStats()
    for element in document.elements:
        if isinstance(element, Dialogue):
            words = element.num_words
            stats.num_dialogues += 1
            stats.num_dialogue_words += words
            character = stats.characters.setdefault(
                element.character_name, CharacterStats()
            )
            character.num_speeches += 1
            character.num_words += words
        elif isinstance(element, Action):
            stats.num_actions += 1
            stats.num_action_words += element.num_words
        elif isinstance(element, SceneHeading):
            stats.num_scenes += 1
            if element.marker is SceneMarker.INT:
                stats.num_int_scenes += 1
            else:
                stats.num_ext_scenes += 1
    return stats
