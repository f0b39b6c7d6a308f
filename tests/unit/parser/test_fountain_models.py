"""Tests for the screenplay document model."""

import dataclasses

import pytest

from farce.parser import (
    Action,
    Dialogue,
    Document,
    Metadata,
    PageBreak,
    SceneHeading,
    SceneMarker,
)
from farce.parser.fountain_models import BOILERPLATE_CHARS


class TestElements:
    """Test element value objects."""

    def test_character_line(self):
        dialogue = Dialogue("FRED", ("V.O.", "CONT'D"), "Hi")
        assert dialogue.character_line == "FRED (V.O.) (CONT'D)"
        assert Dialogue("FRED", (), "Hi").character_line == "FRED"

    def test_str_truncates_text(self):
        dialogue = Dialogue("FRED", (), "This is a long line of dialogue")
        assert str(dialogue) == "FRED: This is a long line ..."
        assert str(SceneHeading(SceneMarker.EXT, "FIELD")) == "EXT: FIELD"

    def test_word_counts(self):
        assert Dialogue("FRED", (), "one two  three").num_words == 3
        assert Action("Fred and Toby,\nsitting in a tree").num_words == 7

    def test_elements_are_frozen(self):
        action = Action("text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            action.text = "other"

    def test_to_dict(self):
        assert Dialogue("FRED", ("O.S.",), "Hi").to_dict() == {
            "type": "dialogue",
            "character_name": "FRED",
            "character_extensions": ["O.S."],
            "text": "Hi",
        }
        assert PageBreak().to_dict() == {"type": "page_break"}


class TestMetadata:
    """Test the title page mapping."""

    def test_mapping_interface(self):
        metadata = Metadata({"Title": "Big Fish", "Author": "John August"})

        assert metadata["Title"] == "Big Fish"
        assert metadata.get("Credit") is None
        assert len(metadata) == 2
        assert dict(metadata) == {"Title": "Big Fish", "Author": "John August"}

    def test_is_read_only(self):
        source = {"Title": "Big Fish"}
        metadata = Metadata(source)
        source["Title"] = "Changed"

        assert metadata["Title"] == "Big Fish"
        with pytest.raises(TypeError):
            metadata.fields["Title"] = "Changed"


class TestDocument:
    """Test document queries."""

    def test_metadata_queries(self):
        document = Document(Metadata({"Title": "Big Fish"}))

        assert document.has_metadata()
        assert document.get_title() == "Big Fish"
        assert document.get_metadata_field("Author") is None

    def test_without_metadata(self):
        document = Document()

        assert not document.has_metadata()
        assert document.get_title() is None

    def test_get_all_chars(self):
        document = Document(
            elements=(
                Dialogue("FRED", ("V.O.",), "Hi!"),
                Action("a\nb"),
                PageBreak(),
            )
        )
        chars = document.get_all_chars()

        assert set("FRED(V.O.)Hi!ab") <= chars
        assert set(BOILERPLATE_CHARS) <= chars
        assert "\n" not in chars

    def test_to_dict(self):
        document = Document(
            Metadata({"Title": "X"}), (SceneHeading(SceneMarker.INT, "A"),)
        )
        assert document.to_dict() == {
            "metadata": {"Title": "X"},
            "elements": [{"type": "scene_heading", "marker": "INT", "text": "A"}],
        }
