"""Tests for inline emphasis parsing."""

import pytest

from farce.parser.inline_parser import (
    DIRECTIVES,
    Bold,
    BoldItalic,
    Italic,
    Text,
    Underline,
    parse_inline,
)


class TestParseInline:
    """Test emphasis directives in free text."""

    def test_all_directives(self):
        """Test each fence produces its own node, with plain text between."""
        assert parse_inline("Dave is *actually* **really** ***pissed*** _now_.") == [
            Text("Dave is "),
            Italic([Text("actually")]),
            Text(" "),
            Bold([Text("really")]),
            Text(" "),
            BoldItalic([Text("pissed")]),
            Text(" "),
            Underline([Text("now")]),
            Text("."),
        ]

    def test_empty_text(self):
        assert parse_inline("") == []

    def test_plain_text(self):
        assert parse_inline("just words") == [Text("just words")]

    @pytest.mark.parametrize("text", ["a *b", "trailing_", "_a *b"])
    def test_unclosed_fences_stay_literal(self, text):
        """Test fences that are never closed remain text."""
        assert parse_inline(text) == [Text(text)]

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("**", [Italic([])]),
            ("****", [Bold([])]),
            ("a ** b", [Text("a "), Italic([]), Text(" b")]),
            ("**a*", [Italic([]), Text("a*")]),
            ("__", [Underline([])]),
        ],
    )
    def test_empty_directives(self, text, expected):
        """Test a fence closed right away makes an empty directive."""
        assert parse_inline(text) == expected

    def test_nested_directive(self):
        """Test a directive interior is parsed again."""
        assert parse_inline("**bold _under_ text**") == [
            Bold([Text("bold "), Underline([Text("under")]), Text(" text")])
        ]

    def test_first_closing_fence_ends_span(self):
        assert parse_inline("*a* b*") == [Italic([Text("a")]), Text(" b*")]

    def test_longest_fence_tried_first(self):
        """Test an unclosed triple fence falls back to the double fence."""
        assert parse_inline("***a**") == [Bold([Text("*a")])]

    def test_underscores_inside_words(self):
        assert parse_inline("snake_case_name") == [
            Text("snake"),
            Underline([Text("case")]),
            Text("name"),
        ]

    def test_html_characters_untouched(self):
        """Test markup characters are left for the renderer to escape."""
        assert parse_inline("<b>&") == [Text("<b>&")]


class TestDirectiveNodes:
    """Test the expression node types."""

    def test_children_stored_as_tuple(self):
        node = Italic([Text("x")])
        assert node.children == (Text("x"),)

    def test_distinct_directive_types_differ(self):
        assert Bold([Text("x")]) != BoldItalic([Text("x")])
        assert Italic([Text("x")]) == Italic((Text("x"),))

    def test_fence_precedence(self):
        assert [d.fence for d in DIRECTIVES] == ["***", "**", "*", "_"]
