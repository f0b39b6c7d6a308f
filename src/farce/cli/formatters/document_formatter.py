"""Formatter showing the structure of a parsed document."""

from __future__ import annotations

from rich.markup import escape
from rich.tree import Tree

from farce.cli.formatters.base import OutputFormat, OutputFormatter
from farce.cli.formatters.json_formatter import JsonFormatter
from farce.parser import Action, Dialogue, Document, Element, SceneHeading
from farce.utils.text import truncate_string

PREVIEW_LENGTH = 60


def describe_element(element: Element) -> str:
    """One-line summary of an element for the tree view."""
    if isinstance(element, SceneHeading):
        heading = escape(f"{element.marker.value}. {element.text}")
        return f"[bold]Scene heading[/bold] {heading}"
    if isinstance(element, Dialogue):
        text = escape(truncate_string(element.text, PREVIEW_LENGTH))
        return f"[bold]Dialogue[/bold] {escape(element.character_line)}: {text}"
    if isinstance(element, Action):
        kind = "Centered action" if element.is_centered else "Action"
        flat = element.text.replace("\n", " / ")
        text = escape(truncate_string(flat, PREVIEW_LENGTH))
        return f"[bold]{kind}[/bold] {text}"
    return "[bold]Page break[/bold]"


class DocumentFormatter(OutputFormatter[Document]):
    """Render a parsed document as a tree or as JSON."""

    def format(
        self, data: Document, format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)

        tree = Tree("[bold cyan]Document[/bold cyan]")
        if data.metadata is not None:
            title_page = tree.add("Title page")
            for key, value in data.metadata.items():
                title_page.add(f"{escape(key)}: {escape(value)}")
        elements = tree.add(f"Elements ({len(data.elements)})")
        for element in data.elements:
            elements.add(describe_element(element))
        return self.render(tree)
