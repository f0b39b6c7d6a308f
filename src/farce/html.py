"""HTML rendering of parsed screenplays."""

from __future__ import annotations

from html import escape
from pathlib import Path

from farce.config import FarceSettings, get_logger, get_settings
from farce.exceptions import RenderError
from farce.parser.fountain_models import (
    Action,
    Dialogue,
    Document,
    Element,
    Metadata,
    PageBreak,
    SceneHeading,
)
from farce.parser.inline_parser import (
    Bold,
    BoldItalic,
    Expression,
    Italic,
    Text,
    Underline,
    parse_inline,
)

logger = get_logger(__name__)

HTML_HEADER = """<html><head><style type="text/css">
body { font-family: Courier; width: 800px; margin-left: 200px;}
p {margin: 0px;}
p {padding: 0px;}
.element-dialogue {padding-left: 100px; padding-right: 200px;}
div::after { content: "\\00a0";}
div.element-pagebreak {break-after:page; padding-bottom: 250px; }
div#title-page-credits {text-align: center; margin: 200px auto 200px auto;}
</style></head>

<body>"""

HTML_FOOTER = "</body></html>"

# Bold italic has no markup of its own here
_TAGS: dict[type, str] = {
    Italic: "i",
    Bold: "b",
    BoldItalic: "b",
    Underline: "u",
}


def expression_to_html(expression: Expression) -> str:
    """Render one inline expression and its children."""
    if isinstance(expression, Text):
        return escape(expression.text, quote=False)
    tag = _TAGS[type(expression)]
    inner = "".join(expression_to_html(child) for child in expression.children)
    return f"<{tag}>{inner}</{tag}>"


def inline_to_html(text: str) -> str:
    """Render free text with its emphasis directives expanded."""
    return "".join(expression_to_html(e) for e in parse_inline(text))


def element_to_html(element: Element) -> str:
    """Render one screenplay element as a block."""
    if isinstance(element, SceneHeading):
        heading = escape(f"{element.marker.value}. {element.text}", quote=False)
        return f'<div class="scene-heading">\n<p>{heading}</p>\n</div>\n\n'
    if isinstance(element, Dialogue):
        return (
            '<div class="element-dialogue">\n'
            f"<p>{inline_to_html(element.character_line)}</p>\n"
            f"<p>{inline_to_html(element.text)}</p>\n"
            "</div>\n\n"
        )
    if isinstance(element, Action):
        return (
            '<div class="element-action">\n'
            f"<p>{inline_to_html(element.text)}</p>\n"
            "</div>\n\n"
        )
    if isinstance(element, PageBreak):
        return '<div class="element-pagebreak"></div>\n\n'
    raise TypeError(f"Unsupported element type: {type(element).__name__}")


def title_page_to_html(metadata: Metadata, settings: FarceSettings) -> str:
    """Render the title page credits block."""
    parts = ['<div id="title-page">', '<div id="title-page-credits">']
    title = metadata.get("Title", settings.default_title)
    parts.append(f"<p>{escape(title, quote=False)}</p>")
    author = metadata.get("Author")
    if author is not None:
        credit = metadata.get("Credit", settings.default_credit)
        parts.append(f"<p>{escape(credit, quote=False)}</p>")
        parts.append(f"<p>{escape(author, quote=False)}</p>")
    parts.append("</div>")
    parts.append("</div>")
    return "".join(parts)


def render_html(document: Document, settings: FarceSettings | None = None) -> str:
    """Render a complete HTML page for a document.

    Args:
        document: Parsed screenplay
        settings: Settings providing title page defaults (default: global)

    Returns:
        HTML page as a string
    """
    settings = settings or get_settings()
    parts = [HTML_HEADER]
    if document.metadata is not None:
        parts.append(title_page_to_html(document.metadata, settings))
    parts.extend(element_to_html(element) for element in document.elements)
    parts.append(HTML_FOOTER)
    return "".join(parts)


def write_html(
    document: Document, path: Path, settings: FarceSettings | None = None
) -> Path:
    """Render a document and write it to ``path``.

    Raises:
        RenderError: If the file cannot be written
    """
    content = render_html(document, settings)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise RenderError(
            message=f"Could not write HTML file: {path}",
            hint="Check that the directory exists and is writable.",
            details={"file": str(path), "error": str(e)},
        ) from e
    logger.info(f"Wrote HTML file {path}", elements=len(document.elements))
    return path
