"""farce: a Fountain screenplay parser.

Parses Fountain screenplay markup into an immutable document model (title
page plus scene headings, dialogue, action and page breaks), expands inline
emphasis, and renders HTML and screenplay statistics from the result.
"""

__version__ = "0.1.0"

from .parser import (  # noqa: E402
    Document,
    FountainParser,
    ParseResult,
    parse_document,
    parse_inline,
)

__all__ = [
    "Document",
    "FountainParser",
    "ParseResult",
    "__version__",
    "parse_document",
    "parse_inline",
]
