"""Text helpers shared by the document model and the CLI."""

from __future__ import annotations

DEFAULT_TRUNCATE_LENGTH = 20


def truncate_string(text: str, num_chars: int | None = None) -> str:
    """Shorten text to ``num_chars`` characters, marking the cut with ``...``.

    Args:
        text: Text to shorten
        num_chars: Maximum number of characters kept (default: 20)

    Returns:
        The text itself when short enough, otherwise its prefix plus ``...``
    """
    limit = DEFAULT_TRUNCATE_LENGTH if num_chars is None else num_chars
    if len(text) > limit:
        return text[:limit] + "..."
    return text
