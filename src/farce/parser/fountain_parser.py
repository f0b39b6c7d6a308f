"""Fountain screenplay parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from farce.config import FarceSettings, get_logger, get_settings
from farce.exceptions import (
    FarceFileNotFoundError,
    ParseError,
    UnrecognizedElementError,
)
from farce.parser.elements import parse_element
from farce.parser.fountain_models import Document, Element
from farce.parser.metadata import parse_metadata_block
from farce.parser.primitives import line_and_column, skip_blank_lines

logger = get_logger(__name__)

EXCERPT_LENGTH = 40


@dataclass(frozen=True)
class ParseIssue:
    """Input that no element recognizes, left unconsumed by the parser."""

    position: int
    line: int
    column: int
    excerpt: str

    @property
    def message(self) -> str:
        return f"Unrecognized element at line {self.line}, column {self.column}"


@dataclass(frozen=True)
class ParseResult:
    """A parsed document together with how much of the input it covers."""

    document: Document
    end: int
    source: str = field(repr=False)

    @property
    def remainder(self) -> str:
        """Input left over after the last recognized element."""
        return self.source[self.end :]

    @property
    def is_complete(self) -> bool:
        return self.end >= len(self.source)

    @property
    def issues(self) -> list[ParseIssue]:
        if self.is_complete:
            return []
        line, column = line_and_column(self.source, self.end)
        excerpt = self.remainder[:EXCERPT_LENGTH].splitlines()[0]
        return [ParseIssue(self.end, line, column, excerpt)]


def parse_document(text: str) -> ParseResult:
    """Parse Fountain text into a document.

    An optional title page is tried first; if it does not parse, the whole
    input is read as body. Elements are then matched one after another until
    the input is used up or nothing matches. Parsing stops rather than fails
    at unrecognized input: the result records where it stopped.

    Args:
        text: Raw Fountain text

    Returns:
        ParseResult with the document and the position where parsing stopped
    """
    pos = skip_blank_lines(text, 0)

    metadata = None
    block = parse_metadata_block(text, pos)
    if block is not None:
        metadata, pos = block.value, block.end

    elements: list[Element] = []
    while pos < len(text):
        element = parse_element(text, pos)
        if element is None:
            break
        elements.append(element.value)
        pos = skip_blank_lines(text, element.end)

    return ParseResult(
        document=Document(metadata=metadata, elements=tuple(elements)),
        end=pos,
        source=text,
    )


class FountainParser:
    """Parse Fountain screenplays, applying the configured error policy."""

    def __init__(
        self, settings: FarceSettings | None = None, strict: bool | None = None
    ) -> None:
        """Initialize the fountain parser.

        Args:
            settings: Settings to use (default: global settings)
            strict: Raise on unrecognized input; overrides ``strict_parsing``
        """
        self.settings = settings or get_settings()
        self.strict = self.settings.strict_parsing if strict is None else strict

    def parse_with_diagnostics(self, content: str) -> ParseResult:
        """Parse content without applying the strict policy.

        Args:
            content: Raw Fountain text

        Returns:
            ParseResult including any unconsumed input
        """
        result = parse_document(content)
        logger.debug(
            "Parsed fountain content",
            elements=len(result.document.elements),
            has_title_page=result.document.has_metadata(),
            complete=result.is_complete,
        )
        return result

    def apply_policy(
        self, result: ParseResult, source: str | None = None
    ) -> Document:
        """Raise or warn about unconsumed input, depending on strictness.

        Args:
            result: Outcome of parse_with_diagnostics
            source: Optional name of the input, used in diagnostics

        Returns:
            The parsed document

        Raises:
            UnrecognizedElementError: In strict mode, when input is left over
        """
        for issue in result.issues:
            if self.strict:
                raise UnrecognizedElementError(
                    position=issue.position,
                    line=issue.line,
                    column=issue.column,
                    excerpt=issue.excerpt,
                    source=source,
                )
            logger.warning(
                issue.message,
                excerpt=issue.excerpt,
                ignored_chars=len(result.remainder),
                source=source,
            )
        return result.document

    def parse(self, content: str, source: str | None = None) -> Document:
        """Parse Fountain content into a document.

        Args:
            content: Raw Fountain text
            source: Optional name of the input, used in diagnostics

        Returns:
            Parsed Document

        Raises:
            UnrecognizedElementError: In strict mode, when input is left over
        """
        return self.apply_policy(self.parse_with_diagnostics(content), source)

    def read_file(self, file_path: Path) -> str:
        """Read a Fountain file as UTF-8 text, keeping line endings as stored.

        Raises:
            FarceFileNotFoundError: If the file does not exist
            ParseError: If the file cannot be read as UTF-8 text
        """
        try:
            return file_path.read_bytes().decode("utf-8")
        except FileNotFoundError as e:
            raise FarceFileNotFoundError(
                message=f"File not found: {file_path}",
                hint="Check the path and file name.",
                details={"file": str(file_path)},
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read fountain file: {e}")
            raise ParseError(
                message=f"Failed to read Fountain file: {file_path}",
                hint="Fountain files must be UTF-8 encoded text.",
                details={"file": str(file_path), "error": str(e)},
            ) from e

    def parse_file(self, file_path: Path) -> Document:
        """Parse a Fountain file.

        Args:
            file_path: Path to the Fountain file

        Returns:
            Parsed Document
        """
        logger.debug(f"Parsing fountain file: {file_path}")
        content = self.read_file(file_path)
        return self.parse(content, source=str(file_path))
