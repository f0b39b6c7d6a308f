"""Custom exception hierarchy for farce with helpful error messages."""

from __future__ import annotations

from typing import Any


class FarceError(Exception):
    """Base exception with helpful formatting for all farce errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(FarceError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class ParseError(FarceError):
    """Fountain parsing errors including format and structure issues."""

    pass


class UnrecognizedElementError(ParseError):
    """Non-blank input that no screenplay element recognizes."""

    def __init__(
        self,
        position: int,
        line: int,
        column: int,
        excerpt: str,
        source: str | None = None,
    ) -> None:
        """Initialize with the location of the unrecognized input.

        Args:
            position: Character offset where parsing stopped
            line: 1-based line number of the offset
            column: 1-based column number of the offset
            excerpt: The start of the unconsumed input
            source: Optional name of the parsed file
        """
        self.position = position
        self.line = line
        self.column = column
        self.excerpt = excerpt
        details: dict[str, Any] = {
            "position": position,
            "line": line,
            "column": column,
            "excerpt": excerpt,
        }
        if source:
            details["file"] = source
        super().__init__(
            message=f"Unrecognized screenplay element at line {line}, column {column}",
            hint=(
                "Check for stray carriage returns or malformed lines, "
                "or parse without strict mode to keep the partial document."
            ),
            details=details,
        )


class FarceFileNotFoundError(FarceError):
    """File not found errors with helpful path information."""

    pass


class RenderError(FarceError):
    """Errors writing rendered output."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "strict": "strict_parsing",
        "top": "stats_top_characters",
        "title": "default_title",
        "credit": "default_credit",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
