"""Base formatter classes for CLI output."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """Supported output formats."""

    TEXT = "text"
    JSON = "json"


class OutputFormatter(ABC, Generic[T]):
    """Base class for output formatters."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> str:
        """Format data for output.

        Args:
            data: Data to format
            format_type: Output format type

        Returns:
            Formatted string
        """
        pass

    def print(self, data: T, format_type: OutputFormat = OutputFormat.TEXT) -> None:
        """Format and print data to console."""
        output = self.format(data, format_type)
        if format_type == OutputFormat.JSON:
            self.console.print_json(output)
        else:
            self.console.print(output, markup=False, highlight=False)

    @staticmethod
    def render(*renderables: Any) -> str:
        """Render rich objects to a string."""
        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=False, width=100)
        for renderable in renderables:
            temp_console.print(renderable)
        return string_io.getvalue()
