"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from farce.cli.formatters.json_formatter import JsonFormatter
from farce.config import get_logger
from farce.exceptions import FarceError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> NoReturn:
        """Display an error consistently and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use
        """
        logger.debug(f"Command failed: {error}", exc_info=error)

        if json_output:
            self.console.print(
                self.json_formatter.format_error_response(error, exit_code),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        elif isinstance(error, FarceError):
            self.console.print(f"[red]Error: {escape(error.message)}[/red]")
            if error.hint:
                self.console.print(f"[yellow]Hint: {escape(error.hint)}[/yellow]")
        else:
            self.console.print(f"[red]Error: {escape(str(error))}[/red]")

        raise typer.Exit(exit_code)
