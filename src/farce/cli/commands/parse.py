"""Show the parsed structure of a Fountain file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from farce.cli.formatters import DocumentFormatter, OutputFormat
from farce.cli.utils.cli_handler import CLIHandler
from farce.cli.utils.config import load_cli_settings
from farce.parser import FountainParser

console = Console()


def parse_command(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(help="Fountain file to parse", metavar="INPUT"),
    ],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--lenient",
            help="Fail when part of the file is not recognized",
        ),
    ] = None,
) -> None:
    """Print the title page and elements found in a Fountain file."""
    handler = CLIHandler(console)
    try:
        settings = load_cli_settings(ctx, strict_parsing=strict)
        parser = FountainParser(settings)
        content = parser.read_file(input_path)
        result = parser.parse_with_diagnostics(content)
        document = parser.apply_policy(result, source=str(input_path))
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)

    formatter = DocumentFormatter(console)
    if json_output:
        print(formatter.format(document, OutputFormat.JSON))
        return

    formatter.print(document)
    for issue in result.issues:
        console.print(
            f"[yellow]Warning: {issue.message}, parsing stopped at "
            f"{escape(repr(issue.excerpt))}[/yellow]"
        )
