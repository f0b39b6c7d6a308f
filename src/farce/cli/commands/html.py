"""Render a Fountain file as HTML."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from farce.cli.utils.cli_handler import CLIHandler
from farce.cli.utils.config import load_cli_settings
from farce.config import get_logger
from farce.html import write_html
from farce.parser import FountainParser

logger = get_logger(__name__)
console = Console()


def html_command(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(help="Fountain file to convert", metavar="INPUT"),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file (default: the input file name with .html)",
        ),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--lenient",
            help="Fail when part of the file is not recognized",
        ),
    ] = None,
) -> None:
    """Write an HTML rendering of a Fountain screenplay."""
    handler = CLIHandler(console)
    try:
        settings = load_cli_settings(ctx, strict_parsing=strict)
        document = FountainParser(settings).parse_file(input_path)
        output_path = output or input_path.with_suffix(".html")
        write_html(document, output_path, settings)
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e)

    console.print(f"[green]✓[/green] Wrote {output_path}")
