"""Show screenplay statistics."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from farce.cli.formatters import OutputFormat, StatsFormatter
from farce.cli.utils.cli_handler import CLIHandler
from farce.cli.utils.config import load_cli_settings
from farce.parser import FountainParser
from farce.stats import compute_stats

console = Console()


def stats_command(
    ctx: typer.Context,
    input_path: Annotated[
        Path,
        typer.Argument(help="Fountain file to analyze", metavar="INPUT"),
    ],
    top: Annotated[
        int | None,
        typer.Option("--top", "-t", min=1, help="Number of characters to list"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Count dialogue, action and scenes, and rank characters by words spoken."""
    handler = CLIHandler(console)
    try:
        settings = load_cli_settings(ctx, stats_top_characters=top)
        document = FountainParser(settings).parse_file(input_path)
        stats = compute_stats(document)
    except typer.Exit:
        raise
    except Exception as e:
        handler.handle_error(e, json_output)

    formatter = StatsFormatter(console, top=settings.stats_top_characters)
    if json_output:
        # Plain print keeps the JSON free of ANSI codes
        print(formatter.format(stats, OutputFormat.JSON))
    else:
        formatter.print(stats)
