"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from farce import __version__
from farce.cli.commands import html_command, parse_command, stats_command
from farce.cli.formatters.json_formatter import JsonFormatter
from farce.config import get_logger

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="farce",
    help="Convert Fountain screenplays to HTML and screenplay statistics",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="html")(html_command)
app.command(name="stats")(stats_command)
app.command(name="parse")(parse_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show farce version."""
    version_info = {
        "name": "farce",
        "version": __version__,
        "description": "Fountain screenplay parser and converter",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"farce v{version_info['version']}")


def _reconfigure_logging(log_level: str, debug: bool = False) -> None:
    """Apply a log level chosen on the command line."""
    os.environ["FARCE_LOG_LEVEL"] = log_level
    if debug:
        os.environ["FARCE_DEBUG"] = "true"

    from farce.config import clear_settings_cache, configure_logging, get_settings

    clear_settings_cache()
    configure_logging(get_settings())


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="FARCE_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging", envvar="FARCE_DEBUG"),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        _reconfigure_logging("DEBUG", debug=True)
        logger.debug("Debug mode enabled")
    elif verbose:
        _reconfigure_logging("INFO")
        logger.info("Verbose mode enabled")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    if config:
        logger.debug(f"Loading configuration from {config}")


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
