"""farce CLI commands."""

from __future__ import annotations

from farce.cli.commands.html import html_command
from farce.cli.commands.parse import parse_command
from farce.cli.commands.stats import stats_command

__all__ = [
    "html_command",
    "parse_command",
    "stats_command",
]
