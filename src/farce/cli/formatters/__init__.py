"""Output formatters for the farce CLI."""

from farce.cli.formatters.base import OutputFormat, OutputFormatter
from farce.cli.formatters.document_formatter import DocumentFormatter
from farce.cli.formatters.json_formatter import JsonFormatter
from farce.cli.formatters.stats_formatter import StatsFormatter

__all__ = [
    "DocumentFormatter",
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "StatsFormatter",
]
