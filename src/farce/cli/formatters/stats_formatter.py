"""Formatter for screenplay statistics."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from farce.cli.formatters.base import OutputFormat, OutputFormatter
from farce.cli.formatters.json_formatter import JsonFormatter
from farce.stats import ScreenplayStats


class StatsFormatter(OutputFormatter[ScreenplayStats]):
    """Render statistics as summary and character tables."""

    def __init__(self, console: Console | None = None, top: int = 10) -> None:
        super().__init__(console)
        self.top = top

    def format(
        self, data: ScreenplayStats, format_type: OutputFormat = OutputFormat.TEXT
    ) -> str:
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data.to_dict(limit=self.top))
        return self.render(self._summary_table(data), self._character_table(data))

    def _summary_table(self, data: ScreenplayStats) -> Table:
        table = Table(title="Screenplay Stats", show_header=False)
        table.add_column("Metric")
        table.add_column("Count", justify="right")
        rows = [
            ("Distinct character names", data.num_characters),
            ("Dialogue sections", data.num_dialogues),
            ("Words of dialogue", data.num_dialogue_words),
            ("Actions", data.num_actions),
            ("Words of action", data.num_action_words),
            ("Scenes", data.num_scenes),
            ("Interior scenes", data.num_int_scenes),
            ("Exterior scenes", data.num_ext_scenes),
        ]
        for label, value in rows:
            table.add_row(label, str(value))
        return table

    def _character_table(self, data: ScreenplayStats) -> Table:
        title = (
            f"Top {self.top} characters"
            if data.num_characters > self.top
            else "Characters"
        )
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Character")
        table.add_column("Total words", justify="right")
        table.add_column("Dialogue sections", justify="right")
        for name, stats in data.top_characters(self.top):
            table.add_row(name, str(stats.num_words), str(stats.num_speeches))
        return table
