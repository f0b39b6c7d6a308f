"""Tests for the farce command line interface."""

import json
from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from farce import __version__
from farce.cli.main import app, main

UNRECOGNIZED = "INT. A\n\nfoo\rbar\n"


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def bad_file(tmp_path):
    """A screenplay with input no element recognizes."""
    path = tmp_path / "bad.fountain"
    path.write_bytes(UNRECOGNIZED.encode("utf-8"))
    return path


class TestApp:
    """Test CLI application setup."""

    def test_app_configuration(self):
        assert isinstance(app, typer.Typer)
        assert app.info.name == "farce"
        assert "Fountain screenplays" in app.info.help
        assert app.pretty_exceptions_enable is False

    def test_app_has_commands(self):
        command_names = [
            cmd.name or cmd.callback.__name__ for cmd in app.registered_commands
        ]
        assert command_names == ["html", "stats", "parse", "version"]

    def test_main_function_calls_app(self):
        with patch("farce.cli.main.app") as mock_app:
            mock_app.side_effect = SystemExit(0)
            with pytest.raises(SystemExit):
                main()
            mock_app.assert_called_once_with()

    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert f"farce v{__version__}" in result.output

    def test_version_json(self, runner):
        result = runner.invoke(app, ["version", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["version"] == __version__


class TestHtmlCommand:
    """Test the html command."""

    def test_writes_next_to_input(self, runner, fountain_file):
        result = runner.invoke(app, ["html", str(fountain_file)])

        assert result.exit_code == 0
        assert "Wrote" in result.output
        html = fountain_file.with_suffix(".html").read_text(encoding="utf-8")
        assert "<p>Big Fish</p>" in html

    def test_output_option(self, runner, fountain_file, tmp_path):
        output = tmp_path / "out" / "script.html"
        output.parent.mkdir()

        result = runner.invoke(app, ["html", str(fountain_file), "-o", str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(app, ["html", str(tmp_path / "missing.fountain")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_unwritable_output(self, runner, fountain_file, tmp_path):
        output = tmp_path / "missing" / "script.html"
        result = runner.invoke(app, ["html", str(fountain_file), "-o", str(output)])

        assert result.exit_code == 1
        assert "Could not write HTML file" in result.output

    def test_strict_rejects_unrecognized_input(self, runner, bad_file):
        result = runner.invoke(app, ["html", str(bad_file), "--strict"])

        assert result.exit_code == 1
        assert "Unrecognized screenplay element" in result.output
        assert not bad_file.with_suffix(".html").exists()

    def test_lenient_keeps_partial_document(self, runner, bad_file):
        result = runner.invoke(app, ["html", str(bad_file)])

        assert result.exit_code == 0
        html = bad_file.with_suffix(".html").read_text(encoding="utf-8")
        assert "<p>INT. A</p>" in html


class TestStatsCommand:
    """Test the stats command."""

    def test_text_output(self, runner, fountain_file):
        result = runner.invoke(app, ["stats", str(fountain_file)])

        assert result.exit_code == 0
        assert "Screenplay Stats" in result.output
        assert "FRED" in result.output

    def test_json_output(self, runner, fountain_file):
        result = runner.invoke(app, ["stats", str(fountain_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["dialogues"] == 3
        assert data["scenes"] == 1
        assert data["top_characters"][0] == {
            "name": "FRED",
            "words": 9,
            "dialogue_sections": 2,
        }

    def test_top_option(self, runner, fountain_file):
        result = runner.invoke(
            app, ["stats", str(fountain_file), "--json", "--top", "1"]
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["top_characters"]) == 1

    def test_top_from_config_file(self, runner, fountain_file, tmp_path):
        config = tmp_path / "farce.yaml"
        config.write_text("stats_top_characters: 1\n")

        result = runner.invoke(
            app, ["--config", str(config), "stats", str(fountain_file), "--json"]
        )

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["top_characters"]) == 1

    def test_json_error(self, runner, tmp_path):
        result = runner.invoke(
            app, ["stats", str(tmp_path / "missing.fountain"), "--json"]
        )

        assert result.exit_code == 1
        error = json.loads(result.stdout)
        assert error["success"] is False
        assert error["error"].startswith("File not found")

    def test_missing_config_file(self, runner, fountain_file, tmp_path):
        result = runner.invoke(
            app,
            ["--config", str(tmp_path / "missing.yaml"), "stats", str(fountain_file)],
        )

        assert result.exit_code == 1
        assert "Config file not found" in result.output


class TestParseCommand:
    """Test the parse command."""

    def test_tree_output(self, runner, fountain_file):
        result = runner.invoke(app, ["parse", str(fountain_file)])

        assert result.exit_code == 0
        assert "Title: Big Fish" in result.output
        assert "Elements (5)" in result.output
        assert "Page break" in result.output

    def test_json_output(self, runner, fountain_file):
        result = runner.invoke(app, ["parse", str(fountain_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["metadata"]["Title"] == "Big Fish"
        assert data["elements"][3] == {"type": "page_break"}

    def test_warns_about_unrecognized_input(self, runner, bad_file):
        result = runner.invoke(app, ["parse", str(bad_file)])

        assert result.exit_code == 0
        assert "Unrecognized element at line 3, column 1" in result.output

    def test_strict_from_config_file(self, runner, bad_file, tmp_path):
        config = tmp_path / "farce.yaml"
        config.write_text("strict_parsing: true\n")

        result = runner.invoke(app, ["--config", str(config), "parse", str(bad_file)])

        assert result.exit_code == 1
        assert "Unrecognized screenplay element" in result.output

    def test_lenient_overrides_config_file(self, runner, bad_file, tmp_path):
        config = tmp_path / "farce.yaml"
        config.write_text("strict_parsing: true\n")

        result = runner.invoke(
            app, ["--config", str(config), "parse", str(bad_file), "--lenient"]
        )

        assert result.exit_code == 0
