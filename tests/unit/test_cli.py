"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from console_tables import ConsoleTable
from console_tables.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def people_csv(tmp_path: Path) -> Path:
    path = tmp_path / "people.csv"
    path.write_text("Name,Age\nAlice,30\nBob,7\n", encoding="utf-8")
    return path


@pytest.fixture
def scores_json(tmp_path: Path) -> Path:
    path = tmp_path / "scores.json"
    path.write_text(
        json.dumps([{"name": "Alice", "points": 30}, {"name": "Bob", "points": 7}]),
        encoding="utf-8",
    )
    return path


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "render tabular data as text" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--format" in result.output
        assert "--number-alignment" in result.output
        assert "--no-count" in result.output
        assert "--column-color" in result.output


class TestRender:
    """Tests for the render command."""

    def test_csv_default_format(
        self, runner: CliRunner, people_csv: Path, people: ConsoleTable
    ) -> None:
        result = runner.invoke(cli, ["render", str(people_csv)])
        assert result.exit_code == 0, result.output
        assert result.output == people.to_string() + "\n"

    def test_csv_markdown(self, runner: CliRunner, people_csv: Path, people: ConsoleTable) -> None:
        result = runner.invoke(cli, ["render", str(people_csv), "--format", "markdown"])
        assert result.exit_code == 0, result.output
        assert result.output == people.to_markdown_string() + "\n"

    def test_no_count(self, runner: CliRunner, people_csv: Path) -> None:
        result = runner.invoke(cli, ["render", str(people_csv), "--no-count"])
        assert result.exit_code == 0
        assert "Count" not in result.output

    def test_count_from_environment(
        self, runner: CliRunner, people_csv: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CONSOLE_TABLES_ENABLE_COUNT", "false")
        result = runner.invoke(cli, ["render", str(people_csv)])
        assert result.exit_code == 0
        assert "Count" not in result.output

    def test_json_records_right_aligned(self, runner: CliRunner, scores_json: Path) -> None:
        result = runner.invoke(
            cli,
            ["render", str(scores_json), "-f", "markdown", "--number-alignment", "right"],
        )
        assert result.exit_code == 0, result.output
        assert "| Alice |     30 |" in result.output
        assert "| Bob   |      7 |" in result.output

    def test_yaml_list_of_lists(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "data.yml"
        path.write_text(yaml.safe_dump([["Id", "Label"], [1, "one"], [2, None]]))
        result = runner.invoke(cli, ["render", str(path), "-f", "minimal"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Id  Label\n---------\n1   one  \n2")

    def test_input_format_override(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("a,b\n1,2\n")
        result = runner.invoke(cli, ["render", str(path), "--input-format", "csv", "-f", "minimal"])
        assert result.exit_code == 0, result.output
        assert "a  b" in result.output

    def test_unknown_suffix(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "data.txt"
        path.write_text("a,b\n")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Cannot detect input format" in result.output

    def test_shape_mismatch(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.csv"
        path.write_text("a,b\n1,2,3\n")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "(2)" in result.output
        assert "(3)" in result.output

    def test_csv_blank_lines(
        self, runner: CliRunner, tmp_path: Path, people: ConsoleTable
    ) -> None:
        """Blank lines in a CSV file are skipped."""
        path = tmp_path / "people.csv"
        path.write_text("Name,Age\n\nAlice,30\nBob,7\n\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 0, result.output
        assert result.output == people.to_string() + "\n"

    def test_invalid_json_shape(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"a": 1}))
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "non-empty list" in result.output

    def test_column_color(self, runner: CliRunner, people_csv: Path) -> None:
        result = runner.invoke(
            cli, ["render", str(people_csv), "--column-color", "red", "--color"]
        )
        assert result.exit_code == 0, result.output
        assert "\x1b[31mName \x1b[0m" in result.output
        assert "\x1b[31mAlice\x1b[0m" in result.output

    def test_no_color(self, runner: CliRunner, people_csv: Path, people: ConsoleTable) -> None:
        """--no-color strips styling even when column colors are set."""
        result = runner.invoke(
            cli, ["render", str(people_csv), "--column-color", "red", "--no-color"]
        )
        assert result.exit_code == 0, result.output
        assert "\x1b[" not in result.output
        assert result.output == people.to_string() + "\n"

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["render", str(tmp_path / "missing.csv")])
        assert result.exit_code != 0
