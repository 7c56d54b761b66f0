"""Tests for the CLI."""

import json
import re
from pathlib import Path

import yaml
from click.testing import CliRunner

from logger_pro.cli import cli


class TestLog:
    """Tests for `logger-pro log`."""

    def test_plain(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["log", "warn", "disk low", "--tag", "Ops", "--no-color"])
        assert result.exit_code == 0
        assert result.output == "[Ops][WARN] disk low\n"

    def test_level_is_case_insensitive(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["log", "ERROR", "boom", "--no-color"])
        assert result.exit_code == 0
        assert result.output == "[ERROR] boom\n"

    def test_template_and_timestamp(self):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "log",
                "info",
                "hi",
                "--no-color",
                "--timestamp",
                "--date-format",
                "yyyy",
                "--template",
                "{timestamp} {level}: {message}",
            ],
        )
        assert result.exit_code == 0
        assert re.fullmatch(r"\d{4} INFO: hi\n", result.output)

    def test_invalid_level(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["log", "loud", "hi"])
        assert result.exit_code != 0
        assert "Invalid value" in result.output

    def test_color(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["log", "info", "hi"])
        assert result.exit_code == 0
        assert "\x1b[34mhi\x1b[0m" in result.output


class TestTable:
    """Tests for `logger-pro table`."""

    def test_json_file(self, tmp_path: Path):
        path = tmp_path / "users.json"
        path.write_text(json.dumps([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]))

        runner = CliRunner()
        result = runner.invoke(cli, ["table", str(path), "--no-color", "--columns", "name"])
        assert result.exit_code == 0
        assert result.output == (
            "[INFO] ┌─────────┬───────┐\n"
            "│ (index) │ name  │\n"
            "├─────────┼───────┤\n"
            "│ 0       │ Alice │\n"
            "│ 1       │ Bob   │\n"
            "└─────────┴───────┘\n"
        )

    def test_yaml_file_with_label(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"appName": "MyApp", "debug": False}))

        runner = CliRunner()
        result = runner.invoke(
            cli, ["table", str(path), "--no-color", "--label", "Config", "--level", "debug"]
        )
        assert result.exit_code == 0
        assert result.output.startswith("[DEBUG] Config:\n┌")
        assert "│ appName │ MyApp  │" in result.output
        assert "│ debug   │ false  │" in result.output

    def test_stdin(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["table", "-", "--no-color"], input="[[1, 2], [3]]")
        assert result.exit_code == 0
        assert "│ 1       │ 3 │ null │" in result.output

    def test_unparseable_input(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("key: [unclosed")

        runner = CliRunner()
        result = runner.invoke(cli, ["table", str(path)])
        assert result.exit_code == 1
        assert "could not parse" in result.output


class TestJson:
    """Tests for `logger-pro json`."""

    def test_pretty_print(self, tmp_path: Path):
        path = tmp_path / "data.json"
        path.write_text('{"a": [1, 2]}')

        runner = CliRunner()
        result = runner.invoke(cli, ["json", str(path), "--no-color", "--label", "Data"])
        assert result.exit_code == 0
        assert result.output == '[INFO] Data:\n{\n  "a": [\n    1,\n    2\n  ]\n}\n'


class TestTimestamp:
    """Tests for `logger-pro timestamp`."""

    def test_default(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["timestamp"])
        assert result.exit_code == 0
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}\n", result.output)

    def test_invalid_format_falls_back(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["timestamp", "xyz123"])
        assert result.exit_code == 0
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}\n", result.output)
