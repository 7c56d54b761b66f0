"""Command-line interface for trying out logger-pro formatting."""

from __future__ import annotations

import json
import sys
from typing import IO, Any

import click
import yaml

from .levels import LogLevel
from .output import ConsoleOutput, RecordContext
from .timestamps import DEFAULT_DATE_TIME_FORMAT, format_timestamp

LEVEL_CHOICE = click.Choice([level.label.lower() for level in LogLevel], case_sensitive=False)


@click.group()
@click.version_option()
def cli() -> None:
    """logger-pro formatting CLI."""
    pass


def _level(name: str) -> LogLevel:
    return LogLevel[name.upper()]


def _load_data(stream: IO[str]) -> Any:
    """Load a JSON or YAML document. YAML is tried when JSON parsing fails."""
    text = stream.read()
    name = getattr(stream, "name", "")
    try:
        if name.endswith((".yaml", ".yml")):
            return yaml.safe_load(text)
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return yaml.safe_load(text)
    except yaml.YAMLError as e:
        click.echo(f"Error: could not parse {name or 'input'}: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("level", type=LEVEL_CHOICE)
@click.argument("message")
@click.option("--tag", help="Tag shown in brackets before the level")
@click.option(
    "--template",
    help="Message template, e.g. '{timestamp} {level}: {message}'",
)
@click.option(
    "--timestamp/--no-timestamp",
    default=False,
    help="Include the current time",
)
@click.option(
    "--date-format",
    default=DEFAULT_DATE_TIME_FORMAT,
    show_default=True,
    help="Timestamp format (tokens: yyyy MM dd HH mm ss SSS)",
)
@click.option("--color/--no-color", default=True, help="ANSI colors")
def log(
    level: str,
    message: str,
    tag: str | None,
    template: str | None,
    timestamp: bool,
    date_format: str,
    color: bool,
) -> None:
    """Print MESSAGE as a formatted log line at LEVEL."""
    context = RecordContext(
        enable_colors=color,
        tag=tag,
        include_timestamp=timestamp,
        date_time_format=date_format,
        message_template=template,
    )
    ConsoleOutput(color=color).emit(_level(level), message, context)


@cli.command()
@click.argument("file", type=click.File("r"))
@click.option(
    "--columns",
    help="Comma-separated list of columns to show",
)
@click.option("--label", help="Line printed above the table")
@click.option("--level", default="info", type=LEVEL_CHOICE, show_default=True)
@click.option("--color/--no-color", default=True, help="ANSI colors")
def table(
    file: IO[str],
    columns: str | None,
    label: str | None,
    level: str,
    color: bool,
) -> None:
    """Print a JSON or YAML FILE as a table ('-' reads stdin)."""
    data = _load_data(file)
    column_list = [c.strip() for c in columns.split(",") if c.strip()] if columns else None
    ConsoleOutput(color=color).emit_table(
        _level(level),
        data,
        RecordContext(enable_colors=color),
        columns=column_list,
        label=label,
    )


@cli.command("json")
@click.argument("file", type=click.File("r"))
@click.option("--label", help="Line printed above the document")
@click.option("--level", default="info", type=LEVEL_CHOICE, show_default=True)
@click.option("--color/--no-color", default=True, help="ANSI colors")
def json_command(
    file: IO[str],
    label: str | None,
    level: str,
    color: bool,
) -> None:
    """Pretty-print a JSON or YAML FILE as a log record ('-' reads stdin)."""
    data = _load_data(file)
    ConsoleOutput(color=color).emit_json(
        _level(level), data, RecordContext(enable_colors=color), label=label
    )


@cli.command()
@click.argument("format", default=DEFAULT_DATE_TIME_FORMAT)
def timestamp(format: str) -> None:
    """Print the current time rendered with FORMAT."""
    click.echo(format_timestamp(format))


if __name__ == "__main__":
    cli()
