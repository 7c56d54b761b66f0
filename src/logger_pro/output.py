"""
Terminal output for formatted log records.

``ConsoleOutput`` turns message, JSON and table bodies into formatted lines
and writes them with ``click.echo``. Long messages are written in chunks so
that terminals and IDE consoles that truncate long writes keep every line.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import IO, Any

import click

from .formatting import format_message
from .levels import LogLevel
from .table import format_table, generate_ascii_table
from .timestamps import DEFAULT_DATE_TIME_FORMAT

logger = logging.getLogger(__name__)

MAX_CHUNK_LENGTH = 800


@dataclass(frozen=True)
class RecordContext:
    """
    Decorations applied to one log record.

    Everything here is already resolved (caller lookup and option merging
    happen in the Logger); the output layer only formats.
    """

    enable_colors: bool = False
    class_name: str | None = None
    tag: str | None = None
    function_name: str | None = None
    location_label: str | None = None
    include_timestamp: bool = False
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    message_template: str | None = None

    def format(self, level: LogLevel, message: str) -> str:
        return format_message(
            level,
            message,
            enable_colors=self.enable_colors,
            class_name=self.class_name,
            tag=self.tag,
            function_name=self.function_name,
            location_label=self.location_label,
            include_timestamp=self.include_timestamp,
            template=self.message_template,
            date_time_format=self.date_time_format,
        )


def split_long_message(message: str, max_length: int = MAX_CHUNK_LENGTH) -> list[str]:
    """
    Split ``message`` into writes of at most ``max_length`` characters.

    Whole lines are batched together while they fit; a single line longer
    than ``max_length`` is cut into fixed-size slices.
    """
    if len(message) <= max_length:
        return [message]

    chunks: list[str] = []
    buffer: list[str] = []
    buffered = 0

    def flush() -> None:
        nonlocal buffered
        if buffer:
            chunks.append("\n".join(buffer))
            buffer.clear()
            buffered = 0

    for line in message.split("\n"):
        if len(line) > max_length:
            flush()
            chunks.extend(line[i : i + max_length] for i in range(0, len(line), max_length))
            continue
        # +1 for the newline joining this line to the buffer
        if buffer and buffered + len(line) + 1 > max_length:
            flush()
        buffered += len(line) + (1 if buffer else 0)
        buffer.append(line)

    flush()
    return chunks


def _with_label(label: str | None, body: str, separator: str = ":\n") -> str:
    return f"{label}{separator}{body}" if label is not None else body


class ConsoleOutput:
    """Write formatted records to a terminal stream."""

    def __init__(self, file: IO[str] | None = None, color: bool | None = None) -> None:
        """Initialize the output.

        Args:
            file: Stream to write to. Defaults to stdout, resolved at write time.
            color: Passed to ``click.echo``. None strips ANSI codes when the
                stream is not a terminal; True always keeps them.
        """
        self._file = file
        self._color = color

    def write(self, text: str) -> None:
        for chunk in split_long_message(text):
            click.echo(chunk, file=self._file, color=self._color)

    def emit(self, level: LogLevel, message: str, context: RecordContext) -> None:
        """Format and write a plain message."""
        self.write(context.format(level, message))

    def emit_json(
        self,
        level: LogLevel,
        obj: Any,
        context: RecordContext,
        label: str | None = None,
    ) -> None:
        """Pretty-print ``obj`` as JSON, falling back to ``str(obj)``."""
        try:
            body = _with_label(label, json.dumps(obj, indent=2, ensure_ascii=False))
        except (TypeError, ValueError):
            logger.debug("Object is not JSON serializable, logging str()", exc_info=True)
            body = _with_label(label, str(obj), separator=": ")
        self.write(context.format(level, body))

    def emit_table(
        self,
        level: LogLevel,
        data: Any,
        context: RecordContext,
        columns: Sequence[str] | None = None,
        label: str | None = None,
    ) -> None:
        """Render ``data`` as an ASCII table, falling back to ``str(data)``."""
        try:
            table = generate_ascii_table(
                format_table(data, columns), enable_colors=context.enable_colors
            )
            body = _with_label(label, table)
        except Exception:  # noqa: BLE001
            logger.debug("Table formatting failed, logging str()", exc_info=True)
            body = _with_label(label, str(data), separator=": ")
        self.write(context.format(level, body))


__all__ = ["MAX_CHUNK_LENGTH", "ConsoleOutput", "RecordContext", "split_long_message"]
