"""
Table formatting for logged data.

Turns arbitrary data (a mapping, a list of mappings, a list of lists, a
scalar, or None) into a normalized ``TableData`` grid, then renders that
grid as a box-drawing table, in the spirit of the browser's console.table:

    ┌─────────┬────────┬────┬───────┐
    │ (index) │ city   │ id │ name  │
    ├─────────┼────────┼────┼───────┤
    │ 0       │ null   │ 1  │ Alice │
    │ 1       │ Boston │ 2  │ Bob   │
    └─────────┴────────┴────┴───────┘

Formatting never raises on unusual input; values that have no tabular
shape degrade to their string form.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .colors import visible_length

INDEX_HEADER = "(index)"
VALUES_HEADER = "Values"
NULL_TEXT = "null"
OBJECT_TEXT = "[object Object]"
EMPTY_TABLE_TEXT = "Empty table"


@dataclass(frozen=True)
class TableData:
    """
    Normalized table grid.

    Attributes:
        headers: Column labels; the first is always the row-identity column
        rows: Cell text per row, aligned to ``headers``; a row may be shorter
            than ``headers``, missing cells render as empty
    """

    headers: list[str]
    rows: list[list[str]]


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _scalar_text(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def format_value(value: Any) -> str:
    """
    Render one table cell.

    Sequences are flattened one level (``"a,b,null"``); nested mappings are
    not expanded and render as ``"[object Object]"``.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return _scalar_text(value)
    if _is_sequence(value):
        return ",".join(_scalar_text(item) for item in value)
    if isinstance(value, Mapping):
        return OBJECT_TEXT
    return str(value)


# ---------------------------------------------------------------------------
# Shape dispatch
# ---------------------------------------------------------------------------


def format_table(data: Any, columns: Sequence[str] | None = None) -> TableData:
    """
    Normalize ``data`` into a table grid.

    Args:
        data: None, a list/tuple, a mapping, or any scalar
        columns: Optional allow-list of column names. For lists of mappings
            these are keys, for lists of lists they are positions as strings
            (``"0"``, ``"1"``), for a single mapping they filter its keys.
            Ignored for mixed lists and scalars.

    Returns:
        TableData for the detected shape
    """
    if data is None:
        return TableData([INDEX_HEADER, VALUES_HEADER], [])

    if _is_sequence(data):
        return _format_sequence(data, columns)

    if isinstance(data, Mapping):
        return _format_mapping(data, columns)

    return TableData([INDEX_HEADER, VALUES_HEADER], [["0", format_value(data)]])


def _format_sequence(data: Sequence[Any], columns: Sequence[str] | None) -> TableData:
    if not data:
        return TableData([INDEX_HEADER], [])

    if all(isinstance(item, Mapping) for item in data):
        return _format_records(data, columns)

    if all(_is_sequence(item) for item in data):
        return _format_rows(data, columns)

    return TableData(
        [INDEX_HEADER, VALUES_HEADER],
        [[str(i), format_value(item)] for i, item in enumerate(data)],
    )


def _format_records(data: Sequence[Mapping[Any, Any]], columns: Sequence[str] | None) -> TableData:
    records = [{str(k): v for k, v in record.items()} for record in data]

    keys: set[str] = set()
    for record in records:
        keys.update(record)
    if columns is not None:
        keys.intersection_update(columns)
    ordered = sorted(keys)

    rows = [
        [str(i), *(format_value(record.get(key)) for key in ordered)]
        for i, record in enumerate(records)
    ]
    return TableData([INDEX_HEADER, *ordered], rows)


def _format_rows(data: Sequence[Sequence[Any]], columns: Sequence[str] | None) -> TableData:
    max_length = max(len(item) for item in data)
    labels = [str(i) for i in range(max_length)]
    if columns is not None:
        wanted = set(columns)
        labels = [label for label in labels if label in wanted]

    rows = []
    for i, item in enumerate(data):
        row = [str(i)]
        for label in labels:
            position = int(label)
            row.append(format_value(item[position] if position < len(item) else None))
        rows.append(row)
    return TableData([INDEX_HEADER, *labels], rows)


def _format_mapping(data: Mapping[Any, Any], columns: Sequence[str] | None) -> TableData:
    items = [(str(k), v) for k, v in data.items()]
    if columns is not None:
        wanted = set(columns)
        items = [(key, value) for key, value in items if key in wanted]
    return TableData(
        [INDEX_HEADER, VALUES_HEADER],
        [[key, format_value(value)] for key, value in items],
    )


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _single_line(text: str) -> str:
    """Escape line breaks so a cell stays on one row."""
    return text.replace("\r\n", "\\n").replace("\n", "\\n").replace("\r", "\\r")


class TableRenderer:
    """Render a TableData grid as a box-drawing table.

    Column width is the widest visible text in the column plus one space of
    padding on each side. ANSI color codes inside cells do not count toward
    the width.
    """

    def __init__(self, enable_colors: bool = False) -> None:
        """Initialize the table renderer.

        Args:
            enable_colors: Accepted for symmetry with the message formatter.
                The table frame itself is never colored.
        """
        self._enable_colors = enable_colors

    def render(self, table: TableData) -> str:
        """Render ``table``, or ``"Empty table"`` if it has no rows."""
        if not table.rows:
            return EMPTY_TABLE_TEXT

        headers = [_single_line(h) for h in table.headers]
        rows = [[_single_line(cell) for cell in row] for row in table.rows]

        # Each column fits its widest cell, header included
        widths = [visible_length(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row[: len(widths)]):
                widths[i] = max(widths[i], visible_length(cell))
        widths = [w + 2 for w in widths]

        lines: list[str] = []
        lines.append(self._border("┌", "┬", "┐", widths))
        lines.append(self._row(headers, widths))
        lines.append(self._border("├", "┼", "┤", widths))
        for row in rows:
            lines.append(self._row(row, widths))
        lines.append(self._border("└", "┴", "┘", widths))

        return "\n".join(lines)

    @staticmethod
    def _border(left: str, middle: str, right: str, widths: list[int]) -> str:
        return left + middle.join("─" * w for w in widths) + right

    @staticmethod
    def _row(cells: Sequence[str], widths: list[int]) -> str:
        parts = []
        for i, width in enumerate(widths):
            cell = cells[i] if i < len(cells) else ""
            parts.append(" " + cell + " " * (width - 1 - visible_length(cell)))
        return "│" + "│".join(parts) + "│"


def generate_ascii_table(table: TableData, enable_colors: bool = False) -> str:
    """Render ``table`` as a box-drawing table string."""
    return TableRenderer(enable_colors=enable_colors).render(table)


__all__ = [
    "EMPTY_TABLE_TEXT",
    "INDEX_HEADER",
    "VALUES_HEADER",
    "TableData",
    "TableRenderer",
    "format_table",
    "format_value",
    "generate_ascii_table",
]
