"""
Timestamp rendering for log lines.

Formats use a small token vocabulary, each replaced wherever it appears:

    yyyy  4-digit year          HH   2-digit hour (24h)
    MM    2-digit month         mm   2-digit minute
    dd    2-digit day           ss   2-digit second
                                SSS  3-digit millisecond

A format containing none of these tokens is invalid.
"""

from __future__ import annotations

from datetime import datetime

from .exceptions import InvalidDateFormatError
from .results import FormatResult

DEFAULT_DATE_TIME_FORMAT = "HH:mm:ss"

DATE_TIME_TOKENS = ("yyyy", "MM", "dd", "HH", "mm", "ss", "SSS")


def _token_values(moment: datetime) -> list[tuple[str, str]]:
    # Substituted one after another into the same string, in this order.
    return [
        ("yyyy", f"{moment.year:04d}"),
        ("MM", f"{moment.month:02d}"),
        ("dd", f"{moment.day:02d}"),
        ("HH", f"{moment.hour:02d}"),
        ("mm", f"{moment.minute:02d}"),
        ("ss", f"{moment.second:02d}"),
        ("SSS", f"{moment.microsecond // 1000:03d}"),
    ]


def try_format_datetime(moment: datetime, format: str) -> FormatResult:
    """
    Render ``moment`` with a token format.

    Args:
        moment: Point in time to render
        format: Format string (see module docstring for tokens)

    Returns:
        FormatResult with the rendered text, or an InvalidDateFormatError
        if the format contains no recognized token
    """
    result = format
    matched = False
    for token, value in _token_values(moment):
        if token in result:
            result = result.replace(token, value)
            matched = True

    if not matched:
        return FormatResult.failure(InvalidDateFormatError(format))
    return FormatResult.success(result)


def format_datetime(moment: datetime, format: str) -> str:
    """
    Render ``moment`` with a token format.

    Raises:
        InvalidDateFormatError: If the format contains no recognized token
    """
    return try_format_datetime(moment, format).unwrap()


def _fallback_timestamp(moment: datetime) -> str:
    # Computed directly so a broken format can never recurse into itself.
    return f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"


def format_timestamp(
    format: str = DEFAULT_DATE_TIME_FORMAT, now: datetime | None = None
) -> str:
    """
    Render the current time with ``format``, never failing.

    Args:
        format: Token format string
        now: Time to render instead of the wall clock

    Returns:
        The rendered timestamp, or ``HH:mm:ss`` if the format is invalid
    """
    moment = now if now is not None else datetime.now()
    return try_format_datetime(moment, format).unwrap_or(_fallback_timestamp(moment))


def is_valid_datetime_format(format: str) -> bool:
    """Return True if ``format`` is non-empty and contains at least one token."""
    return bool(format) and any(token in format for token in DATE_TIME_TOKENS)


__all__ = [
    "DATE_TIME_TOKENS",
    "DEFAULT_DATE_TIME_FORMAT",
    "format_datetime",
    "format_timestamp",
    "is_valid_datetime_format",
    "try_format_datetime",
]
