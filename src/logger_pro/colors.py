"""ANSI color codes for terminal output."""

from __future__ import annotations

import click

from .levels import LogLevel

RESET = "\x1b[0m"
GREY = "\x1b[90m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
CYAN = "\x1b[36m"

_LEVEL_COLORS = {
    LogLevel.ERROR: RED,
    LogLevel.WARN: YELLOW,
    LogLevel.INFO: BLUE,
    LogLevel.DEBUG: CYAN,
}


def color_for_level(level: LogLevel | str) -> str:
    """
    Return the ANSI color used for a level's message text.

    Args:
        level: A LogLevel or its display name

    Returns:
        The escape sequence, or RESET for unknown level names
    """
    resolved = level if isinstance(level, LogLevel) else LogLevel.from_string(level)
    if resolved is None:
        return RESET
    return _LEVEL_COLORS[resolved]


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def strip_ansi_codes(text: str) -> str:
    """Remove ANSI SGR escape sequences, leaving only visible characters."""
    return click.unstyle(text)


def visible_length(text: str) -> int:
    return len(strip_ansi_codes(text))


__all__ = [
    "BLUE",
    "CYAN",
    "GREY",
    "RED",
    "RESET",
    "YELLOW",
    "color_for_level",
    "colorize",
    "strip_ansi_codes",
    "visible_length",
]
