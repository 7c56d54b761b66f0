"""
Log line formatting.

A log line is built either from the default bracketed layout::

    [12:30:01][Api][Service.fetch][INFO] request sent        app/service.py:42

or from a user template with ``{placeholder}`` tokens::

    "{timestamp} {level}: {message} ({location})"

Template substitution is a single pass, so text inside substituted values
is never re-expanded. Unknown ``{tokens}`` are left as written; a template
with no known token at all is rejected and the default layout is used.
"""

from __future__ import annotations

import re

from .colors import GREY, RESET, color_for_level, colorize, visible_length
from .exceptions import InvalidTemplateError
from .levels import LogLevel
from .results import FormatResult
from .timestamps import DEFAULT_DATE_TIME_FORMAT, format_timestamp

DEFAULT_TERMINAL_WIDTH = 120

PLACEHOLDERS = frozenset(
    {"timestamp", "level", "message", "className", "tag", "functionName", "location"}
)

_PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")
_PATH_SEPARATOR = re.compile(r"[/\\]")


def _level_label(level: LogLevel | str) -> str:
    if isinstance(level, LogLevel):
        return level.label
    resolved = LogLevel.from_string(level)
    return resolved.label if resolved is not None else level.upper()



def short_location(location_label: str) -> str:
    """Strip the directory part of a ``path:line`` location."""
    return _PATH_SEPARATOR.split(location_label)[-1]


# ---------------------------------------------------------------------------
# Template validation
# ---------------------------------------------------------------------------


def template_placeholders(template: str) -> list[str]:
    """Return every ``{name}`` token in ``template``, known or not, in order."""
    return _PLACEHOLDER_PATTERN.findall(template)


def unknown_placeholders(template: str) -> list[str]:
    return [name for name in template_placeholders(template) if name not in PLACEHOLDERS]


def is_valid_template(template: str) -> bool:
    """
    Check a template for configuration-time problems.

    A template is valid when it has at least one known placeholder and no
    unknown ones. Invalid templates are still usable: known tokens are
    substituted and a template without any falls back to the default layout.
    """
    names = template_placeholders(template)
    return bool(names) and all(name in PLACEHOLDERS for name in names)


# ---------------------------------------------------------------------------
# Template formatting
# ---------------------------------------------------------------------------


def try_format_template(
    template: str,
    level: LogLevel | str,
    message: str,
    enable_colors: bool = False,
    class_name: str | None = None,
    tag: str | None = None,
    function_name: str | None = None,
    location_label: str | None = None,
    timestamp_text: str | None = None,
) -> FormatResult:
    """
    Substitute placeholders in ``template``.

    Args:
        template: Template with ``{placeholder}`` tokens
        level: Level of the record; ``{level}`` becomes its display name
        message: Rendered message; colored by level if ``enable_colors``
        enable_colors: Whether to color ``{message}``
        class_name: Value for ``{className}``
        tag: Value for ``{tag}``
        function_name: Value for ``{functionName}``
        location_label: ``path:line``; ``{location}`` gets the last path segment
        timestamp_text: Value for ``{timestamp}``; empty if None

    Returns:
        FormatResult with the line, or InvalidTemplateError if the template
        contains no known placeholder
    """
    label = _level_label(level)
    values = {
        "timestamp": timestamp_text or "",
        "level": label,
        "message": colorize(message, color_for_level(level)) if enable_colors else message,
        "className": class_name or "",
        "tag": tag or "",
        "functionName": function_name or "",
        "location": short_location(location_label) if location_label else "",
    }

    matched = False

    def substitute(match: re.Match[str]) -> str:
        nonlocal matched
        name = match.group(1)
        if name not in values:
            return match.group(0)
        matched = True
        return values[name]

    result = _PLACEHOLDER_PATTERN.sub(substitute, template)
    if not matched:
        return FormatResult.failure(InvalidTemplateError(template))
    return FormatResult.success(result)


# ---------------------------------------------------------------------------
# Default formatting
# ---------------------------------------------------------------------------


def build_prefix(
    level: LogLevel | str,
    class_name: str | None = None,
    tag: str | None = None,
    function_name: str | None = None,
    timestamp_text: str | None = None,
) -> str:
    """Build ``[timestamp][className][tag][functionName][LEVEL] ``, skipping empty fields."""
    parts = [f"[{part}]" for part in (timestamp_text, class_name, tag, function_name) if part]
    parts.append(f"[{_level_label(level)}] ")
    return "".join(parts)


def _format_default(
    level: LogLevel | str,
    message: str,
    enable_colors: bool,
    class_name: str | None,
    tag: str | None,
    function_name: str | None,
    location_label: str | None,
    timestamp_text: str | None,
    terminal_width: int,
) -> str:
    prefix = build_prefix(level, class_name, tag, function_name, timestamp_text)

    if enable_colors:
        content = colorize(prefix, GREY) + colorize(message, color_for_level(level))
    else:
        content = prefix + message

    if not location_label:
        return content

    # Right-align the location, keeping at least one space of separation.
    pad_length = terminal_width - visible_length(prefix + message) - len(location_label) - 2
    padding = " " * min(max(pad_length, 1), terminal_width)

    if enable_colors:
        return content + padding + colorize(location_label, GREY)
    return content + padding + location_label


def format_message(
    level: LogLevel | str,
    message: str,
    enable_colors: bool = False,
    class_name: str | None = None,
    tag: str | None = None,
    function_name: str | None = None,
    location_label: str | None = None,
    include_timestamp: bool = False,
    timestamp_text: str | None = None,
    template: str | None = None,
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT,
    terminal_width: int = DEFAULT_TERMINAL_WIDTH,
) -> str:
    """
    Format one log record as a line of text.

    Uses ``template`` when it is non-empty and contains a known placeholder,
    otherwise the default bracketed layout. Never raises for bad templates
    or date formats.

    Args:
        level: LogLevel or display name
        message: Rendered message (may span several lines)
        enable_colors: Wrap prefix, message and location in ANSI colors
        class_name: Optional class name field
        tag: Optional tag field
        function_name: Optional calling function field
        location_label: Optional ``path:line`` of the call site
        include_timestamp: Whether a timestamp is shown
        timestamp_text: Pre-rendered timestamp. When absent and
            ``include_timestamp`` is set, the current time is rendered with
            ``date_time_format``.
        template: Optional message template
        date_time_format: Token format for generated timestamps
        terminal_width: Line width used to right-align the location

    Returns:
        The formatted line
    """
    if include_timestamp and timestamp_text is None:
        timestamp_text = format_timestamp(date_time_format)

    if template:
        result = try_format_template(
            template,
            level,
            message,
            enable_colors=enable_colors,
            class_name=class_name,
            tag=tag,
            function_name=function_name,
            location_label=location_label,
            timestamp_text=timestamp_text if include_timestamp else None,
        )
        if result.ok:
            return result.unwrap()

    return _format_default(
        level,
        message,
        enable_colors,
        class_name,
        tag,
        function_name,
        location_label,
        timestamp_text,
        terminal_width,
    )


__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "PLACEHOLDERS",
    "build_prefix",
    "format_message",
    "is_valid_template",
    "short_location",
    "template_placeholders",
    "try_format_template",
    "unknown_placeholders",
]
