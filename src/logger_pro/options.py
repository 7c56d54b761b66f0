"""
Logger configuration.

``LoggerOptions`` is an immutable value holding the settings every
``Logger`` falls back to. The process-wide defaults are swapped, never
mutated, by :func:`configure` and :func:`reset`::

    from logger_pro import options

    options.configure(min_log_level="warn", include_timestamp=True)
    options.current().min_log_level  # LogLevel.WARN
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, fields, replace
from typing import Any

from .exceptions import LoggerConfigurationError
from .formatting import is_valid_template, unknown_placeholders
from .levels import LogLevel
from .timestamps import DEFAULT_DATE_TIME_FORMAT, is_valid_datetime_format

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggerOptions:
    """
    Resolved logger settings.

    Attributes:
        enable_logging: Master switch for output
        enable_colors: Emit ANSI colors
        min_log_level: Records below this level are dropped
        show_class_name: Include the class that created the logger
        show_function_name: Include the calling function
        show_location: Include the calling ``path:line``
        include_timestamp: Include a timestamp
        date_time_format: Token format for timestamps
        message_template: Optional ``{placeholder}`` template
    """

    enable_logging: bool = True
    enable_colors: bool = True
    min_log_level: LogLevel = LogLevel.DEBUG
    show_class_name: bool = False
    show_function_name: bool = True
    show_location: bool = True
    include_timestamp: bool = False
    date_time_format: str = DEFAULT_DATE_TIME_FORMAT
    message_template: str | None = None

    def merge(self, **changes: Any) -> LoggerOptions:
        """
        Return a validated copy with ``changes`` applied.

        ``None`` values are ignored, so callers can forward optional
        keyword arguments unchanged.

        Raises:
            LoggerConfigurationError: On an unknown option or an invalid
                minimum level. The receiver is left untouched.
        """
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for name, value in changes.items():
            if name not in known:
                raise LoggerConfigurationError(f"Unknown logger option: {name}", field=name)
            if value is None:
                continue
            updates[name] = value

        if "min_log_level" in updates:
            updates["min_log_level"] = _validate_log_level(updates["min_log_level"])
        if "date_time_format" in updates:
            updates["date_time_format"] = _validate_date_time_format(updates["date_time_format"])
        if "message_template" in updates:
            _check_message_template(updates["message_template"])

        return replace(self, **updates)


def _validate_log_level(value: LogLevel | str) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        level = LogLevel.from_string(value)
        if level is not None:
            return level
    raise LoggerConfigurationError(
        f"Invalid log level: {value!r}. Must be one of "
        f"{', '.join(level.label for level in LogLevel)}",
        field="min_log_level",
    )


def _validate_date_time_format(value: str) -> str:
    if is_valid_datetime_format(value):
        return value
    logger.warning("Invalid date_time_format %r, using default format", value)
    return DEFAULT_DATE_TIME_FORMAT


def _check_message_template(value: str) -> None:
    # Problem templates are reported but still applied; formatting degrades gracefully.
    if is_valid_template(value):
        return
    unknown = unknown_placeholders(value)
    if unknown:
        logger.warning(
            "Message template %r has unknown placeholders %s, they will be left as-is",
            value,
            ", ".join(unknown),
        )
    else:
        logger.warning(
            "Message template %r has no placeholders, default formatting will be used",
            value,
        )


# ---------------------------------------------------------------------------
# Process-wide defaults
# ---------------------------------------------------------------------------

_lock = threading.Lock()
_current = LoggerOptions()


def current() -> LoggerOptions:
    """Return the process-wide default options."""
    return _current


def configure(**changes: Any) -> LoggerOptions:
    """
    Update the process-wide defaults.

    Only the given options change; see :meth:`LoggerOptions.merge`.

    Returns:
        The new defaults
    """
    global _current
    with _lock:
        _current = _current.merge(**changes)
        return _current


def reset() -> LoggerOptions:
    """Restore the built-in defaults."""
    global _current
    with _lock:
        _current = LoggerOptions()
        return _current


__all__ = ["LoggerOptions", "configure", "current", "reset"]
