"""
Leveled console logger.

Example:
    from logger_pro import Logger, LogLevel

    log = Logger(tag="Checkout")
    log.info("cart loaded")
    log.json({"user": {"id": 123}}, label="Session")
    log.table([{"name": "Alice", "total": 299.99}], level=LogLevel.DEBUG)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from . import options
from .caller import find_caller, find_caller_class
from .levels import LogLevel
from .output import ConsoleOutput, RecordContext


class Logger:
    """
    Logger with colored, decorated console output.

    Constructor arguments left as None take the process-wide default from
    :func:`logger_pro.options.current` at construction time. The minimum
    level, timestamp settings and template are read from the current
    defaults on every call, so ``options.configure()`` affects existing
    loggers for those.
    """

    def __init__(
        self,
        tag: str | None = None,
        enable_colors: bool | None = None,
        enable_logging: bool | None = None,
        show_class_name: bool | None = None,
        show_function_name: bool | None = None,
        show_location: bool | None = None,
        output: ConsoleOutput | None = None,
    ) -> None:
        defaults = options.current()
        self.tag = tag
        self.class_name = find_caller_class()
        self.enable_colors = defaults.enable_colors if enable_colors is None else enable_colors
        self.enable_logging = (
            defaults.enable_logging if enable_logging is None else enable_logging
        )
        self.show_class_name = (
            defaults.show_class_name if show_class_name is None else show_class_name
        )
        self.show_function_name = (
            defaults.show_function_name if show_function_name is None else show_function_name
        )
        self.show_location = defaults.show_location if show_location is None else show_location
        self.output = output or ConsoleOutput()

    def __repr__(self) -> str:
        return f"Logger(tag={self.tag!r}, enable_logging={self.enable_logging})"

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def debug(self, message: str) -> None:
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        self._log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        self._log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        self._log(LogLevel.ERROR, message)

    d = debug
    i = info
    w = warn
    e = error

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def json(self, obj: Any, level: LogLevel = LogLevel.INFO, label: str | None = None) -> None:
        """
        Log ``obj`` as indented JSON.

        Objects that cannot be serialized are logged with ``str()``.
        """
        context = self._context(level)
        if context is not None:
            self.output.emit_json(level, obj, context, label=label)

    def json_debug(self, obj: Any, label: str | None = None) -> None:
        self.json(obj, LogLevel.DEBUG, label)

    def json_info(self, obj: Any, label: str | None = None) -> None:
        self.json(obj, LogLevel.INFO, label)

    def json_warn(self, obj: Any, label: str | None = None) -> None:
        self.json(obj, LogLevel.WARN, label)

    def json_error(self, obj: Any, label: str | None = None) -> None:
        self.json(obj, LogLevel.ERROR, label)

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def table(
        self,
        data: Any,
        columns: Sequence[str] | None = None,
        level: LogLevel = LogLevel.INFO,
        label: str | None = None,
    ) -> None:
        """
        Log ``data`` as an ASCII table, like the browser's console.table.

        Args:
            data: List of mappings, list of lists, a mapping, or a scalar
            columns: Optional column allow-list
            level: Log level
            label: Optional line printed above the table
        """
        context = self._context(level)
        if context is not None:
            self.output.emit_table(level, data, context, columns=columns, label=label)

    def table_debug(
        self, data: Any, columns: Sequence[str] | None = None, label: str | None = None
    ) -> None:
        self.table(data, columns, LogLevel.DEBUG, label)

    def table_info(
        self, data: Any, columns: Sequence[str] | None = None, label: str | None = None
    ) -> None:
        self.table(data, columns, LogLevel.INFO, label)

    def table_warn(
        self, data: Any, columns: Sequence[str] | None = None, label: str | None = None
    ) -> None:
        self.table(data, columns, LogLevel.WARN, label)

    def table_error(
        self, data: Any, columns: Sequence[str] | None = None, label: str | None = None
    ) -> None:
        self.table(data, columns, LogLevel.ERROR, label)

    # -------------------------------------------------------------------------
    # Local configuration
    # -------------------------------------------------------------------------

    def configure(
        self,
        enable_colors: bool | None = None,
        enable_logging: bool | None = None,
        show_class_name: bool | None = None,
        show_function_name: bool | None = None,
        show_location: bool | None = None,
    ) -> None:
        """Override settings for this logger only. None leaves a setting unchanged."""
        if enable_colors is not None:
            self.enable_colors = enable_colors
        if enable_logging is not None:
            self.enable_logging = enable_logging
        if show_class_name is not None:
            self.show_class_name = show_class_name
        if show_function_name is not None:
            self.show_function_name = show_function_name
        if show_location is not None:
            self.show_location = show_location

    def reset(self) -> None:
        """Drop local overrides and take the current process-wide defaults."""
        defaults = options.current()
        self.enable_colors = defaults.enable_colors
        self.enable_logging = defaults.enable_logging
        self.show_class_name = defaults.show_class_name
        self.show_function_name = defaults.show_function_name
        self.show_location = defaults.show_location

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self.enable_logging and level >= options.current().min_log_level

    def _context(self, level: LogLevel) -> RecordContext | None:
        """Resolve decorations for a record, or None if it is filtered out."""
        if not self.is_enabled_for(level):
            return None

        function_name = None
        location = None
        if self.show_function_name or self.show_location:
            caller = find_caller()
            if caller is not None:
                function_name = caller.function_name if self.show_function_name else None
                location = caller.location if self.show_location else None

        defaults = options.current()
        return RecordContext(
            enable_colors=self.enable_colors,
            class_name=self.class_name if self.show_class_name else None,
            tag=self.tag,
            function_name=function_name,
            location_label=location,
            include_timestamp=defaults.include_timestamp,
            date_time_format=defaults.date_time_format,
            message_template=defaults.message_template,
        )

    def _log(self, level: LogLevel, message: str) -> None:
        context = self._context(level)
        if context is not None:
            self.output.emit(level, message, context)


__all__ = ["Logger"]
