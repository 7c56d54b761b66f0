"""
logger-pro: Colored console logging with JSON and table output.

This library provides:
- Leveled log methods (debug < info < warn < error) with short aliases
- Caller decoration: tag, class, function name and ``path:line`` location
- Message templates and custom timestamp formats
- Pretty-printed JSON and console.table-style ASCII tables
- Process-wide defaults with per-logger overrides

Example:
    from logger_pro import Logger, LogLevel, options

    options.configure(min_log_level=LogLevel.INFO, include_timestamp=True)

    log = Logger(tag="Billing")
    log.info("invoice created")
    log.table(
        [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob", "city": "Boston"}],
        label="Customers",
    )
"""

import importlib.metadata

from . import options
from .exceptions import (
    ConfigurationError,
    FormatError,
    InvalidDateFormatError,
    InvalidTemplateError,
    LoggerConfigurationError,
    LoggerProError,
)
from .formatting import format_message, is_valid_template, try_format_template
from .levels import LogLevel
from .logger import Logger
from .options import LoggerOptions
from .output import ConsoleOutput, RecordContext
from .results import FormatResult
from .table import TableData, TableRenderer, format_table, format_value, generate_ascii_table
from .timestamps import format_datetime, format_timestamp, try_format_datetime

try:
    __version__ = importlib.metadata.version("logger-pro")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main API
    "Logger",
    "LogLevel",
    "LoggerOptions",
    "options",
    # Formatting
    "format_message",
    "try_format_template",
    "is_valid_template",
    "format_timestamp",
    "format_datetime",
    "try_format_datetime",
    "FormatResult",
    # Tables
    "TableData",
    "TableRenderer",
    "format_table",
    "format_value",
    "generate_ascii_table",
    # Output
    "ConsoleOutput",
    "RecordContext",
    # Exceptions
    "LoggerProError",
    "FormatError",
    "ConfigurationError",
    "InvalidTemplateError",
    "InvalidDateFormatError",
    "LoggerConfigurationError",
]
