"""Exceptions for logger-pro."""


# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class LoggerProError(Exception):
    """
    Base exception for all logger-pro errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class FormatError(LoggerProError):
    """
    Base exception for formatting errors.

    These are always recoverable: the formatting entry points catch them
    and fall back to the default layout or a fixed timestamp format.
    """

    pass


class ConfigurationError(LoggerProError):
    """Base exception for logger configuration errors."""

    pass


# ---------------------------------------------------------------------------
# Format Exceptions
# ---------------------------------------------------------------------------


class InvalidTemplateError(FormatError):
    """Raised when a message template contains no recognized placeholder."""

    def __init__(self, template: str) -> None:
        self.template = template
        super().__init__(
            f"Invalid message template {template!r}: no recognized placeholders found"
        )


class InvalidDateFormatError(FormatError):
    """Raised when a date/time format contains no recognized token."""

    def __init__(self, format: str) -> None:
        self.format = format
        super().__init__(f"Invalid date format: {format!r}")


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class LoggerConfigurationError(ConfigurationError):
    """
    Raised when a configuration value cannot be applied.

    Unlike format errors, this one propagates to the caller of
    ``configure()``; the previous options stay in effect.

    Attributes:
        field: Name of the rejected option, if known
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
