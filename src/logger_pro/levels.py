"""Log levels and their severities."""

from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """
    Log severity, ordered by numeric rank.

    The integer value is the severity used for filtering; ``label`` is the
    display name printed in log lines.
    """

    DEBUG = 700
    INFO = 800
    WARN = 900
    ERROR = 1000

    @property
    def label(self) -> str:
        """Upper-case display name (e.g. ``"WARN"``)."""
        return self.name

    @classmethod
    def from_string(cls, name: str) -> LogLevel | None:
        """Look up a level by name, case-insensitively. Returns None if unknown."""
        return cls.__members__.get(name.strip().upper())


__all__ = ["LogLevel"]
