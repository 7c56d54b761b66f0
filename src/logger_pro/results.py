"""Two-branch outcome for formatting steps that may fall back."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import FormatError


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a formatting attempt: either rendered text or a FormatError.

    Exactly one of ``text`` and ``error`` is set. Callers branch on ``ok``
    and substitute their own fallback instead of catching exceptions.
    """

    text: str | None = None
    error: FormatError | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.error is None):
            raise ValueError("FormatResult requires exactly one of text or error")

    @classmethod
    def success(cls, text: str) -> FormatResult:
        return cls(text=text)

    @classmethod
    def failure(cls, error: FormatError) -> FormatResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the text, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.text is not None
        return self.text

    def unwrap_or(self, fallback: str) -> str:
        return self.text if self.text is not None else fallback


__all__ = ["FormatResult"]
