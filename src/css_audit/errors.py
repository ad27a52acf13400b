"""Error hierarchy for the audit run."""
from __future__ import annotations


class AuditError(Exception):
    """Base error for all css_audit failures."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class StylesheetReadError(AuditError):
    """A stylesheet path could not be read."""

    def __init__(self, path: str, *, cause: Exception | None = None) -> None:
        reason = f": {cause.strerror or cause}" if isinstance(cause, OSError) else ""
        super().__init__(f"Failed to read stylesheet {path}{reason}", cause=cause)
        self.path = path


class ParseError(AuditError):
    """Raised when stylesheet source cannot be parsed into rules."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        path: str | None = None,
    ) -> None:
        self.line = line
        self.column = column
        self.path = path
        location = path or "<string>"
        if line is not None:
            location = f"{location}:{line}:{column or 0}"
        super().__init__(f"{location}: {message}")
