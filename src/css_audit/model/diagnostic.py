"""Diagnostic model: non-fatal findings reported while walking a stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet rule.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        source: Path of the stylesheet, if known.
        line: 1-based source line of the offending rule, if known.
        column: 1-based source column of the offending rule, if known.
    """

    rule: str
    severity: Severity
    message: str
    source: str | None = None
    line: int | None = None
    column: int | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def location(self) -> str:
        if self.line is None:
            return self.source or ""
        return f"{self.source or '<string>'}:{self.line}:{self.column or 0}"

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value}{location}: {self.message}"
