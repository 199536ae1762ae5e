"""Finding data model for lint results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .nodes import SourceSpan


class Severity(Enum):
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    """Structured representation of one detected pattern."""

    kind: str
    span: SourceSpan
    message: str
    severity: Severity = Severity.WARNING

    @property
    def line(self) -> int:
        """1-based start line."""
        return self.span.start_line + 1

    @property
    def col(self) -> int:
        """1-based start column."""
        return self.span.start_column + 1


def make_finding(kind: str, span: SourceSpan, message: str) -> Finding:
    return Finding(kind=kind, span=span, message=message)
