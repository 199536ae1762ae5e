"""Exception types raised by the linter."""

from __future__ import annotations


class LintError(Exception):
    """Base class for linter errors."""


class ParseFailure(LintError):
    """
    The JavaScript parser could not build a clean tree from the source.

    Attributes:
        line: 1-based line of the first syntax error
        column: 1-based column of the first syntax error
    """

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        base = super().__str__()
        if self.line:
            return f"{base} (line {self.line}, column {self.column})"
        return base
