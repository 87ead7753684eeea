"""Exceptions raised while interpreting problem markup."""

from __future__ import annotations


class ProblemParseError(Exception):
    """Base class for failures that abort parsing of a problem document."""


class MarkupSyntaxError(ProblemParseError):
    """Raised when the input is not well-formed markup."""

    def __init__(self, diagnostic: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.line = line
        self.column = column


class StructuralError(ProblemParseError):
    """Raised when well-formed markup lacks the required root element."""
