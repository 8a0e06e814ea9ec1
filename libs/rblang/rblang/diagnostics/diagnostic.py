"""Parser diagnostics for rblang source text."""

from __future__ import annotations

from dataclasses import dataclass

from rblang.diagnostics.location import SourceLocation
from rblang.diagnostics.severity import DiagnosticSeverity


@dataclass(frozen=True)
class Diagnostic:
    """One problem found while parsing, anchored at the token that caused it.

    ``literal`` is the source text of that token (None when the problem is
    at the end of input).  It only affects :meth:`render`.
    """

    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None
    literal: str | None = None

    def __str__(self) -> str:
        loc = f"{self.location}: " if self.location else ""
        return f"{loc}{self.severity}: {self.message}"

    def render(self, source: str) -> str:
        """Format with the offending source line and a caret underline."""
        if self.location is None:
            return str(self)
        lines = source.splitlines()
        if not 1 <= self.location.line <= len(lines):
            return str(self)
        text = lines[self.location.line - 1]
        width = len(self.literal.rstrip("\r\n")) if self.literal else 1
        caret = " " * (self.location.column - 1) + "^" * max(width, 1)
        return f"{self}\n    {text}\n    {caret}"
