"""Diagnostics recorded by one rblang parse."""

from __future__ import annotations

from rblang.diagnostics.diagnostic import Diagnostic
from rblang.diagnostics.location import SourceLocation
from rblang.diagnostics.severity import DiagnosticSeverity


class DiagnosticCollector:
    """Ordered record of what the parser skipped or rejected.

    ``Parser.parse_program`` hands back ``messages()``; the CLI prints the
    full diagnostics with ``format_all``.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    def error(
        self,
        message: str,
        location: SourceLocation | None = None,
        literal: str | None = None,
    ) -> None:
        """A production was abandoned or an illegal token was seen."""
        self._diagnostics.append(
            Diagnostic(DiagnosticSeverity.ERROR, message, location, literal)
        )

    def warning(
        self,
        message: str,
        location: SourceLocation | None = None,
        literal: str | None = None,
    ) -> None:
        """A legal token was skipped because no expression starts with it."""
        self._diagnostics.append(
            Diagnostic(DiagnosticSeverity.WARNING, message, location, literal)
        )

    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def messages(self) -> list[str]:
        """Bare messages, the form ``parse_program`` returns."""
        return [d.message for d in self._diagnostics]

    def format_all(self, source: str | None = None) -> str:
        """One diagnostic per line, or with source excerpts when *source* is given."""
        if source is None:
            return "\n".join(str(d) for d in self._diagnostics)
        return "\n".join(d.render(source) for d in self._diagnostics)
