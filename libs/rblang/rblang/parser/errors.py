"""Parse error types for the rblang parser."""

from __future__ import annotations

from rblang.diagnostics.location import SourceLocation


class ParseError(Exception):
    """Aborts the current production.

    The diagnostic describing the problem has already been recorded when
    this is raised; ``Parser.parse_program`` catches it and moves on.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        super().__init__(message)
        self.location = location
