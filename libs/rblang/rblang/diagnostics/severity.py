"""Severity of a parser diagnostic."""

from __future__ import annotations

from enum import Enum


class DiagnosticSeverity(Enum):
    """ERROR means input was rejected; WARNING means a token was skipped."""

    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value
