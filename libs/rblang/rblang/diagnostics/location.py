"""Line and column of a token in rblang source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """Where a token starts. Newline tokens end their own line."""

    file: str
    line: int  # 1-indexed
    column: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"
