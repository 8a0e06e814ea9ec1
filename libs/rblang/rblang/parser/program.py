"""Program container: the parser's output artifact."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, overload

from rblang.parser.ast_nodes import ExprNode


@dataclass
class Program:
    """Top-level expressions in source order.

    The parser appends each completed expression and never touches the
    program again once ``parse_program`` returns.  No validation happens
    here; productions that fail are never appended.
    """

    expressions: list[ExprNode] = field(default_factory=list)

    def append(self, expression: ExprNode) -> None:
        self.expressions.append(expression)

    def __len__(self) -> int:
        return len(self.expressions)

    @overload
    def __getitem__(self, index: int) -> ExprNode: ...

    @overload
    def __getitem__(self, index: slice) -> list[ExprNode]: ...

    def __getitem__(self, index: int | slice) -> ExprNode | list[ExprNode]:
        return self.expressions[index]

    def __iter__(self) -> Iterator[ExprNode]:
        return iter(self.expressions)
