"""AST node types produced by the rblang parser.

The grammar is expression oriented: every top-level construct is an
expression.  ``Identifier`` is the single plain node type; the
``ExprNode`` subclasses are the variants the parser can emit.  All nodes
are frozen dataclasses that own their token and children.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

from rblang.parser.tokens import Token

__all__ = [
    "Identifier",
    "ExprNode",
    "AssignExpr",
    "ValueExpr",
    "ReturnExpr",
    "IdentifierExpr",
]


@dataclass(frozen=True)
class Identifier:
    """A name, together with the IDENT token it was read from."""

    token: Token
    name: str

    @property
    def token_literal(self) -> str:
        return self.token.literal


class ExprNode(ABC):
    """Base type for expression nodes. All concrete subclasses are frozen dataclasses."""

    token: Token

    @property
    def token_literal(self) -> str:
        """Source text of the token this expression was built from."""
        return self.token.literal


@dataclass(frozen=True)
class AssignExpr(ExprNode):
    """Assignment: ``name = value``. ``token`` is the ``=`` token."""

    token: Token
    target: Identifier
    value: ExprNode


@dataclass(frozen=True)
class ValueExpr(ExprNode):
    """Integer literal: ``5``, ``838383``.

    The literal text is not converted yet, so ``value`` is always 0.
    """

    token: Token
    value: int = 0


@dataclass(frozen=True)
class ReturnExpr(ExprNode):
    """``return value``."""

    token: Token
    value: ExprNode


@dataclass(frozen=True)
class IdentifierExpr(ExprNode):
    """Bare identifier reference: ``foo;``."""

    token: Token
    identifier: Identifier
