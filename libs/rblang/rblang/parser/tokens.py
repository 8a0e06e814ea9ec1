"""Token definitions for the rblang lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping

from rblang.diagnostics.location import SourceLocation

# Literal carried by the terminal EOF token.
EOF_LITERAL = "\0"


class TokenType(Enum):
    """All token types recognized by the rblang lexer."""

    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers and literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    BANG = auto()  # !
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    LT = auto()  # <
    GT = auto()  # >
    EQ = auto()  # ==
    NOTEQ = auto()  # !=

    # Delimiters
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    NEWLINE = auto()  # \n, \r, \r\n

    # Groupings
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords
    DEF = auto()
    END = auto()
    DO = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()

    def is_keyword(self) -> bool:
        """Return True if this type is produced only by a reserved word."""
        return self in _KEYWORD_TYPES


# Keyword string -> TokenType mapping, read-only for the life of the process.
# Identifiers are checked against this table during lexing.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "def": TokenType.DEF,
        "end": TokenType.END,
        "do": TokenType.DO,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)

_KEYWORD_TYPES = frozenset(KEYWORDS.values())


def lookup_ident(literal: str) -> TokenType:
    """Classify an identifier run as a keyword or a plain IDENT."""
    return KEYWORDS.get(literal, TokenType.IDENT)


@dataclass(frozen=True)
class Token:
    """A single token produced by the rblang lexer.

    ``literal`` is the exact source text of the token, except for EOF
    which carries ``EOF_LITERAL``.
    """

    kind: TokenType
    literal: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        return f"{self.kind.name}:{self.literal!r}"
