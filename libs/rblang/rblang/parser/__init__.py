"""rblang parser subpackage (Layer 1 -- depends on diagnostics)."""

from rblang.parser.ast_nodes import (
    AssignExpr,
    ExprNode,
    Identifier,
    IdentifierExpr,
    ReturnExpr,
    ValueExpr,
)
from rblang.parser.errors import ParseError
from rblang.parser.lexer import Lexer
from rblang.parser.parser import Parser, parse
from rblang.parser.program import Program
from rblang.parser.tokens import EOF_LITERAL, KEYWORDS, Token, TokenType, lookup_ident

__all__ = [
    "TokenType",
    "Token",
    "KEYWORDS",
    "EOF_LITERAL",
    "lookup_ident",
    "Lexer",
    "Identifier",
    "ExprNode",
    "AssignExpr",
    "ValueExpr",
    "ReturnExpr",
    "IdentifierExpr",
    "Program",
    "Parser",
    "parse",
    "ParseError",
]
