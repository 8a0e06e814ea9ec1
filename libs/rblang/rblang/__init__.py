"""rblang: lexer and parser front end for a small Ruby-flavoured language."""

from rblang.parser import Lexer, Parser, Program, Token, TokenType, parse

__version__ = "0.1.0"

__all__ = ["Lexer", "Parser", "Program", "Token", "TokenType", "parse", "__version__"]
