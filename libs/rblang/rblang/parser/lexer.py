"""Lexer (tokenizer) for rblang source code."""

from __future__ import annotations

from string import ascii_letters, digits
from typing import Iterator

from rblang.diagnostics.location import SourceLocation
from rblang.parser.tokens import EOF_LITERAL, Token, TokenType, lookup_ident

_IDENT_START = frozenset(ascii_letters + "_")
_IDENT_PART = frozenset(ascii_letters + "_!?")
_DIGITS = frozenset(digits)


class Lexer:
    """Turn rblang source into a lazy stream of tokens.

    The lexer is an iterator: every ``next()`` call scans exactly one token.
    Spaces and tabs separate tokens, newlines are tokens of their own.
    Characters that start no token come out as ILLEGAL tokens so the parser
    can report them.  The stream ends with a single EOF token, after which
    the iterator is exhausted.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenType] = {
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "*": TokenType.ASTERISK,
        "/": TokenType.SLASH,
        "<": TokenType.LT,
        ">": TokenType.GT,
        ";": TokenType.SEMICOLON,
        ",": TokenType.COMMA,
        "(": TokenType.LPAREN,
        ")": TokenType.RPAREN,
        "{": TokenType.LBRACE,
        "}": TokenType.RBRACE,
    }

    # Characters that become a two-character token when followed by "=".
    _WITH_EQUALS: dict[str, tuple[TokenType, TokenType]] = {
        "=": (TokenType.ASSIGN, TokenType.EQ),
        "!": (TokenType.BANG, TokenType.NOTEQ),
    }

    def __init__(self, source: str, filename: str = "<string>") -> None:
        self._source = source
        self._filename = filename
        self._position = 0
        self._read_position = 0
        self._ch = EOF_LITERAL
        self._line = 1
        self._col = 0
        self._finished = False
        self._read_char()

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._position >= len(self._source)

    def _read_char(self) -> None:
        """Move to the next character, updating line/col."""
        if self._ch == "\n" or (self._ch == "\r" and self._peek_char() != "\n"):
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        if self._read_position >= len(self._source):
            self._ch = EOF_LITERAL
        else:
            self._ch = self._source[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        """Return the character after the current one, or NUL at the end."""
        if self._read_position >= len(self._source):
            return EOF_LITERAL
        return self._source[self._read_position]

    def _loc(self) -> SourceLocation:
        return SourceLocation(file=self._filename, line=self._line, column=self._col)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self._ch in (" ", "\t"):
            self._read_char()

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _read_run(self, allowed: frozenset[str]) -> str:
        """Consume characters while they belong to *allowed*."""
        begin = self._position
        while not self._at_end() and self._ch in allowed:
            self._read_char()
        return self._source[begin : self._position]

    def _scan_newline(self, loc: SourceLocation) -> Token:
        if self._ch == "\r" and self._peek_char() == "\n":
            self._read_char()
            self._read_char()
            return Token(TokenType.NEWLINE, "\r\n", loc)
        ch = self._ch
        self._read_char()
        return Token(TokenType.NEWLINE, ch, loc)

    def _scan_token(self) -> Token:
        """Scan one token starting at the current character."""
        self._skip_whitespace()
        loc = self._loc()

        if self._at_end():
            self._finished = True
            return Token(TokenType.EOF, EOF_LITERAL, loc)

        ch = self._ch

        if ch in ("\n", "\r"):
            return self._scan_newline(loc)

        # --- "=" / "==" and "!" / "!=" ---
        if ch in self._WITH_EQUALS:
            single, double = self._WITH_EQUALS[ch]
            if self._peek_char() == "=":
                self._read_char()
                self._read_char()
                return Token(double, ch + "=", loc)
            self._read_char()
            return Token(single, ch, loc)

        if ch in self._SINGLE_CHAR:
            self._read_char()
            return Token(self._SINGLE_CHAR[ch], ch, loc)

        # --- Identifier / keyword ---
        if ch in _IDENT_START:
            literal = self._read_run(_IDENT_PART)
            return Token(lookup_ident(literal), literal, loc)

        # --- Integer literal ---
        if ch in _DIGITS:
            return Token(TokenType.INT, self._read_run(_DIGITS), loc)

        self._read_char()
        return Token(TokenType.ILLEGAL, ch, loc)

    # ------------------------------------------------------------------
    # Iterator protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        return self._scan_token()

    def tokenize(self) -> list[Token]:
        """Scan the rest of the source. Returns a list ending with the EOF token."""
        return list(self)
