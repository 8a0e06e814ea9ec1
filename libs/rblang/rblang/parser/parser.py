"""Recursive-descent parser for rblang source code.

Handles:
- ``name = expr``   assignments
- ``return expr``   return expressions
- ``42``            integer literals (rest of the statement is skipped)
- ``name``          bare identifier references before ``;``, a newline or EOF

Statements are separated by ``;`` or newlines.  The parser looks at most
two tokens ahead (``current`` and ``peek``) and pulls tokens from the
lexer one at a time.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from rblang.diagnostics.collector import DiagnosticCollector
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
from rblang.parser.program import Program
from rblang.parser.tokens import EOF_LITERAL, Token, TokenType

# Tokens that end a statement.
_TERMINATORS: frozenset[TokenType] = frozenset(
    {TokenType.SEMICOLON, TokenType.NEWLINE, TokenType.EOF}
)

# Token kinds that can start an expression, in the order they are reported.
_EXPRESSION_STARTS: tuple[TokenType, ...] = (
    TokenType.IDENT,
    TokenType.INT,
    TokenType.RETURN,
)


class Parser:
    """Recursive-descent parser for rblang programs."""

    def __init__(
        self,
        lexer: Lexer,
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self._lexer = lexer
        self._diag = diagnostics if diagnostics is not None else DiagnosticCollector()
        # [current, peek]; peek is None once the lexer is exhausted.
        self._lookahead: deque[Token | None] = deque(maxlen=2)
        first = next(self._lexer, None)
        if first is None:
            first = Token(TokenType.EOF, EOF_LITERAL)
        self._lookahead.append(first)
        self._lookahead.append(next(self._lexer, None))

    @property
    def diagnostics(self) -> DiagnosticCollector:
        return self._diag

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def current(self) -> Token:
        """Return the token being parsed."""
        token = self._lookahead[0]
        assert token is not None
        return token

    def peek(self) -> Token | None:
        """Return the token after ``current``, or None at the end of the stream."""
        return self._lookahead[1]

    def advance(self) -> Token | None:
        """Shift ``peek`` into ``current`` and pull the next token from the lexer.

        Returns the new current token, or None (leaving the parser unchanged)
        when there is nothing left to shift in.
        """
        token = self._lookahead[1]
        if token is None:
            return None
        self._lookahead.append(next(self._lexer, None))
        return token

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.advance()
        if token is None:
            raise StopIteration
        return token

    def _current_is(self, kind: TokenType) -> bool:
        return self.current().kind == kind

    def _peek_is(self, *kinds: TokenType) -> bool:
        token = self.peek()
        return token is not None and token.kind in kinds

    def _peek_description(self) -> str:
        token = self.peek()
        return token.kind.name if token is not None else TokenType.EOF.name

    def expect_peek(self, kind: TokenType) -> bool:
        """Advance if the next token is *kind*, otherwise record an error."""
        if self._peek_is(kind):
            self.advance()
            return True
        self._peek_error(kind.name)
        return False

    def _peek_error(self, expected: str) -> None:
        token = self.peek()
        location = token.location if token is not None else self.current().location
        literal = token.literal if token is not None and token.kind != TokenType.EOF else None
        self._diag.error(
            f"expected next token to be {expected}, got {self._peek_description()} instead",
            location,
            literal,
        )

    def _require_peek(self, kind: TokenType) -> None:
        """Like ``expect_peek`` but aborts the production on mismatch."""
        if not self.expect_peek(kind):
            raise ParseError(f"expected {kind.name}", self.current().location)

    def _require_expression_next(self) -> None:
        """Abort the production unless the next token can start an expression."""
        if self._peek_is(*_EXPRESSION_STARTS):
            return
        self._peek_error("one of " + ", ".join(k.name for k in _EXPRESSION_STARTS))
        raise ParseError("expected expression", self.current().location)

    # ------------------------------------------------------------------
    # Top-level program parsing
    # ------------------------------------------------------------------

    def parse_program(self) -> tuple[Program, list[str]]:
        """Parse every top-level expression in the stream.

        Returns the program and the diagnostic messages recorded so far.
        A failed production never stops the loop; it resumes at the next
        token.
        """
        program = Program()
        while not self._current_is(TokenType.EOF):
            try:
                expr = self.parse_expression()
            except ParseError:
                expr = None
            if expr is not None:
                program.append(expr)
            if self.advance() is None:
                break
        return program, self._diag.messages()

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def parse_expression(self) -> ExprNode | None:
        """Dispatch on the current token.

        Returns None for tokens that start no expression.  Separators are
        skipped quietly; any other skipped token is reported.
        """
        if self._at_prefix():
            return self._parse_prefixed([])
        return self._parse_operand()

    def _at_prefix(self) -> bool:
        if self._current_is(TokenType.RETURN):
            return True
        return self._current_is(TokenType.IDENT) and self._peek_is(TokenType.ASSIGN)

    def _parse_operand(self) -> ExprNode | None:
        tok = self.current()

        if tok.kind == TokenType.IDENT:
            if self.peek() is None or self._peek_is(*_TERMINATORS):
                return self.parse_identifier_expression()
            self._diag.warning(
                f"cannot parse expression starting with IDENT {tok.literal!r} "
                f"followed by {self._peek_description()}, skipping",
                tok.location,
                tok.literal,
            )
            return None

        if tok.kind == TokenType.INT:
            return self.parse_integer_literal()

        if tok.kind in _TERMINATORS:
            return None

        if tok.kind == TokenType.ILLEGAL:
            self._report_illegal(tok)
            return None

        self._diag.warning(
            f"no expression starts with {tok.kind.name} {tok.literal!r}, skipping",
            tok.location,
            tok.literal,
        )
        return None

    def _report_illegal(self, tok: Token) -> None:
        self._diag.error(f"illegal token {tok.literal!r}", tok.location, tok.literal)

    def _parse_prefixed(self, prefixes: list[tuple[Token, Identifier | None]]) -> ExprNode:
        """Parse a chain of ``name =`` / ``return`` prefixes and its operand.

        The chain is consumed in a loop and the nodes are built inside-out,
        so nesting depth is not bounded by the Python call stack.
        """
        while self._at_prefix():
            if self._current_is(TokenType.RETURN):
                prefixes.append(self._return_prefix())
            else:
                prefixes.append(self._assign_prefix())

        value = self._parse_operand()
        if value is None:
            tok, target = prefixes[-1]
            reason = "missing return value" if target is None else "missing right-hand side"
            raise ParseError(reason, tok.location)

        for tok, target in reversed(prefixes):
            if target is None:
                value = ReturnExpr(token=tok, value=value)
            else:
                value = AssignExpr(token=tok, target=target, value=value)
        return value

    def _assign_prefix(self) -> tuple[Token, Identifier]:
        name_tok = self.current()
        target = Identifier(token=name_tok, name=name_tok.literal)

        self._require_peek(TokenType.ASSIGN)
        assign_tok = self.current()

        self._require_expression_next()
        self.advance()  # move past '='
        return assign_tok, target

    def _return_prefix(self) -> tuple[Token, None]:
        return_tok = self.current()
        self._require_expression_next()
        self.advance()
        return return_tok, None

    def parse_assign_expression(self) -> ExprNode | None:
        """Parse ``name = expr``."""
        if not self._current_is(TokenType.IDENT):
            return None
        return self._parse_prefixed([self._assign_prefix()])

    def parse_integer_literal(self) -> ValueExpr:
        """Parse an integer literal and skip the rest of its statement."""
        tok = self.current()
        while self.current().kind not in _TERMINATORS:
            skipped = self.advance()
            if skipped is None:
                break
            if skipped.kind == TokenType.ILLEGAL:
                self._report_illegal(skipped)
        return ValueExpr(token=tok)

    def parse_return_expression(self) -> ExprNode:
        """Parse ``return expr``."""
        return self._parse_prefixed([self._return_prefix()])

    def parse_identifier_expression(self) -> IdentifierExpr:
        """Parse a bare identifier reference."""
        tok = self.current()
        return IdentifierExpr(token=tok, identifier=Identifier(token=tok, name=tok.literal))


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(source: str, filename: str = "<string>") -> tuple[Program, DiagnosticCollector]:
    """Parse rblang source code.

    Returns:
        A ``(program, diagnostics)`` tuple.
    """
    diag = DiagnosticCollector()
    parser = Parser(Lexer(source, filename), diag)
    program, _ = parser.parse_program()
    return program, diag
