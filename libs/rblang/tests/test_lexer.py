"""Tests for the rblang lexer."""

from __future__ import annotations

import pytest

from rblang.parser.lexer import Lexer
from rblang.parser.tokens import EOF_LITERAL, TokenType

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def lex(source: str) -> list[tuple[TokenType, str]]:
    """Tokenize *source* and return ``(kind, literal)`` pairs (excluding EOF)."""
    tokens = Lexer(source, "<test>").tokenize()
    assert tokens[-1].kind == TokenType.EOF
    # Drop trailing EOF for easier assertions
    return [(t.kind, t.literal) for t in tokens[:-1]]


def kinds(source: str) -> list[TokenType]:
    return [kind for kind, _ in lex(source)]


# ---------------------------------------------------------------------------
# Stream termination
# ---------------------------------------------------------------------------


class TestEndOfInput:
    def test_empty_source_yields_only_eof(self) -> None:
        tokens = list(Lexer(""))
        assert len(tokens) == 1
        assert tokens[0].kind == TokenType.EOF
        assert tokens[0].literal == EOF_LITERAL == "\0"

    def test_exhausted_after_eof(self) -> None:
        lexer = Lexer("x")
        assert next(lexer).kind == TokenType.IDENT
        assert next(lexer).kind == TokenType.EOF
        assert next(lexer, None) is None
        # Asking again is still not an error.
        assert next(lexer, None) is None
        with pytest.raises(StopIteration):
            next(lexer)

    def test_tokenize_after_exhaustion_is_empty(self) -> None:
        lexer = Lexer("x")
        lexer.tokenize()
        assert lexer.tokenize() == []

    @pytest.mark.parametrize(
        "source",
        ["", " ", "\n", "foo", "x = 5;", "@@@", "a\r\nb", "\0", "return 993322\n\n"],
    )
    def test_exactly_one_trailing_eof(self, source: str) -> None:
        tokens = Lexer(source).tokenize()
        assert tokens[-1].kind == TokenType.EOF
        assert [t.kind for t in tokens].count(TokenType.EOF) == 1

    def test_is_lazy(self) -> None:
        lexer = Lexer("a b c")
        assert next(lexer).literal == "a"
        assert [t.literal for t in lexer] == ["b", "c", EOF_LITERAL]


# ---------------------------------------------------------------------------
# Operators, delimiters and groupings
# ---------------------------------------------------------------------------


class TestSingleCharacterTokens:
    @pytest.mark.parametrize(
        "char,kind",
        [
            ("=", TokenType.ASSIGN),
            ("+", TokenType.PLUS),
            ("-", TokenType.MINUS),
            ("!", TokenType.BANG),
            ("/", TokenType.SLASH),
            ("*", TokenType.ASTERISK),
            ("<", TokenType.LT),
            (">", TokenType.GT),
            (";", TokenType.SEMICOLON),
            (",", TokenType.COMMA),
            ("(", TokenType.LPAREN),
            (")", TokenType.RPAREN),
            ("{", TokenType.LBRACE),
            ("}", TokenType.RBRACE),
            ("\n", TokenType.NEWLINE),
            ("\r", TokenType.NEWLINE),
        ],
    )
    def test_single_char(self, char: str, kind: TokenType) -> None:
        assert lex(char) == [(kind, char)]

    def test_single_line(self) -> None:
        assert kinds("=+(){},;") == [
            TokenType.ASSIGN,
            TokenType.PLUS,
            TokenType.LPAREN,
            TokenType.RPAREN,
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.COMMA,
            TokenType.SEMICOLON,
        ]


class TestTwoCharacterOperators:
    def test_eq(self) -> None:
        assert lex("==") == [(TokenType.EQ, "==")]

    def test_noteq(self) -> None:
        assert lex("!=") == [(TokenType.NOTEQ, "!=")]

    def test_triple_equals(self) -> None:
        assert lex("===") == [(TokenType.EQ, "=="), (TokenType.ASSIGN, "=")]

    def test_spaced_equals_are_two_assigns(self) -> None:
        assert lex("= =") == [(TokenType.ASSIGN, "="), (TokenType.ASSIGN, "=")]

    def test_comparison_line(self) -> None:
        assert lex("10 == 10\n10 != 9") == [
            (TokenType.INT, "10"),
            (TokenType.EQ, "=="),
            (TokenType.INT, "10"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.INT, "10"),
            (TokenType.NOTEQ, "!="),
            (TokenType.INT, "9"),
        ]

    def test_bang_before_identifier(self) -> None:
        assert lex("!done") == [(TokenType.BANG, "!"), (TokenType.IDENT, "done")]


# ---------------------------------------------------------------------------
# Keywords and identifiers
# ---------------------------------------------------------------------------


class TestKeywords:
    @pytest.mark.parametrize(
        "word,kind",
        [
            ("def", TokenType.DEF),
            ("end", TokenType.END),
            ("do", TokenType.DO),
            ("true", TokenType.TRUE),
            ("false", TokenType.FALSE),
            ("if", TokenType.IF),
            ("else", TokenType.ELSE),
            ("return", TokenType.RETURN),
        ],
    )
    def test_keyword(self, word: str, kind: TokenType) -> None:
        assert lex(word) == [(kind, word)]

    def test_identifier_not_keyword(self) -> None:
        # "ending" is NOT a keyword, just an identifier
        assert lex("ending") == [(TokenType.IDENT, "ending")]

    def test_keywords_are_case_sensitive(self) -> None:
        assert lex("Return") == [(TokenType.IDENT, "Return")]


class TestIdentifiers:
    def test_simple_ident(self) -> None:
        assert lex("foo") == [(TokenType.IDENT, "foo")]

    def test_underscore_prefix(self) -> None:
        assert lex("_bar") == [(TokenType.IDENT, "_bar")]

    def test_predicate_suffix(self) -> None:
        assert lex("empty?") == [(TokenType.IDENT, "empty?")]

    def test_bang_suffix(self) -> None:
        assert lex("save!") == [(TokenType.IDENT, "save!")]

    def test_digits_end_identifier(self) -> None:
        assert lex("x1") == [(TokenType.IDENT, "x"), (TokenType.INT, "1")]

    def test_bang_suffix_takes_precedence_over_noteq(self) -> None:
        # "!" continues the name, so only the spaced form is a comparison.
        assert lex("x!=y") == [
            (TokenType.IDENT, "x!"),
            (TokenType.ASSIGN, "="),
            (TokenType.IDENT, "y"),
        ]
        assert kinds("x != y") == [TokenType.IDENT, TokenType.NOTEQ, TokenType.IDENT]

    def test_question_mark_cannot_start_identifier(self) -> None:
        assert lex("?x") == [(TokenType.ILLEGAL, "?"), (TokenType.IDENT, "x")]


# ---------------------------------------------------------------------------
# Integer literals
# ---------------------------------------------------------------------------


class TestIntLiterals:
    def test_zero(self) -> None:
        assert lex("0") == [(TokenType.INT, "0")]

    def test_large(self) -> None:
        assert lex("838383") == [(TokenType.INT, "838383")]

    def test_minus_is_separate(self) -> None:
        assert lex("-5") == [(TokenType.MINUS, "-"), (TokenType.INT, "5")]

    def test_no_floats(self) -> None:
        assert lex("1.5") == [
            (TokenType.INT, "1"),
            (TokenType.ILLEGAL, "."),
            (TokenType.INT, "5"),
        ]


# ---------------------------------------------------------------------------
# Whitespace, newlines and illegal characters
# ---------------------------------------------------------------------------


class TestWhitespaceAndNewlines:
    def test_whitespace_skipped(self) -> None:
        assert lex("  foo \t bar  ") == [(TokenType.IDENT, "foo"), (TokenType.IDENT, "bar")]

    def test_newline_is_a_token(self) -> None:
        assert kinds("a\nb") == [TokenType.IDENT, TokenType.NEWLINE, TokenType.IDENT]

    def test_crlf_is_one_newline(self) -> None:
        assert lex("a\r\nb") == [
            (TokenType.IDENT, "a"),
            (TokenType.NEWLINE, "\r\n"),
            (TokenType.IDENT, "b"),
        ]

    def test_blank_lines_are_not_collapsed(self) -> None:
        assert kinds("\n\n") == [TokenType.NEWLINE, TokenType.NEWLINE]


class TestIllegal:
    @pytest.mark.parametrize("char", ["@", "$", "#", "[", ".", "é", "\0"])
    def test_illegal_char(self, char: str) -> None:
        assert lex(char) == [(TokenType.ILLEGAL, char)]

    def test_illegal_does_not_stop_scanning(self) -> None:
        assert lex("a @ b") == [
            (TokenType.IDENT, "a"),
            (TokenType.ILLEGAL, "@"),
            (TokenType.IDENT, "b"),
        ]


# ---------------------------------------------------------------------------
# Multi-line programs and locations
# ---------------------------------------------------------------------------


class TestPrograms:
    def test_multiple_lines(self) -> None:
        source = "five = 5\nten = 10\ndef add(x, y)\n  x + y;\nend\nresult = add five, ten"
        assert lex(source) == [
            (TokenType.IDENT, "five"),
            (TokenType.ASSIGN, "="),
            (TokenType.INT, "5"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENT, "ten"),
            (TokenType.ASSIGN, "="),
            (TokenType.INT, "10"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.DEF, "def"),
            (TokenType.IDENT, "add"),
            (TokenType.LPAREN, "("),
            (TokenType.IDENT, "x"),
            (TokenType.COMMA, ","),
            (TokenType.IDENT, "y"),
            (TokenType.RPAREN, ")"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENT, "x"),
            (TokenType.PLUS, "+"),
            (TokenType.IDENT, "y"),
            (TokenType.SEMICOLON, ";"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.END, "end"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENT, "result"),
            (TokenType.ASSIGN, "="),
            (TokenType.IDENT, "add"),
            (TokenType.IDENT, "five"),
            (TokenType.COMMA, ","),
            (TokenType.IDENT, "ten"),
        ]

    def test_literals_are_exact_source_text(self) -> None:
        source = "if x != 10 do\n  save! = empty?\nend"
        tokens = Lexer(source).tokenize()[:-1]
        for tok in tokens:
            assert tok.literal in source

    def test_locations(self) -> None:
        tokens = Lexer("x = 5\n  y", "prog.rb").tokenize()
        locs = [(t.literal, t.location.line, t.location.column) for t in tokens]
        assert locs == [
            ("x", 1, 1),
            ("=", 1, 3),
            ("5", 1, 5),
            ("\n", 1, 6),
            ("y", 2, 3),
            (EOF_LITERAL, 2, 4),
        ]
        assert tokens[0].location.file == "prog.rb"

    def test_crlf_counts_one_line(self) -> None:
        tokens = Lexer("a\r\nb\rc").tokenize()
        lines = {t.literal: t.location.line for t in tokens if t.kind == TokenType.IDENT}
        assert lines == {"a": 1, "b": 2, "c": 3}
