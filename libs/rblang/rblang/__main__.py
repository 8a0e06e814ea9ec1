"""CLI: python -m rblang [--parse] [FILE]

Without FILE, reads lines from stdin at a ``>> `` prompt and prints the
tokens of each line.  A token spelled ``exit`` ends the session.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from rblang.parser.lexer import Lexer
from rblang.parser.parser import parse
from rblang.parser.tokens import Token, TokenType

PROMPT = ">> "
EXIT_WORD = "exit"


def format_token(token: Token) -> str:
    if token.kind in (TokenType.NEWLINE, TokenType.EOF):
        return f"{token.kind.name}:{token.literal!r}"
    return f"{token.kind.name}:{token.literal}"


def print_tokens(source: str, filename: str, out: TextIO) -> bool:
    """Print every token of *source*. Returns True if ``exit`` was seen."""
    saw_exit = False
    for token in Lexer(source, filename):
        print(format_token(token), file=out)
        if token.literal == EXIT_WORD:
            saw_exit = True
    return saw_exit


def report_parse(source: str, filename: str, out: TextIO, err: TextIO) -> int:
    program, diag = parse(source, filename)
    if len(diag):
        print(diag.format_all(source), file=err)
    print(f"{len(program)} expression(s)", file=out)
    return 1 if diag.has_errors() else 0


def repl(args: argparse.Namespace, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    print("Welcome to rblang", file=out)
    status = 0
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        if args.parse:
            status = report_parse(line, "<stdin>", out, err)
            if line.strip() == EXIT_WORD:
                break
        elif print_tokens(line, "<stdin>", out):
            break
    print("Goodbye!", file=out)
    return status


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    ap = argparse.ArgumentParser(prog="rblang", description="Tokenize or parse rblang source.")
    ap.add_argument("file", nargs="?", type=Path, help="source file (interactive if omitted)")
    ap.add_argument(
        "--parse",
        action="store_true",
        help="parse instead of printing tokens; exit 1 on errors",
    )
    args = ap.parse_args(argv)

    out, err = sys.stdout, sys.stderr
    if args.file is None:
        return repl(args, stdin or sys.stdin, out, err)

    try:
        source = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"rblang: cannot read {args.file}: {exc}", file=err)
        return 2
    if args.parse:
        return report_parse(source, str(args.file), out, err)
    print_tokens(source, str(args.file), out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
