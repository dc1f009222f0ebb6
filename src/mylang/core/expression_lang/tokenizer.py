"""
Tokenizer for the mylang expression language.

Converts source text into a flat sequence of classified tokens. Each line
is scanned independently, left to right, so no token spans a line break.
Whitespace separates tokens and produces none itself.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

from mylang.core.errors import ErrorContext, InvalidTokenError
from mylang.core.ir.operators import Operator, TokenKind, is_operator, operator_for

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
# ASCII only: other Unicode spaces are ordinary characters
_WHITESPACE = frozenset(" \t\n\r\v\f")


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of source text."""

    kind: TokenKind
    value: str
    op: Operator = Operator.INVALID
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.kind} {self.value}"


# Returned by the cursor once the token sequence is exhausted.
END_TOKEN = Token(TokenKind.INVALID, "")


def tokenize(source: str, source_name: str = "<input>") -> list[Token]:
    """Tokenize every line of ``source`` and concatenate the results.

    Raises:
        InvalidTokenError: On the first malformed token. Lexing does not
            resynchronise; the rest of the input is abandoned.
    """
    tokens: list[Token] = []
    for line_no, line in enumerate(source_lines(source), start=1):
        tokens.extend(tokenize_line(line, line_no, source_name))
    logger.debug("Tokenized %s into %d tokens", source_name, len(tokens))
    return tokens


def source_lines(source: str) -> list[str]:
    """Split source text into lines. Only a line feed ends a line."""
    return source.split("\n")


def tokenize_line(line: str, line_no: int = 1, source_name: str = "<input>") -> list[Token]:
    """Tokenize a single line of source text."""
    tokens: list[Token] = []
    open_kind: TokenKind | None = None
    start = 0
    i = 0
    n = len(line)

    def close(end: int) -> None:
        assert open_kind is not None
        tokens.append(Token(open_kind, line[start:end], line=line_no, column=start + 1))

    def invalid(end: int) -> InvalidTokenError:
        context = ErrorContext(
            line=line_no, column=start + 1, snippet=line, source_name=source_name
        )
        return InvalidTokenError(line[start:end], context)

    while i < n:
        c = line[i]

        # Separators: whitespace and operators
        if c in _WHITESPACE or is_operator(c):
            if open_kind is not None:
                close(i)
                open_kind = None
            if c in _WHITESPACE:
                i += 1
                continue

            # Two-character operators only start where a one-character one does
            lexeme = c
            if i + 1 < n and is_operator(line[i : i + 2]):
                lexeme = line[i : i + 2]
            tokens.append(
                Token(TokenKind.OP, lexeme, operator_for(lexeme), line=line_no, column=i + 1)
            )
            i += len(lexeme)
            continue

        # Numbers and identifiers; an open unknown token absorbs word characters too
        if c in _WORD_CHARS:
            if open_kind is None:
                start = i
                open_kind = TokenKind.NUM if c in _DIGITS else TokenKind.ID
            elif open_kind is TokenKind.NUM and c not in _DIGITS:
                raise invalid(i + 1)
            i += 1
            continue

        # Anything else opens an unknown token, unless it abuts an open token
        if open_kind is not None:
            raise invalid(i + 1)
        start = i
        open_kind = TokenKind.UNKNOWN
        i += 1

    if open_kind is not None:
        close(n)

    return tokens
