"""
Forward-only, peekable read position over a token sequence.
"""

from __future__ import annotations

from collections.abc import Sequence

from mylang.core.expression_lang.tokenizer import END_TOKEN, Token


class TokenCursor:
    """Wraps a token sequence with one token of lookahead.

    ``peek`` never advances and returns ``END_TOKEN`` once the sequence is
    exhausted; ``advance`` is a no-op past the end.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return END_TOKEN

    def advance(self) -> None:
        if self._pos < len(self._tokens):
            self._pos += 1

    def __repr__(self) -> str:
        return f"TokenCursor(pos={self._pos}, len={len(self._tokens)})"
