"""
Token kinds and operators for mylang.

The operator table is the only place lexemes are recognised. Recognition
is purely string based: a lexeme is an operator exactly when it is a key
of ``OPERATOR_TABLE``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class TokenKind(StrEnum):
    """Token classes. Values are the names shown in a token dump."""

    INVALID = "inv"  # end of input
    NUM = "num"
    ID = "id_"
    OP = "op_"
    UNKNOWN = "unk"


class Operator(StrEnum):
    """Closed set of operators known to the tokenizer."""

    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIV = "/"
    PAREN_L = "("
    PAREN_R = ")"
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    INVALID = "invalid"


OPERATOR_TABLE: dict[str, Operator] = {
    op.value: op for op in Operator if op is not Operator.INVALID
}

ARITHMETIC_OPS = frozenset({Operator.PLUS, Operator.MINUS, Operator.TIMES, Operator.DIV})
RELATIONAL_OPS = frozenset({Operator.LT, Operator.GT, Operator.LE, Operator.GE})


def check_operator_table(table: Mapping[str, Operator]) -> None:
    """Verify that every two-character operator starts with a one-character one.

    The tokenizer only looks for a two-character operator at positions whose
    single character is already an operator, so a table breaking this rule
    would contain operators that can never be produced.

    Raises:
        ValueError: If a lexeme is empty, longer than two characters, or a
            two-character lexeme has no one-character prefix operator.
    """
    for lexeme in table:
        if not 1 <= len(lexeme) <= 2:
            raise ValueError(f"Operator lexeme must be 1 or 2 characters: {lexeme!r}")
        if len(lexeme) == 2 and lexeme[0] not in table:
            raise ValueError(
                f"Two-character operator {lexeme!r} requires {lexeme[0]!r} to be an operator"
            )


check_operator_table(OPERATOR_TABLE)


def operator_for(lexeme: str) -> Operator:
    """Return the operator spelled by ``lexeme``, or ``Operator.INVALID``."""
    return OPERATOR_TABLE.get(lexeme, Operator.INVALID)


def is_operator(lexeme: str) -> bool:
    return lexeme in OPERATOR_TABLE
