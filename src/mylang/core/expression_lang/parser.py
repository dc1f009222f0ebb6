"""
Recursive descent parser for the mylang expression language.

Grammar (precedence low to high):
    expr           → relational
    relational     → additive (("<"|">"|"<="|">=") additive)*
    additive       → ("+"|"-")? multiplicative (("+"|"-") multiplicative)*
    multiplicative → primary (("*"|"/") primary)*
    primary        → INT | "(" expr ")"

Every level is greedy and left-associative. Each rule invocation that
matches builds exactly one node; a failed rule raises and returns nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from mylang.core.errors import LangSyntaxError, make_syntax_error
from mylang.core.expression_lang.cursor import TokenCursor
from mylang.core.expression_lang.tokenizer import Token, source_lines, tokenize
from mylang.core.ir.nodes import BinaryChain, ChainTerm, Grouping, IntLiteral, Node, Rule
from mylang.core.ir.operators import Operator, TokenKind

logger = logging.getLogger(__name__)

_MULTIPLICATIVE_OPS = (Operator.TIMES, Operator.DIV)
_ADDITIVE_OPS = (Operator.PLUS, Operator.MINUS)
_RELATIONAL_OPS = (Operator.LT, Operator.GT, Operator.LE, Operator.GE)


class _Parser:
    """Recursive descent parser over a token cursor."""

    def __init__(self, tokens: Sequence[Token], lines: Sequence[str] = ()) -> None:
        self.cursor = TokenCursor(tokens)
        self.lines = lines

    def error(self, message: str) -> LangSyntaxError:
        """Build a syntax error pointing at the current token, if any."""
        tok = self.cursor.peek()
        if tok.kind is TokenKind.INVALID:
            return make_syntax_error(f"{message}, got end of input")
        snippet = self.lines[tok.line - 1] if 0 < tok.line <= len(self.lines) else None
        return make_syntax_error(f"{message}, got {tok.value!r}", tok.line, tok.column, snippet)

    # -- Token helpers --

    def accept_int(self) -> IntLiteral | None:
        tok = self.cursor.peek()
        if tok.kind is TokenKind.NUM:
            self.cursor.advance()
            return IntLiteral(value=int(tok.value))
        return None

    def accept_op(self, op: Operator) -> bool:
        tok = self.cursor.peek()
        if tok.kind is TokenKind.OP and tok.op is op:
            self.cursor.advance()
            return True
        return False

    def expect_op(self, op: Operator) -> None:
        if not self.accept_op(op):
            raise self.error(f"Expected {op.value!r}")

    def accept_one_of(self, ops: Sequence[Operator]) -> Operator | None:
        for op in ops:
            if self.accept_op(op):
                return op
        return None

    # -- Grammar rules --

    def parse_expr(self) -> Node:
        """Top rule."""
        return self.parse_relational()

    def parse_primary(self) -> Node:
        """INT | '(' expr ')'"""
        literal = self.accept_int()
        if literal is not None:
            return Grouping(rule=Rule.PRIMARY, child=literal)

        if self.accept_op(Operator.PAREN_L):
            inner = self.parse_expr()
            self.expect_op(Operator.PAREN_R)
            return Grouping(rule=Rule.PRIMARY, child=inner)

        raise self.error("Expected an integer or '('")

    def parse_multiplicative(self) -> Node:
        """primary (('*' | '/') primary)*"""
        return self._parse_chain(Rule.MULTIPLICATIVE, self.parse_primary, _MULTIPLICATIVE_OPS)

    def parse_additive(self) -> Node:
        """('+' | '-')? multiplicative (('+' | '-') multiplicative)*"""
        return self._parse_chain(
            Rule.ADDITIVE, self.parse_multiplicative, _ADDITIVE_OPS, allow_leading_op=True
        )

    def parse_relational(self) -> Node:
        """additive (('<' | '>' | '<=' | '>=') additive)*"""
        return self._parse_chain(Rule.RELATIONAL, self.parse_additive, _RELATIONAL_OPS)

    def _parse_chain(
        self,
        rule: Rule,
        operand: Callable[[], Node],
        ops: Sequence[Operator],
        allow_leading_op: bool = False,
    ) -> BinaryChain:
        """Shared shape of every binary precedence level."""
        leading = self.accept_one_of(ops) if allow_leading_op else None
        terms = [ChainTerm(op=leading, operand=operand())]

        while (op := self.accept_one_of(ops)) is not None:
            terms.append(ChainTerm(op=op, operand=operand()))

        return BinaryChain(rule=rule, terms=terms)


def parse_tokens(tokens: Sequence[Token], lines: Sequence[str] = ()) -> Node:
    """Parse a complete top-level expression from ``tokens``.

    Args:
        tokens: Output of the tokenizer.
        lines: Optional source lines, used for error snippets.

    Returns:
        Root node of the syntax tree.

    Raises:
        LangSyntaxError: If the tokens do not form exactly one expression.
    """
    parser = _Parser(tokens, lines)
    tree = parser.parse_expr()

    # Ensure all tokens consumed
    if not parser.cursor.at_end:
        raise parser.error("Unexpected token after expression")

    logger.debug("Parsed %d tokens", len(tokens))
    return tree


def parse_expr(source: str) -> Node:
    """Parse an expression string into a syntax tree.

    Args:
        source: Expression text, one or more lines (e.g., "1 + 2 * 3")

    Returns:
        Parsed syntax tree.

    Raises:
        InvalidTokenError: If tokenization fails.
        LangSyntaxError: If the expression is invalid.
    """
    return parse_tokens(tokenize(source), source_lines(source))
