"""
Tree-walking evaluator for the mylang expression language.

Evaluation is a single depth-first, left-to-right, post-order walk: each
node evaluates its children in declared order before combining their
values. Only the closed set of node types in ``mylang.core.ir.nodes`` is
handled.
"""

from __future__ import annotations

import logging

from mylang.core.errors import DivisionByZeroError, UnresolvedCallError, ValueTypeError
from mylang.core.ir.nodes import (
    BinaryChain,
    Binding,
    Call,
    Grouping,
    Identifier,
    IntLiteral,
    Node,
    NodeList,
)
from mylang.core.ir.operators import Operator
from mylang.core.ir.values import Environment, RuntimeValue

logger = logging.getLogger(__name__)

_LEADING_OPS = (None, Operator.PLUS, Operator.MINUS)


def evaluate(node: Node, env: Environment | None = None) -> RuntimeValue:
    """Evaluate a syntax tree against an environment.

    Args:
        node: Root of the tree.
        env: Variable storage; a fresh empty environment when omitted.

    Returns:
        The node's runtime value.

    Raises:
        EvaluationError: If evaluation fails (division by zero, undefined
            name, wrong kind of value, unresolved call).
    """
    if env is None:
        env = Environment()
    value = _interpret(node, env)
    logger.debug("Evaluated %s node to %s", node.kind, value.render())
    return value


def _interpret(node: Node, env: Environment) -> RuntimeValue:
    """Dispatch evaluation to the appropriate handler."""
    match node:
        case IntLiteral(value=value):
            return RuntimeValue.of_int(value)
        case Identifier(name=name):
            return RuntimeValue.of_ref(env.lookup(name))
        case Grouping(child=child):
            return _interpret(child, env)
        case BinaryChain():
            return _interpret_chain(node, env)
        case NodeList(items=items):
            for item in items:
                _interpret(item, env)
            return RuntimeValue.absent()
        case Call():
            return _interpret_call(node, env)
        case Binding():
            return _interpret_binding(node, env)
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _interpret_chain(node: BinaryChain, env: Environment) -> RuntimeValue:
    """Fold the chain's terms left to right."""
    first, *rest = node.terms
    if first.op not in _LEADING_OPS:
        raise ValueError(f"Not a leading operator: {first.op}")
    result = _interpret(first.operand, env).unwrap()
    if first.op is Operator.MINUS:
        result = -result

    for term in rest:
        operand = _interpret(term.operand, env).unwrap()
        result = apply_operator(term.op, result, operand)

    return RuntimeValue.of_int(result)


def apply_operator(op: Operator | None, left: int, right: int) -> int:
    """Combine two integers. Comparisons yield 1 for true and 0 for false.

    Raises:
        DivisionByZeroError: If ``op`` is '/' and ``right`` is zero.
    """
    if op is Operator.PLUS:
        return left + right
    if op is Operator.MINUS:
        return left - right
    if op is Operator.TIMES:
        return left * right
    if op is Operator.DIV:
        if right == 0:
            raise DivisionByZeroError()
        return _truncating_div(left, right)

    if op is Operator.LT:
        return int(left < right)
    if op is Operator.GT:
        return int(left > right)
    if op is Operator.LE:
        return int(left <= right)
    if op is Operator.GE:
        return int(left >= right)

    raise ValueError(f"Not a binary operator: {op}")


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _interpret_binding(node: Binding, env: Environment) -> RuntimeValue:
    """Store the right side into the target's cell; yields the stored value."""
    value = _interpret(node.value, env).deref()

    if isinstance(node.target, Identifier):
        # First successful store to a name declares it
        env.assign(node.target.name, value)
        return value

    target = _interpret(node.target, env)
    if not target.is_ref:
        raise ValueTypeError("left side of an assignment must be a variable")
    assert target.cell is not None
    target.cell.store(value)
    return value


def _interpret_call(node: Call, env: Environment) -> RuntimeValue:
    """Arguments are evaluated for effect; no call target can be resolved."""
    _interpret(node.args, env)
    raise UnresolvedCallError(node.callee.name)
