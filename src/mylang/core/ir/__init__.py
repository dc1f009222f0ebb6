"""
Intermediate representation for mylang: operators, syntax tree, runtime values.
"""

from mylang.core.ir.nodes import (
    BinaryChain,
    Binding,
    Call,
    ChainTerm,
    Grouping,
    Identifier,
    IntLiteral,
    Node,
    NodeList,
    Rule,
    assign,
    block,
    call,
    stmt,
)
from mylang.core.ir.operators import (
    OPERATOR_TABLE,
    Operator,
    TokenKind,
    check_operator_table,
    is_operator,
    operator_for,
)
from mylang.core.ir.values import Environment, RuntimeValue, StorageCell, ValueKind

__all__ = [
    "OPERATOR_TABLE",
    "BinaryChain",
    "Binding",
    "Call",
    "ChainTerm",
    "Environment",
    "Grouping",
    "Identifier",
    "IntLiteral",
    "Node",
    "NodeList",
    "Operator",
    "Rule",
    "RuntimeValue",
    "StorageCell",
    "TokenKind",
    "ValueKind",
    "assign",
    "block",
    "call",
    "check_operator_table",
    "is_operator",
    "operator_for",
    "stmt",
]
