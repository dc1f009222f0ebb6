"""
Syntax tree types for mylang.

The tree is a closed union of node models, discriminated by ``kind``.
Serialization and evaluation dispatch over this union by pattern matching
(see ``expression_lang.serializer`` and ``expression_lang.evaluator``).

Node kinds:
- IntLiteral: an integer constant
- Identifier: a variable name
- Grouping: single-child wrapper (parenthesised expressions, statements)
- BinaryChain: left-associative run of same-tier operator/operand pairs
- NodeList: ordered children without operators (argument lists, blocks)
- Call: callee identifier plus argument list
- Binding: stores a value into a variable's storage cell

Each node exclusively owns its children; trees never share subtrees.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from mylang.core.ir.operators import Operator

# ---------------------------------------------------------------------------
# Grammar rule labels
# ---------------------------------------------------------------------------


class Rule(StrEnum):
    """Grammar rule that produced a wrapper node."""

    PRIMARY = "primary"
    MULTIPLICATIVE = "multiplicative"
    ADDITIVE = "additive"
    RELATIONAL = "relational"
    STMT = "stmt"
    BLOCK = "block"
    ARGS = "args"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class IntLiteral(BaseModel):
    """An integer literal."""

    kind: Literal["int"] = "int"
    value: int = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)


class Identifier(BaseModel):
    """A variable name. Evaluates to a reference to its storage cell."""

    kind: Literal["id"] = "id"
    name: str = Field(description="Variable name")

    model_config = ConfigDict(frozen=True)


class Grouping(BaseModel):
    """Single-child wrapper; evaluates to its child's value unchanged."""

    kind: Literal["group"] = "group"
    rule: Rule = Rule.PRIMARY
    child: Node

    model_config = ConfigDict(frozen=True)


class ChainTerm(BaseModel):
    """One (operator, operand) pair of a binary chain.

    ``op`` is None on the first term unless the rule allows a leading sign.
    """

    op: Operator | None = None
    operand: Node

    model_config = ConfigDict(frozen=True)


class BinaryChain(BaseModel):
    """
    A run of same-precedence operators, folded left to right.

    Examples:
        - 1 + 2 - 3 → terms [(None, 1), (+, 2), (-, 3)]
        - -4 + 1    → terms [(-, 4), (+, 1)]
    """

    kind: Literal["chain"] = "chain"
    rule: Rule
    terms: list[ChainTerm] = Field(min_length=1)

    model_config = ConfigDict(frozen=True)


class NodeList(BaseModel):
    """Ordered children evaluated for effect. Has no value of its own."""

    kind: Literal["list"] = "list"
    rule: Rule = Rule.BLOCK
    items: list[Node] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Call(BaseModel):
    """Function call: callee(args...). Not produced by the grammar yet."""

    kind: Literal["call"] = "call"
    callee: Identifier
    args: NodeList = Field(default_factory=lambda: NodeList(rule=Rule.ARGS))

    model_config = ConfigDict(frozen=True)


class Binding(BaseModel):
    """Assignment: target = value."""

    kind: Literal["bind"] = "bind"
    target: Node
    op: Operator = Operator.INVALID
    value: Node

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Node = Annotated[
    IntLiteral | Identifier | Grouping | BinaryChain | NodeList | Call | Binding,
    Field(discriminator="kind"),
]

# Rebuild models for recursive forward references
Grouping.model_rebuild()
ChainTerm.model_rebuild()
BinaryChain.model_rebuild()
NodeList.model_rebuild()
Call.model_rebuild()
Binding.model_rebuild()


# ---------------------------------------------------------------------------
# Builders for the statement scaffolding
# ---------------------------------------------------------------------------


def stmt(node: Node) -> Grouping:
    return Grouping(rule=Rule.STMT, child=node)


def block(*nodes: Node) -> NodeList:
    return NodeList(rule=Rule.BLOCK, items=list(nodes))


def call(name: str, *args: Node) -> Call:
    return Call(callee=Identifier(name=name), args=NodeList(rule=Rule.ARGS, items=list(args)))


def assign(name: str, value: Node) -> Binding:
    return Binding(target=Identifier(name=name), value=value)
