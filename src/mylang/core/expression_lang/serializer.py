"""
Indented text rendering of syntax trees.

The output is for display only. It is not valid mylang source and
re-parsing it is not supported.
"""

from __future__ import annotations

from mylang.core.ir.nodes import (
    BinaryChain,
    Binding,
    Call,
    Grouping,
    Identifier,
    IntLiteral,
    Node,
    NodeList,
    Rule,
)

_LABELS: dict[Rule, str] = {
    Rule.PRIMARY: "Primary",
    Rule.MULTIPLICATIVE: "Multiplicative",
    Rule.ADDITIVE: "Additive",
    Rule.RELATIONAL: "Relational",
    Rule.STMT: "Stmt",
    Rule.BLOCK: "Block",
    Rule.ARGS: "ExprList",
}


def serialize(node: Node, level: int = 0, indent: int = 4) -> str:
    """Render ``node`` and its subtree, one node per line.

    Args:
        node: Root of the subtree to render.
        level: Indentation level of the root.
        indent: Spaces per indentation level.
    """
    lines: list[str] = []
    _render(node, level, indent, lines)
    return "\n".join(lines)


def _render(node: Node, level: int, indent: int, out: list[str]) -> None:
    pad = " " * (level * indent)
    match node:
        case IntLiteral(value=value):
            out.append(f"{pad}Int {value}")
        case Identifier(name=name):
            out.append(f"{pad}Id {name}")
        case Grouping(rule=rule, child=child):
            out.append(f"{pad}{_LABELS[rule]}")
            _render(child, level + 1, indent, out)
        case BinaryChain(rule=rule, terms=terms):
            out.append(f"{pad}{_LABELS[rule]}")
            child_pad = " " * ((level + 1) * indent)
            for term in terms:
                if term.op is not None:
                    out.append(f"{child_pad}op {term.op.value}")
                _render(term.operand, level + 1, indent, out)
        case NodeList(rule=rule, items=items):
            out.append(f"{pad}{_LABELS[rule]} [{len(items)}]")
            for item in items:
                _render(item, level + 1, indent, out)
        case Call(callee=callee, args=args):
            out.append(f"{pad}Call {callee.name}")
            _render(args, level + 1, indent, out)
        case Binding(target=target, value=value):
            out.append(f"{pad}Binding")
            _render(target, level + 1, indent, out)
            out.append(f"{' ' * ((level + 1) * indent)}op =")
            _render(value, level + 1, indent, out)
        case _:
            raise TypeError(f"Unknown node type: {type(node).__name__}")
