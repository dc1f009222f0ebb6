"""
mylang - a minimal expression language.

Turns raw text into a token stream, parses the stream into a typed syntax
tree by recursive descent, and evaluates the tree to a runtime value.

Usage:
    from mylang import parse_expr, evaluate

    tree = parse_expr("(1 + 2) * 3")
    evaluate(tree).unwrap()
    # 9
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    DivisionByZeroError,
    InvalidTokenError,
    LangSyntaxError,
    MyLangError,
    ValueTypeError,
)
from .core.expression_lang import evaluate, parse_expr, run_pipeline, serialize, tokenize

__version__ = get_version()

__all__ = [
    "__version__",
    "DivisionByZeroError",
    "InvalidTokenError",
    "LangSyntaxError",
    "MyLangError",
    "ValueTypeError",
    "evaluate",
    "parse_expr",
    "run_pipeline",
    "serialize",
    "tokenize",
]
