"""
mylang expression language.

Tokenizer, parser, serializer and evaluator for the expression pipeline.

Usage:
    from mylang.core.expression_lang import parse_expr, evaluate

    tree = parse_expr("1 + 2 * 3")
    result = evaluate(tree)
    # result.unwrap() == 7
"""

from mylang.core.expression_lang.evaluator import evaluate
from mylang.core.expression_lang.parser import parse_expr, parse_tokens
from mylang.core.expression_lang.pipeline import PipelineResult, run_pipeline
from mylang.core.expression_lang.serializer import serialize
from mylang.core.expression_lang.tokenizer import Token, tokenize

__all__ = [
    "PipelineResult",
    "Token",
    "evaluate",
    "parse_expr",
    "parse_tokens",
    "run_pipeline",
    "serialize",
    "tokenize",
]
