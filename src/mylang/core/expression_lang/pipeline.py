"""
Tokenize → parse → evaluate, reported as a single result object.

Each stage raises internally; ``run_pipeline`` catches the failure of a
stage once and returns early, so later stages never run and nothing is
partially reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mylang.core.errors import ErrorKind, MyLangError
from mylang.core.expression_lang.evaluator import evaluate
from mylang.core.expression_lang.parser import parse_tokens
from mylang.core.expression_lang.tokenizer import Token, source_lines, tokenize
from mylang.core.ir.nodes import Node
from mylang.core.ir.values import Environment, RuntimeValue

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of one pipeline run.

    ``tokens``, ``tree`` and ``value`` are filled in as stages succeed;
    ``error`` is set by the first stage that fails.
    """

    source: str
    tokens: list[Token] = field(default_factory=list)
    tree: Node | None = None
    value: RuntimeValue | None = None
    error: MyLangError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None


def run_pipeline(
    source: str,
    env: Environment | None = None,
    source_name: str = "<input>",
) -> PipelineResult:
    """Run all stages over ``source``.

    Args:
        source: Program text, one or more lines.
        env: Environment to evaluate against; fresh and empty when omitted.
        source_name: Name used in error locations.

    Returns:
        PipelineResult describing how far the run got.
    """
    result = PipelineResult(source=source)

    try:
        result.tokens = tokenize(source, source_name)
    except MyLangError as e:
        logger.debug("Tokenizing failed: %s", e.message)
        result.error = e
        return result

    try:
        result.tree = parse_tokens(result.tokens, source_lines(source))
    except MyLangError as e:
        logger.debug("Parsing failed: %s", e.message)
        result.error = e
        return result

    try:
        result.value = evaluate(result.tree, Environment() if env is None else env)
    except MyLangError as e:
        logger.debug("Evaluation failed: %s", e.message)
        result.error = e

    return result
