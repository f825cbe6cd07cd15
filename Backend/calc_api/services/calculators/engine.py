"""Calculator execution pipeline."""
from __future__ import annotations

import logging

from ...schemas.calc import EvaluationResult
from .converter import to_postfix
from .errors import EvaluationError
from .evaluator import evaluate
from .tokenizer import tokenize
from .tokens import render

logger = logging.getLogger(__name__)


class CalculatorEngine:
    """Runs tokenizer, converter and evaluator over one expression.

    The engine holds no per-expression state, so a single instance is shared
    by every request.
    """

    def evaluate(self, expression: str) -> float:
        tokens = tokenize(expression)
        logger.debug("Tokens for %r: %s", expression, render(tokens))
        postfix = to_postfix(tokens)
        logger.debug("Postfix for %r: %s", expression, render(postfix))
        value = evaluate(postfix)
        logger.debug("Value of %r: %s", expression, value)
        return value

    def run(self, expression: str) -> EvaluationResult:
        try:
            value = self.evaluate(expression)
        except EvaluationError as exc:
            logger.info("Rejected expression %r: %s (%s)", expression, exc.kind.value, exc.reason)
            return EvaluationResult(success=False, error=exc.kind, reason=exc.reason)
        return EvaluationResult(success=True, value=value)


def evaluate_expression(expression: str) -> EvaluationResult:
    """Evaluate ``expression`` and report the outcome as a result object."""
    return CalculatorEngine().run(expression)
