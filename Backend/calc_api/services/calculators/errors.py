"""Classified failures raised by the expression pipeline."""
from __future__ import annotations

from ...schemas.calc import EvaluationErrorKind


class EvaluationError(Exception):
    """Base class for every deterministic input problem."""

    kind: EvaluationErrorKind

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class MalformedInputError(EvaluationError):
    """Input holds characters outside the supported alphabet."""

    kind = EvaluationErrorKind.MALFORMED_INPUT


class MismatchedParenthesesError(EvaluationError):
    kind = EvaluationErrorKind.MISMATCHED_PARENTHESES


class MalformedExpressionError(EvaluationError):
    """Operand stack underflow or a wrong number of final values."""

    kind = EvaluationErrorKind.MALFORMED_EXPRESSION


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    kind = EvaluationErrorKind.DIVISION_BY_ZERO


class InvalidOperatorError(EvaluationError):
    kind = EvaluationErrorKind.INVALID_OPERATOR


class NumericOverflowError(EvaluationError):
    """An intermediate or final value is not a finite float."""

    kind = EvaluationErrorKind.NUMERIC_OVERFLOW
