"""Arithmetic expression engine."""
from .converter import to_postfix
from .engine import CalculatorEngine, evaluate_expression
from .errors import (
    DivisionByZeroError,
    EvaluationError,
    EvaluationErrorKind,
    InvalidOperatorError,
    MalformedExpressionError,
    MalformedInputError,
    MismatchedParenthesesError,
    NumericOverflowError,
)
from .evaluator import evaluate
from .tokenizer import tokenize

__all__ = [
    "CalculatorEngine",
    "DivisionByZeroError",
    "EvaluationError",
    "EvaluationErrorKind",
    "InvalidOperatorError",
    "MalformedExpressionError",
    "MalformedInputError",
    "MismatchedParenthesesError",
    "NumericOverflowError",
    "evaluate",
    "evaluate_expression",
    "to_postfix",
    "tokenize",
]
