"""Reduces a postfix token sequence to a single value."""
from __future__ import annotations

import logging
import math
from typing import Callable

from .errors import (
    DivisionByZeroError,
    InvalidOperatorError,
    MalformedExpressionError,
    NumericOverflowError,
)
from .tokens import Number, Operator, OperatorKind, Token

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivisionByZeroError("Division by zero")
    return left / right


OPERATIONS: dict[OperatorKind, Callable[[float, float], float]] = {
    OperatorKind.ADD: lambda left, right: left + right,
    OperatorKind.SUB: lambda left, right: left - right,
    OperatorKind.MUL: lambda left, right: left * right,
    OperatorKind.DIV: _divide,
}


def _checked(value: float) -> float:
    if not math.isfinite(value):
        raise NumericOverflowError("Value is out of the representable range")
    return value


def evaluate(tokens: list[Token]) -> float:
    """Evaluate a postfix sequence produced by ``to_postfix``."""
    stack: list[float] = []

    for token in tokens:
        if isinstance(token, Number):
            try:
                value = token.value
            except ValueError:
                raise InvalidOperatorError(f"Invalid number: {token.text!r}") from None
            stack.append(_checked(value))
            continue

        if not isinstance(token, Operator):
            raise InvalidOperatorError(f"Invalid operator: {getattr(token, 'text', token)!r}")
        operation = OPERATIONS.get(token.kind)
        if operation is None:
            raise InvalidOperatorError(f"Invalid operator: {token.kind!r}")

        if len(stack) < 2:
            logger.debug("Insufficient operands for %s (stack=%s)", token.text, stack)
            raise MalformedExpressionError(f"Insufficient operands for {token.text!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(_checked(operation(left, right)))

    if len(stack) != 1:
        raise MalformedExpressionError(
            "Empty expression" if not stack else f"Expression leaves {len(stack)} values, expected 1"
        )
    return stack[0]
