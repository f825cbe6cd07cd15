"""Schemas for expression evaluation."""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import BaseSchema


class EvaluationErrorKind(str, Enum):
    MALFORMED_INPUT = "malformed_input"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"
    MALFORMED_EXPRESSION = "malformed_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"
    NUMERIC_OVERFLOW = "numeric_overflow"


class CalcRequest(BaseSchema):
    """Incoming expression payload."""

    expression: str = Field(description="Arithmetic expression, e.g. (3+4)*2")


class CalcResponse(BaseSchema):
    expression: str
    result: float


class CalcErrorDetail(BaseSchema):
    """Body of a rejected evaluation."""

    message: str = "Invalid expression provided"
    error: EvaluationErrorKind
    reason: str


class EvaluationResult(BaseSchema):
    """Outcome of a single evaluation."""

    success: bool
    value: Optional[float] = None
    error: Optional[EvaluationErrorKind] = None
    reason: Optional[str] = None
