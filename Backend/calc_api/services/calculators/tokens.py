"""Token types produced by the tokenizer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class OperatorKind(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]


PRECEDENCE: dict[OperatorKind, int] = {
    OperatorKind.ADD: 1,
    OperatorKind.SUB: 1,
    OperatorKind.MUL: 2,
    OperatorKind.DIV: 2,
}


@dataclass(frozen=True)
class Number:
    """Non-negative integer literal, kept as written."""

    text: str

    @property
    def value(self) -> float:
        # float() of an oversized digit run yields inf; the evaluator rejects it
        return float(self.text)


@dataclass(frozen=True)
class Operator:
    kind: OperatorKind

    @property
    def text(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class LeftParen:
    @property
    def text(self) -> str:
        return "("


@dataclass(frozen=True)
class RightParen:
    @property
    def text(self) -> str:
        return ")"


Token = Union[Number, Operator, LeftParen, RightParen]


def render(tokens: list[Token], separator: str = " ") -> str:
    """Join token texts, mostly for log lines."""
    return separator.join(token.text for token in tokens)
