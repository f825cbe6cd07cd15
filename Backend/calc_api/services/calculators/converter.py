"""Infix to postfix conversion (shunting-yard)."""
from __future__ import annotations

from .errors import MismatchedParenthesesError
from .tokens import LeftParen, Number, Operator, RightParen, Token


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Reorder infix ``tokens`` into postfix order.

    Operators of equal precedence are emitted left to right, so ``8-3-2``
    becomes ``8 3 - 2 -``. The result never contains parentheses.
    """
    output: list[Token] = []
    operators: list[Token] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            while (
                operators
                and isinstance(operators[-1], Operator)
                and operators[-1].kind.precedence >= token.kind.precedence
            ):
                output.append(operators.pop())
            operators.append(token)
        elif isinstance(token, LeftParen):
            operators.append(token)
        elif isinstance(token, RightParen):
            while operators and not isinstance(operators[-1], LeftParen):
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesesError("Closing parenthesis without matching opening parenthesis")
            operators.pop()

    while operators:
        top = operators.pop()
        if isinstance(top, (LeftParen, RightParen)):
            raise MismatchedParenthesesError("Opening parenthesis is never closed")
        output.append(top)

    return output
