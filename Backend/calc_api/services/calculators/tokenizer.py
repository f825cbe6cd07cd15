"""Splits a raw expression string into tagged tokens."""
from __future__ import annotations

import re

from .errors import MalformedInputError
from .tokens import LeftParen, Number, Operator, OperatorKind, RightParen, Token, render

_TOKEN_RE = re.compile(r"[0-9]+|[+\-*/()]")
_INVALID_RE = re.compile(r"[^0-9+\-*/()]")


def _make_token(text: str) -> Token:
    if text.isdigit():
        return Number(text)
    if text == "(":
        return LeftParen()
    if text == ")":
        return RightParen()
    return Operator(OperatorKind(text))


def tokenize(expression: str) -> list[Token]:
    """Return the tokens of ``expression`` in reading order.

    Whitespace is not a separator: like any other character outside digits,
    ``+ - * /`` and parentheses it makes the input malformed.
    """
    invalid = _INVALID_RE.search(expression)
    if invalid:
        raise MalformedInputError(
            f"Invalid character {invalid.group()!r} at position {invalid.start()}"
        )

    tokens = [_make_token(match.group()) for match in _TOKEN_RE.finditer(expression)]
    if render(tokens, separator="") != expression:
        raise MalformedInputError("Expression could not be tokenized")
    return tokens
