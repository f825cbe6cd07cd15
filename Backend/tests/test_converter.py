"""Tests for infix to postfix conversion."""
import pytest

from calc_api.services.calculators import MismatchedParenthesesError, to_postfix, tokenize
from calc_api.services.calculators.tokens import LeftParen, RightParen, render


def postfix(expression: str) -> str:
    return render(to_postfix(tokenize(expression)))


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("3+4*2", "3 4 2 * +"),
        ("(3+4)*2", "3 4 + 2 *"),
        ("2*3+4", "2 3 * 4 +"),
        ("8-3-2", "8 3 - 2 -"),
        ("8/4/2", "8 4 / 2 /"),
        ("8-(3-2)", "8 3 2 - -"),
        ("((1))", "1"),
        ("1+2*3-4/5", "1 2 3 * + 4 5 / -"),
    ],
)
def test_postfix_order(expression, expected):
    assert postfix(expression) == expected


def test_no_parentheses_in_output():
    tokens = to_postfix(tokenize("((1+2)*(3-(4/5)))"))
    assert not any(isinstance(t, (LeftParen, RightParen)) for t in tokens)


def test_empty_input():
    assert to_postfix([]) == []


def test_empty_parentheses_are_dropped():
    assert to_postfix(tokenize("()")) == []


@pytest.mark.parametrize("expression", ["(1+2", "((1)", "(", "1*(2+(3)"])
def test_unclosed_parenthesis(expression):
    with pytest.raises(MismatchedParenthesesError, match="never closed"):
        to_postfix(tokenize(expression))


@pytest.mark.parametrize("expression", ["1+2)", ")", ")(", "(1))"])
def test_unmatched_closing_parenthesis(expression):
    with pytest.raises(MismatchedParenthesesError, match="without matching"):
        to_postfix(tokenize(expression))
