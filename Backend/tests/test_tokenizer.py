"""Tests for splitting expressions into tokens."""
import pytest

from calc_api.services.calculators import MalformedInputError, tokenize
from calc_api.services.calculators.tokens import (
    LeftParen,
    Number,
    Operator,
    OperatorKind,
    RightParen,
    render,
)


def test_numbers_and_operators():
    assert tokenize("12+3") == [Number("12"), Operator(OperatorKind.ADD), Number("3")]


def test_digit_runs_are_greedy():
    tokens = tokenize("1234*56")
    assert [t.text for t in tokens] == ["1234", "*", "56"]


def test_parentheses_are_tagged():
    assert tokenize("(7)") == [LeftParen(), Number("7"), RightParen()]


def test_every_operator_kind():
    kinds = [t.kind for t in tokenize("1+2-3*4/5") if isinstance(t, Operator)]
    assert kinds == [OperatorKind.ADD, OperatorKind.SUB, OperatorKind.MUL, OperatorKind.DIV]


def test_empty_string_gives_no_tokens():
    assert tokenize("") == []


def test_grammar_is_not_checked():
    """Consecutive operators are left for later stages to reject."""
    assert len(tokenize("3++2")) == 4


@pytest.mark.parametrize(
    "expression",
    ["3+4*2", "(3+4)*2", "007", "((1))", "3++2", ")(", "10/0", "1-2-3"],
)
def test_round_trip(expression):
    assert render(tokenize(expression), separator="") == expression


# --- Rejected input ---

@pytest.mark.parametrize(
    "expression",
    ["1 + 2", " 1", "1\t", "1.5", "2^3", "x+1", "1e3", "٣+1", "abc"],
)
def test_invalid_characters(expression):
    with pytest.raises(MalformedInputError):
        tokenize(expression)


def test_error_names_offending_character():
    with pytest.raises(MalformedInputError, match=r"' ' at position 1"):
        tokenize("1 +2")
