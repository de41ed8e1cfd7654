import pytest

from structlab.expression import (
    calculate,
    evaluate_postfix,
    evaluate_prefix,
    evaluate_prefix_expression,
    infix_to_postfix,
    is_valid_parentheses,
    mirror,
    normalize_unary,
    precedence,
)

EXAMPLE = "9 + ( 3 - 1 ) * 3 + 10 / 2"
PREFIX_EXAMPLE = "(7 - 2) + (8/4) * 8"


@pytest.mark.parametrize("op, level", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("(", -1), ("x", -1)])
def test_precedence(op, level):
    assert precedence(op) == level


def test_infix_to_postfix_example():
    assert infix_to_postfix(EXAMPLE) == "9 3 1 - 3 * + 10 2 / +"


def test_calculate_example():
    assert calculate(EXAMPLE) == 20


def test_postfix_round_trip_matches_calculate():
    assert evaluate_postfix(infix_to_postfix(EXAMPLE)) == calculate(EXAMPLE)


def test_whitespace_does_not_matter():
    assert calculate(EXAMPLE) == calculate(EXAMPLE.replace(" ", ""))


def test_normalize_unary_inserts_zero():
    assert normalize_unary("1-(    -2)") == "1-(0-2)"


def test_leading_minus_is_unary():
    assert calculate("-5+5") == calculate("5-5")


def test_division_truncates_toward_zero():
    assert calculate("(0-7)/2") == -calculate("7/2")


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("1/0")


@pytest.mark.parametrize("bad", ["(1+2", "1+2)", "1&2"])
def test_infix_errors(bad):
    with pytest.raises(ValueError):
        infix_to_postfix(bad)


@pytest.mark.parametrize("bad", ["1 +", "1 2", "", "1 x +"])
def test_postfix_errors(bad):
    with pytest.raises(ValueError):
        evaluate_postfix(bad)


def test_mirror_swaps_parentheses():
    assert mirror("(1+2)") == "(2+1)"


def test_mirror_is_an_involution():
    assert mirror(mirror(PREFIX_EXAMPLE)) == PREFIX_EXAMPLE


def test_prefix_expression_example():
    assert evaluate_prefix_expression(PREFIX_EXAMPLE) == 21


def test_prefix_matches_infix():
    assert evaluate_prefix("+ - 7 2 * / 8 4 8") == calculate(PREFIX_EXAMPLE)


def test_prefix_multi_digit_numbers():
    assert evaluate_prefix_expression("12+3*10") == calculate("12+3*10")


def test_prefix_errors():
    with pytest.raises(ValueError):
        evaluate_prefix("+ 1")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected