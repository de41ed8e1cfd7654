"""Arithmetic expressions evaluated through stacks, plus bracket matching."""

from __future__ import annotations

import re

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_LEXEME = re.compile(r"[0-9]+|.")
_NUMBER = re.compile(r"[0-9]+")
_MIRROR = str.maketrans("()", ")(")
_CLOSING = {")": "(", "]": "[", "}": "{"}


def precedence(op: str) -> int:
    """Return 1 for ``+``/``-``, 2 for ``*``/``/`` and -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def normalize_unary(expression: str) -> str:
    """Drop whitespace and turn a leading or unary minus into ``0-``."""
    out: list[str] = []
    after_operator = True
    for char in expression:
        if char.isspace():
            continue
        if char == "-" and after_operator:
            out.append("0")
        out.append(char)
        after_operator = char in "+-("
    return "".join(out)


def _apply(a: int, b: int, op: str) -> int:
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    raise ValueError(f"unknown operator {op!r}")


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to space-separated postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for item in _LEXEME.findall(normalize_unary(expression)):
        if _NUMBER.fullmatch(item):
            output.append(item)
        elif item == "(":
            operators.append(item)
        elif item == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced ')'")
            operators.pop()
        elif item in _PRECEDENCE:
            while operators and precedence(operators[-1]) >= precedence(item):
                output.append(operators.pop())
            operators.append(item)
        else:
            raise ValueError(f"unexpected character {item!r}")
    while operators:
        op = operators.pop()
        if op == "(":
            raise ValueError("unbalanced '('")
        output.append(op)
    return " ".join(output)


def _evaluate(items: list[str], operands_reversed: bool) -> int:
    values: list[int] = []
    for item in items:
        if _NUMBER.fullmatch(item):
            values.append(int(item))
        elif item in _PRECEDENCE:
            if len(values) < 2:
                raise ValueError(f"operator {item!r} lacks operands")
            first = values.pop()
            second = values.pop()
            a, b = (first, second) if operands_reversed else (second, first)
            values.append(_apply(a, b, item))
        else:
            raise ValueError(f"unexpected item {item!r}")
    if len(values) != 1:
        raise ValueError("malformed expression")
    return values[0]


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a space-separated postfix expression with truncating division."""
    return _evaluate(postfix.split(), operands_reversed=False)


def calculate(expression: str) -> int:
    """Evaluate an infix expression of integers, ``+ - * /`` and parentheses."""
    return evaluate_postfix(infix_to_postfix(expression))


def mirror(expression: str) -> str:
    """Reverse ``expression`` character by character, swapping ``(`` and ``)``."""
    return expression[::-1].translate(_MIRROR)


def evaluate_prefix(prefix: str) -> int:
    """Evaluate a space-separated prefix expression, reading it right to left."""
    return _evaluate(list(reversed(prefix.split())), operands_reversed=True)


def evaluate_prefix_expression(expression: str) -> int:
    """Evaluate infix ``expression`` by way of its prefix form."""
    postfix = infix_to_postfix(mirror(expression))
    return evaluate_prefix(mirror(postfix))


def is_valid_parentheses(text: str) -> bool:
    """Return True if ``text`` consists only of correctly nested brackets."""
    pending: list[str] = []
    for char in text:
        if char in "([{":
            pending.append(char)
        elif char in _CLOSING and pending and pending.pop() == _CLOSING[char]:
            continue
        else:
            return False
    return not pending