"""Conversion between infix, postfix and prefix notation, and evaluation."""

from __future__ import annotations

import math

_OPERATORS = frozenset("+-*/%")
_PREFIX_OPERATORS = frozenset("+-*/")
_MIRROR = str.maketrans("()", ")(")


class ExpressionError(ValueError):
    """Raised for malformed expressions."""


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def operator_priority(op: str) -> int:
    """Binding strength of an operator: 1 for ``* / %``, 0 for ``+ -``."""
    if op in ("*", "/", "%"):
        return 1
    if op in ("+", "-"):
        return 0
    raise ExpressionError(f"unknown operator {op!r}")


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    An operator only displaces stacked operators of strictly higher
    priority, so a run of equal-priority operators groups to the right.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("incorrect expression: unbalanced ')'")
            stack.pop()
        elif _is_operand(ch):
            output.append(ch)
        elif ch in _OPERATORS:
            priority = operator_priority(ch)
            while stack and stack[-1] != "(" and operator_priority(stack[-1]) > priority:
                output.append(stack.pop())
            stack.append(ch)
        else:
            raise ExpressionError(f"incorrect element in expression: {ch!r}")
    while stack and stack[-1] != "(":
        output.append(stack.pop())
    return "".join(output)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by converting its mirror image to postfix."""
    mirrored = expression[::-1].translate(_MIRROR)
    return infix_to_postfix(mirrored)[::-1]


def _apply_float(op: str, left: float, right: float) -> float:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ExpressionError("division by zero")
        return left / right
    dividend, divisor = int(left), int(right)
    if divisor == 0:
        raise ExpressionError("modulo by zero")
    return math.fmod(dividend, divisor)


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ExpressionError("division by zero")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _apply_int(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    return _truncating_divide(left, right)


def evaluate_postfix(expression: str) -> float:
    """Evaluate a postfix expression of single-digit operands as floating point.

    ``%`` works on the operands truncated to integers, keeping the sign of
    the dividend.
    """
    stack: list[float] = []
    for ch in expression:
        if _is_digit(ch):
            stack.append(float(int(ch)))
        elif ch in _OPERATORS:
            if len(stack) < 2:
                raise ExpressionError("stack underflow: missing operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(_apply_float(ch, left, right))
        else:
            raise ExpressionError(f"incorrect element in expression: {ch!r}")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single-digit operands with integer arithmetic.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for ch in reversed(expression):
        if ch in _PREFIX_OPERATORS:
            if len(stack) < 2:
                raise ExpressionError("stack underflow: missing operand")
            left = stack.pop()
            right = stack.pop()
            stack.append(_apply_int(ch, left, right))
        elif _is_digit(ch):
            stack.append(int(ch))
        else:
            raise ExpressionError(f"incorrect element in expression: {ch!r}")
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]