"""Evaluation of Reverse Polish Notation arithmetic expressions."""

from __future__ import annotations

import enum
import re

from .stack import Stack

_OPERATORS = "+-/*"

_NUMBER_PREFIX = re.compile(
    r"[ \t\n\r\f\v]*[+-]?"
    r"(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class RpnErrorCode(enum.IntEnum):
    """Reasons an RPN expression can fail to evaluate."""

    STACK_OVERFLOW = 1
    STACK_UNDERFLOW = 2
    INVALID_TOKEN = 3
    DIVIDE_BY_ZERO = 4
    TOO_FEW_ITEMS_REMAIN = 5
    TOO_MANY_ITEMS_REMAIN = 6


_MESSAGES = {
    RpnErrorCode.STACK_OVERFLOW: "stack overflow",
    RpnErrorCode.STACK_UNDERFLOW: "stack underflow",
    RpnErrorCode.INVALID_TOKEN: "invalid token",
    RpnErrorCode.DIVIDE_BY_ZERO: "divide by zero",
    RpnErrorCode.TOO_FEW_ITEMS_REMAIN: "too few items remain",
    RpnErrorCode.TOO_MANY_ITEMS_REMAIN: "too many items remain",
}


class RpnError(Exception):
    """Raised when an RPN expression cannot be evaluated."""

    def __init__(self, code: RpnErrorCode, token: str | None = None) -> None:
        self.code = RpnErrorCode(code)
        self.token = token
        message = _MESSAGES[self.code]
        if token is not None:
            message = f"{message}: {token!r}"
        super().__init__(message)


def _leading_float(token: str) -> float:
    """Value of the longest numeric prefix of ``token``, or 0.0 if none."""
    match = _NUMBER_PREFIX.match(token)
    if match is None:
        return 0.0
    return float(match.group().strip())


def _apply(operator: str, x: float, y: float) -> float:
    if operator == "+":
        return x + y
    if operator == "-":
        return x - y
    if operator == "*":
        return x * y
    if y == 0:
        raise RpnError(RpnErrorCode.DIVIDE_BY_ZERO)
    return x / y


def evaluate(rpn_string: str) -> float:
    """Evaluate a space-separated RPN expression and return its value.

    Tokens are numbers (integers or decimals, optionally signed) or one of
    the operators ``+ - * /``. Raises :class:`RpnError` on invalid input.
    """
    stack = Stack()
    for token in (part for part in rpn_string.split(" ") if part):
        value = _leading_float(token)
        if value != 0 or token.startswith("0"):
            if stack.is_full():
                raise RpnError(RpnErrorCode.STACK_OVERFLOW, token)
            stack.push(value)
            continue

        operator = token[0]
        if operator not in _OPERATORS:
            raise RpnError(RpnErrorCode.INVALID_TOKEN, token)
        if len(stack) < 2:
            raise RpnError(RpnErrorCode.STACK_UNDERFLOW, token)
        y = stack.pop()
        x = stack.pop()
        stack.push(_apply(operator, x, y))

    if len(stack) > 1:
        raise RpnError(RpnErrorCode.TOO_MANY_ITEMS_REMAIN)
    if len(stack) < 1:
        raise RpnError(RpnErrorCode.TOO_FEW_ITEMS_REMAIN)
    return stack.pop()


def process_backspaces(text: str) -> str:
    """Apply backspace characters in ``text``.

    Each backspace is removed together with the character before it, if
    there is one. The length of the result is the size of the edited text.
    """
    kept: list[str] = []
    for char in text:
        if char == "\b":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return "".join(kept)