"""Infix, postfix and prefix expressions handled with an operator stack."""

from __future__ import annotations

from collections.abc import Iterable

_ARITHMETIC = "+-*/"
_MIRROR = str.maketrans("()", ")(")
_BRACKETS = {")": "(", "}": "{", "]": "["}


def _is_operand(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _arithmetic_precedence(op: str) -> int:
    if op in "+-":
        return 1
    if op in "*/":
        return 2
    return 0


def _letter_precedence(op: str) -> int:
    if op == "^":
        return 3
    if op in "*/%":
        return 2
    if op in "+-":
        return 1
    return -1


def _apply(op: str, left: int, right: int) -> int:
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError(f"unknown operator {op!r}")


def _pop_pair(stack: list[int]) -> tuple[int, int]:
    if len(stack) < 2:
        raise ValueError("operator is missing an operand")
    second = stack.pop()
    first = stack.pop()
    return first, second


def _single_result(stack: list[int]) -> int:
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of letters and digits to postfix.

    Only ``+ - * /`` are treated as operators; other characters are skipped.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if _is_operand(ch):
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')'")
            stack.pop()
        elif ch in _ARITHMETIC:
            while stack and _arithmetic_precedence(stack[-1]) >= _arithmetic_precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single digits."""
    stack: list[int] = []
    for ch in expression:
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
        else:
            left, right = _pop_pair(stack)
            stack.append(_apply(ch, left, right))
    return _single_result(stack)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix by way of its mirror image."""
    mirrored = expression[::-1].translate(_MIRROR)
    return infix_to_postfix(mirrored)[::-1]


def evaluate_prefix(expression: str) -> int:
    """Evaluate a prefix expression of single digits."""
    stack: list[int] = []
    for ch in reversed(expression):
        if ch.isascii() and ch.isdigit():
            stack.append(int(ch))
        else:
            right, left = _pop_pair(stack)
            stack.append(_apply(ch, left, right))
    return _single_result(stack)


def letters_to_postfix(expression: str) -> str:
    """Convert an infix expression over letters to postfix.

    Every non-letter other than parentheses is an operator; ``^`` binds
    tightest, then ``* / %``, then ``+ -``. Unmatched parentheses are dropped.
    """
    stack: list[str] = []
    output: list[str] = []
    for ch in expression:
        if ch.isalpha():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while (
                stack
                and stack[-1] != "("
                and _letter_precedence(stack[-1]) >= _letter_precedence(ch)
            ):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(op for op in reversed(stack) if op != "(")
    return "".join(output)


def letters_to_prefix(expression: str) -> str:
    """Convert an infix expression over letters to prefix."""
    mirrored = expression[::-1].translate(_MIRROR)
    stack: list[str] = []
    output: list[str] = []
    for ch in mirrored:
        if ch.isalpha():
            output.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched '('")
            stack.pop()
        else:
            while stack and _letter_precedence(stack[-1]) > _letter_precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return "".join(output)[::-1]


def evaluate_rpn(tokens: Iterable[str]) -> int:
    """Evaluate reverse Polish tokens of integers and ``+ - * /``."""
    stack: list[int] = []
    for token in tokens:
        if token in _ARITHMETIC:
            left, right = _pop_pair(stack)
            stack.append(_apply(token, left, right))
        else:
            try:
                stack.append(int(token))
            except ValueError:
                raise ValueError(f"not a number: {token!r}") from None
    return _single_result(stack)


def is_balanced(text: str) -> bool:
    """Check that every bracket in ``text`` is closed in the right order."""
    stack: list[str] = []
    for ch in text:
        if ch in "({[":
            stack.append(ch)
        elif ch in _BRACKETS:
            if not stack or stack[-1] != _BRACKETS[ch]:
                return False
            stack.pop()
    return not stack