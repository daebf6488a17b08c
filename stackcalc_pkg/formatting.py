"""Rendering helpers for numbers, stacks and step traces."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from .tokenizer import is_operator
from .types import InsufficientOperandsError, MalformedResultError, StepRecord

# Integral floats at or above this magnitude are printed in exponent form
_MAX_PLAIN_INTEGER = 1e21


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value for display.

    Integral values print without a fractional part ("5", not "5.0").
    Non-finite values print as "Infinity", "-Infinity" and "NaN".

    Args:
        val: Numeric value to format
        precision: Significant digits; None prints the shortest exact repr

    Returns:
        Formatted string representation of the number
    """
    try:
        number = float(val)
    except (ValueError, TypeError, OverflowError):
        return str(val)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if precision is not None:
        return ("{:." + str(int(precision)) + "g}").format(number)
    if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
        return str(int(number))
    return repr(number)


def format_stack(values: Iterable[float]) -> str:
    """Render stack contents bottom to top, e.g. "[2, 3]"."""
    return "[" + ", ".join(format_number(v) for v in values) + "]"


def format_steps_table(steps: Sequence[StepRecord], highlight: int | None = None) -> str:
    """Render a plain-text table with one row per step.

    Args:
        steps: Recorded steps
        highlight: Zero-based index of a row to mark with ">"

    Returns:
        Multi-line table string (empty string when there are no steps)
    """
    if not steps:
        return ""
    header = ("Step", "Token", "Action", "Stack")
    rows = [
        (
            str(step.index),
            step.token.text,
            step.description,
            format_stack(step.stack_snapshot),
        )
        for step in steps
    ]
    widths = [max(len(row[col]) for row in [header, *rows]) for col in range(4)]

    def _line(cells: Sequence[str], marker: str = " ") -> str:
        padded = "  ".join(cell.ljust(width) for cell, width in zip(cells, widths))
        return f"{marker} {padded}".rstrip()

    lines = [_line(header), _line(["-" * w for w in widths])]
    for idx, row in enumerate(rows):
        lines.append(_line(row, ">" if idx == highlight else " "))
    return "\n".join(lines)


def postfix_to_infix(tokens: Iterable[str]) -> str:
    """Render postfix tokens as a fully parenthesised infix string.

    Every binary operation is wrapped in parentheses so the grouping encoded by
    the postfix order stays visible.

    Raises:
        InsufficientOperandsError: An operator has fewer than two operands
        MalformedResultError: The tokens do not reduce to one expression

    Example:
        >>> postfix_to_infix(["5", "3", "2", "+", "*"])
        '(5 * (3 + 2))'
    """
    stack: list[str] = []
    for token in tokens:
        if is_operator(token):
            if len(stack) < 2:
                raise InsufficientOperandsError()
            b = stack.pop()
            a = stack.pop()
            stack.append(f"({a} {token} {b})")
        else:
            stack.append(token)
    if len(stack) != 1:
        raise MalformedResultError()
    return stack[0]
