"""Infix to postfix conversion (shunting-yard).

By default the conversion is lenient: unknown characters are dropped, an
unmatched ")" is ignored and a stray "(" is emitted into the output as-is.
Strict mode turns each of those into a ConversionError.

Operators of equal precedence are popped before the incoming one is pushed,
which makes every operator left-associative, "^" included. Set
``right_assoc_power`` to get the conventional right-associative "^".
"""

from __future__ import annotations

from collections.abc import Iterable

from . import config
from .logging_config import get_logger
from .tokenizer import find_unknown_characters, is_operator, tokenize_infix
from .types import ConversionError

logger = get_logger("converter")


def _should_pop(top: str, incoming: str, right_assoc_power: bool) -> bool:
    if top == config.LEFT_PAREN:
        return False
    if right_assoc_power and incoming == "^":
        return config.PRECEDENCE[top] > config.PRECEDENCE[incoming]
    return config.PRECEDENCE[top] >= config.PRECEDENCE[incoming]


def _check_unknown_characters(expression: str) -> None:
    unknown = find_unknown_characters(expression)
    if unknown:
        position, char = unknown[0]
        raise ConversionError(
            f"Unexpected character '{char}' at position {position}",
            "UNKNOWN_CHARACTER",
            position,
        )


def convert(
    expression: str,
    strict: bool | None = None,
    right_assoc_power: bool | None = None,
) -> list[str]:
    """Convert an infix expression into a postfix token sequence.

    Args:
        expression: Infix expression (e.g., "5 * (3 + 2)")
        strict: Reject unknown characters and unbalanced parentheses
            (default: config.STRICT_CONVERSION)
        right_assoc_power: Treat "^" as right-associative
            (default: config.POWER_RIGHT_ASSOCIATIVE)

    Returns:
        Postfix tokens in output order

    Raises:
        ConversionError: Only in strict mode

    Example:
        >>> convert("5 * (3 + 2)")
        ['5', '3', '2', '+', '*']
    """
    if strict is None:
        strict = config.STRICT_CONVERSION
    if right_assoc_power is None:
        right_assoc_power = config.POWER_RIGHT_ASSOCIATIVE

    if strict:
        _check_unknown_characters(expression)

    output: list[str] = []
    operator_stack: list[str] = []

    for token in tokenize_infix(expression):
        if token == config.LEFT_PAREN:
            operator_stack.append(token)
        elif token == config.RIGHT_PAREN:
            while operator_stack and operator_stack[-1] != config.LEFT_PAREN:
                output.append(operator_stack.pop())
            if operator_stack:
                operator_stack.pop()
            elif strict:
                raise ConversionError(
                    "Unmatched closing parenthesis", "UNBALANCED_PARENTHESES"
                )
        elif is_operator(token):
            while operator_stack and _should_pop(
                operator_stack[-1], token, right_assoc_power
            ):
                output.append(operator_stack.pop())
            operator_stack.append(token)
        else:
            output.append(token)

    while operator_stack:
        top = operator_stack.pop()
        if top == config.LEFT_PAREN and strict:
            raise ConversionError(
                "Unmatched opening parenthesis", "UNBALANCED_PARENTHESES"
            )
        output.append(top)

    logger.debug("converted %r -> %r", expression, output)
    return output


def to_postfix_string(tokens: Iterable[str]) -> str:
    """Join postfix tokens with single spaces."""
    return " ".join(tokens)
