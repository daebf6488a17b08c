"""Postfix evaluation with an explicit operand stack and a recorded step trace."""

from __future__ import annotations

import math

from .formatting import format_number
from .logging_config import get_logger
from .tokenizer import classify_token, tokenize_postfix
from .types import (
    DivisionByZeroError,
    EvaluationResult,
    InsufficientOperandsError,
    InvalidTokenError,
    MalformedResultError,
    StepKind,
    StepRecord,
    TokenKind,
)

logger = get_logger("evaluator")


def _power(a: float, b: float) -> float:
    # IEEE semantics instead of Python exceptions or complex results
    if math.isnan(b) or (abs(a) == 1 and math.isinf(b)):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and float(b).is_integer() and int(b) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0 and b < 0:
            if math.copysign(1.0, a) < 0 and float(b).is_integer() and int(b) % 2 == 1:
                return -math.inf
            return math.inf
        return math.nan


def _remainder(a: float, b: float) -> float:
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def apply_operator(a: float, b: float, operator: str) -> float:
    """Compute ``a <operator> b``.

    Args:
        a: Left operand (pushed first)
        b: Right operand (pushed last)
        operator: One of + - * / ^ %

    Returns:
        The floating-point result

    Raises:
        DivisionByZeroError: If operator is "/" and b is zero
    """
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        if b == 0:
            raise DivisionByZeroError()
        return a / b
    if operator == "^":
        return _power(a, b)
    if operator == "%":
        return _remainder(a, b)
    raise ValueError(f"Unsupported operator: {operator}")


def evaluate(expression: str) -> EvaluationResult:
    """Evaluate a postfix expression and record every step.

    Args:
        expression: Whitespace-delimited postfix expression (e.g., "2 3 +")

    Returns:
        EvaluationResult with the final value and one StepRecord per token

    Raises:
        InvalidTokenError: A token is neither an operator nor a number
        InsufficientOperandsError: An operator found fewer than two operands
        DivisionByZeroError: Right operand of "/" is zero
        MalformedResultError: The stack did not end with exactly one value

    Example:
        >>> result = evaluate("2 3 +")
        >>> result.final_value
        5.0
        >>> [step.description for step in result.steps]
        ['Push 2', 'Push 3', 'Pop 3 and 2, compute 2 + 3 = 5']
    """
    stack: list[float] = []
    steps: list[StepRecord] = []

    for raw in tokenize_postfix(expression):
        token = classify_token(raw)

        if token.kind is TokenKind.OPERATOR:
            if len(stack) < 2:
                raise InsufficientOperandsError()
            b = stack.pop()
            a = stack.pop()
            value = apply_operator(a, b, token.text)
            stack.append(value)
            description = (
                f"Pop {format_number(b)} and {format_number(a)}, compute "
                f"{format_number(a)} {token.text} {format_number(b)} = {format_number(value)}"
            )
            kind = StepKind.OPERATION
        elif token.kind is TokenKind.NUMBER:
            stack.append(token.value)
            description = f"Push {token.text}"
            kind = StepKind.PUSH
        else:
            # Parentheses have no meaning in postfix input
            raise InvalidTokenError(raw)

        step = StepRecord(
            index=len(steps) + 1,
            token=token,
            description=description,
            stack_snapshot=tuple(stack),
            kind=kind,
        )
        steps.append(step)
        logger.debug("step %d: %s -> %s", step.index, description, list(step.stack_snapshot))

    if len(stack) != 1:
        raise MalformedResultError()

    return EvaluationResult(final_value=stack[0], steps=tuple(steps))
