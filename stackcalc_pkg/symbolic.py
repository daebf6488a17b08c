"""Exact (SymPy) companion evaluation for postfix expressions.

A successful float evaluation can also be shown as an exact value, e.g.
"1 3 /" gives 1/3 instead of 0.3333333333333333 and "2 0.5 ^" gives sqrt(2).

These helpers assume the tokens already evaluated successfully with
``evaluator.evaluate``; they do not re-check operand counts.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import sympy as sp

from . import config
from .logging_config import get_logger
from .tokenizer import is_operator, parse_number

logger = get_logger("symbolic")

_BITS_PER_DIGIT = math.log2(10)


def to_rational(text: str) -> sp.Rational:
    """Convert a numeric literal into an exact SymPy Rational."""
    return sp.Rational(repr(parse_number(text)))


def _truncated_mod(a: sp.Expr, b: sp.Expr) -> sp.Expr:
    # Remainder with the sign of the dividend, matching math.fmod
    quotient = a / b
    return a - b * sp.sign(quotient) * sp.floor(sp.Abs(quotient))


def _estimated_digits(base: sp.Expr, exponent: sp.Expr) -> float:
    # Decimal digits of base**exponent, |exponent| * log10|base|
    magnitude = sp.Abs(base)
    if magnitude.is_zero or magnitude == 1:
        return 0.0
    return abs(float(exponent)) * abs(float(sp.log(magnitude, 10).evalf()))


def _check_size(value: sp.Expr) -> sp.Expr:
    coefficient = value if value.is_Rational else value.as_coeff_Mul()[0]
    if coefficient.is_Rational:
        bits = max(abs(coefficient.p).bit_length(), coefficient.q.bit_length())
        if bits > (config.MAX_EXACT_DIGITS + 1) * _BITS_PER_DIGIT:
            raise OverflowError("Exact value has too many digits")
    return value


def combine(a: sp.Expr, b: sp.Expr, operator: str) -> sp.Expr:
    """Exact counterpart of ``evaluator.apply_operator``."""
    if operator == "+":
        return a + b
    if operator == "-":
        return a - b
    if operator == "*":
        return a * b
    if operator == "/":
        return a / b
    if operator == "^":
        if sp.Abs(b) > config.MAX_EXACT_EXPONENT:
            raise OverflowError(f"Exponent {b} too large for exact evaluation")
        if _estimated_digits(a, b) > config.MAX_EXACT_DIGITS:
            raise OverflowError(f"{a} ^ {b} too large for exact evaluation")
        return a**b
    if operator == "%":
        if b == 0:
            raise ZeroDivisionError("Remainder by zero has no exact value")
        return _truncated_mod(a, b)
    raise ValueError(f"Unsupported operator: {operator}")


def exact_value(tokens: Iterable[str]) -> sp.Expr | None:
    """Evaluate postfix tokens exactly.

    Returns:
        The exact SymPy value, or None when the result is not a finite real
        number or it would need too many digits to expand
    """
    stack: list[sp.Expr] = []
    try:
        for token in tokens:
            if is_operator(token):
                b = stack.pop()
                a = stack.pop()
                stack.append(_check_size(combine(a, b, token)))
            else:
                stack.append(to_rational(token))
    except (OverflowError, ZeroDivisionError, ValueError, TypeError) as e:
        logger.debug("exact evaluation skipped: %s", e)
        return None

    if len(stack) != 1:
        return None
    value = stack[0]
    if value.is_real is not True or value.is_finite is not True:
        return None
    return value


def format_exact(value: sp.Expr) -> str:
    """String form of an exact value using SymPy's printer ("1/3", "sqrt(2)")."""
    return sp.sstr(value)
