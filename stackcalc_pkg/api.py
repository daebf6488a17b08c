"""Public API for Stackcalc - returns structured objects without side effects.

Core functions raise on bad input; these wrappers turn every failure into an
``ok=False`` outcome carrying a message and an error code, so callers branch
on ``outcome.ok`` instead of catching exceptions.
"""

from __future__ import annotations

import math

from . import config
from .converter import convert as _convert
from .converter import to_postfix_string
from .evaluator import evaluate as _evaluate
from .formatting import format_number, postfix_to_infix
from .logging_config import get_logger
from .symbolic import exact_value, format_exact
from .tokenizer import tokenize_postfix
from .types import (
    ConversionError,
    ConversionOutcome,
    EvalOutcome,
    InvalidExpressionError,
    ValidationError,
)

logger = get_logger("api")


def _exact_string(text: str) -> str | None:
    try:
        value = exact_value(tokenize_postfix(text))
        if value is None:
            return None
        return format_exact(value)
    except (ValueError, OverflowError) as e:
        logger.debug("exact value of %r skipped: %s", text, e)
        return None


def _validate_input(expression: str, empty_message: str) -> str:
    if expression is None or not expression.strip():
        raise ValidationError(empty_message, "EMPTY_INPUT")
    if len(expression) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    return expression.strip()


def evaluate(expression: str, exact: bool = True) -> EvalOutcome:
    """Evaluate a postfix expression.

    Args:
        expression: Postfix expression string (e.g., "2 3 +", "10 2 3 + /")
        exact: Also compute the exact SymPy value

    Returns:
        EvalOutcome with value, display string, exact value and steps

    Example:
        >>> from stackcalc_pkg.api import evaluate
        >>> outcome = evaluate("10 2 3 + /")
        >>> print(outcome.result)
        2
        >>> evaluate("5 0 /").error_code
        'DIVISION_BY_ZERO'
    """
    try:
        text = _validate_input(expression, "Please enter a postfix expression")
        result = _evaluate(text)
    except (ValidationError, InvalidExpressionError) as e:
        logger.info("evaluation of %r failed: %s", expression, e)
        return EvalOutcome(ok=False, error=e.message, error_code=e.code)
    except Exception as e:
        logger.error(f"Unexpected evaluation error: {e}", exc_info=True)
        return EvalOutcome(
            ok=False, error="An error occurred", error_code="INTERNAL_ERROR"
        )

    exact_str = None
    if exact and math.isfinite(result.final_value):
        exact_str = _exact_string(text)

    return EvalOutcome(
        ok=True,
        value=result.final_value,
        result=format_number(result.final_value),
        exact=exact_str,
        steps=list(result.steps),
    )


def convert(
    expression: str,
    strict: bool | None = None,
    right_assoc_power: bool | None = None,
) -> ConversionOutcome:
    """Convert an infix expression to postfix.

    Args:
        expression: Infix expression (e.g., "5 * (3 + 2)")
        strict: Reject unknown characters and unbalanced parentheses
        right_assoc_power: Treat "^" as right-associative

    Returns:
        ConversionOutcome with the postfix tokens and their joined string

    Example:
        >>> from stackcalc_pkg.api import convert
        >>> convert("2 ^ 3 + 4").postfix
        '2 3 ^ 4 +'
    """
    try:
        text = _validate_input(expression, "Please enter an infix expression")
        tokens = _convert(text, strict=strict, right_assoc_power=right_assoc_power)
    except (ValidationError, ConversionError) as e:
        logger.info("conversion of %r failed: %s", expression, e)
        return ConversionOutcome(ok=False, error=e.message, error_code=e.code)
    except Exception as e:
        logger.error(f"Unexpected conversion error: {e}", exc_info=True)
        return ConversionOutcome(
            ok=False, error="Invalid infix expression", error_code="CONVERSION_ERROR"
        )
    return ConversionOutcome(ok=True, tokens=tokens, postfix=to_postfix_string(tokens))


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate a postfix expression without keeping its result.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from stackcalc_pkg.api import validate_expression
        >>> validate_expression("2 3 +")
        (True, None)
        >>> validate_expression("2 +")
        (False, 'Invalid expression: Not enough operands')
    """
    outcome = evaluate(expression, exact=False)
    if outcome.ok:
        return True, None
    return False, outcome.error


def to_infix(expression: str) -> EvalOutcome:
    """Render a postfix expression as fully parenthesised infix.

    The expression is evaluated first so invalid input is reported with the
    same errors as ``evaluate``.

    Example:
        >>> from stackcalc_pkg.api import to_infix
        >>> to_infix("5 3 2 + *").result
        '(5 * (3 + 2))'
    """
    outcome = evaluate(expression, exact=False)
    if not outcome.ok:
        return outcome
    outcome.result = postfix_to_infix(tokenize_postfix(expression))
    return outcome
