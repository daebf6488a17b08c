"""Type definitions, result dataclasses and error classes for consistent API responses."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _json_number(value: float) -> float | str:
    # JSON has no literal for inf or nan; use the same words as the display form
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class StepKind(Enum):
    PUSH = "push"
    OPERATION = "operation"


@dataclass(frozen=True)
class Token:
    """A classified lexical unit.

    ``text`` is the verbatim source text; ``value`` is only set for numbers.
    """

    kind: TokenKind
    text: str
    value: float | None = None

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class StepRecord:
    """One recorded push or operation of a postfix evaluation."""

    index: int
    token: Token
    description: str
    stack_snapshot: tuple[float, ...]
    kind: StepKind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "step": self.index,
            "token": self.token.text,
            "action": self.description,
            "stack": [_json_number(v) for v in self.stack_snapshot],
            "type": self.kind.value,
        }


@dataclass(frozen=True)
class EvaluationResult:
    """Final value and full trace of one postfix evaluation."""

    final_value: float
    steps: tuple[StepRecord, ...]


@dataclass
class EvalOutcome:
    """Result of evaluating a postfix expression through the public API."""

    ok: bool
    value: float | None = None
    result: str | None = None
    exact: str | None = None
    steps: list[StepRecord] = field(default_factory=list)
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["value"] = _json_number(self.value)
        if self.result is not None:
            result_dict["result"] = self.result
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.steps:
            result_dict["steps"] = [step.to_dict() for step in self.steps]
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the outcome."""
        if not self.ok:
            return f"EvalOutcome(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        parts.append(f"steps={len(self.steps)}")
        return f"EvalOutcome({', '.join(parts)})"


@dataclass
class ConversionOutcome:
    """Result of converting an infix expression to postfix."""

    ok: bool
    tokens: list[str] = field(default_factory=list)
    postfix: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.ok:
            result_dict["tokens"] = list(self.tokens)
            result_dict["postfix"] = self.postfix
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"ConversionOutcome(ok=False, error={self.error!r})"
        return f"ConversionOutcome(ok=True, postfix={self.postfix!r})"


@dataclass(frozen=True)
class Notice:
    """A message for the user, tagged "success" or "error"."""

    text: str
    severity: str = "success"

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidExpressionError(Exception):
    """Raised when a postfix expression cannot be evaluated."""

    default_code = "INVALID_EXPRESSION"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidTokenError(InvalidExpressionError):
    """A token is neither an operator nor a parseable number."""

    default_code = "INVALID_TOKEN"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid token: {token}")


class InsufficientOperandsError(InvalidExpressionError):
    """An operator was reached with fewer than two values on the stack."""

    default_code = "INSUFFICIENT_OPERANDS"

    def __init__(self, message: str = "Invalid expression: Not enough operands"):
        super().__init__(message)


class MalformedResultError(InvalidExpressionError):
    """The stack did not end with exactly one value."""

    default_code = "MALFORMED_RESULT"

    def __init__(self, message: str = "Invalid expression: Multiple values remaining"):
        super().__init__(message)


class DivisionByZeroError(InvalidExpressionError):
    default_code = "DIVISION_BY_ZERO"

    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class ConversionError(Exception):
    """Raised by strict infix conversion."""

    def __init__(
        self, message: str, code: str = "CONVERSION_ERROR", position: int | None = None
    ):
        self.message = message
        self.code = code
        self.position = position
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
