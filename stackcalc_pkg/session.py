"""Caller-owned playback state for step-by-step evaluation.

The evaluator and converter keep no state between calls. A presentation layer
that wants to replay an evaluation one step at a time keeps an
``EvaluationSession``: it holds the current expressions, the latest outcome
and the step cursor, and answers every action with a ``Notice`` to show.
"""

from __future__ import annotations

from . import api
from .logging_config import get_logger
from .types import EvalOutcome, Notice, StepRecord

logger = get_logger("session")


class EvaluationSession:
    """Latest evaluation result plus a cursor for step playback."""

    def __init__(self) -> None:
        self.expression = ""
        self.infix_expression = ""
        self.outcome: EvalOutcome | None = None
        self.cursor = -1
        self.stack: list[float] = []

    @property
    def steps(self) -> list[StepRecord]:
        if self.outcome is None or not self.outcome.ok:
            return []
        return self.outcome.steps

    @property
    def current_step(self) -> StepRecord | None:
        if self.cursor < 0:
            return None
        return self.steps[self.cursor]

    @property
    def is_complete(self) -> bool:
        return self.cursor >= len(self.steps) - 1

    @property
    def progress(self) -> float:
        """Percentage of steps played back (0 when nothing is loaded)."""
        if not self.steps:
            return 0.0
        return (self.cursor + 1) / len(self.steps) * 100

    def _clear_result(self) -> None:
        self.outcome = None
        self.cursor = -1
        self.stack = []

    def evaluate(self, expression: str | None = None) -> Notice:
        """Evaluate ``expression`` (or the current one) and rewind playback."""
        if expression is not None:
            self.expression = expression
        if not self.expression.strip():
            return Notice("Please enter a postfix expression", "error")

        outcome = api.evaluate(self.expression)
        self._clear_result()
        if not outcome.ok:
            return Notice(outcome.error or "An error occurred", "error")
        self.outcome = outcome
        return Notice("Expression evaluated successfully!")

    def step(self) -> Notice:
        """Advance playback by one step."""
        if not self.steps:
            return Notice("Evaluate an expression to see step-by-step execution", "error")
        if self.is_complete:
            return Notice("All steps completed!")
        self.cursor += 1
        step = self.steps[self.cursor]
        self.stack = list(step.stack_snapshot)
        logger.debug("playback at step %d of %d", step.index, len(self.steps))
        return Notice(f"Step {step.index}: {step.description}")

    def convert(self, infix: str | None = None) -> Notice:
        """Convert ``infix`` (or the current infix expression) and load the postfix result."""
        if infix is not None:
            self.infix_expression = infix
        if not self.infix_expression.strip():
            return Notice("Please enter an infix expression", "error")

        outcome = api.convert(self.infix_expression)
        if not outcome.ok:
            return Notice(outcome.error or "Invalid infix expression", "error")
        self.expression = outcome.postfix
        return Notice("Converted to postfix!")

    def reset(self) -> Notice:
        self.expression = ""
        self.infix_expression = ""
        self._clear_result()
        return Notice("Reset complete")
