"""Stackcalc package: tokenizer, postfix evaluator, infix converter, API, session and CLI."""

# Public API exports
from .api import convert, evaluate, to_infix, validate_expression

__all__ = [
    "config",
    "tokenizer",
    "evaluator",
    "converter",
    "symbolic",
    "formatting",
    "session",
    "cli",
    "types",
    "api",
    "logging_config",
    "evaluate",
    "convert",
    "validate_expression",
    "to_infix",
]
