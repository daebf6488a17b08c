"""Tokenizer for postfix and infix input.

Postfix input is split on whitespace and taken verbatim. Infix input is
scanned for numeric literals and operator/parenthesis characters; anything
else is dropped. Both tokenizers are generators so callers can stop early.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from .config import (
    INFIX_SCAN_REGEX,
    INFIX_TOKEN_REGEX,
    LEFT_PAREN,
    OPERATORS,
    RIGHT_PAREN,
)
from .types import InvalidTokenError, Token, TokenKind


def is_operator(text: str) -> bool:
    """Return True if ``text`` is one of the six supported operator symbols."""
    return text in OPERATORS


def tokenize_postfix(expression: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens of a postfix expression.

    Args:
        expression: Postfix expression (e.g., "2 3 +")

    Yields:
        Raw token strings, unclassified
    """
    yield from expression.split()


def tokenize_infix(expression: str) -> Iterator[str]:
    """Yield numbers, operators and parentheses found in an infix expression.

    Characters matching neither are skipped without error, so "2 + a" yields
    "2" and "+".
    """
    for match in INFIX_TOKEN_REGEX.finditer(expression):
        yield match.group(0)


def find_unknown_characters(expression: str) -> list[tuple[int, str]]:
    """Return (position, character) for every non-space character the infix scan drops."""
    return [
        (match.start(), match.group("other"))
        for match in INFIX_SCAN_REGEX.finditer(expression)
        if match.group("other") is not None
    ]


def parse_number(text: str) -> float:
    """Parse a numeric literal.

    Raises:
        InvalidTokenError: If ``text`` is not a finite floating-point literal
    """
    try:
        value = float(text)
    except ValueError:
        raise InvalidTokenError(text) from None
    if not math.isfinite(value):
        raise InvalidTokenError(text)
    return value


def classify_token(text: str) -> Token:
    """Turn a raw token string into a Token.

    Raises:
        InvalidTokenError: If the text is not an operator, a parenthesis or a number
    """
    if is_operator(text):
        return Token(TokenKind.OPERATOR, text)
    if text == LEFT_PAREN:
        return Token(TokenKind.LEFT_PAREN, text)
    if text == RIGHT_PAREN:
        return Token(TokenKind.RIGHT_PAREN, text)
    return Token(TokenKind.NUMBER, text, parse_number(text))
