"""Unit tests for tokenizer module."""

import inspect
import unittest

from stackcalc_pkg.tokenizer import (
    classify_token,
    find_unknown_characters,
    is_operator,
    tokenize_infix,
    tokenize_postfix,
)
from stackcalc_pkg.types import InvalidTokenError, TokenKind


class TestPostfixTokenizer(unittest.TestCase):
    """Test whitespace splitting of postfix input."""

    def test_basic_split(self):
        self.assertEqual(list(tokenize_postfix("2 3 +")), ["2", "3", "+"])

    def test_irregular_whitespace(self):
        self.assertEqual(list(tokenize_postfix("  10\t2   3 +  / ")), ["10", "2", "3", "+", "/"])

    def test_tokens_kept_verbatim(self):
        self.assertEqual(list(tokenize_postfix("2.50 abc 3")), ["2.50", "abc", "3"])

    def test_empty_input(self):
        self.assertEqual(list(tokenize_postfix("")), [])
        self.assertEqual(list(tokenize_postfix("   ")), [])

    def test_is_lazy(self):
        self.assertTrue(inspect.isgenerator(tokenize_postfix("1 2 +")))


class TestInfixTokenizer(unittest.TestCase):
    """Test the scan-and-collect infix tokenizer."""

    def test_no_spaces(self):
        self.assertEqual(
            list(tokenize_infix("5*(3+2)")), ["5", "*", "(", "3", "+", "2", ")"]
        )

    def test_decimals(self):
        self.assertEqual(list(tokenize_infix("3.14 * 2")), ["3.14", "*", "2"])
        self.assertEqual(list(tokenize_infix("5. + 1")), ["5.", "+", "1"])

    def test_all_operators(self):
        self.assertEqual(
            list(tokenize_infix("1+2-3*4/5^6%7")),
            ["1", "+", "2", "-", "3", "*", "4", "/", "5", "^", "6", "%", "7"],
        )

    def test_unknown_characters_dropped(self):
        self.assertEqual(list(tokenize_infix("2 + a")), ["2", "+"])
        self.assertEqual(list(tokenize_infix("x = 4 $ 2")), ["4", "2"])

    def test_is_lazy(self):
        self.assertTrue(inspect.isgenerator(tokenize_infix("1+2")))

    def test_find_unknown_characters(self):
        self.assertEqual(find_unknown_characters("2 + a"), [(4, "a")])
        self.assertEqual(find_unknown_characters("(1 + 2) * 3"), [])
        self.assertEqual(find_unknown_characters(".5"), [(0, ".")])


class TestClassifyToken(unittest.TestCase):
    """Test token classification."""

    def test_operators(self):
        for symbol in "+-*/^%":
            self.assertTrue(is_operator(symbol))
            self.assertEqual(classify_token(symbol).kind, TokenKind.OPERATOR)
        self.assertFalse(is_operator("**"))

    def test_parentheses(self):
        self.assertEqual(classify_token("(").kind, TokenKind.LEFT_PAREN)
        self.assertEqual(classify_token(")").kind, TokenKind.RIGHT_PAREN)

    def test_numbers(self):
        token = classify_token("2.5")
        self.assertEqual(token.kind, TokenKind.NUMBER)
        self.assertEqual(token.value, 2.5)
        self.assertEqual(token.text, "2.5")
        self.assertEqual(classify_token("-7").value, -7.0)

    def test_invalid_token(self):
        with self.assertRaises(InvalidTokenError) as ctx:
            classify_token("abc")
        self.assertEqual(str(ctx.exception), "Invalid token: abc")
        self.assertEqual(ctx.exception.code, "INVALID_TOKEN")

    def test_non_finite_literals_rejected(self):
        for text in ("nan", "inf", "-Infinity", "1e400"):
            with self.assertRaises(InvalidTokenError):
                classify_token(text)

    def test_token_is_immutable(self):
        token = classify_token("3")
        with self.assertRaises(AttributeError):
            token.text = "4"


if __name__ == "__main__":
    unittest.main()
