"""Tests for the exact (SymPy) companion evaluation."""

import unittest

import sympy as sp

from stackcalc_pkg.symbolic import combine, exact_value, format_exact, to_rational
from stackcalc_pkg.tokenizer import tokenize_postfix


def _exact(expression):
    return exact_value(tokenize_postfix(expression))


class TestExactValue(unittest.TestCase):
    def test_rational_division(self):
        self.assertEqual(_exact("1 3 /"), sp.Rational(1, 3))
        self.assertEqual(format_exact(_exact("1 3 /")), "1/3")

    def test_decimal_literals_are_exact(self):
        self.assertEqual(_exact("0.1 0.2 +"), sp.Rational(3, 10))

    def test_irrational_power(self):
        self.assertEqual(_exact("2 0.5 ^"), sp.sqrt(2))
        self.assertEqual(format_exact(_exact("2 0.5 ^")), "sqrt(2)")

    def test_remainder_matches_float_semantics(self):
        self.assertEqual(_exact("7 3 %"), 1)
        self.assertEqual(_exact("-7 3 %"), -1)
        self.assertEqual(_exact("7.5 2 %"), sp.Rational(3, 2))

    def test_non_real_result_is_none(self):
        self.assertIsNone(_exact("-8 0.5 ^"))

    def test_infinite_result_is_none(self):
        self.assertIsNone(_exact("0 -1 ^"))

    def test_huge_exponent_skipped(self):
        self.assertIsNone(_exact("2 100000 ^"))

    def test_large_but_allowed_exponent(self):
        self.assertEqual(_exact("10 400 ^"), sp.Integer(10) ** 400)

    def test_too_many_digits_skipped(self):
        self.assertIsNone(_exact("100 600 ^"))

    def test_chained_powers_skipped(self):
        self.assertIsNone(_exact("9 1000 ^ 1000 ^ 1000 ^"))
        self.assertIsNone(_exact("1 10 1000 ^ 5 ^ /"))

    def test_large_product_skipped(self):
        self.assertIsNone(_exact("10 600 ^ 10 600 ^ *"))


class TestHelpers(unittest.TestCase):
    def test_to_rational(self):
        self.assertEqual(to_rational("2.5"), sp.Rational(5, 2))
        self.assertEqual(to_rational("4"), 4)

    def test_combine(self):
        self.assertEqual(combine(sp.Integer(2), sp.Integer(3), "^"), 8)
        self.assertEqual(combine(sp.Integer(2), sp.Integer(4), "/"), sp.Rational(1, 2))


if __name__ == "__main__":
    unittest.main()
