"""Unit tests for formatting helpers."""

import math
import unittest

from stackcalc_pkg.evaluator import evaluate
from stackcalc_pkg.formatting import (
    format_number,
    format_stack,
    format_steps_table,
    postfix_to_infix,
)
from stackcalc_pkg.types import InsufficientOperandsError, MalformedResultError


class TestFormatNumber(unittest.TestCase):
    def test_integral_values(self):
        self.assertEqual(format_number(5.0), "5")
        self.assertEqual(format_number(-12.0), "-12")
        self.assertEqual(format_number(-0.0), "0")

    def test_fractional_values(self):
        self.assertEqual(format_number(2.5), "2.5")
        self.assertEqual(format_number(0.1 + 0.2), "0.30000000000000004")

    def test_non_finite_values(self):
        self.assertEqual(format_number(math.inf), "Infinity")
        self.assertEqual(format_number(-math.inf), "-Infinity")
        self.assertEqual(format_number(math.nan), "NaN")

    def test_precision(self):
        self.assertEqual(format_number(1 / 3, 3), "0.333")

    def test_non_numeric(self):
        self.assertEqual(format_number("abc"), "abc")


class TestFormatStack(unittest.TestCase):
    def test_format_stack(self):
        self.assertEqual(format_stack([2.0, 3.0]), "[2, 3]")
        self.assertEqual(format_stack(()), "[]")


class TestStepsTable(unittest.TestCase):
    def test_table_rows(self):
        table = format_steps_table(evaluate("2 3 +").steps, highlight=2)
        lines = table.splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn("Step", lines[0])
        self.assertIn("Push 2", lines[2])
        self.assertTrue(lines[4].startswith(">"))
        self.assertIn("[5]", lines[4])

    def test_empty_table(self):
        self.assertEqual(format_steps_table([]), "")


class TestPostfixToInfix(unittest.TestCase):
    def test_grouping(self):
        self.assertEqual(postfix_to_infix(["5", "3", "2", "+", "*"]), "(5 * (3 + 2))")
        self.assertEqual(postfix_to_infix(["2", "3", "^", "2", "^"]), "((2 ^ 3) ^ 2)")
        self.assertEqual(postfix_to_infix(["7"]), "7")

    def test_errors(self):
        with self.assertRaises(InsufficientOperandsError):
            postfix_to_infix(["2", "+"])
        with self.assertRaises(MalformedResultError):
            postfix_to_infix(["2", "3"])


if __name__ == "__main__":
    unittest.main()
