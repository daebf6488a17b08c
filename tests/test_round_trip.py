"""Round-trip tests: evaluate(convert(infix)) against SymPy as a reference evaluator."""

import random

import pytest
from sympy.parsing.sympy_parser import parse_expr

from stackcalc_pkg.converter import convert, to_postfix_string
from stackcalc_pkg.evaluator import evaluate
from stackcalc_pkg.types import DivisionByZeroError


def reference_value(infix: str) -> float:
    """Evaluate infix with SymPy (Python operator precedence, ^ as power)."""
    return float(parse_expr(infix.replace("^", "**"), evaluate=True))


def round_trip(infix: str, **kwargs) -> float:
    return evaluate(to_postfix_string(convert(infix, **kwargs))).final_value


@pytest.mark.parametrize(
    "infix",
    [
        "2 + 3 * 4",
        "(2 + 3) * 4",
        "10 / 4 - 1",
        "2 ^ 3 * 2",
        "7 % 3 + 1",
        "100 - 50 + 20",
        "2 * (3 + 4) ^ 2",
        "8 / 2 / 2",
        "10 - 4 - 3",
        "(8 + 2) * (5 - 3)",
        "1.5 * 4 - 0.25",
        "9 % 4 * 3",
    ],
)
def test_round_trip_matches_reference(infix):
    assert round_trip(infix) == pytest.approx(reference_value(infix))


def test_chained_power_is_left_associative():
    assert round_trip("2 ^ 3 ^ 2") == 64
    assert round_trip("2 ^ 3 ^ 2", right_assoc_power=True) == 512
    assert round_trip("2 ^ 3 ^ 2", right_assoc_power=True) == reference_value("2 ^ 3 ^ 2")


def _random_infix(rng: random.Random, depth: int) -> str:
    if depth == 0 or rng.random() < 0.3:
        return str(rng.randint(1, 9))
    op = rng.choice("+-*/")
    left = _random_infix(rng, depth - 1)
    right = _random_infix(rng, depth - 1)
    text = f"{left} {op} {right}"
    return f"({text})" if rng.random() < 0.5 else text


def test_random_expressions_round_trip():
    rng = random.Random(1234)
    checked = 0
    for _ in range(200):
        infix = _random_infix(rng, 4)
        try:
            value = round_trip(infix)
        except DivisionByZeroError:
            continue
        assert value == pytest.approx(reference_value(infix), rel=1e-9, abs=1e-9)
        checked += 1
    assert checked > 100


def test_valid_postfix_has_one_step_per_token():
    rng = random.Random(99)
    for _ in range(50):
        count = rng.randint(1, 8)
        tokens = [str(rng.randint(1, 9)), str(rng.randint(1, 9))][: 1 if count == 1 else 2]
        pending = count - len(tokens)
        depth = len(tokens)
        while pending or depth > 1:
            if pending and (depth < 2 or rng.random() < 0.5):
                tokens.append(str(rng.randint(1, 9)))
                pending -= 1
                depth += 1
            else:
                tokens.append(rng.choice("+-*"))
                depth -= 1
        result = evaluate(" ".join(tokens))
        assert len(result.steps) == len(tokens)
        assert len(result.steps) == 2 * count - 1
        assert [s.index for s in result.steps] == list(range(1, len(tokens) + 1))
