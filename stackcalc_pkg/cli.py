from __future__ import annotations

import argparse
import json
import sys

from . import api
from .config import VERSION
from .formatting import format_number, format_stack, format_steps_table
from .session import EvaluationSession
from .types import ConversionOutcome, EvalOutcome, Notice


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Stackcalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    try:
        outcome = api.evaluate("10 2 3 + /")
        if outcome.ok and outcome.value == 2 and len(outcome.steps) == 5:
            print("[OK] Postfix evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Postfix evaluation failed: {outcome}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Evaluation check failed: {e}")
        checks_failed += 1

    try:
        outcome = api.convert("5 * (3 + 2)")
        if outcome.ok and outcome.postfix == "5 3 2 + *":
            print("[OK] Infix conversion works")
            checks_passed += 1
        else:
            print(f"[FAIL] Infix conversion failed: {outcome}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Conversion check failed: {e}")
        checks_failed += 1

    try:
        outcome = api.evaluate("1 3 /")
        if outcome.ok and outcome.exact == "1/3":
            print("[OK] Exact evaluation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Exact evaluation failed: {outcome}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Exact evaluation check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_eval_outcome(
    outcome: EvalOutcome,
    output_format: str = "human",
    show_steps: bool = False,
    precision: int | None = None,
) -> None:
    """Print an evaluation outcome.

    Args:
        outcome: Outcome returned by api.evaluate
        output_format: "json" for JSON output, "human" for human-readable
        show_steps: Also print the step table (human format only; JSON always
            includes steps)
        precision: Significant digits for the result line (default: shortest exact form)
    """
    if output_format == "json":
        data = outcome.to_dict()
        print(json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False))
        return
    if not outcome.ok:
        print("Error:", outcome.error)
        return
    if show_steps:
        print(format_steps_table(outcome.steps))
        print()
    if precision and precision > 0:
        result = format_number(outcome.value, precision)
    else:
        result = outcome.result
    print(f"Result: {result}")
    if outcome.exact is not None and outcome.exact != outcome.result:
        print(f"Exact: {outcome.exact}")


def print_conversion_outcome(
    outcome: ConversionOutcome, output_format: str = "human"
) -> None:
    if output_format == "json":
        data = outcome.to_dict()
        print(json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False))
        return
    if not outcome.ok:
        print("Error:", outcome.error)
        return
    print(f"Postfix: {outcome.postfix}")


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(
        f"""Stackcalc version {VERSION}

Commands:
  eval <postfix>     Evaluate a postfix expression, e.g. eval 5 3 2 + *
  convert <infix>    Convert infix to postfix and load it, e.g. convert 5 * (3 + 2)
  step               Play back the next evaluation step
  steps              Show the full step table
  stack              Show the stack at the current step
  infix              Show the loaded postfix expression as infix
  reset              Clear the session
  help               Show this help
  quit, exit         Leave

A line that is not a command is evaluated as postfix.
Operators: + - * / ^ %   (^ is left-associative unless --right-assoc-power)"""
    )


def _show_notice(notice: Notice) -> None:
    prefix = "Error: " if notice.is_error else ""
    print(f"{prefix}{notice.text}")


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL driving an EvaluationSession."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    session = EvaluationSession()
    print("Stackcalc - type 'help' for commands, 'quit' to exit.")

    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue

        command, _, rest = raw.partition(" ")
        command = command.lower()
        rest = rest.strip()

        if command in ("quit", "exit"):
            print("Goodbye.")
            break
        if command == "help":
            print_help_text()
        elif command == "eval":
            notice = session.evaluate(rest)
            if notice.is_error:
                _show_notice(notice)
            else:
                print_eval_outcome(session.outcome, output_format)
        elif command == "convert":
            notice = session.convert(rest)
            _show_notice(notice)
            if not notice.is_error:
                print(f"Postfix: {session.expression}")
        elif command == "step":
            if not session.steps and session.expression:
                session.evaluate()
            _show_notice(session.step())
            if session.cursor >= 0:
                print(f"Stack: {format_stack(session.stack)}")
                print(f"Progress: {session.progress:.0f}%")
        elif command == "steps":
            if not session.steps:
                print("Evaluate an expression to see step-by-step execution")
            else:
                print(format_steps_table(session.steps, highlight=session.cursor))
        elif command == "stack":
            print(format_stack(session.stack) if session.stack else "Stack is empty")
        elif command == "infix":
            outcome = api.to_infix(session.expression)
            print(outcome.result if outcome.ok else f"Error: {outcome.error}")
        elif command == "reset":
            _show_notice(session.reset())
        else:
            notice = session.evaluate(raw)
            if notice.is_error:
                _show_notice(notice)
            else:
                print_eval_outcome(session.outcome, output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Stackcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="stackcalc",
        description="Evaluate postfix expressions step by step and convert infix to postfix.",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one postfix expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-c",
        "--convert",
        type=str,
        help="Convert one infix expression to postfix and exit",
        dest="convert_expr",
    )
    parser.add_argument(
        "--steps",
        action="store_true",
        help="Print the step table with --eval",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown characters and unbalanced parentheses when converting",
    )
    parser.add_argument(
        "--right-assoc-power",
        action="store_true",
        help="Treat ^ as right-associative when converting",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    import stackcalc_pkg.config as _config

    if args.strict:
        _config.STRICT_CONVERSION = True
    if args.right_assoc_power:
        _config.POWER_RIGHT_ASSOCIATIVE = True

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    if args.convert_expr is not None:
        conversion = api.convert(args.convert_expr)
        print_conversion_outcome(conversion, args.format)
        return 0 if conversion.ok else 1

    if args.eval_expr is not None:
        outcome = api.evaluate(args.eval_expr)
        print_eval_outcome(
            outcome,
            args.format,
            show_steps=args.steps,
            precision=args.precision,
        )
        return 0 if outcome.ok else 1

    repl_loop(output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m stackcalc_pkg.cli"""
    sys.exit(main_entry())
