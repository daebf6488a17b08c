#!/usr/bin/env python3
"""
Stackcalc - Stack Calculator

Main entry point for the Stackcalc postfix evaluator and infix converter.
This file serves as a thin wrapper that delegates all functionality
to the stackcalc_pkg package.

Usage:
    python stackcalc.py                        # Interactive REPL
    python stackcalc.py -e "2 3 +"             # Evaluate postfix expression
    python stackcalc.py -e "2 3 +" --steps     # ...and print every step
    python stackcalc.py -c "5 * (3 + 2)"       # Convert infix to postfix
    python stackcalc.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Stackcalc.

    Delegates all functionality to the stackcalc_pkg.cli module,
    which handles argument parsing, evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from stackcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import stackcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
