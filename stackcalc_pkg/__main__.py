"""Main entry point for running stackcalc_pkg as a module.

This allows running Stackcalc with:
    python -m stackcalc_pkg
    python -m stackcalc_pkg --health-check
    python -m stackcalc_pkg -e "2 3 +"
    python -m stackcalc_pkg -c "5 * (3 + 2)"

This is equivalent to running:
    python -m stackcalc_pkg.cli
    python stackcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
