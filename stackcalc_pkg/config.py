"""Centralized configuration for Stackcalc.

This module defines:
- The supported operators and their precedence table
- Input validation limits
- Converter behavior switches (strict mode, power associativity)
- Limits for the exact (symbolic) companion evaluation
- Regex patterns for infix scanning

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with STACKCALC_)
"""

import os
import re
from types import MappingProxyType

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("stackcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Operator precedence: higher binds tighter. Read-only for the whole process.
PRECEDENCE = MappingProxyType(
    {
        "+": 1,
        "-": 1,
        "*": 2,
        "/": 2,
        "%": 2,
        "^": 3,
    }
)

OPERATORS = frozenset(PRECEDENCE)

LEFT_PAREN = "("
RIGHT_PAREN = ")"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("STACKCALC_MAX_INPUT_LENGTH", "10000"))  # characters

# Converter behavior (defaults reproduce the lenient, left-associative reference)
STRICT_CONVERSION = (
    os.getenv("STACKCALC_STRICT_CONVERSION", "false").lower() == "true"
)
POWER_RIGHT_ASSOCIATIVE = (
    os.getenv("STACKCALC_POWER_RIGHT_ASSOCIATIVE", "false").lower() == "true"
)

# Exact evaluation is skipped when an exponent is larger than this in magnitude
MAX_EXACT_EXPONENT = int(os.getenv("STACKCALC_MAX_EXACT_EXPONENT", "1000"))
# ...and when a value would need more digits than this
MAX_EXACT_DIGITS = int(os.getenv("STACKCALC_MAX_EXACT_DIGITS", "1000"))

# One numeric literal (digits with an optional fractional part) or one symbol
INFIX_TOKEN_REGEX = re.compile(r"\d+\.?\d*|[+\-*/^%()]")
# Same as above plus a catch-all for anything the lenient scan would drop
INFIX_SCAN_REGEX = re.compile(r"(?P<token>\d+\.?\d*|[+\-*/^%()])|(?P<other>\S)")
