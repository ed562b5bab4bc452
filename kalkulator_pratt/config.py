"""Centralized configuration for Kalkulator Pratt.

This module defines:
- Input validation limits (length, nesting depth)
- Grammar options (implicit multiplication, strict parentheses)
- Output precision and cache sizes

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with KALKULATOR_)
"""

import importlib.metadata
import os

# Version is defined in pyproject.toml [project] section
try:
    VERSION = importlib.metadata.version("kalkulator-pratt")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.1.0"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("KALKULATOR_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_NESTING_DEPTH = int(
    os.getenv("KALKULATOR_MAX_NESTING_DEPTH", "250")
)  # recursive evaluator calls

# Grammar options
IMPLICIT_MULTIPLICATION = _env_flag("KALKULATOR_IMPLICIT_MULTIPLICATION", "false")
STRICT_PARENS = _env_flag("KALKULATOR_STRICT_PARENS", "false")

# Output
OUTPUT_PRECISION = int(
    os.getenv("KALKULATOR_OUTPUT_PRECISION", "15")
)  # significant digits
EXACT_TOLERANCE = float(
    os.getenv("KALKULATOR_EXACT_TOLERANCE", "1e-12")
)  # relative tolerance when matching closed forms
EXACT_MAX_LENGTH = int(
    os.getenv("KALKULATOR_EXACT_MAX_LENGTH", "24")
)  # longest closed form worth showing

# Cache configuration
CACHE_SIZE_EVAL = int(os.getenv("KALKULATOR_CACHE_SIZE_EVAL", "2048"))

ASCII_WHITESPACE = frozenset(" \t\n\r\f")
ASCII_DIGITS = frozenset("0123456789")
ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
