"""Result formatting: decimal display and closed-form recognition."""

from __future__ import annotations

import math

import sympy as sp

from . import config
from .logging_config import get_logger

logger = get_logger("formatting")

MAX_DENOMINATOR = 1000


def format_number(value: float, precision: int | None = None) -> str:
    """Format a numeric value with the given number of significant digits.

    Args:
        value: Numeric value to format
        precision: Significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string, e.g. ``4.0 -> "4"``, ``math.pi -> "3.14159265358979"``,
        and ``inf``/``-inf``/``nan`` for non-finite values
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        return f"{float(value):.{int(precision)}g}"
    except (ValueError, TypeError, OverflowError):
        return str(value)


def _is_close(candidate: sp.Basic, value: float, tolerance: float) -> bool:
    # relative only: a tiny nonzero value must not match 0
    try:
        return math.isclose(float(candidate), value, rel_tol=tolerance)
    except (TypeError, ValueError, OverflowError):
        return False


def _rational_multiple(value: float, unit: sp.Basic, tolerance: float) -> sp.Basic | None:
    coeff = sp.Rational(value / float(unit)).limit_denominator(MAX_DENOMINATOR)
    candidate = coeff * unit
    if _is_close(candidate, value, tolerance):
        return candidate
    return None


def format_exact(value: float, tolerance: float | None = None) -> str | None:
    """Recognize a float as a short closed form.

    Tries small rationals, rational multiples of pi, then SymPy's ``nsimplify``
    (surds and expressions in E).

    Args:
        value: Value to recognize
        tolerance: Relative tolerance for a match (default: config.EXACT_TOLERANCE)

    Returns:
        Closed form such as ``"1/2"``, ``"pi/4"`` or ``"sqrt(2)"``, or None when
        the value is not finite or nothing short enough matches
    """
    if tolerance is None:
        tolerance = config.EXACT_TOLERANCE
    if not math.isfinite(value):
        return None
    if value == 0:
        return "0"

    candidate = _rational_multiple(value, sp.Integer(1), tolerance)
    if candidate is None:
        candidate = _rational_multiple(value, sp.pi, tolerance)
    if candidate is None:
        try:
            simplified = sp.nsimplify(value, [sp.E], tolerance=tolerance)
        except (ValueError, TypeError, sp.SympifyError) as e:
            logger.debug(f"nsimplify failed for {value!r}: {e}")
            return None
        if not simplified.is_Float and _is_close(simplified, value, tolerance):
            candidate = simplified

    if candidate is None:
        return None
    text = str(candidate)
    if len(text) > config.EXACT_MAX_LENGTH:
        return None
    return text
