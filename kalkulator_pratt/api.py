"""Public API for Kalkulator Pratt - returns values or structured results without side effects."""

from __future__ import annotations

from functools import lru_cache

from . import config
from .evaluator import evaluate as evaluate_tokens
from .formatting import format_exact, format_number
from .lexer import tokenize
from .logging_config import get_logger
from .types import CalculatorError, EvalResult, ValidationError

logger = get_logger("api")


def _validate_length(expression: str) -> None:
    if len(expression) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )


@lru_cache(maxsize=config.CACHE_SIZE_EVAL)
def _calculate_cached(
    expression: str, implicit_multiplication: bool, strict_parens: bool, max_depth: int
) -> float:
    tokens = tokenize(expression, implicit_multiplication=implicit_multiplication)
    return evaluate_tokens(tokens, 0, strict_parens=strict_parens, max_depth=max_depth)


def calculate(
    expression: str,
    *,
    implicit_multiplication: bool | None = None,
    strict_parens: bool | None = None,
) -> float:
    """Tokenize and evaluate one line of input.

    Args:
        expression: Arithmetic expression (e.g., "2 + 2 * 3", "sin(pi/2)")
        implicit_multiplication: See ``lexer.tokenize`` (default: config)
        strict_parens: See ``evaluator.evaluate`` (default: config)

    Returns:
        The value as a float

    Raises:
        ValidationError: If the input is too long
        LexError: If the input cannot be tokenized
        ParseError: If the tokens are not a valid expression

    Example:
        >>> calculate("2 ^ 3 ^ 2")
        512.0
    """
    _validate_length(expression)
    if implicit_multiplication is None:
        implicit_multiplication = config.IMPLICIT_MULTIPLICATION
    if strict_parens is None:
        strict_parens = config.STRICT_PARENS
    return _calculate_cached(
        expression, implicit_multiplication, strict_parens, config.MAX_NESTING_DEPTH
    )


def clear_cache() -> None:
    """Drop memoized results, e.g. after changing configuration."""
    _calculate_cached.cache_clear()


def evaluate(
    expression: str,
    *,
    exact: bool = False,
    implicit_multiplication: bool | None = None,
    strict_parens: bool | None = None,
) -> EvalResult:
    """Evaluate an expression, reporting errors in the result instead of raising.

    Args:
        expression: Arithmetic expression string
        exact: Also try to recognize the value as a closed form

    Returns:
        EvalResult with the formatted result and value, or the error and its code
    """
    try:
        value = calculate(
            expression,
            implicit_multiplication=implicit_multiplication,
            strict_parens=strict_parens,
        )
    except CalculatorError as e:
        logger.debug(f"Evaluation of {expression!r} failed: {e.code}")
        return EvalResult(ok=False, error=e.message, error_code=e.code)

    return EvalResult(
        ok=True,
        result=format_number(value),
        value=value,
        exact=format_exact(value) if exact else None,
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check whether an expression evaluates without error.

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> validate_expression("2 + 2")
        (True, None)
        >>> validate_expression("2 & 3")
        (False, "unrecognized character '&'")
    """
    try:
        calculate(expression)
        return True, None
    except CalculatorError as e:
        return False, str(e)
