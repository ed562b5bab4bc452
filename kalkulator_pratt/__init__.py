"""Kalkulator Pratt: arithmetic expression tokenizer and Pratt evaluator."""

from .api import calculate, evaluate, validate_expression
from .evaluator import evaluate as evaluate_tokens
from .lexer import tokenize
from .types import CalculatorError, LexError, ParseError, ValidationError

__all__ = [
    "config",
    "tokens",
    "lexer",
    "evaluator",
    "formatting",
    "api",
    "cli",
    "types",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "tokenize",
    "evaluate_tokens",
    "calculate",
    "evaluate",
    "validate_expression",
    "CalculatorError",
    "LexError",
    "ParseError",
    "ValidationError",
]
