"""Error types and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LexErrorCode(str, Enum):
    """Reasons the tokenizer can reject an input line."""

    UNRECOGNIZED_CHARACTER = "UNRECOGNIZED_CHARACTER"
    UNRECOGNIZED_IDENTIFIER = "UNRECOGNIZED_IDENTIFIER"
    MULTIPLE_DECIMAL_POINTS = "MULTIPLE_DECIMAL_POINTS"
    MALFORMED_NUMBER = "MALFORMED_NUMBER"


class ParseErrorCode(str, Enum):
    """Reasons the evaluator can reject a token sequence."""

    UNEXPECTED_END = "UNEXPECTED_END"
    UNEXPECTED_TOKEN = "UNEXPECTED_TOKEN"
    UNEXPECTED_OPERATOR = "UNEXPECTED_OPERATOR"
    EXPECTED_LPAREN = "EXPECTED_LPAREN"
    UNMATCHED_DELIMITER = "UNMATCHED_DELIMITER"
    FACTORIAL_OF_NEGATIVE = "FACTORIAL_OF_NEGATIVE"
    FACTORIAL_OF_NON_INTEGER = "FACTORIAL_OF_NON_INTEGER"
    TOO_DEEPLY_NESTED = "TOO_DEEPLY_NESTED"


@dataclass
class EvalResult:
    """Result of evaluating an arithmetic expression."""

    ok: bool
    result: str | None = None
    value: float | None = None
    exact: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.value is not None:
            result_dict["value"] = self.value
        if self.exact is not None:
            result_dict["exact"] = self.exact
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.exact is not None:
            parts.append(f"exact={self.exact!r}")
        return f"EvalResult({', '.join(parts)})"


class CalculatorError(Exception):
    """Base class for every error raised while evaluating one input line."""

    def __init__(self, message: str, code: str = "CALCULATOR_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(CalculatorError):
    """Raised when input is rejected before tokenizing."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        super().__init__(message, code)


class LexError(CalculatorError):
    """Raised when the tokenizer meets text it does not understand.

    Attributes:
        text: The offending character, identifier or number text
        position: Character offset of ``text`` in the input line
    """

    def __init__(
        self,
        message: str,
        code: LexErrorCode,
        text: str = "",
        position: int | None = None,
    ):
        self.text = text
        self.position = position
        super().__init__(message, code)


class ParseError(CalculatorError):
    """Raised when the token sequence is not a valid expression.

    Attributes:
        token: The token the evaluator stopped at, or None at end of input
    """

    def __init__(self, message: str, code: ParseErrorCode, token: Any = None):
        self.token = token
        super().__init__(message, code)
