"""Pratt (precedence climbing) evaluator.

The evaluator reduces a token sequence to a single float while parsing; no
syntax tree is kept. Every operator has a binding power and a sub-expression
only absorbs operators that bind tighter than the minimum binding power it was
called with, e.g. ``2 + 2 * 3`` evaluates ``2 * 3`` first because ``*`` binds
tighter than ``+``.

All arithmetic is IEEE-754 double precision: ``1/0`` is ``inf`` and ``0/0`` is
NaN. The only numeric checks that raise are the factorial domain checks.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Callable

import numpy as np

from . import config
from .logging_config import get_logger
from .tokens import Function, LParen, Number, Operator, OpKind, RParen, Token
from .types import ParseError, ParseErrorCode

logger = get_logger("evaluator")

# 171! no longer fits in a double
MAX_FACTORIAL_ARGUMENT = 170


def euclidean_remainder(lhs: float, rhs: float) -> float:
    """Remainder of Euclidean division, never negative.

    ``-7 % 3`` is ``2`` (not ``-1`` as with truncated division) and
    ``7 % -3`` is ``1``. A zero divisor gives NaN.
    """
    with np.errstate(all="ignore"):
        remainder = np.fmod(np.float64(lhs), np.float64(rhs))
        if remainder < 0:
            remainder = remainder + np.abs(np.float64(rhs))
    return float(remainder)


def factorial(value: float) -> float:
    """Factorial of a non-negative integer-valued float.

    Raises:
        ParseError: If ``value`` is negative (including ``-0.0``) or is not an
            integer (including infinities and NaN)
    """
    if math.copysign(1.0, value) < 0:
        raise ParseError(
            "cannot calculate factorial of negative numbers",
            ParseErrorCode.FACTORIAL_OF_NEGATIVE,
            token=Operator(OpKind.FACTORIAL),
        )
    if not value.is_integer():
        raise ParseError(
            "cannot calculate factorial of non integers",
            ParseErrorCode.FACTORIAL_OF_NON_INTEGER,
            token=Operator(OpKind.FACTORIAL),
        )
    if value > MAX_FACTORIAL_ARGUMENT:
        return math.inf
    return float(math.factorial(int(value)))


_INFIX_OPERATIONS: dict[OpKind, Callable] = {
    OpKind.PLUS: np.add,
    OpKind.MINUS: np.subtract,
    OpKind.STAR: np.multiply,
    OpKind.SLASH: np.true_divide,
    OpKind.MODULO: euclidean_remainder,
    OpKind.CARET: np.power,
}


def apply_infix(op: OpKind, lhs: float, rhs: float) -> float:
    """Combine two operands with an infix operator under IEEE-754 rules."""
    with np.errstate(all="ignore"):
        return float(_INFIX_OPERATIONS[op](np.float64(lhs), np.float64(rhs)))


class Evaluator:
    """Recursive Pratt evaluator over one token sequence.

    An instance is single use: it owns a cursor into ``tokens`` and the
    current recursion depth.
    """

    def __init__(self, tokens: Iterable[Token], max_depth: int):
        self.tokens = list(tokens)
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def expression(self, min_bp: int) -> float:
        """Evaluate the longest sub-expression whose operators bind tighter than ``min_bp``."""
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise ParseError(
                    f"expression too deeply nested (more than {self.max_depth} levels)",
                    ParseErrorCode.TOO_DEEPLY_NESTED,
                    token=self.peek(),
                )
            lhs = self._leading()
            return self._trailing(lhs, min_bp)
        finally:
            self.depth -= 1

    def _leading(self) -> float:
        token = self.advance()
        if token is None:
            raise ParseError("unexpected end of statement", ParseErrorCode.UNEXPECTED_END)

        if isinstance(token, Number):
            return float(token.value)

        if isinstance(token, Function):
            # the '(' stays in place so the argument is the whole group
            if not isinstance(self.peek(), LParen):
                raise ParseError(
                    f"expected '(' after function '{token}'",
                    ParseErrorCode.EXPECTED_LPAREN,
                    token=token,
                )
            argument = self.expression(token.kind.binding_power)
            return token.kind.apply(argument)

        if isinstance(token, Operator):
            if token.kind not in (OpKind.PLUS, OpKind.MINUS):
                raise ParseError(
                    f"unexpected operator '{token}'",
                    ParseErrorCode.UNEXPECTED_OPERATOR,
                    token=token,
                )
            operand = self.expression(token.kind.prefix_binding_power)
            return -operand if token.kind is OpKind.MINUS else operand

        if isinstance(token, LParen):
            value = self.expression(0)
            if not isinstance(self.advance(), RParen):
                raise ParseError(
                    "unmatched delimiter '('",
                    ParseErrorCode.UNMATCHED_DELIMITER,
                    token=token,
                )
            return value

        raise ParseError(
            f"unexpected token '{token}'", ParseErrorCode.UNEXPECTED_TOKEN, token=token
        )

    def _trailing(self, lhs: float, min_bp: int) -> float:
        while True:
            token = self.peek()
            # ')' is consumed only by the '(' that opened the group
            if token is None or isinstance(token, RParen):
                break
            if not isinstance(token, Operator):
                raise ParseError(
                    f"unexpected token '{token}'",
                    ParseErrorCode.UNEXPECTED_TOKEN,
                    token=token,
                )

            op = token.kind
            if op.binding_power <= min_bp:
                break
            self.advance()

            if op is OpKind.FACTORIAL:
                lhs = factorial(lhs)
                continue

            # right associative operators recurse with a lower binding power so
            # that a following operator of the same kind binds to the right
            rbp = op.binding_power - 1 if op.right_associative else op.binding_power
            rhs = self.expression(rbp)
            lhs = apply_infix(op, lhs, rhs)

        return lhs


def evaluate(
    tokens: Iterable[Token],
    min_bp: int = 0,
    *,
    strict_parens: bool | None = None,
    max_depth: int | None = None,
) -> float:
    """Evaluate a token sequence to a float.

    Args:
        tokens: Tokens produced by ``lexer.tokenize``
        min_bp: Minimum binding power; callers start from 0 so the first
            operator is never skipped
        strict_parens: Reject a ``)`` without a matching ``(``. When off, an
            unmatched ``)`` ends the expression and any tokens after it are
            ignored, so ``(2 + 3)) * 4`` is ``5``. Defaults to
            ``config.STRICT_PARENS``.
        max_depth: Maximum recursion depth. Defaults to ``config.MAX_NESTING_DEPTH``.

    Returns:
        The value of the expression

    Raises:
        ParseError: If the tokens are not a valid expression

    Example:
        >>> from kalkulator_pratt.tokens import Number, Operator, OpKind
        >>> evaluate([Number(2.0), Operator(OpKind.PLUS), Number(2.0)])
        4.0
    """
    if strict_parens is None:
        strict_parens = config.STRICT_PARENS
    if max_depth is None:
        max_depth = config.MAX_NESTING_DEPTH

    evaluator = Evaluator(tokens, max_depth)
    try:
        value = evaluator.expression(min_bp)
    except RecursionError:
        # a max_depth above what the interpreter stack allows
        raise ParseError(
            "expression too deeply nested (interpreter recursion limit reached)",
            ParseErrorCode.TOO_DEEPLY_NESTED,
        ) from None

    leftover = evaluator.peek()
    if isinstance(leftover, RParen):
        if strict_parens:
            raise ParseError(
                "unmatched delimiter ')'",
                ParseErrorCode.UNMATCHED_DELIMITER,
                token=leftover,
            )
        logger.debug(
            f"Ignoring {len(evaluator.tokens) - evaluator.pos} tokens after unmatched ')'"
        )
    return value
