"""Token model: operator and function kinds, binding powers and keyword tables.

Binding powers encode precedence for the Pratt evaluator. The values themselves
are arbitrary, but an operator that binds tighter must have a strictly greater
binding power:

    + -  (5)  <  * /  (10)  <  %  (15)  <  ^  (25)  <  !  (30)  <  functions (35)

Prefix ``+`` and ``-`` bind with their infix power plus
``PREFIX_BINDING_POWER_BONUS``, so ``-2^2`` is ``-(2^2)`` while ``-7 % 3`` is
``(-7) % 3``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

import numpy as np

PREFIX_BINDING_POWER_BONUS = 15
FUNCTION_BINDING_POWER = 35


class OpKind(Enum):
    """All operators, keyed by their source symbol."""

    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    MODULO = "%"
    CARET = "^"
    FACTORIAL = "!"

    @property
    def binding_power(self) -> int:
        """Binding power for the infix (or, for factorial, postfix) sense."""
        return _OP_BINDING_POWERS[self]

    @property
    def prefix_binding_power(self) -> int:
        return self.binding_power + PREFIX_BINDING_POWER_BONUS

    @property
    def right_associative(self) -> bool:
        return self is OpKind.CARET


_OP_BINDING_POWERS = {
    OpKind.PLUS: 5,
    OpKind.MINUS: 5,
    OpKind.STAR: 10,
    OpKind.SLASH: 10,
    OpKind.MODULO: 15,
    OpKind.CARET: 25,
    OpKind.FACTORIAL: 30,
}


class FuncKind(Enum):
    """Built-in single-argument functions, keyed by their keyword."""

    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    DEG = "deg"  # radians to degrees
    RAD = "rad"  # degrees to radians
    EXP = "exp"
    LN = "ln"
    LOG = "log"  # base 10
    SQRT = "sqrt"

    @property
    def binding_power(self) -> int:
        """All functions share the highest binding power.

        Hence ``sin(2 + 2) - 3`` is ``(sin(2 + 2)) - 3`` and ``sqrt(4)^3`` is
        ``(sqrt(4))^3``.
        """
        return FUNCTION_BINDING_POWER

    def apply(self, value: float) -> float:
        """Evaluate the function at ``value`` with IEEE-754 semantics.

        Out-of-domain arguments give NaN and overflow gives infinity instead of
        raising, e.g. ``ln(-1)`` is NaN and ``ln(0)`` is ``-inf``.
        """
        with np.errstate(all="ignore"):
            return float(_FUNCTION_UFUNCS[self](np.float64(value)))


_FUNCTION_UFUNCS: dict[FuncKind, Callable] = {
    FuncKind.SIN: np.sin,
    FuncKind.COS: np.cos,
    FuncKind.TAN: np.tan,
    FuncKind.ASIN: np.arcsin,
    FuncKind.ACOS: np.arccos,
    FuncKind.ATAN: np.arctan,
    FuncKind.DEG: np.degrees,
    FuncKind.RAD: np.radians,
    FuncKind.EXP: np.exp,
    FuncKind.LN: np.log,
    FuncKind.LOG: np.log10,
    FuncKind.SQRT: np.sqrt,
}


@dataclass(frozen=True)
class Number:
    """A numeric literal as a 64-bit float."""

    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    kind: OpKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Function:
    kind: FuncKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class LParen:
    def __str__(self) -> str:
        return "("


@dataclass(frozen=True)
class RParen:
    def __str__(self) -> str:
        return ")"


Token = Union[Number, Operator, Function, LParen, RParen]

# `pi` is a plain number, not a function
KEYWORDS: dict[str, Token] = {kind.value: Function(kind) for kind in FuncKind}
KEYWORDS["pi"] = Number(math.pi)

SINGLE_CHAR_TOKENS: dict[str, Token] = {kind.value: Operator(kind) for kind in OpKind}
SINGLE_CHAR_TOKENS["("] = LParen()
SINGLE_CHAR_TOKENS[")"] = RParen()

# First letters of every keyword, used by the implicit multiplication variant
KEYWORD_INITIALS = frozenset(word[0] for word in KEYWORDS)
