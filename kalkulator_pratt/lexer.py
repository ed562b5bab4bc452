"""Lexical analysis: turn an input line into a list of tokens.

Only ASCII digits, letters and whitespace are understood besides the
single-character operators; any other codepoint, including non-ASCII digits,
is an unrecognized character. Tokenizing is all-or-nothing: the first
problem raises ``LexError`` and no partial token list is returned.
"""

from __future__ import annotations

from . import config
from .config import ASCII_DIGITS, ASCII_LETTERS, ASCII_WHITESPACE
from .logging_config import get_logger
from .tokens import (
    KEYWORD_INITIALS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Number,
    Operator,
    OpKind,
    Token,
)
from .types import LexError, LexErrorCode

logger = get_logger("lexer")


def tokenize(text: str, implicit_multiplication: bool | None = None) -> list[Token]:
    """Convert ``text`` into tokens, strictly left to right.

    Args:
        text: One line of input (e.g., "2 + 2", "sin(pi/2)")
        implicit_multiplication: Insert ``*`` between a number and a following
            ``(`` or keyword, so ``2(3)`` lexes as ``2*(3)``. This changes the
            grammar: ``2pi/2pi`` becomes ``2*pi/2*pi``. Defaults to
            ``config.IMPLICIT_MULTIPLICATION``.

    Returns:
        List of tokens

    Raises:
        LexError: On an unrecognized character or identifier, or a malformed number

    Example:
        >>> tokenize("2 + 2")
        [Number(value=2.0), Operator(kind=<OpKind.PLUS: '+'>), Number(value=2.0)]
    """
    if implicit_multiplication is None:
        implicit_multiplication = config.IMPLICIT_MULTIPLICATION

    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in ASCII_WHITESPACE:
            pos += 1
        elif char in ASCII_DIGITS or char == ".":
            token, pos = _lex_number(text, pos)
            tokens.append(token)
            if implicit_multiplication:
                pos = _skip_whitespace(text, pos)
                if pos < len(text) and (
                    text[pos] == "(" or text[pos] in KEYWORD_INITIALS
                ):
                    tokens.append(Operator(OpKind.STAR))
        elif char in ASCII_LETTERS:
            token, pos = _lex_identifier(text, pos)
            tokens.append(token)
        else:
            tokens.append(_lex_single(char, pos))
            pos += 1

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in ASCII_WHITESPACE:
        pos += 1
    return pos


def _lex_single(char: str, pos: int) -> Token:
    try:
        return SINGLE_CHAR_TOKENS[char]
    except KeyError:
        raise LexError(
            f"unrecognized character '{char}'",
            LexErrorCode.UNRECOGNIZED_CHARACTER,
            text=char,
            position=pos,
        ) from None


def _lex_number(text: str, start: int) -> tuple[Number, int]:
    """Consume digits with at most one decimal point.

    A leading ``.`` reads as ``0.``, so ``.5`` is ``0.5`` and ``.`` alone is ``0``.
    """
    pos = start
    seen_dot = False
    while pos < len(text) and (text[pos] in ASCII_DIGITS or text[pos] == "."):
        if text[pos] == ".":
            if seen_dot:
                raise LexError(
                    "number cannot contain more than one decimal point",
                    LexErrorCode.MULTIPLE_DECIMAL_POINTS,
                    text=text[start : pos + 1],
                    position=pos,
                )
            seen_dot = True
        pos += 1

    literal = text[start:pos]
    if literal.startswith("."):
        literal = "0" + literal
    try:
        value = float(literal)
    except ValueError:
        raise LexError(
            f"malformed number '{literal}'",
            LexErrorCode.MALFORMED_NUMBER,
            text=literal,
            position=start,
        ) from None
    return Number(value), pos


def _lex_identifier(text: str, start: int) -> tuple[Token, int]:
    pos = start
    while pos < len(text) and text[pos] in ASCII_LETTERS:
        pos += 1

    word = text[start:pos]
    try:
        return KEYWORDS[word], pos
    except KeyError:
        raise LexError(
            f"unrecognized identifier '{word}'",
            LexErrorCode.UNRECOGNIZED_IDENTIFIER,
            text=word,
            position=start,
        ) from None
