"""Unit tests for lexer module."""

import math
import unittest

from kalkulator_pratt.lexer import tokenize
from kalkulator_pratt.tokens import (
    FuncKind,
    Function,
    LParen,
    Number,
    Operator,
    OpKind,
    RParen,
)
from kalkulator_pratt.types import LexError, LexErrorCode


class TestTokenize(unittest.TestCase):
    """Test tokenizing of valid input."""

    def test_basic_arithmetic(self):
        self.assertEqual(
            tokenize("2 + 2"),
            [Number(2.0), Operator(OpKind.PLUS), Number(2.0)],
        )

    def test_all_single_character_tokens(self):
        self.assertEqual(
            tokenize("+-*/%^!()"),
            [
                Operator(OpKind.PLUS),
                Operator(OpKind.MINUS),
                Operator(OpKind.STAR),
                Operator(OpKind.SLASH),
                Operator(OpKind.MODULO),
                Operator(OpKind.CARET),
                Operator(OpKind.FACTORIAL),
                LParen(),
                RParen(),
            ],
        )

    def test_whitespace_is_skipped(self):
        self.assertEqual(tokenize(" \t2\r\n*\f3 "), tokenize("2*3"))
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize("   "), [])

    def test_decimal_numbers(self):
        self.assertEqual(tokenize("3.25"), [Number(3.25)])
        self.assertEqual(tokenize("5."), [Number(5.0)])
        self.assertEqual(tokenize("007"), [Number(7.0)])

    def test_leading_decimal_point(self):
        self.assertEqual(tokenize(".5"), [Number(0.5)])
        self.assertEqual(tokenize("."), [Number(0.0)])

    def test_number_ends_at_non_digit(self):
        self.assertEqual(
            tokenize("12!"), [Number(12.0), Operator(OpKind.FACTORIAL)]
        )

    def test_functions(self):
        for kind in FuncKind:
            self.assertEqual(tokenize(kind.value), [Function(kind)])
        self.assertEqual(tokenize("log"), [Function(FuncKind.LOG)])

    def test_pi_is_a_number(self):
        self.assertEqual(tokenize("pi"), [Number(math.pi)])

    def test_function_call(self):
        self.assertEqual(
            tokenize("sqrt(16)"),
            [Function(FuncKind.SQRT), LParen(), Number(16.0), RParen()],
        )

    def test_adjacent_tokens_without_implicit_multiplication(self):
        self.assertEqual(tokenize("2pi"), [Number(2.0), Number(math.pi)])
        self.assertEqual(tokenize("2(3)"), [Number(2.0), LParen(), Number(3.0), RParen()])


class TestImplicitMultiplication(unittest.TestCase):
    """Test the optional implicit multiplication variant."""

    def test_number_before_paren(self):
        self.assertEqual(
            tokenize("2(3)", implicit_multiplication=True),
            [Number(2.0), Operator(OpKind.STAR), LParen(), Number(3.0), RParen()],
        )

    def test_number_before_keyword_after_whitespace(self):
        self.assertEqual(
            tokenize("2 pi", implicit_multiplication=True),
            [Number(2.0), Operator(OpKind.STAR), Number(math.pi)],
        )
        self.assertEqual(
            tokenize("3sin(0)", implicit_multiplication=True)[:3],
            [Number(3.0), Operator(OpKind.STAR), Function(FuncKind.SIN)],
        )

    def test_regular_input_unchanged(self):
        self.assertEqual(
            tokenize("2 + 3", implicit_multiplication=True), tokenize("2 + 3")
        )

    def test_every_keyword_initial_triggers(self):
        for word in ("asin", "deg", "rad", "sqrt", "ln", "exp"):
            tokens = tokenize(f"2{word}(1)", implicit_multiplication=True)
            self.assertEqual(tokens[1], Operator(OpKind.STAR), word)

    def test_unknown_identifier_still_fails(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("2x", implicit_multiplication=True)
        self.assertEqual(ctx.exception.code, LexErrorCode.UNRECOGNIZED_IDENTIFIER)


class TestLexErrors(unittest.TestCase):
    """Test that invalid input is rejected as a whole."""

    def test_unrecognized_character(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("2 & 3")
        self.assertEqual(ctx.exception.code, LexErrorCode.UNRECOGNIZED_CHARACTER)
        self.assertEqual(ctx.exception.text, "&")
        self.assertEqual(ctx.exception.position, 2)
        self.assertIn("'&'", str(ctx.exception))

    def test_non_ascii_is_never_dropped(self):
        for text in ("٣", "π", "2 × 3", "\u00a0", "\x0b"):
            with self.assertRaises(LexError) as ctx:
                tokenize(text)
            self.assertEqual(
                ctx.exception.code, LexErrorCode.UNRECOGNIZED_CHARACTER, repr(text)
            )

    def test_unrecognized_identifier(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("1 + foo")
        self.assertEqual(ctx.exception.code, LexErrorCode.UNRECOGNIZED_IDENTIFIER)
        self.assertEqual(ctx.exception.text, "foo")
        self.assertEqual(ctx.exception.position, 4)

    def test_identifiers_are_case_sensitive(self):
        with self.assertRaises(LexError):
            tokenize("Sin(0)")
        with self.assertRaises(LexError):
            tokenize("PI")

    def test_identifier_is_maximal_run(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("sinpi")
        self.assertEqual(ctx.exception.text, "sinpi")

    def test_multiple_decimal_points(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("1.2.3")
        self.assertEqual(ctx.exception.code, LexErrorCode.MULTIPLE_DECIMAL_POINTS)
        self.assertEqual(ctx.exception.position, 3)

    def test_bare_double_dot(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("..")
        self.assertEqual(ctx.exception.code, LexErrorCode.MULTIPLE_DECIMAL_POINTS)

    def test_error_after_valid_prefix(self):
        with self.assertRaises(LexError):
            tokenize("1 + 2 + 3 + $")


if __name__ == "__main__":
    unittest.main()
