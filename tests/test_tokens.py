"""Unit tests for the token model and binding powers."""

import math
import unittest

from kalkulator_pratt.tokens import (
    FUNCTION_BINDING_POWER,
    KEYWORD_INITIALS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    FuncKind,
    Function,
    LParen,
    Number,
    Operator,
    OpKind,
)


class TestBindingPowers(unittest.TestCase):
    """Binding powers must follow mathematical precedence."""

    def test_precedence_order(self):
        self.assertEqual(OpKind.PLUS.binding_power, OpKind.MINUS.binding_power)
        self.assertEqual(OpKind.STAR.binding_power, OpKind.SLASH.binding_power)
        self.assertLess(OpKind.PLUS.binding_power, OpKind.STAR.binding_power)
        self.assertLess(OpKind.STAR.binding_power, OpKind.MODULO.binding_power)
        self.assertLess(OpKind.MODULO.binding_power, OpKind.CARET.binding_power)
        self.assertLess(OpKind.CARET.binding_power, OpKind.FACTORIAL.binding_power)
        self.assertLess(OpKind.FACTORIAL.binding_power, FuncKind.SIN.binding_power)

    def test_exact_values(self):
        self.assertEqual(
            [op.binding_power for op in OpKind], [5, 5, 10, 10, 15, 25, 30]
        )
        self.assertEqual(FUNCTION_BINDING_POWER, 35)

    def test_all_functions_share_binding_power(self):
        self.assertEqual({kind.binding_power for kind in FuncKind}, {35})

    def test_prefix_binding_power(self):
        self.assertEqual(OpKind.MINUS.prefix_binding_power, 20)
        self.assertEqual(OpKind.PLUS.prefix_binding_power, 20)
        # binds tighter than %, looser than ^
        self.assertGreater(OpKind.MINUS.prefix_binding_power, OpKind.MODULO.binding_power)
        self.assertLess(OpKind.MINUS.prefix_binding_power, OpKind.CARET.binding_power)

    def test_only_caret_is_right_associative(self):
        self.assertEqual(
            [op for op in OpKind if op.right_associative], [OpKind.CARET]
        )


class TestFunctions(unittest.TestCase):
    """Test function evaluation."""

    def test_inverse_pairs(self):
        self.assertAlmostEqual(FuncKind.LN.apply(FuncKind.EXP.apply(1.0)), 1.0)
        self.assertAlmostEqual(FuncKind.ASIN.apply(FuncKind.SIN.apply(0.5)), 0.5)
        self.assertAlmostEqual(FuncKind.RAD.apply(FuncKind.DEG.apply(1.25)), 1.25)

    def test_values(self):
        self.assertEqual(FuncKind.SQRT.apply(16.0), 4.0)
        self.assertAlmostEqual(FuncKind.LOG.apply(1000.0), 3.0)
        self.assertAlmostEqual(FuncKind.DEG.apply(math.pi), 180.0)
        self.assertAlmostEqual(FuncKind.RAD.apply(180.0), math.pi)
        self.assertAlmostEqual(FuncKind.ATAN.apply(1.0), math.pi / 4)
        self.assertEqual(FuncKind.COS.apply(0.0), 1.0)

    def test_results_are_python_floats(self):
        for kind in FuncKind:
            self.assertIs(type(kind.apply(0.5)), float, kind)

    def test_out_of_domain_is_ieee(self):
        self.assertTrue(math.isnan(FuncKind.SQRT.apply(-1.0)))
        self.assertTrue(math.isnan(FuncKind.LN.apply(-1.0)))
        self.assertTrue(math.isnan(FuncKind.ACOS.apply(2.0)))
        self.assertEqual(FuncKind.LN.apply(0.0), -math.inf)
        self.assertEqual(FuncKind.EXP.apply(1000.0), math.inf)
        self.assertTrue(math.isnan(FuncKind.SIN.apply(math.inf)))


class TestTables(unittest.TestCase):
    """Test keyword and single-character tables."""

    def test_keywords(self):
        self.assertEqual(
            set(KEYWORDS),
            {
                "sin", "cos", "tan", "asin", "acos", "atan",
                "deg", "rad", "exp", "ln", "log", "sqrt", "pi",
            },
        )
        self.assertEqual(KEYWORDS["pi"], Number(math.pi))
        self.assertEqual(KEYWORDS["log"], Function(FuncKind.LOG))

    def test_keyword_initials(self):
        self.assertEqual(KEYWORD_INITIALS, frozenset("sctaderlp"))

    def test_single_characters(self):
        self.assertEqual(set(SINGLE_CHAR_TOKENS), set("+-*/%^!()"))
        self.assertEqual(SINGLE_CHAR_TOKENS["("], LParen())
        self.assertEqual(SINGLE_CHAR_TOKENS["^"], Operator(OpKind.CARET))

    def test_tokens_render_as_source(self):
        self.assertEqual(str(Operator(OpKind.STAR)), "*")
        self.assertEqual(str(Function(FuncKind.SQRT)), "sqrt")
        self.assertEqual(str(Number(2.5)), "2.5")
        self.assertEqual(str(LParen()), "(")

    def test_tokens_are_immutable(self):
        token = Number(1.0)
        with self.assertRaises(AttributeError):
            token.value = 2.0


if __name__ == "__main__":
    unittest.main()
