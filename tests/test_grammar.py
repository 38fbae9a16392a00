import unittest

from stochastic_l_systems.errors import GrammarError
from stochastic_l_systems.grammar import Grammar, Production


class TestProduction(unittest.TestCase):

    def test_defaults_to_deterministic(self):
        p = Production("F", "FF")
        self.assertEqual(p.probability, 1.0)
        self.assertFalse(p.is_stochastic)

    def test_immutable(self):
        p = Production("F", "FF", 0.5)
        with self.assertRaises(AttributeError):
            p.rhs = "F"

    def test_invalid_lhs(self):
        with self.assertRaises(GrammarError):
            Production("FF", "F")
        with self.assertRaises(GrammarError):
            Production("", "F")

    def test_probability_out_of_range(self):
        with self.assertRaises(GrammarError):
            Production("F", "F", 0.0)
        with self.assertRaises(ValueError):
            Production("F", "F", 1.5)


class TestGrammar(unittest.TestCase):

    def setUp(self):
        self.grammar = Grammar()
        self.grammar.set_root("F")

    def test_productions_kept_in_insertion_order(self):
        self.grammar.add_production("F", "A", 0.3)
        self.grammar.add_production("G", "GG")
        self.grammar.add_production("F", "B", 0.7)
        self.assertEqual([p.rhs for p in self.grammar.productions_for("F")], ["A", "B"])
        self.assertEqual([p.rhs for p in self.grammar.productions], ["A", "GG", "B"])
        self.assertEqual(self.grammar.symbols, ["F", "G"])
        self.assertEqual(len(self.grammar), 3)

    def test_missing_symbol_has_no_productions(self):
        self.assertEqual(self.grammar.productions_for("X"), ())
        self.assertNotIn("X", self.grammar)

    def test_stochastic_flag(self):
        self.grammar.add_production("F", "F[+F]F")
        self.assertFalse(self.grammar.is_stochastic)
        self.grammar.add_production("F", "F[-F]F", 0.5)
        self.assertTrue(self.grammar.is_stochastic)

    def test_clear(self):
        self.grammar.add_production("F", "FF", 0.5)
        self.grammar.clear()
        self.assertEqual(self.grammar.root, "")
        self.assertEqual(len(self.grammar), 0)
        self.assertFalse(self.grammar.is_stochastic)
        self.assertEqual(self.grammar.productions_for("F"), ())

    def test_rule_string_deterministic(self):
        self.grammar.add_production("F", "F[+F]F[-F]F")
        self.assertEqual(self.grammar.rule_string(), "Root is F\nF → F[+F]F[-F]F\n")

    def test_rule_string_stochastic(self):
        self.grammar.add_production("F", "F[+F]F", 0.33)
        self.grammar.add_production("F", "F[-F]F", 0.67)
        self.assertEqual(
            self.grammar.rule_string(),
            "Root is F\nF → F[+F]F (0.33)\nF → F[-F]F (0.67)\n",
        )


if __name__ == "__main__":
    unittest.main()
