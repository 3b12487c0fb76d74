import unittest

from automatas import ParseResult, PredictiveParser, TraceStep
from errors import InputExhausted, NoApplicableRule, ParseError, UnexpectedSymbol
from grammar import END_SYMBOL, Grammar, NonTerminal, Terminal
from samples import FOLLOW_SUFFIX_RULES, expression_grammar
from table import LL1TableBuilder, ParseTable
from utils import tokenize_input


class TokenizeTest(unittest.TestCase):

    def test_split_and_sentinel(self):
        self.assertEqual(tokenize_input("  id +\tid \n"), ["id", "+", "id", "$"])
        self.assertEqual(tokenize_input(""), ["$"])


class PredictiveParserTest(unittest.TestCase):

    def setUp(self):
        self.parser = PredictiveParser(LL1TableBuilder(expression_grammar()).table)

    def actions(self, result):
        return [step.action for step in result.trace]

    def test_accepts_expression(self):
        result = self.parser.parse("id + id * id")
        self.assertTrue(result.accepted)
        self.assertIsNone(result.error)
        self.assertEqual(self.actions(result)[:4],
                         ["Apply E -> T E'", "Apply T -> F T'", "Apply F -> id", "Match id"])
        self.assertEqual(self.actions(result)[-1], "Accept")
        result.raise_for_error()

    def test_rejects_missing_operand(self):
        result = self.parser.parse("id + * id")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, NoApplicableRule)
        self.assertEqual(result.error.nonterminal, NonTerminal("T"))
        self.assertEqual(result.error.lookahead, Terminal("*"))
        self.assertEqual(result.error.position, 2)
        self.assertEqual(self.actions(result)[-1], str(result.error))
        with self.assertRaises(ParseError):
            result.raise_for_error()

    def test_accepts_single_token(self):
        result = self.parser.parse("id")
        self.assertTrue(result.accepted)
        self.assertEqual(self.actions(result), [
            "Apply E -> T E'", "Apply T -> F T'", "Apply F -> id", "Match id",
            "Apply T' -> ε", "Apply E' -> ε", "Accept",
        ])

    def test_rejects_empty_input(self):
        result = self.parser.parse("")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, NoApplicableRule)
        self.assertEqual(result.error.nonterminal, NonTerminal("E"))
        self.assertEqual(result.error.lookahead, END_SYMBOL)
        self.assertEqual(len(result.trace), 1)

    def test_unexpected_terminal(self):
        result = self.parser.parse("( id")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, UnexpectedSymbol)
        self.assertEqual(result.error.expected, Terminal(")"))
        self.assertEqual(result.error.actual, END_SYMBOL)
        self.assertEqual(result.error.position, 2)

    def test_trailing_input_rejected(self):
        result = self.parser.parse("id )")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, UnexpectedSymbol)
        self.assertEqual(result.error.expected, END_SYMBOL)

    def test_trace_records_state_before_each_step(self):
        result = self.parser.parse("id")
        first = result.trace[0]
        self.assertIsInstance(first, TraceStep)
        self.assertEqual(first.stack_str(), "$ E")
        self.assertEqual(first.input_str(), "id $")
        last = result.trace[-1]
        self.assertEqual(last.stack, (END_SYMBOL,))
        self.assertEqual(last.remaining, (END_SYMBOL,))

    def test_repeated_parses_are_identical(self):
        a = self.parser.parse("( id + id ) * id")
        b = self.parser.parse("( id + id ) * id")
        self.assertTrue(a.accepted)
        self.assertEqual(a, b)

    def test_parse_tokens_appends_end(self):
        self.assertTrue(self.parser.parse_tokens(["id", "*", "id"]).accepted)
        self.assertTrue(self.parser.parse_tokens(["id", "$"]).accepted)

    def test_broken_table_rejects(self):
        # M[S, $] pide otra a: la pila nunca vuelve a $
        S, a = NonTerminal("S"), Terminal("a")
        table = ParseTable(S, {(S, a): (a, S), (S, END_SYMBOL): (a,)})
        result = PredictiveParser(table).parse("a")
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, UnexpectedSymbol)
        self.assertEqual(result.error.position, 1)

    def test_input_without_end_marker_is_rejected(self):
        result = self.parser._run((Terminal("id"),))
        self.assertFalse(result.accepted)
        self.assertIsInstance(result.error, InputExhausted)
        self.assertEqual(result.error.top, NonTerminal("T'"))
        self.assertEqual(result.error.position, 1)

    def test_follow_suffix_grammar(self):
        parser = PredictiveParser(LL1TableBuilder(Grammar(FOLLOW_SUFFIX_RULES, "S")).table)
        self.assertTrue(parser.parse("x y z").accepted)
        self.assertTrue(parser.parse("x z").accepted)
        self.assertFalse(parser.parse("x").accepted)

    def test_result_is_a_value(self):
        result = self.parser.parse("id")
        self.assertIsInstance(result, ParseResult)
        self.assertIsInstance(result.trace, tuple)


if __name__ == '__main__':
    unittest.main()
