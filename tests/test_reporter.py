import unittest

from automatas import PredictiveParser
from main import main
from reporter import first_follow_frame, render_analysis, render_parse, table_frame, trace_frame
from samples import expression_grammar
from table import LL1TableBuilder


class ReporterTest(unittest.TestCase):

    def setUp(self):
        self.builder = LL1TableBuilder(expression_grammar())

    def test_first_follow_frame(self):
        df = first_follow_frame(self.builder.grammar, self.builder.first, self.builder.follow)
        self.assertEqual(list(df.columns), ["No Terminal", "FIRST", "FOLLOW"])
        self.assertEqual(list(df["No Terminal"]), ["E", "E'", "T", "T'", "F"])
        row = df.set_index("No Terminal").loc["F"]
        self.assertEqual(row["FIRST"], "(, id")
        self.assertEqual(row["FOLLOW"], "$, ), *, +")

    def test_table_frame(self):
        df = table_frame(self.builder).set_index("No Terminal")
        self.assertEqual(list(df.columns), ["+", "*", "(", ")", "id", "$"])
        self.assertEqual(df.loc["E'", "$"], "E' -> ε")
        self.assertEqual(df.loc["F", "("], "F -> ( E )")
        self.assertEqual(df.loc["E", "$"], "")

    def test_trace_frame(self):
        result = PredictiveParser(self.builder.table).parse("id")
        df = trace_frame(result)
        self.assertEqual(len(df), len(result.trace))
        self.assertEqual(df.iloc[0]["Pila"], "$ E")
        self.assertEqual(df.iloc[-1]["Acción"], "Accept")

    def test_render_text(self):
        text = render_analysis(self.builder)
        self.assertIn("FIRST y FOLLOW:", text)
        self.assertIn("Tabla LL(1):", text)
        result = PredictiveParser(self.builder.table).parse("id + * id")
        self.assertTrue(render_parse("id + * id", result).endswith("Resultado: Rechazada"))


class MainTest(unittest.TestCase):

    def test_exit_status(self):
        self.assertEqual(main(["--no-trace", "id + id * id"]), 0)
        self.assertEqual(main(["--no-trace", "id + id * id", "id +"]), 1)
        self.assertEqual(main(["-g", "if-else"]), 2)


if __name__ == '__main__':
    unittest.main()
