import argparse
import sys
from typing import List, Optional

from automatas import PredictiveParser
from errors import GrammarConflict
from reporter import render_analysis, render_parse
from samples import SAMPLES, sample_grammar, sample_input
from table import LL1TableBuilder
from utils import configure_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Analizador predictivo LL(1)")
    p.add_argument("inputs", nargs="*",
                   help="cadenas de tokens separados por espacios (por defecto la de ejemplo)")
    p.add_argument("-g", "--grammar", default="expresiones", choices=sorted(SAMPLES),
                   help="gramática de ejemplo")
    p.add_argument("--log-level", default=None,
                   help="nivel de logging (por defecto LL1_LOG_LEVEL o WARNING)")
    p.add_argument("--no-trace", action="store_true",
                   help="muestra solo el veredicto")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    grammar = sample_grammar(args.grammar)
    try:
        builder = LL1TableBuilder(grammar)
    except GrammarConflict as exc:
        print(str(grammar))
        print(f"\n{exc}")
        return 2

    print(render_analysis(builder))
    parser = PredictiveParser(builder.table)
    inputs = args.inputs or [sample_input(args.grammar)]
    status = 0
    for texto in inputs:
        result = parser.parse(texto)
        print()
        if args.no_trace:
            print(f"'{texto}': {'Aceptada' if result.accepted else 'Rechazada'}")
        else:
            print(render_parse(texto, result))
        if not result.accepted:
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
