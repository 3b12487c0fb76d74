"""Proyecciones de FIRST, FOLLOW, tabla y traza para lectura humana."""
from typing import FrozenSet, List, Mapping

import pandas as pd

from automatas import ParseResult
from grammar import Grammar, NonTerminal, Terminal, production_str
from table import LL1TableBuilder, ParseTable


def _set_str(values: FrozenSet[Terminal]) -> str:
    return ", ".join(sorted(str(v) for v in values))


def first_follow_frame(grammar: Grammar,
                       first: Mapping[NonTerminal, FrozenSet[Terminal]],
                       follow: Mapping[NonTerminal, FrozenSet[Terminal]]) -> pd.DataFrame:
    df_first = pd.DataFrame([{"No Terminal": str(nt), "FIRST": _set_str(first.get(nt, frozenset()))}
                             for nt in grammar.nonterminals])
    df_follow = pd.DataFrame([{"No Terminal": str(nt), "FOLLOW": _set_str(follow.get(nt, frozenset()))}
                              for nt in grammar.nonterminals])
    return pd.merge(df_first, df_follow, on="No Terminal", how="left").fillna("")


def table_frame(builder: LL1TableBuilder) -> pd.DataFrame:
    """Matriz no terminal × terminal; las celdas vacías quedan en blanco."""
    grammar: Grammar = builder.grammar
    table: ParseTable = builder.table
    columns = builder.lookahead_terminals()
    rows: List[dict] = []
    for A in grammar.nonterminals:
        row = {"No Terminal": str(A)}
        for t in columns:
            prod = table.get(A, t)
            row[str(t)] = f"{A} -> {production_str(prod)}" if prod is not None else ""
        rows.append(row)
    return pd.DataFrame(rows, columns=["No Terminal"] + [str(t) for t in columns])


def trace_frame(result: ParseResult) -> pd.DataFrame:
    return pd.DataFrame([{"Pila": step.stack_str(),
                          "Entrada": step.input_str(),
                          "Acción": step.action}
                         for step in result.trace],
                        columns=["Pila", "Entrada", "Acción"])


# ===============================================================
# SALIDA DE TEXTO (consola)
# ===============================================================

def render_analysis(builder: LL1TableBuilder) -> str:
    ff = first_follow_frame(builder.grammar, builder.first, builder.follow)
    parts = [
        "Gramática:",
        str(builder.grammar),
        "",
        "FIRST y FOLLOW:",
        ff.to_string(index=False),
        "",
        "Tabla LL(1):",
        table_frame(builder).to_string(index=False),
    ]
    return "\n".join(parts)


def render_parse(texto: str, result: ParseResult) -> str:
    verdict = "Aceptada" if result.accepted else "Rechazada"
    parts = [
        f"Cadena: '{texto}'",
        trace_frame(result).to_string(index=False),
        f"Resultado: {verdict}",
    ]
    return "\n".join(parts)
