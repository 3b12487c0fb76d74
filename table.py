import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Tuple

from errors import GrammarConflict
from grammar import (EPSILON_SYMBOL, END_SYMBOL, Grammar, NonTerminal, Production,
                     Terminal, production_str)
from parser_ll1 import FirstSets, FollowSets, analizar_gramatica, first_of_sequence

LOGGER = logging.getLogger(__name__)

Cell = Tuple[NonTerminal, Terminal]


class ParseTable:
    """Tabla predictiva M[A, t] de solo lectura."""

    def __init__(self, start: NonTerminal, cells: Mapping[Cell, Production]):
        self.start = start
        self._cells = MappingProxyType(dict(cells))

    def get(self, nonterminal: NonTerminal, terminal: Terminal) -> Optional[Production]:
        return self._cells.get((nonterminal, terminal))

    def __getitem__(self, key: Cell) -> Production:
        return self._cells[key]

    def __contains__(self, key: Cell) -> bool:
        return key in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)


# ===============================================================
# CONSTRUCCIÓN DE LA TABLA
# ===============================================================

def build_parsing_table(grammar: Grammar,
                        first: FirstSets,
                        follow: FollowSets) -> ParseTable:
    """Construye M[A, t]; una segunda producción distinta en la misma celda es un conflicto."""
    cells: Dict[Cell, Production] = {}

    def _assign(A: NonTerminal, t: Terminal, alpha: Production) -> None:
        existing = cells.get((A, t))
        if existing is not None and existing != alpha:
            LOGGER.error("Conflicto en M[%s, %s]: %s / %s",
                         A, t, production_str(existing), production_str(alpha))
            raise GrammarConflict(A, t, existing, alpha)
        cells[(A, t)] = alpha

    for A, alpha in grammar.iter_productions():
        F = first_of_sequence(alpha, first)
        for t in sorted(F - {EPSILON_SYMBOL}, key=str):
            _assign(A, t, alpha)
        if EPSILON_SYMBOL in F:
            for t in sorted(follow.get(A, frozenset()), key=str):
                _assign(A, t, alpha)

    LOGGER.info("Tabla LL(1) construida: %d celdas", len(cells))
    return ParseTable(grammar.start, cells)


class LL1TableBuilder:
    """Calcula FIRST, FOLLOW y la tabla LL(1) al construirse."""

    def __init__(self, grammar: Grammar):
        self.grammar = grammar
        self.first, self.follow = analizar_gramatica(grammar)
        self.table = build_parsing_table(grammar, self.first, self.follow)

    def first_of(self, seq) -> FrozenSet[Terminal]:
        return first_of_sequence(tuple(seq), self.first)

    def lookahead_terminals(self) -> Tuple[Terminal, ...]:
        """Columnas de la tabla: terminales de la gramática más $."""
        return self.grammar.terminals + (END_SYMBOL,)
