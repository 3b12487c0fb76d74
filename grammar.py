from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple, Union

from errors import GrammarError
from utils import EPSILON, END_MARKER

# ===============================================================
# SÍMBOLOS
# ===============================================================

@dataclass(frozen=True)
class Terminal:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class NonTerminal:
    name: str

    def __str__(self) -> str:
        return self.name


Symbol = Union[Terminal, NonTerminal]
Production = Tuple[Symbol, ...]

EPSILON_SYMBOL = Terminal(EPSILON)
END_SYMBOL = Terminal(END_MARKER)


def production_str(production: Production) -> str:
    return " ".join(str(s) for s in production) if production else EPSILON


# ===============================================================
# GRAMÁTICA
# ===============================================================

class Grammar:
    """Gramática libre de contexto inmutable.

    `rules` asocia cada no terminal con sus alternativas, en orden, por
    ejemplo ``{"F": [["(", "E", ")"], ["id"]]}``. Todo nombre que no sea
    clave de `rules` es un terminal; ``["ε"]`` es la producción vacía.
    """

    def __init__(self, rules: Mapping[str, Sequence[Sequence[str]]], start: str):
        declared = set(rules.keys())
        if start not in declared:
            raise GrammarError(f"El símbolo inicial '{start}' no es un no terminal declarado")
        for reserved in (EPSILON, END_MARKER):
            if reserved in declared:
                raise GrammarError(f"'{reserved}' es reservado y no puede ser no terminal")

        self._rules: Dict[NonTerminal, Tuple[Production, ...]] = {}
        terminals: List[Terminal] = []
        for A, alternatives in rules.items():
            prods: List[Production] = []
            for alt in alternatives:
                prod = tuple(self._as_symbol(s, declared) for s in alt)
                if prod not in prods:
                    prods.append(prod)
                for s in prod:
                    if isinstance(s, Terminal) and s != EPSILON_SYMBOL and s not in terminals:
                        terminals.append(s)
            self._rules[NonTerminal(A)] = tuple(prods)

        self.start = NonTerminal(start)
        self._terminals = tuple(terminals)

    @staticmethod
    def _as_symbol(name: str, declared) -> Symbol:
        return NonTerminal(name) if name in declared else Terminal(name)

    @property
    def nonterminals(self) -> Tuple[NonTerminal, ...]:
        return tuple(self._rules.keys())

    @property
    def terminals(self) -> Tuple[Terminal, ...]:
        """Terminales en orden de aparición (sin ε ni $)."""
        return self._terminals

    def is_nonterminal(self, symbol: Symbol) -> bool:
        return isinstance(symbol, NonTerminal) and symbol in self._rules

    def productions(self, nonterminal: NonTerminal) -> Tuple[Production, ...]:
        return self._rules[nonterminal]

    def iter_productions(self) -> Iterator[Tuple[NonTerminal, Production]]:
        for A, prods in self._rules.items():
            for prod in prods:
                yield A, prod

    def __str__(self) -> str:
        lines = []
        for A, prods in self._rules.items():
            lines.append(f"{A} -> " + " | ".join(production_str(p) for p in prods))
        return "\n".join(lines)
