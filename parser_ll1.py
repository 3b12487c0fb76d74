import logging
from typing import Dict, FrozenSet, Iterator, Mapping, Sequence, Tuple

from grammar import EPSILON_SYMBOL, END_SYMBOL, Grammar, NonTerminal, Symbol, Terminal

__all__ = [
    "first_of_sequence",
    "first_passes",
    "compute_first",
    "follow_passes",
    "compute_follow",
    "analizar_gramatica",
]

LOGGER = logging.getLogger(__name__)

FirstSets = Dict[NonTerminal, FrozenSet[Terminal]]
FollowSets = Dict[NonTerminal, FrozenSet[Terminal]]

# ---------------------------------------------------------------------------
# FIRST
# ---------------------------------------------------------------------------

def first_of_sequence(seq: Sequence[Symbol],
                      first: Mapping[NonTerminal, FrozenSet[Terminal]]) -> FrozenSet[Terminal]:
    """FIRST(α) para una secuencia α con la aproximación actual de FIRST."""
    if not seq or seq[0] == EPSILON_SYMBOL:
        return frozenset({EPSILON_SYMBOL})
    acc = set()
    for X in seq:
        if X == EPSILON_SYMBOL:
            continue
        if isinstance(X, Terminal):
            acc.add(X)
            return frozenset(acc)
        FX = first.get(X, frozenset())
        acc |= (FX - {EPSILON_SYMBOL})
        if EPSILON_SYMBOL not in FX:
            return frozenset(acc)
    # toda la secuencia puede anularse
    acc.add(EPSILON_SYMBOL)
    return frozenset(acc)


def first_passes(grammar: Grammar) -> Iterator[FirstSets]:
    """Genera FIRST tras cada pasada completa hasta el punto fijo.

    Cada pasada lee de la instantánea anterior y escribe en una copia,
    de modo que el conjunto leído nunca es el que se está escribiendo.
    """
    first: FirstSets = {A: frozenset() for A in grammar.nonterminals}
    passes = 0
    while True:
        updated = dict(first)
        for A, prod in grammar.iter_productions():
            updated[A] = updated[A] | first_of_sequence(prod, first)
        passes += 1
        if updated == first:
            LOGGER.debug("FIRST estable tras %d pasadas", passes)
            return
        LOGGER.debug("FIRST pasada %d: %s", passes, _fmt(updated))
        first = updated
        yield first


def compute_first(grammar: Grammar) -> FirstSets:
    first: FirstSets = {A: frozenset() for A in grammar.nonterminals}
    for first in first_passes(grammar):
        pass
    return first


# ---------------------------------------------------------------------------
# FOLLOW
# ---------------------------------------------------------------------------

def follow_passes(grammar: Grammar, first: Mapping[NonTerminal, FrozenSet[Terminal]]) -> Iterator[FollowSets]:
    """Genera FOLLOW tras cada pasada; la primera es la semilla $ ∈ FOLLOW(S)."""
    follow: FollowSets = {A: frozenset() for A in grammar.nonterminals}
    follow[grammar.start] = frozenset({END_SYMBOL})
    yield follow

    passes = 0
    while True:
        updated = dict(follow)
        for A, prod in grammar.iter_productions():
            for i, B in enumerate(prod):
                if not grammar.is_nonterminal(B):
                    continue
                beta = prod[i + 1:]
                first_beta = first_of_sequence(beta, first)
                # Regla 1: FIRST(β) - {ε} ⊆ FOLLOW(B)
                gained = first_beta - {EPSILON_SYMBOL}
                # Regla 2: β vacío o ε ∈ FIRST(β) → FOLLOW(A) ⊆ FOLLOW(B)
                if EPSILON_SYMBOL in first_beta:
                    gained |= follow[A]
                updated[B] = updated[B] | gained
        passes += 1
        if updated == follow:
            LOGGER.debug("FOLLOW estable tras %d pasadas", passes)
            return
        LOGGER.debug("FOLLOW pasada %d: %s", passes, _fmt(updated))
        follow = updated
        yield follow


def compute_follow(grammar: Grammar, first: Mapping[NonTerminal, FrozenSet[Terminal]]) -> FollowSets:
    follow: FollowSets = {}
    for follow in follow_passes(grammar, first):
        pass
    return follow


# ---------------------------------------------------------------------------
# Front-end "puro"
# ---------------------------------------------------------------------------

def analizar_gramatica(grammar: Grammar) -> Tuple[FirstSets, FollowSets]:
    first = compute_first(grammar)
    follow = compute_follow(grammar, first)
    return first, follow


def _fmt(sets: Mapping[NonTerminal, FrozenSet[Terminal]]) -> str:
    return "; ".join(f"{A}={{{', '.join(sorted(map(str, v)))}}}" for A, v in sets.items())
