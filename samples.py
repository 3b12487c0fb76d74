"""Gramáticas de ejemplo para la app y el programa de consola."""
from typing import Dict, List, Tuple

from grammar import Grammar
from utils import EPSILON

Rules = Dict[str, List[List[str]]]

# E -> T E' ; E' -> + T E' | ε ; T -> F T' ; T' -> * F T' | ε ; F -> ( E ) | id
EXPRESSION_RULES: Rules = {
    "E": [["T", "E'"]],
    "E'": [["+", "T", "E'"], [EPSILON]],
    "T": [["F", "T'"]],
    "T'": [["*", "F", "T'"], [EPSILON]],
    "F": [["(", "E", ")"], ["id"]],
}

# S -> i E t S S' | a ; S' -> e S | ε ; E -> b   (if-then-else ambiguo)
DANGLING_ELSE_RULES: Rules = {
    "S": [["i", "E", "t", "S", "S'"], ["a"]],
    "S'": [["e", "S"], [EPSILON]],
    "E": [["b"]],
}

# FOLLOW(X) = { y, z }: Y puede anularse pero z no
FOLLOW_SUFFIX_RULES: Rules = {
    "S": [["X", "Y", "z"]],
    "X": [["x"]],
    "Y": [["y"], [EPSILON]],
}

SAMPLES: Dict[str, Tuple[Rules, str, str]] = {
    "expresiones": (EXPRESSION_RULES, "E", "id + id * id"),
    "if-else": (DANGLING_ELSE_RULES, "S", "i b t a e a"),
    "sufijo": (FOLLOW_SUFFIX_RULES, "S", "x y z"),
}


def sample_grammar(name: str) -> Grammar:
    rules, start, _ = SAMPLES[name]
    return Grammar(rules, start)


def sample_input(name: str) -> str:
    return SAMPLES[name][2]


def expression_grammar() -> Grammar:
    return Grammar(EXPRESSION_RULES, "E")
