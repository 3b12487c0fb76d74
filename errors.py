"""Errores de la gramática y del análisis predictivo."""


class LL1Error(Exception):
    """Base de todos los errores del analizador LL(1)."""


# ===============================================================
# ERRORES DE GRAMÁTICA (construcción)
# ===============================================================

class GrammarError(LL1Error):
    """La declaración de la gramática no es válida."""


class GrammarConflict(GrammarError):
    """Dos producciones distintas compiten por la misma celda M[A, t]."""

    def __init__(self, nonterminal, terminal, existing, candidate):
        self.nonterminal = nonterminal
        self.terminal = terminal
        self.existing = existing
        self.candidate = candidate
        super().__init__(
            f"La gramática no es LL(1): M[{nonterminal}, {terminal}] tiene "
            f"{_rhs(existing)} y {_rhs(candidate)}"
        )


# ===============================================================
# ERRORES DE ANÁLISIS (por llamada a parse)
# ===============================================================

class ParseError(LL1Error):
    """Rechazo de la cadena; `position` es el índice del token actual."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(message)


class NoApplicableRule(ParseError):
    def __init__(self, nonterminal, lookahead, position: int):
        self.nonterminal = nonterminal
        self.lookahead = lookahead
        super().__init__(
            f"Error: no hay producción para {nonterminal} con '{lookahead}'",
            position,
        )


class UnexpectedSymbol(ParseError):
    def __init__(self, expected, actual, position: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Error: símbolo inesperado '{actual}', se esperaba '{expected}'",
            position,
        )


class InputExhausted(ParseError):
    def __init__(self, top, position: int):
        self.top = top
        super().__init__(
            f"Error: la entrada terminó con {top} en el tope de la pila",
            position,
        )


def _rhs(production) -> str:
    return " ".join(str(s) for s in production) if production else "ε"
