import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from errors import InputExhausted, NoApplicableRule, ParseError, UnexpectedSymbol
from grammar import END_SYMBOL, EPSILON_SYMBOL, NonTerminal, Symbol, Terminal, production_str
from table import ParseTable
from utils import END_MARKER, tokenize_input

LOGGER = logging.getLogger(__name__)

# ===============================================================
# TRAZA
# ===============================================================

class TraceStep(NamedTuple):
    """Un paso del autómata: pila (fondo → tope), entrada restante y acción."""
    stack: Tuple[Symbol, ...]
    remaining: Tuple[Terminal, ...]
    action: str

    def stack_str(self) -> str:
        return " ".join(str(s) for s in self.stack)

    def input_str(self) -> str:
        return " ".join(str(t) for t in self.remaining)


class ParseResult(NamedTuple):
    accepted: bool
    trace: Tuple[TraceStep, ...]
    error: Optional[ParseError] = None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


# ===============================================================
# AUTÓMATA DE PILA PREDICTIVO
# ===============================================================

class PredictiveParser:
    """Reconocedor LL(1) dirigido por tabla.

    La tabla se comparte en modo lectura; pila, cursor y traza son locales
    a cada llamada, así que varias llamadas a `parse` no interfieren.
    """

    def __init__(self, table: ParseTable):
        self.table = table

    def parse(self, texto: str) -> ParseResult:
        return self.parse_tokens(tokenize_input(texto))

    def parse_tokens(self, tokens: Sequence[str]) -> ParseResult:
        """Analiza tokens ya separados; agrega $ si no viene al final."""
        words = list(tokens)
        if not words or words[-1] != END_MARKER:
            words.append(END_MARKER)
        result = self._run(tuple(Terminal(w) for w in words))
        LOGGER.info("Cadena %s: %s", "aceptada" if result.accepted else "rechazada",
                    " ".join(words))
        return result

    def _run(self, inp: Tuple[Terminal, ...]) -> ParseResult:
        stack: List[Symbol] = [END_SYMBOL, self.table.start]
        ip = 0
        trace: List[TraceStep] = []

        def _record(action: str) -> None:
            LOGGER.debug("%-25s %-25s %s", " ".join(map(str, stack)),
                         " ".join(map(str, inp[ip:])), action)
            trace.append(TraceStep(tuple(stack), inp[ip:], action))

        def _reject(error: ParseError) -> ParseResult:
            _record(str(error))
            return ParseResult(False, tuple(trace), error)

        while stack:
            top = stack[-1]
            if ip >= len(inp):
                return _reject(InputExhausted(top, ip))
            a = inp[ip]

            if top == a:
                if top == END_SYMBOL:
                    _record("Accept")
                    return ParseResult(True, tuple(trace))
                _record(f"Match {top}")
                stack.pop()
                ip += 1
            elif isinstance(top, NonTerminal):
                production = self.table.get(top, a)
                if production is None:
                    return _reject(NoApplicableRule(top, a, ip))
                _record(f"Apply {top} -> {production_str(production)}")
                stack.pop()
                stack.extend(s for s in reversed(production) if s != EPSILON_SYMBOL)
            else:
                return _reject(UnexpectedSymbol(top, a, ip))

        return _reject(InputExhausted(END_SYMBOL, ip))
