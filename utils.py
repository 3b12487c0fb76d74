# utils.py
import logging
import os
import re
import sys
from typing import List, Optional, Union

EPSILON = "ε"  # símbolo para epsilon
END_MARKER = "$"  # fin de entrada

LOG_LEVEL_ENV = "LL1_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def limpiar_texto(texto: str) -> str:
    # Función para limpiar o preprocesar texto de entrada
    return texto.strip()


# ---------------------------------------------------------------------------
# TOKENIZACIÓN DE ENTRADA
# ---------------------------------------------------------------------------

def tokenize_input(texto: str) -> List[str]:
    """Separa por espacios y agrega el centinela $ al final."""
    tokens = [t for t in re.split(r"\s+", limpiar_texto(texto)) if t]
    tokens.append(END_MARKER)
    return tokens


# ---------------------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------------------

def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Configura el logging raíz; sin nivel explícito se usa LL1_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        stream=sys.stdout,
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
