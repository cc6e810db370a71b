# shaffuru/logic/moves.py
from __future__ import annotations

from typing import List, cast

from shaffuru.core.move import FACES, MODIFIERS, Face, Modifier, Move


def parse_move(tok: str) -> Move:
    """Convierte un token de texto en un `Move`.

    Permite leer de vuelta un scramble impreso (la línea de movimientos que
    produce `Scramble.render()`) o una secuencia escrita a mano.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta notación de una cara con sufijo opcional:
        - ""  (ej: "R")
        - "'" (ej: "R'")
        - "2" (ej: "R2")
    - Corrige el caso típico "D2'" -> "D2" (el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "F2", "D2'").

    Returns:
        El movimiento correspondiente.

    Raises:
        ValueError: Si el token está vacío, la cara no es válida o el sufijo no es válido.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        raise ValueError("Movimiento vacío.")

    base = tok[0]
    suf = tok[1:]

    if base not in FACES:
        raise ValueError(f"Movimiento inválido: {tok}")

    # Corrección: "D2'" -> "D2"
    if suf == "2'":
        suf = "2"

    if suf not in MODIFIERS:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return Move(cast(Face, base), cast(Modifier, suf))


def parse_sequence(text: str) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    La entrada debe separar movimientos por espacios. Por ejemplo:
        "R U R' U'" -> [Move("R", ""), Move("U", ""), Move("R", "'"), Move("U", "'")]

    Args:
        text: Secuencia de movimientos escrita como string.

    Returns:
        Lista de movimientos, en el mismo orden.

    Raises:
        ValueError: Si algún token es inválido.
    """
    return [parse_move(t) for t in text.split()]
