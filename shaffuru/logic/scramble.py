# shaffuru/logic/scramble.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from shaffuru.core.move import Move, opposite, render, sample_move

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scramble:
    """Resultado de una generación: semilla, largo pedido y movimientos.

    Attributes:
        seed: Semilla usada para el generador pseudoaleatorio.
        length: Cantidad de movimientos pedida.
        moves: Movimientos aceptados, en orden.
    """

    seed: int
    length: int
    moves: Tuple[Move, ...]

    def render(self) -> str:
        """Texto de salida: línea "Seed: <seed>" y los movimientos separados por espacios.

        Si no hay movimientos, solo se produce la línea de la semilla.
        """
        header = f"Seed: {self.seed}"
        if not self.moves:
            return header
        return header + "\n" + " ".join(render(m) for m in self.moves)

    def __str__(self) -> str:
        return self.render()


def is_valid(
    candidate: Move,
    last: Optional[Move],
    second_to_last: Optional[Move],
) -> bool:
    """Indica si `candidate` puede agregarse después de los dos últimos movimientos.

    Reglas:
    - Sin movimientos previos: siempre válido.
    - No repetir la cara del último movimiento (evita "U U'", "R R2", ...).
    - Tampoco usar la cara del penúltimo ni su opuesta: con un giro de otro eje
      en medio, "U R D" o "U R U" dejan dos giros del mismo eje casi juntos.

    Args:
        candidate: Movimiento a evaluar.
        last: Último movimiento aceptado, o None si la secuencia está vacía.
        second_to_last: Penúltimo movimiento aceptado, o None si no existe.

    Returns:
        True si el movimiento es aceptable; False en caso contrario.
    """
    if last is None:
        return True

    if candidate.face == last.face:
        return False

    if second_to_last is None:
        return True

    return (
        candidate.face != second_to_last.face
        and candidate.face != opposite(second_to_last.face)
    )


def generate(seed: int, length: int) -> Scramble:
    """Genera un scramble de exactamente `length` movimientos a partir de `seed`.

    Se crea un `random.Random` propio, sembrado una sola vez, y se hace muestreo
    por rechazo: se sortea un movimiento, se valida contra los dos últimos
    aceptados y se agrega o se descarta. Para el mismo par (seed, length) el
    resultado es siempre idéntico.

    Args:
        seed: Semilla del generador (entero sin signo de 64 bits).
        length: Cantidad de movimientos a generar. El rango (0..255) lo valida
            quien llama (ver `shaffuru.logic.request.parse_length`).

    Returns:
        El `Scramble` con la semilla, el largo y los movimientos.
    """
    rng = random.Random(seed)

    moves: List[Move] = []
    last: Optional[Move] = None
    second_to_last: Optional[Move] = None
    rejected = 0

    while len(moves) < length:
        candidate = sample_move(rng)
        if not is_valid(candidate, last, second_to_last):
            rejected += 1
            continue

        moves.append(candidate)
        second_to_last, last = last, candidate

    logger.debug(
        "Scramble generado: seed=%d length=%d rechazados=%d", seed, length, rejected
    )
    return Scramble(seed=seed, length=length, moves=tuple(moves))
