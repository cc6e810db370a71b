# shaffuru/core/move.py
from __future__ import annotations

import random
from typing import Dict, List, Literal, NamedTuple

Face = Literal["F", "B", "R", "L", "U", "D"]
Modifier = Literal["", "'", "2"]

FACES: List[Face] = ["F", "B", "R", "L", "U", "D"]

# ""  giro 90°, "'" giro 90° en sentido contrario, "2" giro 180°
MODIFIERS: List[Modifier] = ["", "'", "2"]

# Pares de caras que comparten eje de rotación
OPPOSITE: Dict[Face, Face] = {
    "F": "B",
    "B": "F",
    "R": "L",
    "L": "R",
    "U": "D",
    "D": "U",
}


class Move(NamedTuple):
    """Un movimiento del scramble: cara + modificador.

    La igualdad es estructural: dos movimientos son iguales si cara y modificador
    coinciden.
    """

    face: Face
    modifier: Modifier = ""

    def __str__(self) -> str:
        return render(self)


def opposite(face: Face) -> Face:
    """Devuelve la cara opuesta (la que comparte eje de rotación).

    La relación es una involución: `opposite(opposite(f)) == f` para toda cara.

    Args:
        face: Cara en notación estándar ("F", "B", "R", "L", "U", "D").

    Returns:
        La cara opuesta.

    Raises:
        ValueError: Si `face` no es una cara válida.
    """
    try:
        return OPPOSITE[face]
    except KeyError:
        raise ValueError(f"Cara inválida: {face!r}") from None


def sample_face(rng: random.Random) -> Face:
    """Elige una cara al azar (uniforme entre las 6) usando `rng`."""
    return rng.choice(FACES)


def sample_modifier(rng: random.Random) -> Modifier:
    """Elige un modificador al azar (uniforme entre los 3) usando `rng`."""
    return rng.choice(MODIFIERS)


def sample_move(rng: random.Random) -> Move:
    """Genera un movimiento aleatorio.

    Se sortea primero la cara y luego el modificador; ambos sorteos son
    independientes y usan solo el generador recibido.

    Args:
        rng: Generador pseudoaleatorio del que se extraen los valores.

    Returns:
        Un `Move` uniformemente distribuido entre los 18 posibles.
    """
    face = sample_face(rng)
    modifier = sample_modifier(rng)
    return Move(face, modifier)


def render(move: Move) -> str:
    """Convierte un movimiento a notación de texto (ej: "U'", "B2", "R")."""
    return move.face + move.modifier
