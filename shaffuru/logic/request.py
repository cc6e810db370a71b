# shaffuru/logic/request.py
from __future__ import annotations

import random
import re
from typing import NamedTuple, Optional

DEFAULT_LENGTH: int = 25
MAX_LENGTH: int = 255
MAX_SEED: int = 2**64 - 1

_DIGITS = re.compile(r"\+?[0-9]+")


class ScrambleRequest(NamedTuple):
    """Pedido de generación: semilla y largo ya validados."""

    seed: int
    length: int


def _parse_int(text: str, what: str, upper: int) -> int:
    """Convierte `text` a entero y verifica que esté en [0, upper].

    Solo se aceptan dígitos ASCII con un "+" opcional al inicio: se rechazan
    espacios, separadores "_", signo "-" y dígitos de otros alfabetos.

    Args:
        text: Texto a convertir.
        what: Nombre del valor, usado en el mensaje de error.
        upper: Máximo permitido (inclusive).

    Returns:
        El entero convertido.

    Raises:
        ValueError: Si el texto no es un entero o está fuera de rango.
    """
    raw = str(text)
    if _DIGITS.fullmatch(raw) is None:
        raise ValueError(f"`{raw}` no es un valor válido para {what}.")

    value = int(raw, 10)
    if value > upper:
        raise ValueError(f"`{raw}` está fuera de rango para {what} (0..{upper}).")
    return value


def parse_length(text: str) -> int:
    """Valida el largo del scramble (entero entre 0 y `MAX_LENGTH`).

    Raises:
        ValueError: Si no es numérico o está fuera de rango.
    """
    return _parse_int(text, "length", MAX_LENGTH)


def parse_seed(text: str) -> int:
    """Valida una semilla (entero sin signo de 64 bits).

    Raises:
        ValueError: Si no es numérica o está fuera de rango.
    """
    return _parse_int(text, "seed", MAX_SEED)


def random_seed() -> int:
    """Obtiene una semilla de 64 bits desde la fuente de entropía del sistema."""
    return random.SystemRandom().getrandbits(64)


def build_request(
    seed_text: Optional[str],
    length_text: Optional[str] = None,
) -> ScrambleRequest:
    """Construye un `ScrambleRequest` validando la entrada antes de generar.

    Args:
        seed_text: Semilla como texto. Si es None o vacía se usa `random_seed()`.
        length_text: Largo como texto. Si es None se usa `DEFAULT_LENGTH`.

    Returns:
        El pedido validado.

    Raises:
        ValueError: Si la semilla o el largo son inválidos.
    """
    length = DEFAULT_LENGTH if length_text is None else parse_length(length_text)

    if seed_text is None or not str(seed_text).strip():
        seed = random_seed()
    else:
        seed = parse_seed(seed_text)

    return ScrambleRequest(seed=seed, length=length)
