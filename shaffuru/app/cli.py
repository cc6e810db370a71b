# shaffuru/app/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from shaffuru import __version__
from shaffuru.logic.request import DEFAULT_LENGTH, MAX_LENGTH, build_request
from shaffuru.logic.scramble import generate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Crea el parser de argumentos de la línea de comandos.

    Semilla y largo quedan como texto; los valida `build_request`.
    """
    parser = argparse.ArgumentParser(
        prog="shaffuru",
        description="Generate random Rubik's cube permutations",
    )
    parser.add_argument(
        "-s",
        "--seed",
        metavar="SEED",
        default=None,
        help="Seed for the random number generator.",
    )
    parser.add_argument(
        "-l",
        "--length",
        metavar="LENGTH",
        default=None,
        help=(
            f"Length of generated permutation (default {DEFAULT_LENGTH}). "
            f"Maximum length is {MAX_LENGTH} moves."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug messages on stderr.",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Open the desktop window instead of printing a scramble.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada de la línea de comandos.

    Valida semilla y largo (termina con código 2 si son inválidos), genera el
    scramble y lo imprime en stdout.

    Args:
        argv: Argumentos sin el nombre del programa. Si es None se usa `sys.argv`.

    Returns:
        Código de salida del proceso.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.gui:
        # Import diferido: PySide6 solo hace falta para la ventana
        from shaffuru.app.main_window import run_gui

        return run_gui()

    try:
        request = build_request(args.seed, args.length)
    except ValueError as exc:
        parser.error(str(exc))
    logger.debug("Pedido: seed=%d length=%d", request.seed, request.length)

    scramble = generate(request.seed, request.length)
    print(scramble.render())
    return 0
