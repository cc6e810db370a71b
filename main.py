# main.py
from __future__ import annotations

import sys
from typing import NoReturn

from shaffuru.app.cli import main as cli_main


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Ejecuta la interfaz de línea de comandos y termina el proceso con su
    código de salida.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
