# shaffuru/app/main_window.py
from __future__ import annotations

import logging
import sys
from typing import List, Optional

from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from shaffuru.logic.request import DEFAULT_LENGTH, MAX_LENGTH, build_request
from shaffuru.logic.scramble import Scramble, generate

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ventana principal para generar scrambles con semilla y largo.

    Esta clase coordina:
    - La entrada de semilla (vacía = aleatoria) y largo (0..255)
    - La generación del scramble (`generate`)
    - El historial de scrambles generados en la sesión
    """

    def __init__(self) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales."""
        super().__init__()
        self.setWindowTitle("Shaffuru - Scrambles")

        # --- Historial ---
        self.history: List[Scramble] = []
        self.last_scramble: Optional[Scramble] = None

        # --- UI ---
        root = QWidget()
        root_layout = QVBoxLayout(root)

        # Semilla
        root_layout.addWidget(QLabel("Semilla (vacío = aleatoria)"))
        self.txt_seed = QLineEdit()
        self.txt_seed.setPlaceholderText("Ej: 42")
        root_layout.addWidget(self.txt_seed)

        # Largo + botón
        row_gen = QHBoxLayout()
        self.spin_length = QSpinBox()
        self.spin_length.setRange(0, MAX_LENGTH)
        self.spin_length.setValue(DEFAULT_LENGTH)
        self.btn_generate = QPushButton("Generar")
        row_gen.addWidget(QLabel("Largo"), 0)
        row_gen.addWidget(self.spin_length, 1)
        row_gen.addWidget(self.btn_generate, 1)
        root_layout.addLayout(row_gen)

        # Resultado
        self.txt_output = QPlainTextEdit()
        self.txt_output.setReadOnly(True)
        root_layout.addWidget(self.txt_output, 1)

        # Historial
        root_layout.addWidget(QLabel("Historial de scrambles"))
        self.list_history = QListWidget()
        root_layout.addWidget(self.list_history, 1)

        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_generate.clicked.connect(self.on_generate)
        self.txt_seed.returnPressed.connect(self.on_generate)

    def on_generate(self) -> None:
        """Valida la entrada, genera el scramble y lo muestra."""
        try:
            seed_text = self.txt_seed.text().strip()
            request = build_request(seed_text, str(self.spin_length.value()))
        except ValueError as exc:
            QMessageBox.warning(self, "Semilla inválida", str(exc))
            return

        scramble = generate(request.seed, request.length)
        logger.debug("Scramble desde la ventana: seed=%d", scramble.seed)

        self.last_scramble = scramble
        self.history.append(scramble)
        self.txt_output.setPlainText(scramble.render())
        self.list_history.addItem(scramble.render().replace("\n", "  "))
        self.list_history.scrollToBottom()


def run_gui() -> int:
    """Crea la `QApplication`, muestra la ventana y ejecuta el loop de eventos de Qt.

    Returns:
        Código de salida del loop de eventos.
    """
    app = QApplication.instance() or QApplication(sys.argv)
    w = MainWindow()
    w.show()
    return app.exec()
