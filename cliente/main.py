"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from cliente.backend.controller import AppController
from cliente.console import ConsoleApp
from servidor.services.inventory_manager import InventoryManager

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inventario simple de libros y electronicos.")
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Abre la interfaz de escritorio en vez del menu de consola.",
    )
    parser.add_argument(
        "--no-samples",
        action="store_true",
        help="Inicia con el inventario vacio.",
    )
    return parser.parse_args(argv)


def run_gui(controller: AppController) -> int:
    """Ejecuta la aplicacion grafica."""
    from PyQt6.QtWidgets import QApplication

    from cliente.frontend.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow(controller=controller)
    window.show()

    LOGGER.info("Aplicacion grafica iniciada.")
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    """Punto de entrada CLI."""
    args = parse_args(argv)

    manager = InventoryManager()
    if not args.no_samples:
        manager.load_sample_products()

    if args.gui:
        return run_gui(AppController(manager))
    return ConsoleApp(manager).run()


if __name__ == "__main__":
    raise SystemExit(main())
