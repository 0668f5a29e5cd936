"""Front-end de consola con menu de texto."""

from __future__ import annotations

import logging
import sys
from decimal import Decimal
from typing import TextIO

from servidor.services.discount_calculator import DiscountCalculator
from servidor.services.inventory_manager import InventoryManager
from servidor.services.product_factory import ProductFactory
from shared.errors import ValidationError

from .backend.report_formatter import (
    format_inventory_listing,
    format_sale_summary,
    format_statistics,
)
from .backend.validators import parse_decimal, parse_int

LOGGER = logging.getLogger(__name__)

MENU_OPTIONS: tuple[str, ...] = (
    "Add Product",
    "View Inventory",
    "Sell Product",
    "Add Stock",
    "View Statistics",
    "Exit",
)


class ConsoleApp:
    """Menu interactivo sobre un InventoryManager con entrada/salida inyectadas."""

    def __init__(
        self,
        manager: InventoryManager,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._manager = manager
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def run(self) -> int:
        """Ejecuta el loop hasta elegir Exit o agotar la entrada."""
        self._print("=== WELCOME TO SIMPLE INVENTORY SYSTEM ===")
        self._print()

        actions = {
            1: self.add_product,
            2: self.view_inventory,
            3: self.sell_product,
            4: self.add_stock,
            5: self.view_statistics,
        }
        try:
            while True:
                self._show_menu()
                choice = self._read_int("Enter your choice: ")
                if choice == len(MENU_OPTIONS):
                    break

                action = actions.get(choice)
                if action is None:
                    self._print("Invalid choice. Please try again.")
                    continue
                action()
        except EOFError:
            LOGGER.info("Entrada agotada; se cierra el menu.")

        self._print("Thank you for using the Inventory System!")
        return 0

    def add_product(self) -> None:
        self._print()
        self._print("=== ADD NEW PRODUCT ===")
        types = ProductFactory.get_valid_types()
        category = self._choose("Available product types:", types, "product type")
        if category is None:
            self._print("Invalid choice.")
            return

        name = self._read_line("Enter product name: ")
        price = self._read_decimal("Enter price: $")
        quantity = self._read_int("Enter initial quantity: ")

        result = self._manager.add_product(category, name, price, quantity)
        self._print(result.message)
        if result:
            self._print("Product added successfully!")
        else:
            self._print("Failed to add product.")
        self._print()

    def view_inventory(self) -> None:
        self._print()
        self._print(format_inventory_listing(self._manager.get_products()))
        self._print()

    def sell_product(self) -> None:
        self._print()
        self._print("=== SELL PRODUCT ===")
        self.view_inventory()
        name = self._read_line("Enter product name to sell: ")
        quantity = self._read_int("Enter quantity to sell: ")

        discount_types = DiscountCalculator.get_available_discount_types()
        discount = self._choose("Available discount types:", discount_types, "discount type")
        if discount is None:
            self._print("Invalid choice. Using no discount.")
            discount = discount_types[-1]

        result = self._manager.sell_product(name, quantity, discount)
        if result.summary is not None:
            self._print()
            self._print(format_sale_summary(result.summary))
        else:
            self._print(result.message)
        self._print()

    def add_stock(self) -> None:
        self._print()
        self._print("=== ADD STOCK ===")
        self.view_inventory()
        name = self._read_line("Enter product name: ")
        quantity = self._read_int("Enter quantity to add: ")
        self._print(self._manager.add_stock(name, quantity).message)
        self._print()

    def view_statistics(self) -> None:
        self._print()
        self._print(format_statistics(self._manager.get_statistics()))
        self._print()

    def _show_menu(self) -> None:
        self._print("=== MAIN MENU ===")
        for position, option in enumerate(MENU_OPTIONS, start=1):
            self._print(f"{position}. {option}")
        self._print("==================")

    def _choose(self, title: str, options: list[str], label: str) -> str | None:
        """Muestra opciones numeradas y retorna la elegida o None."""
        self._print(title)
        for position, option in enumerate(options, start=1):
            self._print(f"{position}. {option}")
        choice = self._read_int(f"Choose {label} (1-{len(options)}): ")
        if 1 <= choice <= len(options):
            return options[choice - 1]
        return None

    def _read_line(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _read_int(self, prompt: str) -> int:
        # Reintenta sin limite hasta recibir un numero valido.
        while True:
            try:
                return parse_int(self._read_line(prompt))
            except ValidationError:
                self._print("Please enter a valid number.")

    def _read_decimal(self, prompt: str) -> Decimal:
        while True:
            try:
                return parse_decimal(self._read_line(prompt))
            except ValidationError:
                self._print("Please enter a valid number.")

    def _print(self, text: str = "") -> None:
        self._stdout.write(f"{text}\n")
