"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from servidor.services.discount_calculator import DiscountCalculator
from servidor.services.inventory_manager import InventoryManager
from servidor.services.product_factory import ProductFactory
from shared.errors import ServiceError, ValidationError
from shared.protocol import SaleSummary

from .report_formatter import (
    format_inventory_listing,
    format_sale_summary,
    format_statistics,
)
from .validators import parse_decimal, parse_int

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de UI con el servicio de inventario."""

    def __init__(self, manager: InventoryManager | None = None) -> None:
        self._manager = manager or InventoryManager()

    @property
    def manager(self) -> InventoryManager:
        return self._manager

    @staticmethod
    def list_categories() -> list[str]:
        return ProductFactory.get_valid_types()

    @staticmethod
    def list_discount_types() -> list[str]:
        return DiscountCalculator.get_available_discount_types()

    def list_product_names(self) -> list[str]:
        """Nombres en orden de insercion, para combos de seleccion."""
        return [product.name for product in self._manager.get_products()]

    def inventory_text(self) -> str:
        return format_inventory_listing(self._manager.get_products())

    def statistics_text(self) -> str:
        return format_statistics(self._manager.get_statistics())

    def on_add_product(
        self,
        category: str,
        name: str,
        price_raw: str,
        quantity_raw: str,
    ) -> str:
        """Valida el formulario y agrega el producto; retorna el mensaje de exito."""
        name_clean = name.strip()
        if not name_clean:
            raise ValidationError("Product name cannot be empty.")
        if not ProductFactory.is_valid_type(category):
            raise ValidationError(f"Unknown product type: {category}")

        price = parse_decimal(price_raw)
        quantity = parse_int(quantity_raw)
        self._validate_non_negative(quantity)

        result = self._manager.add_product(category, name_clean, price, quantity)
        if not result:
            raise ServiceError(result.message)

        LOGGER.info("Accion ejecutada: agregar producto %s", name_clean)
        return result.message

    def on_sell_product(
        self,
        name: str,
        quantity_raw: str,
        discount_kind: str,
    ) -> SaleSummary:
        """Ejecuta una venta y retorna su resumen."""
        quantity = parse_int(quantity_raw)
        self._validate_non_negative(quantity)

        result = self._manager.sell_product(name.strip(), quantity, discount_kind)
        if not result or result.summary is None:
            raise ServiceError(result.message)

        LOGGER.info("Accion ejecutada: vender %s x%s", name.strip(), quantity)
        return result.summary

    def sale_summary_text(self, summary: SaleSummary) -> str:
        return format_sale_summary(summary)

    def on_add_stock(self, name: str, quantity_raw: str) -> str:
        """Repone stock de un producto y retorna el mensaje del servicio."""
        quantity = parse_int(quantity_raw)
        self._validate_non_negative(quantity)

        result = self._manager.add_stock(name.strip(), quantity)
        if not result:
            raise ServiceError(result.message)
        return result.message

    def on_exit(
        self,
        app: QApplication | Callable[[], None] | None,
    ) -> None:
        """Cierra la aplicacion."""
        LOGGER.info("Accion ejecutada: salir")

        if callable(app):
            app()
            return

        if app is not None:
            app.quit()

    @staticmethod
    def _validate_non_negative(quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Quantity must be zero or greater.")
