"""Servicio de inventario en memoria."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal

from parametros import LOW_STOCK_THRESHOLD, SAMPLE_PRODUCTS
from servidor.domain.models import Category, DiscountKind, Product
from servidor.services.discount_calculator import DiscountCalculator
from servidor.services.inventory_utils import normalize_lookup_key
from servidor.services.product_factory import ProductFactory
from shared.errors import ValidationError
from shared.protocol import (
    InventoryStatistics,
    OperationResult,
    SaleResult,
    SaleSummary,
)

LOGGER = logging.getLogger(__name__)


class InventoryManager:
    """Mantiene la lista ordenada de productos y sus operaciones.

    Ninguna operacion lanza errores de negocio: los fallos se retornan como
    resultados con ``success=False`` y el inventario queda intacto.
    Los nombres duplicados se toleran; las busquedas resuelven al primero
    insertado.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def add_product(
        self,
        category: Category | str,
        name: str,
        price: Decimal | float | int | str,
        quantity: int,
    ) -> OperationResult:
        """Crea un producto via la fabrica y lo agrega al final."""
        try:
            if not name.strip():
                raise ValidationError("Product name cannot be empty.")
            product = ProductFactory.create_product(category, name, price, quantity)
        except ValidationError as exc:
            LOGGER.warning("No se pudo agregar producto %r: %s", name, exc)
            return OperationResult(False, f"Error adding product: {exc}")

        self._products.append(product)
        LOGGER.info("Producto agregado: %s", product)
        return OperationResult(True, f"Added product: {product.name}")

    def find_product(self, name: str) -> Product | None:
        """Busca por nombre sin distinguir mayusculas; gana el primero insertado."""
        key = normalize_lookup_key(name)
        for product in self._products:
            if normalize_lookup_key(product.name) == key:
                return product
        return None

    def sell_product(
        self,
        name: str,
        quantity: int,
        discount_kind: DiscountKind | str | None = DiscountKind.NONE,
    ) -> SaleResult:
        """Vende ``quantity`` unidades aplicando el descuento indicado."""
        product = self.find_product(name)
        if product is None:
            LOGGER.warning("Venta rechazada, producto inexistente: %s", name)
            return SaleResult(False, f"Product not found: {name}")

        if quantity < 0:
            LOGGER.warning("Venta rechazada, cantidad negativa: %s", quantity)
            return SaleResult(False, f"Invalid quantity: {quantity}")

        if not product.is_in_stock() or product.quantity < quantity:
            LOGGER.warning(
                "Venta rechazada por stock insuficiente: %s (pedido=%s, disponible=%s)",
                product.name,
                quantity,
                product.quantity,
            )
            return SaleResult(False, f"Not enough stock. Available: {product.quantity}")

        original_total = product.price * quantity
        discount = DiscountCalculator.calculate_discount(product, quantity, discount_kind)
        final_price = DiscountCalculator.calculate_final_price(
            product, quantity, discount_kind
        )
        description = DiscountCalculator.get_discount_description(
            product, quantity, discount_kind
        )
        product.sell(quantity)

        summary = SaleSummary(
            product_name=product.name,
            quantity=quantity,
            unit_price=product.price,
            original_total=original_total,
            discount=discount,
            discount_description=description,
            final_price=final_price,
            remaining_stock=product.quantity,
        )
        LOGGER.info(
            "Venta completada: %s x%s, total=%s, stock restante=%s",
            product.name,
            quantity,
            final_price,
            product.quantity,
        )
        return SaleResult(True, "Sale complete", summary)

    def add_stock(self, name: str, quantity: int) -> OperationResult:
        """Suma stock a un producto existente."""
        product = self.find_product(name)
        if product is None:
            LOGGER.warning("Reposicion rechazada, producto inexistente: %s", name)
            return OperationResult(False, f"Product not found: {name}")

        product.add_stock(quantity)
        LOGGER.info("Stock actualizado: %s -> %s", product.name, product.quantity)
        return OperationResult(
            True,
            f"Added {quantity} items to {name}. New stock: {product.quantity}",
        )

    def get_products(self) -> list[Product]:
        return list(self._products)

    def get_products_by_type(self, category: Category | str) -> list[Product]:
        target = Category.parse(category)
        return [product for product in self._products if product.category is target]

    def get_low_stock_products(self) -> list[Product]:
        return [
            product
            for product in self._products
            if product.quantity <= LOW_STOCK_THRESHOLD
        ]

    def get_total_inventory_value(self) -> Decimal:
        return sum(
            (product.total_value() for product in self._products),
            start=Decimal("0"),
        )

    def get_product_count(self) -> int:
        return len(self._products)

    def get_statistics(self) -> InventoryStatistics:
        """Agrupa conteo, valor total y productos con stock bajo."""
        return InventoryStatistics(
            product_count=self.get_product_count(),
            total_value=self.get_total_inventory_value(),
            low_stock=self.get_low_stock_products(),
        )

    def load_sample_products(self) -> int:
        """Carga los productos de ejemplo y retorna cuantos se agregaron."""
        added = 0
        for category, name, price, quantity in SAMPLE_PRODUCTS:
            if self.add_product(category, name, price, quantity):
                added += 1
        LOGGER.info("Productos de ejemplo cargados: %s", added)
        return added
