"""Calculo de descuentos por tipo de venta."""

from __future__ import annotations

from decimal import Decimal

from parametros import BULK_DISCOUNT_RATE, BULK_MIN_QUANTITY, STUDENT_DISCOUNT_RATE
from servidor.domain.models import Category, DiscountKind, Product
from servidor.services.inventory_utils import format_money

_ZERO = Decimal("0")


class DiscountCalculator:
    """Funciones puras de descuento sobre (producto, cantidad, tipo)."""

    @staticmethod
    def calculate_discount(
        product: Product,
        quantity: int,
        discount_kind: DiscountKind | str | None,
    ) -> Decimal:
        """Retorna el monto a descontar; tipos desconocidos no descuentan."""
        match DiscountKind.parse(discount_kind):
            case DiscountKind.STUDENT:
                return DiscountCalculator._student_discount(product, quantity)
            case DiscountKind.BULK:
                return DiscountCalculator._bulk_discount(product, quantity)
            case DiscountKind.NONE:
                return _ZERO

    @staticmethod
    def calculate_final_price(
        product: Product,
        quantity: int,
        discount_kind: DiscountKind | str | None,
    ) -> Decimal:
        """Total bruto menos descuento. No valida stock ni aplica piso en cero."""
        original_total = product.price * quantity
        return original_total - DiscountCalculator.calculate_discount(
            product, quantity, discount_kind
        )

    @staticmethod
    def get_discount_description(
        product: Product,
        quantity: int,
        discount_kind: DiscountKind | str | None,
    ) -> str:
        discount = DiscountCalculator.calculate_discount(product, quantity, discount_kind)
        if discount <= 0:
            return "No discount applied"

        amount = format_money(discount)
        match DiscountKind.parse(discount_kind):
            case DiscountKind.STUDENT:
                return f"Student discount (10% off books): {amount}"
            case DiscountKind.BULK:
                return f"Bulk discount (15% off {BULK_MIN_QUANTITY}+ items): {amount}"
            case _:
                return f"Discount applied: {amount}"

    @staticmethod
    def is_valid_discount_type(discount_kind: DiscountKind | str | None) -> bool:
        if isinstance(discount_kind, DiscountKind):
            return True
        return discount_kind in DiscountCalculator.get_available_discount_types()

    @staticmethod
    def get_available_discount_types() -> list[str]:
        return [kind.value for kind in DiscountKind]

    @staticmethod
    def _student_discount(product: Product, quantity: int) -> Decimal:
        if product.category is not Category.BOOK:
            return _ZERO
        return product.price * quantity * STUDENT_DISCOUNT_RATE

    @staticmethod
    def _bulk_discount(product: Product, quantity: int) -> Decimal:
        if quantity < BULK_MIN_QUANTITY:
            return _ZERO
        return product.price * quantity * BULK_DISCOUNT_RATE
