"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from servidor.services.inventory_utils import format_money, to_decimal


class Category(str, Enum):
    """Categorias de producto soportadas."""

    BOOK = "Book"
    ELECTRONICS = "Electronics"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Category | str) -> Category | None:
        """Retorna la categoria para un nombre exacto o None si no existe."""
        if isinstance(value, cls):
            return value
        for category in cls:
            if category.value == value:
                return category
        return None


class DiscountKind(str, Enum):
    """Tipos de descuento aplicables a una venta."""

    STUDENT = "Student"
    BULK = "Bulk"
    NONE = "None"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: DiscountKind | str | None) -> DiscountKind:
        """Mapea un valor a un tipo de descuento; lo desconocido es NONE."""
        if isinstance(value, cls):
            return value
        for kind in cls:
            if kind.value == value:
                return kind
        return cls.NONE


@dataclass(slots=True)
class Product:
    """Representa un producto en inventario."""

    name: str
    category: Category
    price: Decimal
    quantity: int

    def __post_init__(self) -> None:
        self.price = to_decimal(self.price)

    def is_in_stock(self) -> bool:
        """Indica si queda al menos una unidad."""
        return self.quantity > 0

    def sell(self, amount: int) -> bool:
        """Descuenta stock; rechaza la venta completa si no alcanza."""
        if amount < 0 or amount > self.quantity:
            return False

        self.quantity -= amount
        return True

    def add_stock(self, amount: int) -> None:
        # Sin validacion de signo: un monto negativo reduce el stock.
        self.quantity += amount

    def set_price(self, price: Decimal | float | int | str) -> None:
        self.price = to_decimal(price)

    def set_quantity(self, quantity: int) -> None:
        self.quantity = quantity

    def total_value(self) -> Decimal:
        """Valor del stock disponible (precio * cantidad)."""
        return self.price * self.quantity

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.category.value}) - "
            f"{format_money(self.price)} [Stock: {self.quantity}]"
        )
