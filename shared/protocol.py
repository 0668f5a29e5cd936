"""DTOs de resultados entre servicios y front-ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from servidor.domain.models import Product


@dataclass(slots=True)
class OperationResult:
    """Resultado de una operacion de inventario; verdadero si tuvo exito."""

    success: bool
    message: str

    def __bool__(self) -> bool:
        return self.success


@dataclass(slots=True)
class SaleSummary:
    """Detalle de una venta completada."""

    product_name: str
    quantity: int
    unit_price: Decimal
    original_total: Decimal
    discount: Decimal
    discount_description: str
    final_price: Decimal
    remaining_stock: int


@dataclass(slots=True)
class SaleResult:
    """Resultado de una venta; ``summary`` solo existe si tuvo exito."""

    success: bool
    message: str
    summary: SaleSummary | None = None

    def __bool__(self) -> bool:
        return self.success


@dataclass(slots=True)
class InventoryStatistics:
    """Resumen agregado del inventario."""

    product_count: int
    total_value: Decimal
    low_stock: list[Product] = field(default_factory=list)
