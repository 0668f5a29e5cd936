"""Formateadores puros de reportes de inventario en texto."""

from __future__ import annotations

from collections.abc import Sequence

from servidor.domain.models import Product
from servidor.services.inventory_utils import format_money
from shared.protocol import InventoryStatistics, SaleSummary


def format_inventory_listing(products: Sequence[Product]) -> str:
    """Lista numerada desde 1 con el formato de cada producto."""
    lines = ["=== INVENTORY LIST ==="]
    if not products:
        lines.append("No products in inventory.")
    else:
        lines.extend(
            f"{position}. {product}"
            for position, product in enumerate(products, start=1)
        )
    lines.append("======================")
    return "\n".join(lines)


def format_sale_summary(summary: SaleSummary) -> str:
    lines = [
        "=== SALE COMPLETE ===",
        f"Product: {summary.product_name}",
        f"Quantity: {summary.quantity}",
        f"Unit Price: {format_money(summary.unit_price)}",
        f"Original Total: {format_money(summary.original_total)}",
        summary.discount_description,
        f"Final Price: {format_money(summary.final_price)}",
        f"Remaining Stock: {summary.remaining_stock}",
        "====================",
    ]
    return "\n".join(lines)


def format_statistics(statistics: InventoryStatistics) -> str:
    """Bloque de estadisticas con detalle de productos a reponer."""
    lines = [
        "=== INVENTORY STATISTICS ===",
        f"Total Products: {statistics.product_count}",
        f"Total Inventory Value: {format_money(statistics.total_value)}",
        f"Low Stock Items: {len(statistics.low_stock)}",
    ]
    if statistics.low_stock:
        lines.append("Items needing restock:")
        lines.extend(
            f"  - {product.name} (Stock: {product.quantity})"
            for product in statistics.low_stock
        )
    lines.append("============================")
    return "\n".join(lines)
