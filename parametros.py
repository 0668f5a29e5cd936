"""Parametros globales del proyecto."""

from __future__ import annotations

import logging
from decimal import Decimal

BOOK_MIN_PRICE = Decimal("5.00")
ELECTRONICS_MIN_PRICE = Decimal("10.00")

STUDENT_DISCOUNT_RATE = Decimal("0.10")
BULK_DISCOUNT_RATE = Decimal("0.15")
BULK_MIN_QUANTITY = 5

LOW_STOCK_THRESHOLD = 5

# (categoria, nombre, precio, cantidad)
SAMPLE_PRODUCTS: tuple[tuple[str, str, str, int], ...] = (
    ("Book", "Java Programming", "29.99", 10),
    ("Book", "Data Structures", "34.99", 8),
    ("Book", "Web Development", "24.99", 15),
    ("Electronics", "Laptop", "599.99", 5),
    ("Electronics", "Mouse", "19.99", 20),
    ("Electronics", "Keyboard", "49.99", 12),
)

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.basicConfig(
    level=LOG_LEVEL,
    format=LOG_FORMAT,
)
