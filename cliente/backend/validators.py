"""Validaciones para entradas del cliente."""

from __future__ import annotations

from decimal import Decimal

from servidor.services.inventory_utils import to_decimal
from shared.errors import ValidationError


def parse_int(raw: str, field_name: str = "Quantity") -> int:
    """Convierte texto a entero o lanza ValidationError."""
    text = raw.strip()
    try:
        return int(text)
    except ValueError as exc:
        raise ValidationError(f"{field_name}: please enter a valid number.") from exc


def parse_decimal(raw: str, field_name: str = "Price") -> Decimal:
    """Convierte texto a Decimal finito o lanza ValidationError."""
    try:
        value = to_decimal(raw.strip())
    except ValidationError as exc:
        raise ValidationError(f"{field_name}: please enter a valid number.") from exc

    if not value.is_finite():
        raise ValidationError(f"{field_name}: please enter a valid number.")
    return value
