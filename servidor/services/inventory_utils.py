"""Utilidades de montos y nombres para el inventario."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from shared.errors import ValidationError

_CENTS = Decimal("0.01")


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convierte un monto a Decimal sin arrastrar error binario de floats."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValidationError(f"Monto invalido: {value!r}")

    try:
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value.strip() if isinstance(value, str) else value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValidationError(f"Monto invalido: {value!r}") from exc


def round_money(amount: Decimal) -> Decimal:
    """Redondea un monto a dos decimales (mitad hacia arriba)."""
    return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal | float | int) -> str:
    """Formatea un monto en dolares con dos decimales."""
    return f"${round_money(to_decimal(amount)):.2f}"


def normalize_lookup_key(text: str) -> str:
    """Normaliza un nombre para comparaciones sin distinguir mayusculas."""
    return text.casefold()
