"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""


class UnsupportedCategoryError(ValidationError):
    """Categoria de producto no soportada por la fabrica."""

    def __init__(self, category: object) -> None:
        super().__init__(f"Unknown product type: {category}")
        self.category = category
