"""Helpers de dialogos para frontend."""

from __future__ import annotations

from PyQt6.QtWidgets import QMessageBox, QWidget

from shared.errors import ServiceError, ValidationError


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo informativo."""
    QMessageBox.information(parent, title, message)


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Muestra un dialogo de error."""
    QMessageBox.critical(parent, title, message)


def show_operation_error(
    parent: QWidget | None,
    title: str,
    exc: ValidationError | ServiceError,
) -> None:
    """Muestra un error de validacion como advertencia y uno de servicio como critico."""
    if isinstance(exc, ValidationError):
        QMessageBox.warning(parent, title, str(exc))
        return
    show_error(parent, title, str(exc))
