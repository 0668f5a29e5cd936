"""Dialogos de formulario para agregar, vender y reponer productos."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.dialogs import show_info, show_operation_error
from cliente.frontend.report_dialog import ReportDialog
from shared.errors import ServiceError, ValidationError

if TYPE_CHECKING:
    from cliente.backend.controller import AppController

_FORM_STYLE = """
QDialog {
    background-color: #eef1f4;
}
QLabel#titleLabel {
    color: #20232a;
    font-family: "Segoe UI";
    font-size: 20px;
    font-weight: 700;
}
QLineEdit, QComboBox {
    background-color: #f8fafc;
    border: 1px solid #d1d5db;
    border-radius: 8px;
    color: #111827;
    font-family: "Segoe UI";
    font-size: 13px;
    padding: 8px;
}
QLineEdit:focus {
    border: 1px solid #2563eb;
    background-color: #ffffff;
}
QPushButton {
    background-color: #2563eb;
    border: none;
    border-radius: 10px;
    color: #ffffff;
    font-family: "Segoe UI";
    font-size: 13px;
    font-weight: 600;
    min-height: 38px;
    min-width: 100px;
    padding: 8px 12px;
}
QPushButton:hover {
    background-color: #1d4ed8;
}
QPushButton#cancelButton {
    background-color: #e5e7eb;
    color: #1f2937;
}
QPushButton#cancelButton:hover {
    background-color: #d1d5db;
}
"""


class _OperationDialog(QDialog):
    """Base comun: titulo, formulario y botones Cancelar/Confirmar.

    Cada subclase define ``_submit()``, que ejecuta la accion y lanza
    ``ValidationError``/``ServiceError`` si falla.
    """

    def __init__(
        self,
        controller: AppController,
        title: str,
        confirm_text: str,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller

        self.setWindowTitle(title)
        self.setModal(True)
        self.setMinimumSize(440, 280)

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(24, 24, 24, 24)
        root_layout.setSpacing(12)

        title_label = QLabel(title, self)
        title_label.setObjectName("titleLabel")
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._form = QFormLayout()
        self._form.setSpacing(10)

        buttons_layout = QHBoxLayout()
        buttons_layout.addStretch(1)
        cancel_button = QPushButton("Cancel", self)
        cancel_button.setObjectName("cancelButton")
        confirm_button = QPushButton(confirm_text, self)
        cancel_button.clicked.connect(self.reject)
        confirm_button.clicked.connect(self._on_confirm_clicked)
        buttons_layout.addWidget(cancel_button)
        buttons_layout.addWidget(confirm_button)

        root_layout.addWidget(title_label)
        root_layout.addLayout(self._form)
        root_layout.addStretch(1)
        root_layout.addLayout(buttons_layout)

        self.setStyleSheet(_FORM_STYLE)

    def _on_confirm_clicked(self) -> None:
        try:
            self._submit()
        except (ValidationError, ServiceError) as exc:
            show_operation_error(self, self.windowTitle(), exc)
            return
        self.accept()

    def _product_combo(self) -> QComboBox:
        """Combo editable con los nombres actuales del inventario."""
        combo = QComboBox(self)
        combo.setEditable(True)
        combo.addItems(self._controller.list_product_names())
        return combo


class AddProductDialog(_OperationDialog):
    """Formulario para crear un producto nuevo."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(controller, "Add Product", "Add", parent)

        self._category_combo = QComboBox(self)
        self._category_combo.addItems(controller.list_categories())
        self._name_input = QLineEdit(self)
        self._price_input = QLineEdit(self)
        self._price_input.setPlaceholderText("0.00")
        self._quantity_input = QLineEdit(self)
        self._quantity_input.setPlaceholderText("0")

        self._form.addRow("Product type", self._category_combo)
        self._form.addRow("Name", self._name_input)
        self._form.addRow("Price ($)", self._price_input)
        self._form.addRow("Initial quantity", self._quantity_input)
        self._name_input.setFocus()

    def _submit(self) -> None:
        message = self._controller.on_add_product(
            category=self._category_combo.currentText(),
            name=self._name_input.text(),
            price_raw=self._price_input.text(),
            quantity_raw=self._quantity_input.text(),
        )
        show_info(self, "Product added", message)


class SellProductDialog(_OperationDialog):
    """Formulario de venta con seleccion de descuento."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(controller, "Sell Product", "Sell", parent)

        self._product_input = self._product_combo()
        self._quantity_input = QLineEdit(self)
        self._quantity_input.setPlaceholderText("1")
        self._discount_combo = QComboBox(self)
        self._discount_combo.addItems(controller.list_discount_types())
        self._discount_combo.setCurrentText("None")

        self._form.addRow("Product", self._product_input)
        self._form.addRow("Quantity", self._quantity_input)
        self._form.addRow("Discount", self._discount_combo)

    def _submit(self) -> None:
        summary = self._controller.on_sell_product(
            name=self._product_input.currentText(),
            quantity_raw=self._quantity_input.text(),
            discount_kind=self._discount_combo.currentText(),
        )
        ReportDialog(
            "Sale complete",
            self._controller.sale_summary_text(summary),
            parent=self,
        ).exec()


class AddStockDialog(_OperationDialog):
    """Formulario para reponer stock de un producto existente."""

    def __init__(self, controller: AppController, parent: QWidget | None = None) -> None:
        super().__init__(controller, "Add Stock", "Add", parent)

        self._product_input = self._product_combo()
        self._quantity_input = QLineEdit(self)
        self._quantity_input.setPlaceholderText("1")

        self._form.addRow("Product", self._product_input)
        self._form.addRow("Quantity to add", self._quantity_input)

    def _submit(self) -> None:
        message = self._controller.on_add_stock(
            name=self._product_input.currentText(),
            quantity_raw=self._quantity_input.text(),
        )
        show_info(self, "Stock updated", message)
