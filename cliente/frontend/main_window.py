"""Ventana principal del inventario."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import AppController
from cliente.frontend.operation_dialogs import (
    AddProductDialog,
    AddStockDialog,
    SellProductDialog,
)
from cliente.frontend.report_dialog import ReportDialog


class MainWindow(QMainWindow):
    """Ventana principal con el menu de acciones del inventario."""

    def __init__(self, controller: AppController) -> None:
        super().__init__()
        self._controller = controller

        self._add_product_button: QPushButton
        self._view_button: QPushButton
        self._sell_button: QPushButton
        self._add_stock_button: QPushButton
        self._statistics_button: QPushButton
        self._exit_button: QPushButton

        self.setWindowTitle("Simple Inventory System")
        self.resize(560, 640)
        self._build_ui()
        self._apply_styles()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Construye la pagina de menu principal."""
        page = QWidget(self)
        self.setCentralWidget(page)

        root_layout = QVBoxLayout(page)
        root_layout.setContentsMargins(40, 40, 40, 40)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(page)
        card.setObjectName("mainCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(40, 40, 40, 40)
        card_layout.setSpacing(14)

        title_label = QLabel("Inventory", card)
        title_label.setObjectName("titleLabel")
        title_label.setFont(QFont("Segoe UI", 24, QFont.Weight.Bold))
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._add_product_button = self._build_button("Add Product")
        self._view_button = self._build_button("View Inventory")
        self._sell_button = self._build_button("Sell Product")
        self._add_stock_button = self._build_button("Add Stock")
        self._statistics_button = self._build_button("View Statistics")
        self._exit_button = self._build_button("Exit")
        self._exit_button.setObjectName("exitButton")

        card_layout.addWidget(title_label)
        card_layout.addSpacing(12)
        for button in (
            self._add_product_button,
            self._view_button,
            self._sell_button,
            self._add_stock_button,
            self._statistics_button,
        ):
            card_layout.addWidget(button)
        card_layout.addSpacing(8)
        card_layout.addWidget(self._exit_button)

        shadow = QGraphicsDropShadowEffect(card)
        shadow.setBlurRadius(38)
        shadow.setOffset(0, 8)
        shadow.setColor(QColor(0, 0, 0, 38))
        card.setGraphicsEffect(shadow)

        root_layout.addWidget(card)

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #eef1f4;
            }
            QFrame#mainCard {
                background-color: #ffffff;
                border-radius: 18px;
                min-width: 380px;
            }
            QLabel#titleLabel {
                color: #111827;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
                min-height: 46px;
                padding: 8px 14px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton:pressed {
                background-color: #1e40af;
            }
            QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#exitButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta botones de UI con acciones del controller."""
        self._add_product_button.clicked.connect(self._on_add_product_clicked)
        self._view_button.clicked.connect(self._on_view_inventory_clicked)
        self._sell_button.clicked.connect(self._on_sell_clicked)
        self._add_stock_button.clicked.connect(self._on_add_stock_clicked)
        self._statistics_button.clicked.connect(self._on_statistics_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)

    def _on_add_product_clicked(self, _checked: bool = False) -> None:
        AddProductDialog(controller=self._controller, parent=self).exec()

    def _on_view_inventory_clicked(self, _checked: bool = False) -> None:
        ReportDialog("Inventory", self._controller.inventory_text(), parent=self).exec()

    def _on_sell_clicked(self, _checked: bool = False) -> None:
        SellProductDialog(controller=self._controller, parent=self).exec()

    def _on_add_stock_clicked(self, _checked: bool = False) -> None:
        AddStockDialog(controller=self._controller, parent=self).exec()

    def _on_statistics_clicked(self, _checked: bool = False) -> None:
        ReportDialog(
            "Inventory statistics",
            self._controller.statistics_text(),
            parent=self,
        ).exec()

    def _on_exit_clicked(self) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance())

    @staticmethod
    def _build_button(text: str) -> QPushButton:
        """Construye un boton estandar del menu principal."""
        button = QPushButton(text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button
