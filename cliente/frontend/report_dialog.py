"""Dialogo para visualizar y copiar reportes de inventario."""

from __future__ import annotations

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QApplication,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)


class ReportDialog(QDialog):
    """Muestra un bloque de texto de solo lectura (inventario, ventas, estadisticas)."""

    def __init__(self, title: str, text: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._text = text

        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(620, 420)

        self._build_ui(title)
        self._apply_styles()

    def _build_ui(self, title: str) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        title_label = QLabel(title, self)
        title_label.setObjectName("reportTitle")

        report_view = QTextEdit(self)
        report_view.setReadOnly(True)
        report_view.setFont(QFont("Consolas", 11))
        report_view.setPlainText(self._text)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(10)

        copy_button = QPushButton("Copy", self)
        close_button = QPushButton("Close", self)
        close_button.setObjectName("closeButton")

        copy_button.clicked.connect(self._copy_to_clipboard)
        close_button.clicked.connect(self.accept)

        buttons_layout.addStretch(1)
        buttons_layout.addWidget(copy_button)
        buttons_layout.addWidget(close_button)

        root_layout.addWidget(title_label)
        root_layout.addWidget(report_view)
        root_layout.addLayout(buttons_layout)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QDialog {
                background-color: #ffffff;
            }
            QLabel#reportTitle {
                color: #334155;
                font-family: "Segoe UI";
                font-size: 15px;
                font-weight: 600;
            }
            QTextEdit {
                background-color: #f8fafc;
                border: 1px solid #d1d5db;
                border-radius: 8px;
                color: #111827;
                padding: 10px;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 10px;
                color: #ffffff;
                font-family: "Segoe UI";
                font-size: 13px;
                font-weight: 600;
                min-height: 36px;
                min-width: 90px;
                padding: 6px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton#closeButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            QPushButton#closeButton:hover {
                background-color: #d1d5db;
            }
            """
        )

    def _copy_to_clipboard(self) -> None:
        """Copia el reporte completo al portapapeles."""
        QApplication.clipboard().setText(self._text)
