from __future__ import annotations

"""
Main Window - amount input and one button per expense category

Every click is persisted immediately through ExpenseService, so there is no
unsaved state and closing the window needs no confirmation.
"""

from functools import partial

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QGridLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from buy.model.expense import ExpenseCategory
from buy.model.ledger_format import CURRENCY_SYMBOL, category_accounts
from buy.services.expense_service import ExpenseService, RecordResult

AMOUNT_MAX = 10_000_000
BUTTONS_PER_ROW = 3


class ExpenseWindow(QMainWindow):
    """Main application window."""

    def __init__(self, service: ExpenseService, parent=None):
        super().__init__(parent)

        self.service = service
        self.category_buttons: dict[ExpenseCategory, QPushButton] = {}

        self.setWindowTitle("Buy")
        self.setMinimumWidth(360)

        self._init_ui()
        self.statusBar().showMessage(f"Ledger: {service.writer.path}")

    def _init_ui(self):
        """Initialize the user interface."""
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        title = QLabel("Amount")
        title.setAlignment(Qt.AlignLeft)
        layout.addWidget(title)

        self.amount_spin = QSpinBox()
        self.amount_spin.setRange(0, AMOUNT_MAX)
        self.amount_spin.setPrefix(f"{CURRENCY_SYMBOL} ")
        self.amount_spin.setGroupSeparatorShown(False)
        layout.addWidget(self.amount_spin)

        grid = QGridLayout()
        for i, category in enumerate(ExpenseCategory):
            button = QPushButton(category_accounts(category).label)
            button.setObjectName(f"category_{category.value}")
            button.clicked.connect(partial(self._on_category_clicked, category))
            grid.addWidget(button, i // BUTTONS_PER_ROW, i % BUTTONS_PER_ROW)
            self.category_buttons[category] = button
        layout.addLayout(grid)

    def amount_text(self) -> str:
        """Current amount without the currency prefix."""
        return self.amount_spin.cleanText()

    def _on_category_clicked(self, category: ExpenseCategory, *_):
        """Record an entry for the clicked category and report the outcome."""
        result = self.service.on_category_selected(category, self.amount_text())
        self._show_result(result)

    def _show_result(self, result: RecordResult):
        if result.ok:
            self.statusBar().showMessage(result.message, 5000)
            QMessageBox.information(self, "Recorded", result.message)
        else:
            QMessageBox.critical(self, "Error", f"Failed to record expense:\n{result.message}")
