from __future__ import annotations

"""
buy GUI Application

Qt6 window for recording expenses with one click per category.
Startup problems (no LEDGER_FILE, ledger not writable, Qt unavailable) are
fatal; per-click problems are shown in a message box.
"""

import logging
import sys
from typing import Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from buy.config import LedgerConfig
from buy.errors import ApplicationLaunchFailure, BuyError
from buy.gui.main_window import ExpenseWindow
from buy.services.expense_service import ExpenseService
from buy.services.ledger_writer import LedgerWriter

logger = logging.getLogger(__name__)


def create_application(argv: Sequence[str]) -> QApplication:
    """
    Create (or reuse) the QApplication.

    Raises:
        ApplicationLaunchFailure: If Qt cannot be initialized
    """
    app = QApplication.instance()
    if app is not None:
        return app
    try:
        app = QApplication(list(argv))
    except RuntimeError as e:
        raise ApplicationLaunchFailure(str(e)) from e

    app.setApplicationName("Buy")
    app.setOrganizationName("buy-ledger")
    return app


def run(argv: Sequence[str]) -> int:
    """Start the GUI and return the process exit code."""
    try:
        app = create_application(argv)
    except ApplicationLaunchFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        config = LedgerConfig.resolve()
        writer = LedgerWriter(config.ledger_path)
    except BuyError as e:
        logger.error("Startup failed: %s", e)
        QMessageBox.critical(None, "Buy", str(e))
        return 1

    try:
        window = ExpenseWindow(ExpenseService(writer, clock=config.today))
        window.show()
        return app.exec()
    finally:
        writer.close()


def main():
    """Main entry point for the GUI application."""
    logging.basicConfig(level=logging.INFO)
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
