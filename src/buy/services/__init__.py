"""
Service layer for buy.

Business logic separated from the imperative shells (CLI/GUI).

Principles:
- No UI framework imports (Rich, Typer, Qt)
- All dependencies injected through constructors
- Errors are buy.errors types; shells decide how to show them
"""

from buy.services.expense_service import ExpenseService, RecordResult
from buy.services.ledger_writer import LedgerWriter

__all__ = [
    "ExpenseService",
    "LedgerWriter",
    "RecordResult",
]
