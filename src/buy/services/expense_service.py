from __future__ import annotations

"""
Expense Service - record expenses into the ledger

Functional core shared by the CLI and the GUI. The service builds a
LedgerEntry, renders it with the pure formatter and hands the text to the
LedgerWriter. No UI framework imports here.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from buy.errors import BuyError, LedgerIOError
from buy.model.expense import ExpenseCategory, LedgerEntry
from buy.model.ledger_format import parse_amount
from buy.services.ledger_writer import LedgerWriter

logger = logging.getLogger(__name__)


@dataclass
class RecordResult:
    """Outcome of a UI-triggered record request."""

    ok: bool
    message: str
    entry: Optional[LedgerEntry] = None


class ExpenseService:
    """Service for appending expense entries to a ledger."""

    def __init__(
        self, writer: Optional[LedgerWriter], clock: Callable[[], date] = date.today
    ):
        """
        Initialize expense service.

        Args:
            writer: Open ledger writer (owned by the caller); None for preview-only use
            clock: Returns the calendar date used for new entries
        """
        self.writer = writer
        self.clock = clock

    def build_entry(
        self, category: ExpenseCategory, amount: int, when: Optional[date] = None
    ) -> LedgerEntry:
        return LedgerEntry(
            category=category,
            amount=amount,
            entry_date=when if when is not None else self.clock(),
        )

    def preview(
        self, category: ExpenseCategory, amount: int, when: Optional[date] = None
    ) -> str:
        """Render the entry that record() would write, without writing it."""
        return self.build_entry(category, amount, when).render()

    def record(
        self, category: ExpenseCategory, amount: int, when: Optional[date] = None
    ) -> LedgerEntry:
        """
        Append one expense entry to the ledger.

        Returns:
            The entry that was written

        Raises:
            GuardBusy: If another write is in progress
            LedgerIOError: If the append fails
        """
        if self.writer is None:
            raise LedgerIOError(None, OSError("no ledger file is open"))
        entry = self.build_entry(category, amount, when)
        self.writer.append(entry.render())
        logger.info(
            "Recorded %s %s on %s to %s",
            entry.category.value,
            entry.amount,
            entry.entry_date.isoformat(),
            self.writer.path,
        )
        return entry

    def on_category_selected(self, category: ExpenseCategory, amount_text: str) -> RecordResult:
        """
        Handle a category button press from a UI.

        Args:
            category: Category of the pressed button
            amount_text: Raw amount text from the input control

        Returns:
            RecordResult; failures carry the error message instead of raising
        """
        try:
            amount = parse_amount(amount_text)
            entry = self.record(category, amount)
        except BuyError as e:
            logger.warning("Could not record %s: %s", category.value, e)
            return RecordResult(ok=False, message=str(e))
        label = entry.accounts.label
        return RecordResult(ok=True, message=f"Recorded ₪{entry.amount} at {label}", entry=entry)


__all__ = ["ExpenseService", "RecordResult"]
