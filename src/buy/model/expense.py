from __future__ import annotations

"""
Expense models: the closed set of categories and their ledger accounts.

Scope
- Pure Pydantic v2 models; no I/O.
- EXPENSE_ACCOUNTS is a static, read-only table defined once at import time.
"""

from datetime import date
from enum import StrEnum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class ExpenseCategory(StrEnum):
    """Recognized expense categories, keyed by their command-line token."""

    shufersal = "shufersal"
    keter = "keter"
    tal = "tal"


class CategoryAccounts(BaseModel):
    """Label and the (destination, source) account pair for one category."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1, description="Payee line shown after the date")
    destination: str = Field(min_length=1, description="Expense account receiving the amount")
    source: str = Field(min_length=1, description="Liability or asset account paying for it")


_FOOD = "expenses:food"
_FIBI_CARD = "liability:credit card:fibi:shufersal"

EXPENSE_ACCOUNTS = MappingProxyType(
    {
        ExpenseCategory.shufersal: CategoryAccounts(
            label="Shufersal", destination=_FOOD, source=_FIBI_CARD
        ),
        ExpenseCategory.keter: CategoryAccounts(
            label="Keter Habasar", destination=_FOOD, source=_FIBI_CARD
        ),
        ExpenseCategory.tal: CategoryAccounts(
            label="Tal Tavlinim", destination=_FOOD, source=_FIBI_CARD
        ),
    }
)

_missing = set(ExpenseCategory) - set(EXPENSE_ACCOUNTS)
if _missing:
    raise RuntimeError(f"Expense categories without accounts: {sorted(_missing)}")


class LedgerEntry(BaseModel):
    """One expense about to be appended to the ledger.

    Transient: built, rendered and written, never stored.
    """

    model_config = ConfigDict(frozen=True)

    category: ExpenseCategory
    amount: int = Field(ge=0, description="Whole shekels")
    entry_date: date

    @property
    def accounts(self) -> CategoryAccounts:
        return EXPENSE_ACCOUNTS[self.category]

    def render(self) -> str:
        """Return the ledger text block for this entry."""
        from buy.model.ledger_format import format_entry

        return format_entry(self.category, self.amount, self.entry_date)


__all__ = [
    "CategoryAccounts",
    "EXPENSE_ACCOUNTS",
    "ExpenseCategory",
    "LedgerEntry",
]
