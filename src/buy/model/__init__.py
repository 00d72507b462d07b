from .expense import (
    EXPENSE_ACCOUNTS,
    CategoryAccounts,
    ExpenseCategory,
    LedgerEntry,
)
from .ledger_format import (
    CURRENCY_SYMBOL,
    category_accounts,
    format_entry,
    known_categories,
    parse_amount,
    parse_category,
)

__all__ = [
    # models
    "CategoryAccounts",
    "ExpenseCategory",
    "LedgerEntry",
    "EXPENSE_ACCOUNTS",
    # formatting helpers
    "CURRENCY_SYMBOL",
    "category_accounts",
    "format_entry",
    "known_categories",
    "parse_amount",
    "parse_category",
]
