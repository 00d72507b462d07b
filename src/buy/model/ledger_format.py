from __future__ import annotations

"""
Ledger entry formatting (parse and render, no I/O).

Output format, one block per expense:

    \\n2024/03/07 Keter Habasar
        expenses:food  ₪100
        liability:credit card:fibi:shufersal

The block starts with a blank line so consecutive appends stay separated.
Writing the text is the caller's job (see buy.services.ledger_writer).
"""

import re
from datetime import date

from buy.errors import InvalidAmount, InvalidCategory
from buy.model.expense import EXPENSE_ACCOUNTS, CategoryAccounts, ExpenseCategory

CURRENCY_SYMBOL = "₪"
POSTING_INDENT = "    "

_AMOUNT_RE = re.compile(r"[0-9]+")


def known_categories() -> tuple[str, ...]:
    """Canonical category tokens in declaration order."""
    return tuple(c.value for c in ExpenseCategory)


def category_accounts(category: ExpenseCategory) -> CategoryAccounts:
    return EXPENSE_ACCOUNTS[category]


def parse_category(token: str) -> ExpenseCategory:
    """Match a token exactly (case-sensitive) against the category names.

    Raises:
        InvalidCategory: If the token is not a canonical category name
    """
    try:
        return ExpenseCategory(token)
    except ValueError:
        raise InvalidCategory(token, known_categories()) from None


def parse_amount(token: str) -> int:
    """Parse a non-negative base-10 integer amount.

    Only ASCII digits are accepted: no sign, decimal point, whitespace or
    thousands separators.

    Raises:
        InvalidAmount: If the token is not made of digits only, or is too long
            to convert
    """
    if not isinstance(token, str) or not _AMOUNT_RE.fullmatch(token):
        raise InvalidAmount(token)
    try:
        return int(token)
    except ValueError:
        # Longer than the interpreter allows for int conversion
        raise InvalidAmount(token) from None


def format_date(now: date) -> str:
    return f"{now.year}/{now.month:02d}/{now.day:02d}"


def format_entry(category: ExpenseCategory, amount: int, now: date) -> str:
    """Render the ledger block for an expense.

    Args:
        category: Validated expense category
        amount: Validated non-negative amount, rendered as-is
        now: Civil date of the entry (a datetime works too; only its date is used)

    Returns:
        Text block ready to append to the ledger file
    """
    accounts = category_accounts(category)
    return (
        f"\n{format_date(now)} {accounts.label}\n"
        f"{POSTING_INDENT}{accounts.destination}  {CURRENCY_SYMBOL}{amount}\n"
        f"{POSTING_INDENT}{accounts.source}\n"
    )


__all__ = [
    "CURRENCY_SYMBOL",
    "category_accounts",
    "format_date",
    "format_entry",
    "known_categories",
    "parse_amount",
    "parse_category",
]
