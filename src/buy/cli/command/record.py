"""Append one expense entry to the ledger."""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from buy.config import LedgerConfig
from buy.errors import BuyError, InsufficientArguments, TooManyArguments
from buy.model.ledger_format import parse_amount, parse_category
from buy.services.expense_service import ExpenseService
from buy.services.ledger_writer import LedgerWriter

from .util import console, ledger_text, print_error

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def require_two(args: Sequence[str]) -> tuple[str, str]:
    """Split positional arguments into (category, amount).

    Raises:
        InsufficientArguments: Fewer than two arguments (count = number received)
        TooManyArguments: More than two arguments (count = number received)
    """
    count = len(args)
    if count < 2:
        raise InsufficientArguments(count)
    if count > 2:
        raise TooManyArguments(count)
    return args[0], args[1]


def run(
    *,
    args: Sequence[str],
    ledger_file: Optional[Path] = None,
    use_utc: Optional[bool] = None,
    entry_date: Optional[date] = None,
    dry_run: bool = False,
) -> int:
    """Record an expense given [CATEGORY, AMOUNT] tokens.

    The ledger path is resolved first; a missing LEDGER_FILE is fatal even
    when the arguments are also wrong.

    Returns an exit code (0 success, 2 wrong argument count, 1 any other error).
    """
    try:
        config = LedgerConfig.resolve(ledger_file, use_utc=use_utc)
    except BuyError as e:
        print_error(e)
        return EXIT_FAILURE

    try:
        category_token, amount_token = require_two(args)
    except BuyError as e:
        print_error(e)
        console.print("Usage: buy CATEGORY AMOUNT")
        return EXIT_USAGE

    try:
        category = parse_category(category_token)
        amount = parse_amount(amount_token)
    except BuyError as e:
        print_error(e)
        return EXIT_FAILURE

    when = entry_date if entry_date is not None else config.today()

    if dry_run:
        preview = ExpenseService(None, clock=config.today).preview(category, amount, when)
        console.print(ledger_text(preview))
        console.print(
            f"[green]Dry-run:[/] nothing written to {config.ledger_path}", highlight=False
        )
        return EXIT_OK

    try:
        with LedgerWriter(config.ledger_path) as writer:
            entry = ExpenseService(writer, clock=config.today).record(category, amount, when)
    except BuyError as e:
        print_error(e)
        return EXIT_FAILURE

    console.print(ledger_text(entry.render()))
    console.print(f"[green]Appended to[/] {config.ledger_path}", highlight=False)
    return EXIT_OK
