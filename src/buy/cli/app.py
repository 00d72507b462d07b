from __future__ import annotations

"""
buy CLI Wrapper (Typer + Rich)

Appends one expense entry to a plain-text ledger:

  buy CATEGORY AMOUNT

The ledger path comes from --ledger-file or the LEDGER_FILE env var.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from buy.model.ledger_format import known_categories

APP_HELP = (
    "Append an expense to your ledger. "
    f"Categories: {', '.join(known_categories())}. "
    "AMOUNT is a whole number of shekels."
)

app = typer.Typer(add_completion=False, help=APP_HELP)


# Let a negative amount reach the parser instead of being read as an option
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    args: Optional[List[str]] = typer.Argument(
        None, metavar="CATEGORY AMOUNT", help="Expense category and amount"
    ),
    ledger_file: Optional[Path] = typer.Option(
        None,
        "--ledger-file",
        envvar="LEDGER_FILE",
        help="Ledger file to append to (default: $LEDGER_FILE)",
    ),
    utc: bool = typer.Option(
        False, "--utc", help="Date entries by the UTC calendar (default: $BUY_UTC, else local)"
    ),
    on: Optional[datetime] = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Entry date (default: today)"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the entry without writing it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Append one expense entry to the ledger.

    Examples:
      buy keter 100
      buy shufersal 250 --date 2024-03-07
      buy tal 40 --dry-run
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    from buy.cli.command import record as cmd_record

    code = cmd_record.run(
        args=args or [],
        ledger_file=ledger_file,
        use_utc=True if utc else None,
        entry_date=on.date() if on is not None else None,
        dry_run=dry_run,
    )
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()  # pragma: no cover
