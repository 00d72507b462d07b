from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()


def print_error(err: Exception) -> None:
    console.print(f"[red]Error:[/] {escape(str(err))}", highlight=False)


def ledger_text(block: str) -> Text:
    """Ledger block as literal text (no markup or highlighting)."""
    return Text(block.strip("\n"), style="cyan")
