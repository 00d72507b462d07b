"""buy - append expense entries to a plain-text ledger."""

__version__ = "0.3.0"
