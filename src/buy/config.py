"""
LedgerConfig - explicit startup configuration for buy.

Resolved once when the CLI or GUI starts, then passed to the services.
Nothing else in the package reads the environment.

Ledger path resolution priority:
1. Explicit path (--ledger-file CLI option)
2. LEDGER_FILE environment variable
3. Otherwise MissingEnvironmentVariable (fatal)

Entry dates use the local calendar date unless UTC is requested
(--utc or BUY_UTC=1).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path

from buy.errors import MissingEnvironmentVariable

LEDGER_VAR = "LEDGER_FILE"
UTC_VAR = "BUY_UTC"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerConfig:
    """Resolved ledger location and date policy."""

    ledger_path: Path
    use_utc: bool = False

    @classmethod
    def resolve(cls, explicit: Path | None = None, use_utc: bool | None = None) -> LedgerConfig:
        """Resolve configuration from explicit values or the environment.

        Args:
            explicit: Explicitly provided ledger path (highest priority)
            use_utc: Explicit date policy; None defers to BUY_UTC

        Returns:
            LedgerConfig with resolved path

        Raises:
            MissingEnvironmentVariable: If no path was given and LEDGER_FILE is unset
        """
        if use_utc is None:
            use_utc = os.environ.get(UTC_VAR, "").strip().lower() in _TRUTHY
        if explicit is not None:
            return cls(ledger_path=Path(explicit), use_utc=use_utc)
        env = os.environ.get(LEDGER_VAR)
        if not env:
            raise MissingEnvironmentVariable(LEDGER_VAR)
        return cls(ledger_path=Path(env).expanduser(), use_utc=use_utc)

    def today(self) -> date:
        """Current calendar date under this config's date policy."""
        if self.use_utc:
            return datetime.now(timezone.utc).date()
        return date.today()


__all__ = ["LedgerConfig", "LEDGER_VAR", "UTC_VAR"]
