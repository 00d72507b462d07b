from __future__ import annotations

"""
Ledger Writer - single owner of the ledger file handle

The ledger is opened once in create-if-absent append mode. Appends go
through an exclusive guard; a second writer arriving while an append is in
progress gets GuardBusy immediately instead of waiting.
"""

import logging
import threading
from pathlib import Path
from typing import BinaryIO, Optional

from buy.errors import GuardBusy, LedgerIOError

logger = logging.getLogger(__name__)


class LedgerWriter:
    """Guarded append-only access to one ledger file."""

    def __init__(self, path: Path):
        """
        Open the ledger for appending.

        Args:
            path: Ledger file path (created if missing)

        Raises:
            LedgerIOError: If the file cannot be opened
        """
        self._path = Path(path)
        self._guard = threading.Lock()
        try:
            # Unbuffered bytes: a failed write leaves nothing behind for the next flush
            self._fh: Optional[BinaryIO] = open(self._path, "ab", buffering=0)
        except OSError as e:
            raise LedgerIOError(self._path, e) from e
        logger.debug("Opened ledger %s for append", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._fh is None

    def append(self, text: str) -> None:
        """
        Append a text block to the ledger, unbuffered.

        Raises:
            GuardBusy: If another append is in progress
            LedgerIOError: If the writer is closed or the write fails
        """
        if not self._guard.acquire(blocking=False):
            raise GuardBusy(self._path)
        try:
            if self._fh is None:
                raise LedgerIOError(self._path, OSError("ledger file is closed"))
            data = text.encode("utf-8")
            try:
                view = memoryview(data)
                while view:
                    written = self._fh.write(view)
                    view = view[written:]
            except OSError as e:
                raise LedgerIOError(self._path, e) from e
        finally:
            self._guard.release()
        logger.debug("Appended %d characters to %s", len(text), self._path)

    def close(self) -> None:
        with self._guard:
            if self._fh is not None:
                self._fh.close()
                self._fh = None
                logger.debug("Closed ledger %s", self._path)

    def __enter__(self) -> LedgerWriter:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["LedgerWriter"]
