from __future__ import annotations

import threading
from pathlib import Path
from unittest.mock import Mock

import pytest

from buy.errors import GuardBusy, LedgerIOError
from buy.services.ledger_writer import LedgerWriter

BLOCK = "\n2024/01/01 Tal Tavlinim\n    expenses:food  ₪5\n    liability:credit card:fibi:shufersal\n"


class DescribeLedgerWriter:
    def it_should_create_the_file_if_missing(self, tmp_path: Path):
        path = tmp_path / "new.ledger"
        with LedgerWriter(path):
            pass
        assert path.exists()
        assert path.read_text(encoding="utf-8") == ""

    def it_should_append_without_truncating(self, tmp_path: Path):
        path = tmp_path / "main.ledger"
        path.write_text("; existing\n", encoding="utf-8")

        with LedgerWriter(path) as writer:
            writer.append(BLOCK)
            writer.append(BLOCK)

        assert path.read_text(encoding="utf-8") == "; existing\n" + BLOCK + BLOCK

    def it_should_write_utf8_with_unix_newlines(self, tmp_path: Path):
        path = tmp_path / "main.ledger"
        with LedgerWriter(path) as writer:
            writer.append(BLOCK)
        assert path.read_bytes() == BLOCK.encode("utf-8")

    def it_should_raise_ledger_io_error_when_the_file_cannot_be_opened(self, tmp_path: Path):
        with pytest.raises(LedgerIOError) as exc:
            LedgerWriter(tmp_path / "missing-dir" / "main.ledger")
        assert isinstance(exc.value.cause, OSError)

    def it_should_refuse_to_append_after_close(self, tmp_path: Path):
        writer = LedgerWriter(tmp_path / "main.ledger")
        writer.close()
        assert writer.closed
        with pytest.raises(LedgerIOError):
            writer.append(BLOCK)

    def it_should_allow_closing_twice(self, tmp_path: Path):
        writer = LedgerWriter(tmp_path / "main.ledger")
        writer.close()
        writer.close()

    class DescribeGuard:
        def it_should_fail_fast_when_a_write_is_in_progress(self, tmp_path: Path):
            path = tmp_path / "main.ledger"
            with LedgerWriter(path) as writer:
                writer._guard.acquire()
                try:
                    with pytest.raises(GuardBusy):
                        writer.append(BLOCK)
                finally:
                    writer._guard.release()
                writer.append(BLOCK)

            assert path.read_text(encoding="utf-8") == BLOCK

        def it_should_never_interleave_concurrent_appends(self, tmp_path: Path):
            path = tmp_path / "main.ledger"
            busy = []
            written = []

            with LedgerWriter(path) as writer:
                start = threading.Barrier(8)

                def worker(n: int):
                    block = f"\n2024/01/{n + 1:02d} Shufersal\n    expenses:food  ₪{n}\n    x\n"
                    start.wait()
                    for _ in range(20):
                        try:
                            writer.append(block)
                            written.append(block)
                        except GuardBusy:
                            busy.append(n)

                threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
                for t in threads:
                    t.start()
                for t in threads:
                    t.join()

            text = path.read_text(encoding="utf-8")
            assert len(written) + len(busy) == 8 * 20
            # Every block is intact; the file is exactly the successful blocks in some order
            assert len(text) == sum(len(b) for b in written)
            head, *rest = text.split("\n2024/")
            assert head == ""
            assert sorted("\n2024/" + c for c in rest) == sorted(written)

    class DescribeFailedWrite:
        def it_should_not_carry_a_failed_block_into_the_next_append(self, tmp_path: Path):
            path = tmp_path / "main.ledger"
            with LedgerWriter(path) as writer:
                real_fh = writer._fh
                failing_fh = Mock(wraps=real_fh)
                failing_fh.write.side_effect = OSError(28, "No space left on device")
                writer._fh = failing_fh

                with pytest.raises(LedgerIOError, match="No space left"):
                    writer.append(BLOCK)

                writer._fh = real_fh
                writer.append("\n2024/01/02 Shufersal\n")

            assert path.read_text(encoding="utf-8") == "\n2024/01/02 Shufersal\n"
