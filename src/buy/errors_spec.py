from __future__ import annotations

from buy.errors import (
    BuyError,
    GuardBusy,
    InsufficientArguments,
    InvalidAmount,
    InvalidCategory,
    LedgerIOError,
    MissingEnvironmentVariable,
    TooManyArguments,
)


class DescribeBuyErrors:
    def it_should_say_how_many_arguments_are_missing(self):
        assert "1 missing" in str(InsufficientArguments(1))
        assert "2 missing" in str(InsufficientArguments(0))

    def it_should_report_the_total_received_when_too_many(self):
        err = TooManyArguments(4)
        assert err.count == 4
        assert "got 4" in str(err)

    def it_should_classify_validation_errors_as_value_errors(self):
        for err in (InvalidCategory("x"), InvalidAmount("x"), InsufficientArguments(0)):
            assert isinstance(err, ValueError)
            assert isinstance(err, BuyError)

    def it_should_classify_environment_and_io_errors_as_runtime_errors(self):
        io_err = LedgerIOError("/tmp/x", OSError("disk full"))
        for err in (MissingEnvironmentVariable("LEDGER_FILE"), io_err, GuardBusy()):
            assert isinstance(err, RuntimeError)
        assert "disk full" in str(io_err)
