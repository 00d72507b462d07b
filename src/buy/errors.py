from __future__ import annotations

"""
Error types for buy.

Every failure the CLI or GUI can report is a BuyError subclass carrying the
offending value as an attribute. Validation errors are also ValueErrors;
file and toolkit failures are also RuntimeErrors.
"""


class BuyError(Exception):
    """Base class for all buy failures."""


class MissingEnvironmentVariable(BuyError, RuntimeError):
    def __init__(self, var: str):
        self.var = var
        super().__init__(f"Environment variable {var} is not set")


class InsufficientArguments(BuyError, ValueError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Expected 2 arguments (category, amount) but got {count}; "
            f"{2 - count} missing"
        )


class TooManyArguments(BuyError, ValueError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected 2 arguments (category, amount) but got {count}")


class InvalidCategory(BuyError, ValueError):
    def __init__(self, token: str, known: tuple[str, ...] = ()):
        self.token = token
        msg = f"Unknown expense category: {token!r}"
        if known:
            msg += f" (expected one of: {', '.join(known)})"
        super().__init__(msg)


class InvalidAmount(BuyError, ValueError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid amount: {token!r} (expected a non-negative whole number)")


class LedgerIOError(BuyError, RuntimeError):
    """Opening or appending to the ledger file failed."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Ledger file error ({path}): {cause}")


class GuardBusy(BuyError, RuntimeError):
    def __init__(self, path=None):
        self.path = path
        super().__init__("Ledger file is busy; another entry is being written")


class ApplicationLaunchFailure(BuyError, RuntimeError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not start the application: {reason}")


__all__ = [
    "BuyError",
    "MissingEnvironmentVariable",
    "InsufficientArguments",
    "TooManyArguments",
    "InvalidCategory",
    "InvalidAmount",
    "LedgerIOError",
    "GuardBusy",
    "ApplicationLaunchFailure",
]
