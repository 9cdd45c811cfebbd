"""Mini README: Error kinds raised by the ledger core.

Structure:
    * LedgerError - common base so the console can catch every core failure.
    * UnknownCurrency - code or index outside the supported currency set.
    * InvalidAmount - non-finite numbers or negative day counts.
    * InvalidOperation - requests the ledger refuses outright.
    * DuplicateAccount - a second registration of an existing name.
    * AccountNotFound - a transaction names an account that does not exist.
    * InsufficientFunds - a withdrawal would push the balance below zero.

Each error also derives from the closest builtin so callers that only know
about ``ValueError`` or ``LookupError`` keep working.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for failures reported by the ledger core."""


class UnknownCurrency(LedgerError, LookupError):
    """Raised when a currency code or index is not supported."""

    def __init__(self, currency: object) -> None:
        self.currency = currency
        super().__init__(f"Unsupported currency: {currency!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidAmount(LedgerError, ValueError):
    """Raised when a numeric argument is not usable."""


class InvalidOperation(LedgerError, ValueError):
    """Raised when the ledger refuses a request regardless of its values."""


class DuplicateAccount(LedgerError, ValueError):
    """Raised when registering a name that is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"An account named {name!r} already exists.")


class AccountNotFound(LedgerError, LookupError):
    """Raised when a transaction targets an unknown account."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No account named {name!r} exists.")

    def __str__(self) -> str:
        return self.args[0]


class InsufficientFunds(LedgerError, ValueError):
    """Raised when a withdrawal exceeds the available balance."""

    def __init__(self, balance: float, requested: float) -> None:
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Cannot withdraw {requested} from a balance of {balance}."
        )
