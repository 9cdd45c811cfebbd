"""Mini README: Home-currency accounts and the session account registry.

Structure:
    * Account - dataclass storing the name, balance and settlement currency.
    * AccountRegistry - unique, case-sensitive name index of accounts.
    * deposit / withdraw - balance mutations with on-the-fly conversion.

Foreign amounts are converted into the home currency before a balance is
touched, and every validation runs before the mutation, so a failed call
never leaves a partially updated account behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..currency.codes import HOME_CURRENCY, CurrencyCode
from ..currency.conversion import convert, ensure_finite
from ..currency.rates import RateTable
from ..errors import DuplicateAccount, InsufficientFunds, InvalidOperation
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class Account:
    """A named balance held in the home currency."""

    name: str
    balance: float = 0.0
    currency: CurrencyCode = field(default=HOME_CURRENCY, init=False)

    def as_dict(self) -> Dict[str, object]:
        """Export the account with serialisable values."""

        return {
            "name": self.name,
            "balance": self.balance,
            "currency": self.currency.value,
        }


def _to_home(amount: float, source: object, rates: RateTable) -> float:
    """Return the home-currency equivalent of ``amount`` in ``source``."""

    value = ensure_finite(amount)
    currency = CurrencyCode.parse(source)
    if currency is HOME_CURRENCY:
        return value
    return convert(value, currency, HOME_CURRENCY, rates)


def deposit(account: Account, amount: float, source: object, rates: RateTable) -> float:
    """Credit ``account`` with ``amount`` expressed in ``source`` currency."""

    credited = _to_home(amount, source, rates)
    account.balance = ensure_finite(account.balance + credited, "Resulting balance")
    LOGGER.info(
        "Deposited %s %s (%s %s) into %s",
        amount,
        CurrencyCode.parse(source).value,
        credited,
        HOME_CURRENCY.value,
        account.name,
    )
    return account.balance


def withdraw(account: Account, amount: float, source: object, rates: RateTable) -> float:
    """Debit ``account`` unless the balance would drop below zero."""

    debited = _to_home(amount, source, rates)
    if account.balance - debited < 0:
        raise InsufficientFunds(balance=account.balance, requested=debited)
    account.balance = ensure_finite(account.balance - debited, "Resulting balance")
    LOGGER.info(
        "Withdrew %s %s (%s %s) from %s",
        amount,
        CurrencyCode.parse(source).value,
        debited,
        HOME_CURRENCY.value,
        account.name,
    )
    return account.balance


class AccountRegistry:
    """Index accounts by their exact, case-sensitive name."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def register(self, name: str) -> Account:
        """Create a zero-balance account, refusing blank or taken names."""

        if not isinstance(name, str) or not name.strip():
            raise InvalidOperation("Account name must be a non-empty string.")
        if name in self._accounts:
            raise DuplicateAccount(name)
        account = Account(name=name)
        self._accounts[name] = account
        LOGGER.info("Registered account %s", name)
        return account

    def lookup(self, name: str) -> Optional[Account]:
        """Return the account called ``name`` or ``None`` when absent."""

        return self._accounts.get(name)

    def list_accounts(self) -> List[Account]:
        """Return accounts in registration order."""

        return list(self._accounts.values())

    def __contains__(self, name: object) -> bool:
        return name in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
