"""Mini README: Session-scoped ledger service.

Structure:
    * LedgerService - account registry plus the ledger transactions the
      console exposes (register, deposit, withdraw, exchange preview,
      record rate, interest projection).

The service holds all mutable session state explicitly; nothing lives at
module level. Callers pass primitive values (names, floats, currency codes
or zero-based indices) that the driver has already parsed from text, and
the service performs the semantic checks: finiteness, currency membership
and account existence. Rejected requests are logged and re-raised as the
typed errors from ``ledgersim.errors``.
"""

from __future__ import annotations

from typing import List, Optional

from ..accounts import Account, AccountRegistry, deposit, withdraw
from ..configuration import LedgerSettings, get_settings
from ..currency import (
    FOREIGN_CURRENCIES,
    CurrencyCode,
    RateTable,
    convert,
    currency_at,
)
from ..errors import AccountNotFound, LedgerError
from ..interest import InterestEntry, InterestProjector
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class LedgerService:
    """Own the state of one ledger session and expose its transactions."""

    def __init__(
        self,
        settings: Optional[LedgerSettings] = None,
        *,
        rates: Optional[RateTable] = None,
        accounts: Optional[AccountRegistry] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._rates = rates if rates is not None else RateTable()
        self._accounts = accounts if accounts is not None else AccountRegistry()
        self._projector = InterestProjector(self.settings.annual_interest_rate)
        LOGGER.debug(
            "Ledger session started (environment=%s, annual_rate=%s)",
            self.settings.environment,
            self._projector.annual_rate,
        )

    @property
    def rates(self) -> RateTable:
        return self._rates

    @property
    def annual_rate(self) -> float:
        return self._projector.annual_rate

    def register_account(self, name: str) -> Account:
        """Open a new zero-balance account."""

        try:
            return self._accounts.register(name)
        except LedgerError as error:
            LOGGER.warning("Registration rejected: %s", error)
            raise

    def find_account(self, name: str) -> Optional[Account]:
        """Return the account called ``name`` if it exists."""

        return self._accounts.lookup(name)

    def get_account(self, name: str) -> Account:
        """Return the account called ``name`` or raise ``AccountNotFound``."""

        account = self._accounts.lookup(name)
        if account is None:
            LOGGER.warning("Lookup failed for account %s", name)
            raise AccountNotFound(name)
        return account

    def deposit(self, name: str, amount: float, currency: object) -> float:
        """Deposit into ``name`` and return the updated home balance."""

        account = self.get_account(name)
        try:
            return deposit(account, amount, currency, self._rates)
        except LedgerError as error:
            LOGGER.warning("Deposit into %s rejected: %s", name, error)
            raise

    def withdraw(self, name: str, amount: float, currency: object) -> float:
        """Withdraw from ``name`` and return the updated home balance."""

        account = self.get_account(name)
        try:
            return withdraw(account, amount, currency, self._rates)
        except LedgerError as error:
            LOGGER.warning("Withdrawal from %s rejected: %s", name, error)
            raise

    def exchange_preview(self, amount: float, source_index: int, target_index: int) -> float:
        """Convert between two currencies picked by position in the title list."""

        source = currency_at(source_index)
        target = currency_at(target_index)
        converted = convert(amount, source, target, self._rates)
        LOGGER.debug(
            "Exchange preview %s %s -> %s %s", amount, source.value, converted, target.value
        )
        return converted

    def set_rate(self, currency: object, rate: float) -> None:
        """Record the home-per-foreign rate for ``currency``."""

        try:
            self._rates.set(currency, rate)
        except LedgerError as error:
            LOGGER.warning("Rate update rejected: %s", error)
            raise

    def set_rate_by_index(self, foreign_index: int, rate: float) -> CurrencyCode:
        """Record a rate for the foreign currency at ``foreign_index``."""

        currency = currency_at(foreign_index, FOREIGN_CURRENCIES)
        self.set_rate(currency, rate)
        return currency

    def project_interest(self, name: str, day_count: int) -> List[InterestEntry]:
        """Project interest on an account's current balance without changing it."""

        account = self.get_account(name)
        return self._projector.project(account.balance, day_count)
