"""Mini README: Supported currency codes and their display titles.

Structure:
    * CurrencyCode - closed enum of every code the ledger understands.
    * HOME_CURRENCY - the settlement currency every account is held in.
    * SUPPORTED_CURRENCIES / FOREIGN_CURRENCIES - ordered tuples used for
      numbered choice lists (home first).
    * CURRENCY_TITLES - human readable titles in the same order.
    * currency_at - resolve a zero-based position in one of those lists.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Sequence, Tuple

from ..errors import UnknownCurrency


class CurrencyCode(str, Enum):
    """Enumerate the currencies a session can transact in."""

    PHP = "PHP"
    USD = "USD"
    JPY = "JPY"
    GBP = "GBP"
    EUR = "EUR"
    CNY = "CNY"

    @classmethod
    def parse(cls, value: object) -> "CurrencyCode":
        """Coerce arbitrary casing and whitespace into a supported code."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().upper()
            return cls(normalised)
        except ValueError as error:
            raise UnknownCurrency(value) from error

    @property
    def is_home(self) -> bool:
        return self is HOME_CURRENCY

    @property
    def display_title(self) -> str:
        return _TITLES[self]


HOME_CURRENCY = CurrencyCode.PHP

_TITLES: Dict[CurrencyCode, str] = {
    CurrencyCode.PHP: "Philippine Peso (PHP)",
    CurrencyCode.USD: "United States Dollar (USD)",
    CurrencyCode.JPY: "Japanese Yen (JPY)",
    CurrencyCode.GBP: "British Pound Sterling (GBP)",
    CurrencyCode.EUR: "Euro (EUR)",
    CurrencyCode.CNY: "Chinese Yuan Renminbi (CNY)",
}

SUPPORTED_CURRENCIES: Tuple[CurrencyCode, ...] = tuple(CurrencyCode)
FOREIGN_CURRENCIES: Tuple[CurrencyCode, ...] = tuple(
    code for code in SUPPORTED_CURRENCIES if code is not HOME_CURRENCY
)
CURRENCY_TITLES: Tuple[str, ...] = tuple(code.display_title for code in SUPPORTED_CURRENCIES)


def currency_at(index: int, codes: Sequence[CurrencyCode] = SUPPORTED_CURRENCIES) -> CurrencyCode:
    """Return ``codes[index]`` for in-range, non-negative integer positions."""

    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(codes):
        raise UnknownCurrency(index)
    return codes[index]
