"""Mini README: Currency utilities for the ledger simulator.

This package holds the closed set of supported currency codes, the mutable
rate table the operator maintains during a session, and the pivot
conversion that routes every exchange through the home currency.
"""

from .codes import (
    CURRENCY_TITLES,
    FOREIGN_CURRENCIES,
    HOME_CURRENCY,
    SUPPORTED_CURRENCIES,
    CurrencyCode,
    currency_at,
)
from .conversion import convert
from .rates import RateTable

__all__ = [
    "CURRENCY_TITLES",
    "FOREIGN_CURRENCIES",
    "HOME_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "CurrencyCode",
    "RateTable",
    "convert",
    "currency_at",
]
