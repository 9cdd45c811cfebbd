"""Mini README: Session exchange-rate table.

Structure:
    * RateTable - mapping of foreign currency to its rate against home.

Rates are expressed as units of home currency per one unit of foreign
currency. The home currency is never stored: ``get`` answers ``1.0`` for it
and ``set`` refuses it, so a self-rate can never drift away from one. Every
foreign code starts at ``1.0`` and entries are only ever overwritten.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..errors import InvalidAmount, InvalidOperation
from ..logging_utils import get_logger
from .codes import FOREIGN_CURRENCIES, HOME_CURRENCY, CurrencyCode

LOGGER = get_logger(__name__)

DEFAULT_RATE = 1.0


class RateTable:
    """Hold the operator-recorded rate for each foreign currency."""

    def __init__(self, initial: Optional[Mapping[object, float]] = None) -> None:
        self._rates: Dict[CurrencyCode, float] = {
            code: DEFAULT_RATE for code in FOREIGN_CURRENCIES
        }
        for code, rate in (initial or {}).items():
            self.set(code, rate)
        LOGGER.debug("Rate table initialised with %s foreign rates", len(self._rates))

    def get(self, code: object) -> float:
        """Return the rate for ``code``; the home currency is always ``1.0``."""

        currency = CurrencyCode.parse(code)
        if currency is HOME_CURRENCY:
            return 1.0
        return self._rates[currency]

    def set(self, code: object, rate: float) -> None:
        """Record a new rate for a foreign currency."""

        currency = CurrencyCode.parse(code)
        if currency is HOME_CURRENCY:
            raise InvalidOperation(
                f"{HOME_CURRENCY.value} is the home currency; its rate is fixed at 1.0."
            )
        if isinstance(rate, bool) or not isinstance(rate, Real) or not math.isfinite(rate):
            raise InvalidAmount(f"Exchange rate must be a finite number, got {rate!r}.")
        previous = self._rates[currency]
        self._rates[currency] = float(rate)
        LOGGER.info("Rate for %s changed %s -> %s", currency.value, previous, rate)

    def items(self) -> Iterator[Tuple[CurrencyCode, float]]:
        """Yield ``(code, rate)`` pairs in display order."""

        for code in FOREIGN_CURRENCIES:
            yield code, self._rates[code]

    def as_dict(self) -> Dict[str, float]:
        """Export the foreign rates keyed by plain code strings."""

        return {code.value: rate for code, rate in self.items()}

    def __contains__(self, code: object) -> bool:
        try:
            return CurrencyCode.parse(code) in self._rates
        except LookupError:
            return False

    def __len__(self) -> int:
        return len(self._rates)
