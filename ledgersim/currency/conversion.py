"""Mini README: Pivot conversion between supported currencies.

Structure:
    * convert - move an amount from one currency to another via home.
    * ensure_finite - shared guard for amounts entering the core.

Every conversion goes through the home currency: a foreign source is
multiplied by its rate to reach home, and home is divided by the target's
rate to reach a foreign destination. The rate table therefore only needs
one entry per foreign currency. No rounding is applied.
A result that overflows to infinity is refused with ``InvalidAmount``.
"""

from __future__ import annotations

import math
from numbers import Real

from ..errors import InvalidAmount, InvalidOperation
from .codes import CurrencyCode
from .rates import RateTable


def ensure_finite(value: object, label: str = "Amount") -> float:
    """Return ``value`` as a float or raise ``InvalidAmount``."""

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidAmount(f"{label} must be a number, got {value!r}.")
    if not math.isfinite(value):
        raise InvalidAmount(f"{label} must be finite, got {value!r}.")
    return float(value)


def convert(amount: float, source: object, target: object, rates: RateTable) -> float:
    """Convert ``amount`` from ``source`` to ``target`` using ``rates``."""

    value = ensure_finite(amount)
    source_code = CurrencyCode.parse(source)
    target_code = CurrencyCode.parse(target)

    pivot = value if source_code.is_home else value * rates.get(source_code)
    if target_code.is_home:
        return ensure_finite(pivot, "Converted amount")

    target_rate = rates.get(target_code)
    if target_rate == 0:
        raise InvalidOperation(
            f"No usable exchange rate recorded for {target_code.value}."
        )
    return ensure_finite(pivot / target_rate, "Converted amount")
