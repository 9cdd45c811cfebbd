"""Mini README: Text parsing at the console boundary.

Structure:
    * InvalidInput - raised when raw text is not the expected kind of number.
    * parse_float / parse_int - strict numeric parsing of one line of input.
    * parse_choice - turn a 1-based menu id into a zero-based index.

This is the first of two validation stages. Parsing only answers "is this
text a number of the right shape"; whether the number is acceptable (sign,
currency membership, available funds) is decided by the ledger core.
"""

from __future__ import annotations

import math


class InvalidInput(ValueError):
    """Raised when operator text cannot be parsed into the requested value."""


def _strip_digits(text: str, message: str) -> str:
    """Strip whitespace and refuse digit-group separators."""

    try:
        stripped = text.strip()
    except AttributeError as error:
        raise InvalidInput(message) from error
    if "_" in stripped:
        raise InvalidInput(message)
    return stripped


def parse_float(text: str, message: str = "Amount must be a floating point number!") -> float:
    """Parse ``text`` as a finite float."""

    try:
        value = float(_strip_digits(text, message))
    except (AttributeError, ValueError) as error:
        raise InvalidInput(message) from error
    if not math.isfinite(value):
        raise InvalidInput(message)
    return value


def parse_int(text: str, message: str = "Number must be a whole number (integer)!") -> int:
    """Parse ``text`` as a base-10 integer, sign allowed."""

    try:
        return int(_strip_digits(text, message), 10)
    except (AttributeError, ValueError) as error:
        raise InvalidInput(message) from error


def parse_choice(text: str, message: str = "ID must be a positive whole number (integer)!") -> int:
    """Parse a 1-based choice and return the matching zero-based index."""

    value = parse_int(text, message)
    if value < 1:
        raise InvalidInput(message)
    return value - 1
