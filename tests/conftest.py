"""Mini README: Shared fixtures for the ledger simulator tests.

Structure:
    * settings - explicit settings so tests ignore the caller's environment.
    * rates - a fresh rate table with every foreign rate at 1.0.
    * service - a ledger session built from those settings.
"""

from __future__ import annotations

import pytest

from ledgersim.configuration import LedgerSettings, get_settings
from ledgersim.currency import RateTable
from ledgersim.ledger import LedgerService


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop ambient LEDGERSIM_* variables and the cached settings object."""

    for variable in ("ENVIRONMENT", "ANNUAL_INTEREST_RATE", "LOG_LEVEL"):
        monkeypatch.delenv(f"LEDGERSIM_{variable}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> LedgerSettings:
    return LedgerSettings(environment="test", annual_interest_rate=0.05)


@pytest.fixture
def rates() -> RateTable:
    return RateTable()


@pytest.fixture
def service(settings: LedgerSettings) -> LedgerService:
    return LedgerService(settings)
