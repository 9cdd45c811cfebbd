"""Mini README: Tests for the session-scoped ledger service.

These tests drive the service the way the console does, with primitive
arguments, and check that state changes only on success.
"""

from __future__ import annotations

import pytest

from ledgersim.currency import CurrencyCode
from ledgersim.errors import (
    AccountNotFound,
    DuplicateAccount,
    InsufficientFunds,
    InvalidAmount,
    InvalidOperation,
    UnknownCurrency,
)
from ledgersim.ledger import LedgerService


def test_register_and_lookup(service: LedgerService) -> None:
    account = service.register_account("Alice")
    assert service.find_account("Alice") is account
    assert service.find_account("Bob") is None
    with pytest.raises(DuplicateAccount):
        service.register_account("Alice")
    with pytest.raises(AccountNotFound):
        service.get_account("Bob")


def test_deposit_and_withdraw_by_name(service: LedgerService) -> None:
    service.register_account("Alice")
    service.set_rate("USD", 56.0)
    assert service.deposit("Alice", 50, "PHP") == 50
    assert service.deposit("Alice", 1, "USD") == pytest.approx(106.0)
    with pytest.raises(InsufficientFunds):
        service.withdraw("Alice", 2, "USD")
    assert service.withdraw("Alice", 106.0, "PHP") == pytest.approx(0.0)


def test_transactions_on_unknown_accounts_fail(service: LedgerService) -> None:
    with pytest.raises(AccountNotFound):
        service.deposit("Ghost", 1, "PHP")
    with pytest.raises(AccountNotFound):
        service.project_interest("Ghost", 3)


def test_exchange_preview_uses_title_positions(service: LedgerService) -> None:
    assert service.set_rate_by_index(0, 56.0) is CurrencyCode.USD
    assert service.exchange_preview(100, 1, 0) == 5600.0
    assert service.exchange_preview(5600.0, 0, 1) == 100.0
    assert service.exchange_preview(7, 0, 0) == 7


@pytest.mark.parametrize("source, target", [(-1, 0), (0, 6), (6, 1)])
def test_exchange_preview_rejects_out_of_range_indices(
    service: LedgerService, source: int, target: int
) -> None:
    with pytest.raises(UnknownCurrency):
        service.exchange_preview(1, source, target)


def test_set_rate_refusals_leave_table_untouched(service: LedgerService) -> None:
    with pytest.raises(InvalidOperation):
        service.set_rate("PHP", 2.0)
    with pytest.raises(UnknownCurrency):
        service.set_rate_by_index(5, 2.0)
    with pytest.raises(InvalidAmount):
        service.set_rate("EUR", float("nan"))
    assert service.rates.as_dict() == {code: 1.0 for code in ("USD", "JPY", "GBP", "EUR", "CNY")}


def test_project_interest_does_not_mutate_balance(service: LedgerService) -> None:
    service.register_account("Alice")
    service.deposit("Alice", 1000, "PHP")
    schedule = service.project_interest("Alice", 10)
    assert len(schedule) == 10
    assert service.get_account("Alice").balance == 1000
    assert service.annual_rate == pytest.approx(0.05)


def test_sessions_do_not_share_state(settings) -> None:
    first = LedgerService(settings)
    second = LedgerService(settings)
    first.register_account("Alice")
    first.set_rate("JPY", 0.4)
    assert second.find_account("Alice") is None
    assert second.rates.get("JPY") == 1.0
