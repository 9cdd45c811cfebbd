"""Mini README: Tests for the account registry and balance mutations.

Structure:
    * registration uniqueness and lookup semantics.
    * deposits and withdrawals in home and foreign currencies.
    * failure paths leave balances untouched.
"""

from __future__ import annotations

import math

import pytest

from ledgersim.accounts import Account, AccountRegistry, deposit, withdraw
from ledgersim.currency import HOME_CURRENCY, RateTable
from ledgersim.errors import (
    DuplicateAccount,
    InsufficientFunds,
    InvalidAmount,
    InvalidOperation,
    UnknownCurrency,
)


def test_register_creates_zero_balance_home_account() -> None:
    registry = AccountRegistry()
    account = registry.register("Alice")
    assert account.balance == 0.0
    assert account.currency is HOME_CURRENCY
    assert registry.lookup("Alice") is account
    assert account.as_dict() == {"name": "Alice", "balance": 0.0, "currency": "PHP"}


def test_register_twice_keeps_the_first_account(rates: RateTable) -> None:
    registry = AccountRegistry()
    first = registry.register("Alice")
    deposit(first, 10, "PHP", rates)
    with pytest.raises(DuplicateAccount):
        registry.register("Alice")
    assert len(registry) == 1
    assert registry.lookup("Alice").balance == 10


def test_register_refuses_blank_names() -> None:
    registry = AccountRegistry()
    for name in ("", "   "):
        with pytest.raises(InvalidOperation):
            registry.register(name)
    assert len(registry) == 0


def test_lookup_is_exact_and_case_sensitive() -> None:
    registry = AccountRegistry()
    registry.register("Alice")
    registry.register("alice")
    assert registry.lookup("ALICE") is None
    assert [account.name for account in registry.list_accounts()] == ["Alice", "alice"]
    assert "Alice" in registry
    assert "Bob" not in registry


def test_home_deposit_adds_amount_as_given(rates: RateTable) -> None:
    account = Account(name="Alice", balance=12.5)
    assert deposit(account, 7.25, "PHP", rates) == pytest.approx(19.75)


def test_foreign_deposit_converts_before_crediting(rates: RateTable) -> None:
    rates.set("USD", 56.0)
    account = Account(name="Alice")
    deposit(account, 2, "usd", rates)
    assert account.balance == pytest.approx(112.0)


def test_alice_scenario_overdraw_is_refused(rates: RateTable) -> None:
    account = AccountRegistry().register("Alice")
    deposit(account, 50, "PHP", rates)
    assert account.balance == 50
    with pytest.raises(InsufficientFunds) as excinfo:
        withdraw(account, 60, "PHP", rates)
    assert excinfo.value.requested == 60
    assert account.balance == 50


def test_withdraw_to_exactly_zero_is_allowed(rates: RateTable) -> None:
    account = Account(name="Alice", balance=40.0)
    assert withdraw(account, 40.0, "PHP", rates) == 0.0


def test_foreign_withdraw_uses_converted_amount(rates: RateTable) -> None:
    rates.set("USD", 56.0)
    account = Account(name="Alice", balance=100.0)
    with pytest.raises(InsufficientFunds):
        withdraw(account, 2, "USD", rates)
    withdraw(account, 1, "USD", rates)
    assert account.balance == pytest.approx(44.0)


def test_invalid_amounts_and_codes_leave_balance_untouched(rates: RateTable) -> None:
    account = Account(name="Alice", balance=5.0)
    for bad in (math.nan, math.inf, "10", None):
        with pytest.raises(InvalidAmount):
            deposit(account, bad, "PHP", rates)
        with pytest.raises(InvalidAmount):
            withdraw(account, bad, "PHP", rates)
    with pytest.raises(UnknownCurrency):
        deposit(account, 1, "AUD", rates)
    assert account.balance == 5.0


def test_signed_amounts_follow_plain_arithmetic(rates: RateTable) -> None:
    account = Account(name="Alice", balance=50.0)
    assert deposit(account, -20, "PHP", rates) == pytest.approx(30.0)
    assert withdraw(account, -15, "PHP", rates) == pytest.approx(45.0)


def test_overflowing_balances_are_refused_without_mutation(rates: RateTable) -> None:
    rates.set("USD", 56.0)
    fresh = Account(name="Alice")
    with pytest.raises(InvalidAmount):
        deposit(fresh, 1e308, "USD", rates)
    assert fresh.balance == 0.0

    account = Account(name="Bob", balance=1e308)
    with pytest.raises(InvalidAmount):
        deposit(account, 1e308, "PHP", rates)
    with pytest.raises(InvalidAmount):
        withdraw(account, -1e308, "PHP", rates)
    assert account.balance == 1e308
    assert math.isfinite(withdraw(account, 1e308, "PHP", rates))
