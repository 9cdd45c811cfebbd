"""Mini README: Menu-driven console session for the ledger simulator.

Structure:
    * TRANSACTION_TITLES - menu entries in display order.
    * describe_error - map core and parsing errors to operator messages.
    * LedgerConsole - prompt loop that drives a ``LedgerService``.

The console owns everything text related: prompting through Typer, parsing
raw input, rendering numbered lists and tables, and the yes/no loops around
repeatable transactions. Core errors never escape a transaction; they are
shown as a message and the operator is returned to the menu prompt.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

import typer

from ..accounts import Account
from ..currency import (
    CURRENCY_TITLES,
    FOREIGN_CURRENCIES,
    HOME_CURRENCY,
    CurrencyCode,
    currency_at,
)
from ..errors import (
    AccountNotFound,
    DuplicateAccount,
    InsufficientFunds,
    LedgerError,
    UnknownCurrency,
)
from ..ledger import LedgerService
from ..logging_utils import get_logger
from .parsing import InvalidInput, parse_choice, parse_float, parse_int
from .rendering import format_choices, format_schedule

LOGGER = get_logger(__name__)

TRANSACTION_TITLES: Tuple[str, ...] = (
    "Register Account Name",
    "Deposit Amount",
    "Withdraw Amount",
    "Currency Exchange",
    "Record Exchange Rates",
    "Show Interest Amount",
)

YES_NO_HINT = "Only accepting a [Y]es or [N]o answer!"


def describe_error(error: Exception) -> str:
    """Return the message shown to the operator for ``error``."""

    if isinstance(error, UnknownCurrency):
        if isinstance(error.currency, int):
            return "No currency with this ID exists!"
        return "No currency with this code exists!"
    if isinstance(error, AccountNotFound):
        return "No account with this name exists!"
    if isinstance(error, DuplicateAccount):
        return "An account with this name already exists!"
    if isinstance(error, InsufficientFunds):
        return "Withdraw amount must be less than the current balance!"
    return str(error)


class LedgerConsole:
    """Run the interactive menu loop against a single ledger session."""

    def __init__(self, service: LedgerService) -> None:
        self.service = service
        self._handlers: List[Tuple[str, Callable[[], None]]] = [
            (TRANSACTION_TITLES[0], self.register_account),
            (TRANSACTION_TITLES[1], self.deposit),
            (TRANSACTION_TITLES[2], self.withdraw),
            (TRANSACTION_TITLES[3], self.exchange_currencies),
            (TRANSACTION_TITLES[4], self.record_exchange_rate),
            (TRANSACTION_TITLES[5], self.show_interest),
        ]

    @staticmethod
    def _print_choices(choices: Sequence[object]) -> None:
        for line in format_choices(choices):
            typer.echo(line)

    @staticmethod
    def _ask(label: str) -> str:
        return typer.prompt(label, prompt_suffix=": ")

    def ask_yes_no(self, question: str) -> bool:
        """Repeat ``question`` until the operator answers Y or N."""

        while True:
            answer = self._ask(f"{question} (Y/N)").strip().upper()
            if answer == "Y":
                return True
            if answer == "N":
                return False
            typer.echo(YES_NO_HINT)
            typer.echo()

    def run(self) -> None:
        """Process transactions until the operator declines to continue."""

        LOGGER.debug("Console session started")
        while True:
            typer.echo("Select Transaction:")
            self._print_choices(TRANSACTION_TITLES)
            typer.echo()
            raw_choice = typer.prompt(">", prompt_suffix=" ")
            typer.echo()
            self.dispatch(raw_choice)
            typer.echo()
            if not self.ask_yes_no("Back to the Main Menu"):
                break
            typer.echo()
        LOGGER.debug("Console session finished")

    def dispatch(self, raw_choice: str) -> None:
        """Run the transaction selected by ``raw_choice``."""

        try:
            index = parse_choice(raw_choice)
            title, handler = self._handlers[index]
        except (InvalidInput, IndexError):
            typer.echo("No transaction with this ID exists!")
            return

        typer.echo(title)
        try:
            handler()
        except (LedgerError, InvalidInput) as error:
            typer.echo(describe_error(error))

    def register_account(self) -> None:
        account = self.service.register_account(self._ask("Account Name"))
        typer.echo(f"Registered account {account.name}.")

    def _ask_account(self) -> Account:
        return self.service.get_account(self._ask("Account Name"))

    def deposit(self) -> None:
        account = self._ask_account()
        typer.echo(f"Current Balance: {account.balance}")
        currency = CurrencyCode.parse(self._ask("Currency"))
        typer.echo()
        amount = parse_float(
            self._ask("Deposit Amount"), "Deposit amount must be a floating point number!"
        )
        balance = self.service.deposit(account.name, amount, currency)
        typer.echo(f"Updated Balance: {balance}")

    def withdraw(self) -> None:
        account = self._ask_account()
        typer.echo(f"Current Balance: {account.balance}")
        currency = CurrencyCode.parse(self._ask("Currency"))
        typer.echo()
        amount = parse_float(
            self._ask("Withdraw Amount"), "Withdraw amount must be a floating point number!"
        )
        balance = self.service.withdraw(account.name, amount, currency)
        typer.echo(f"Updated Balance: {balance}")

    def _ask_currency_index(self, heading: str, label: str) -> int:
        typer.echo(heading)
        self._print_choices(CURRENCY_TITLES)
        typer.echo()
        index = parse_choice(self._ask(label))
        currency_at(index)
        return index

    def exchange_currencies(self) -> None:
        """Preview conversions until the operator stops asking for more."""

        while True:
            try:
                self._exchange_once()
            except (LedgerError, InvalidInput) as error:
                typer.echo(describe_error(error))
            typer.echo()
            if not self.ask_yes_no("Convert another currency?"):
                return
            typer.echo()

    def _exchange_once(self) -> None:
        source_index = self._ask_currency_index("Source Currency Options:", "Source Currency")
        amount = parse_float(self._ask("Source Amount"))
        typer.echo()
        target_index = self._ask_currency_index("Exchanged Currency Options:", "Exchange Currency")
        converted = self.service.exchange_preview(amount, source_index, target_index)
        typer.echo(f"Exchange Amount: {converted}")

    def record_exchange_rate(self) -> None:
        typer.echo()
        self._print_choices([code.display_title for code in FOREIGN_CURRENCIES])
        typer.echo()
        index = parse_choice(self._ask("Select Foreign Currency"))
        currency = currency_at(index, FOREIGN_CURRENCIES)
        rate = parse_float(self._ask("Exchange Rate"))
        self.service.set_rate_by_index(index, rate)
        typer.echo(f"Recorded: 1 {currency.value} = {rate} {HOME_CURRENCY.value}")

    def show_interest(self) -> None:
        account = self._ask_account()
        typer.echo(f"Current Balance: {account.balance}")
        typer.echo(f"Currency: {account.currency.value}")
        typer.echo(f"Interest Rate: {self.service.annual_rate * 100:g}%")
        typer.echo()
        day_count = parse_int(
            self._ask("Total Number of Days"), "Number must be a whole number (integer)!"
        )
        schedule = self.service.project_interest(account.name, day_count)
        typer.echo()
        for line in format_schedule(schedule):
            typer.echo(line)
