"""Mini README: Entry point CLI for the ledger simulator.

This script exposes a Typer CLI with three commands: ``run`` starts the
interactive menu session, ``convert`` previews a single conversion and
``project`` prints an interest schedule for a balance. Logging is configured
from settings before any command does work.
"""

from __future__ import annotations

from typing import List, Optional

import typer

from ledgersim.configuration import get_settings
from ledgersim.currency import RateTable, convert as convert_currency
from ledgersim.errors import LedgerError
from ledgersim.interest import project as project_interest
from ledgersim.interface import (
    InvalidInput,
    LedgerConsole,
    describe_error,
    format_schedule,
    parse_float,
)
from ledgersim.ledger import LedgerService
from ledgersim.logging_utils import configure_root_logger

cli = typer.Typer(help="Simulate a home-currency ledger with exchange rates and interest.")


def _parse_rate_options(values: Optional[List[str]]) -> RateTable:
    """Build a rate table from ``CODE=VALUE`` option strings."""

    rates = RateTable()
    for value in values or []:
        code, separator, raw_rate = value.partition("=")
        if not separator:
            raise typer.BadParameter(f"Expected CODE=VALUE, got '{value}'.", param_hint="--rate")
        try:
            rates.set(code, parse_float(raw_rate, f"Rate for {code} must be a number."))
        except (InvalidInput, LedgerError) as error:
            raise typer.BadParameter(describe_error(error), param_hint="--rate") from error
    return rates


@cli.command()
def run(
    log_level: str = typer.Option(None, help="Override the configured logging level."),
) -> None:
    """Start an interactive ledger session."""

    settings = get_settings()
    try:
        configure_root_logger(log_level or settings.log_level)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--log-level") from error
    typer.echo(
        f"Ledger session ({settings.environment}); "
        f"annual interest {settings.annual_interest_rate * 100:g}%."
    )
    LedgerConsole(LedgerService(settings)).run()


@cli.command("convert")
def convert_command(
    amount: float = typer.Argument(..., help="Amount in the source currency."),
    source: str = typer.Argument(..., help="Source currency code."),
    target: str = typer.Argument(..., help="Target currency code."),
    rate: Optional[List[str]] = typer.Option(
        None, "--rate", help="Home units per foreign unit, as CODE=VALUE. Repeatable."
    ),
) -> None:
    """Preview a single conversion through the home currency."""

    configure_root_logger(get_settings().log_level)
    rates = _parse_rate_options(rate)
    try:
        converted = convert_currency(amount, source, target, rates)
    except LedgerError as error:
        typer.echo(describe_error(error), err=True)
        raise typer.Exit(code=1) from error
    typer.echo(f"Exchange Amount: {converted}")


@cli.command("project")
def project_command(
    balance: float = typer.Argument(..., help="Starting balance in the home currency."),
    days: int = typer.Argument(..., help="Number of days to project."),
    annual_rate: Optional[float] = typer.Option(
        None, help="Annual rate as a fraction; defaults to the configured rate."
    ),
) -> None:
    """Print a daily compounding interest schedule."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    effective_rate = settings.annual_interest_rate if annual_rate is None else annual_rate
    try:
        schedule = project_interest(balance, days, effective_rate)
    except LedgerError as error:
        typer.echo(describe_error(error), err=True)
        raise typer.Exit(code=1) from error
    for line in format_schedule(schedule):
        typer.echo(line)


if __name__ == "__main__":
    cli()
