"""Mini README: Interactive text interface for the ledger simulator.

Exports the console driver that runs the menu loop, plus the parsing and
rendering helpers it uses at the text boundary. The ``main_ledger_console``
script wires these into a Typer command line.
"""

from .console import LedgerConsole, describe_error
from .parsing import InvalidInput, parse_choice, parse_float, parse_int
from .rendering import format_choices, format_schedule

__all__ = [
    "InvalidInput",
    "LedgerConsole",
    "describe_error",
    "format_choices",
    "format_schedule",
    "parse_choice",
    "parse_float",
    "parse_int",
]
