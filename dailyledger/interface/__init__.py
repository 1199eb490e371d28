"""Mini README: Interactive console interface for dailyledger.

Exports the menu loop and the parsing helpers that turn raw user text into
typed values before anything reaches the ledger.
"""

from .console import ExpenseConsole
from .parsing import (
    InputFormatError,
    parse_amount,
    parse_category,
    parse_date,
    parse_position,
)

__all__ = [
    "ExpenseConsole",
    "InputFormatError",
    "parse_amount",
    "parse_category",
    "parse_date",
    "parse_position",
]
