"""Mini README: Parsing helpers for console input.

Structure:
    * InputFormatError - raised when text cannot become the requested value.
    * parse_date / parse_category / parse_amount / parse_position - converters.

Each helper accepts the raw line typed by the user and either returns a
typed value or raises ``InputFormatError`` with a message suitable for
printing straight back to the console.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation

from ..expenses import MAX_AMOUNT, Category, coerce_amount

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InputFormatError(ValueError):
    """User input that could not be parsed into the expected type."""


def parse_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` calendar date."""

    cleaned = text.strip()
    # date.fromisoformat also accepts compact and week forms on newer Pythons
    if not _ISO_DATE.match(cleaned):
        raise InputFormatError("Invalid date format. Please use YYYY-MM-DD.")
    try:
        return date.fromisoformat(cleaned)
    except ValueError as error:
        raise InputFormatError("Invalid date format. Please use YYYY-MM-DD.") from error


def parse_category(text: str) -> Category:
    """Match a category name regardless of case."""

    try:
        return Category.from_str(text)
    except ValueError as error:
        raise InputFormatError(
            f"Invalid category. Choose one of: {', '.join(Category.names())}."
        ) from error


def parse_amount(text: str) -> Decimal:
    """Parse a non-negative decimal number, bounded and rounded to cents."""

    try:
        amount = Decimal(text.strip())
    except InvalidOperation as error:
        raise InputFormatError("Invalid amount. Please enter a number.") from error
    if not amount.is_finite():
        raise InputFormatError("Invalid amount. Please enter a number.")
    if amount < 0:
        raise InputFormatError("Amount cannot be negative.")
    if amount > MAX_AMOUNT:
        raise InputFormatError(f"Amount cannot exceed {MAX_AMOUNT:,.2f}.")
    return coerce_amount(amount)


def parse_position(text: str) -> int:
    """Convert a 1-based position typed by the user into a 0-based index."""

    try:
        position = int(text.strip())
    except ValueError as error:
        raise InputFormatError("Invalid position. Please enter a whole number.") from error
    return position - 1
