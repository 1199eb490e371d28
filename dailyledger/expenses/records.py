"""Mini README: Expense record value types.

Structure:
    * Category - closed enum of the five supported spending categories.
    * ExpenseRecord - frozen dataclass describing one spending event.
    * coerce_amount - shared validation for amounts and limits (cents, bounded).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import List

CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("999999999999.99")


class Category(str, Enum):
    """Enumerate the supported expense categories."""

    FOOD = "FOOD"
    TRANSPORT = "TRANSPORT"
    ENTERTAINMENT = "ENTERTAINMENT"
    UTILITIES = "UTILITIES"
    OTHER = "OTHER"

    @classmethod
    def from_str(cls, value: str) -> "Category":
        """Coerce arbitrary casing into a valid category."""

        try:
            normalised = value.strip().upper()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported category: {value}") from error

    @classmethod
    def names(cls) -> List[str]:
        return [category.value for category in cls]


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """Represent a single dated expense."""

    category: Category
    amount: Decimal
    occurred_on: date
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.category, Category):
            raise ValueError(f"Unsupported category: {self.category}")
        object.__setattr__(self, "amount", coerce_amount(self.amount))
        # datetime is a date subclass; records carry calendar days only
        if isinstance(self.occurred_on, datetime) or not isinstance(self.occurred_on, date):
            raise ValueError("Expense dates must be date instances without a time component.")

    def describe(self) -> str:
        """Render the record for console listings."""

        return (
            f"Category: {self.category.value} | Amount: {self.amount:.2f} | "
            f"Date: {self.occurred_on.isoformat()} | Description: {self.description}"
        )


def coerce_amount(value: object) -> Decimal:
    """Convert numeric input to a non-negative Decimal rounded to cents.

    Amounts above ``MAX_AMOUNT`` are rejected so same-day sums stay exact
    within the default decimal context.
    """

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as error:
        raise ValueError(f"Invalid amount: {value}") from error
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Amounts must be finite and non-negative, got {value}")
    if amount > MAX_AMOUNT:
        raise ValueError(f"Amounts cannot exceed {MAX_AMOUNT:,.2f}, got {value}")
    # copy_abs folds "-0" into 0
    return amount.quantize(CENT, rounding=ROUND_HALF_UP).copy_abs()
