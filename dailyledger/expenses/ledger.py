"""Mini README: In-memory expense ledger with a daily spending limit.

Structure:
    * AddOutcome / AddResult - result of attempting to record an expense.
    * RemoveOutcome / RemoveResult - result of removing by position.
    * DailySummary - records and total for a single calendar day.
    * ExpenseLedger - owns the ordered records and the daily limit policy.

The ledger reports policy decisions as values rather than exceptions: an
expense that would push its day over the limit is simply not stored, and an
out-of-range removal is reported as an invalid index. The limit applies only
to future additions; lowering it never re-checks recorded days.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..logging_utils import get_logger
from .records import ExpenseRecord, coerce_amount

LOGGER = get_logger(__name__)

NO_LIMIT = Decimal("0")


class AddOutcome(str, Enum):
    """Possible results of ``ExpenseLedger.add_expense``."""

    ADDED = "added"
    REJECTED_BY_LIMIT = "rejected_by_limit"


class RemoveOutcome(str, Enum):
    """Possible results of ``ExpenseLedger.remove_by_index``."""

    REMOVED = "removed"
    INVALID_INDEX = "invalid_index"


@dataclass(frozen=True, slots=True)
class AddResult:
    """Outcome of an add attempt with the figures used to decide it."""

    outcome: AddOutcome
    record: ExpenseRecord
    projected_total: Decimal
    daily_limit: Decimal

    @property
    def added(self) -> bool:
        return self.outcome is AddOutcome.ADDED


@dataclass(frozen=True, slots=True)
class RemoveResult:
    """Outcome of a removal; ``record`` is set only when something was removed."""

    outcome: RemoveOutcome
    index: int
    record: Optional[ExpenseRecord] = None

    @property
    def removed(self) -> bool:
        return self.outcome is RemoveOutcome.REMOVED


@dataclass(frozen=True, slots=True)
class DailySummary:
    """Expenses recorded on one calendar day, in insertion order."""

    occurred_on: date
    records: Tuple[ExpenseRecord, ...]
    total: Decimal


class ExpenseLedger:
    """Manage an ordered collection of expenses and the daily limit."""

    def __init__(
        self,
        records: Optional[Iterable[ExpenseRecord]] = None,
        *,
        daily_limit: Decimal = NO_LIMIT,
    ) -> None:
        # Preloaded records are trusted as-is; the limit guards add_expense only.
        self._records: List[ExpenseRecord] = list(records or [])
        self._daily_limit = NO_LIMIT
        self.set_daily_limit(daily_limit)
        LOGGER.debug("Expense ledger initialised with %s records", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    @property
    def daily_limit(self) -> Decimal:
        return self._daily_limit

    @property
    def is_empty(self) -> bool:
        return not self._records

    def set_daily_limit(self, limit: Decimal) -> Decimal:
        """Replace the daily limit; zero disables enforcement.

        Negative, non-finite or oversized limits raise ``ValueError`` and keep
        the current value. Limits are rounded to cents like expense amounts.
        Expenses already recorded are not re-validated against the new limit.
        """

        try:
            value = coerce_amount(limit)
        except ValueError as error:
            raise ValueError(f"Invalid daily limit: {error}") from error
        self._daily_limit = value
        LOGGER.info("Daily limit set to %.2f", value)
        return value

    def total_for_date(self, occurred_on: date) -> Decimal:
        """Sum the amounts recorded on exactly ``occurred_on``."""

        return sum(
            (record.amount for record in self._records if record.occurred_on == occurred_on),
            Decimal("0"),
        )

    def add_expense(self, record: ExpenseRecord) -> AddResult:
        """Append ``record`` unless it would push its day over the limit."""

        projected_total = self.total_for_date(record.occurred_on) + record.amount
        if self._daily_limit > 0 and projected_total > self._daily_limit:
            LOGGER.info(
                "Rejected expense on %s: projected total %.2f exceeds limit %.2f",
                record.occurred_on,
                projected_total,
                self._daily_limit,
            )
            return AddResult(AddOutcome.REJECTED_BY_LIMIT, record, projected_total, self._daily_limit)

        self._records.append(record)
        LOGGER.debug("Recorded expense #%s: %s", len(self._records), record.describe())
        return AddResult(AddOutcome.ADDED, record, projected_total, self._daily_limit)

    def list_all(self) -> List[ExpenseRecord]:
        """Return all records in insertion order; empty when nothing is recorded."""

        return list(self._records)

    def remove_by_index(self, index: int) -> RemoveResult:
        """Remove the record at the 0-based ``index`` if it exists."""

        if not 0 <= index < len(self._records):
            LOGGER.debug("Ignoring removal of invalid index %s (size %s)", index, len(self._records))
            return RemoveResult(RemoveOutcome.INVALID_INDEX, index)
        removed = self._records.pop(index)
        LOGGER.debug("Removed expense at index %s: %s", index, removed.describe())
        return RemoveResult(RemoveOutcome.REMOVED, index, removed)

    def expenses_for_date(self, occurred_on: date) -> Optional[DailySummary]:
        """Return the day's records and total, or ``None`` when nothing matches."""

        matching = tuple(record for record in self._records if record.occurred_on == occurred_on)
        if not matching:
            return None
        total = sum((record.amount for record in matching), Decimal("0"))
        return DailySummary(occurred_on=occurred_on, records=matching, total=total)
