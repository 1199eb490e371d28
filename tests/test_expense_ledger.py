"""Mini README: Tests covering the expense ledger operations.

Structure:
    * Limit enforcement - unlimited ledgers accept everything, limits use strict greater-than.
    * Removal - invalid indices never change state, valid ones keep order.
    * Daily summaries - exact date filtering with totals, ``None`` when empty.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from dailyledger.expenses import (
    MAX_AMOUNT,
    AddOutcome,
    Category,
    ExpenseLedger,
    ExpenseRecord,
    RemoveOutcome,
)

NEW_YEAR = date(2024, 1, 1)


def _record(category: Category, amount: str, occurred_on: date = NEW_YEAR, description: str = "") -> ExpenseRecord:
    return ExpenseRecord(
        category=category, amount=Decimal(amount), occurred_on=occurred_on, description=description
    )


def test_unlimited_ledger_accepts_every_expense_in_order() -> None:
    """With no limit every add succeeds and insertion order is preserved."""

    ledger = ExpenseLedger()
    records = [_record(Category.FOOD, str(amount), description=f"item {amount}") for amount in range(1, 6)]

    outcomes = [ledger.add_expense(record).outcome for record in records]

    assert outcomes == [AddOutcome.ADDED] * 5
    assert ledger.list_all() == records
    assert len(ledger) == 5


def test_second_expense_over_limit_is_rejected() -> None:
    """Same-day totals above the limit reject the new record without storing it."""

    ledger = ExpenseLedger(daily_limit=Decimal("20"))
    assert ledger.add_expense(_record(Category.FOOD, "15")).added

    result = ledger.add_expense(_record(Category.TRANSPORT, "6"))

    assert result.outcome is AddOutcome.REJECTED_BY_LIMIT
    assert result.projected_total == Decimal("21")
    assert result.daily_limit == Decimal("20")
    assert len(ledger) == 1


def test_expense_reaching_limit_exactly_is_accepted() -> None:
    """Equality with the limit is not exceeding it."""

    ledger = ExpenseLedger(daily_limit=Decimal("10.00"))

    assert ledger.add_expense(_record(Category.UTILITIES, "10.00")).added
    assert ledger.add_expense(_record(Category.OTHER, "0")).added
    assert not ledger.add_expense(_record(Category.OTHER, "0.01")).added
    assert ledger.total_for_date(NEW_YEAR) == Decimal("10.00")


def test_limit_only_counts_the_same_calendar_day() -> None:
    ledger = ExpenseLedger(daily_limit=Decimal("10"))
    ledger.add_expense(_record(Category.FOOD, "9", date(2024, 1, 1)))

    assert ledger.add_expense(_record(Category.FOOD, "9", date(2024, 1, 2))).added


def test_lowering_limit_does_not_revalidate_existing_days() -> None:
    """A limit change affects future additions only."""

    ledger = ExpenseLedger()
    ledger.add_expense(_record(Category.ENTERTAINMENT, "50"))

    assert ledger.set_daily_limit(Decimal("10")) == Decimal("10")

    assert len(ledger) == 1
    assert not ledger.add_expense(_record(Category.FOOD, "1")).added


def test_negative_limit_is_rejected_and_previous_limit_kept() -> None:
    ledger = ExpenseLedger(daily_limit=Decimal("5"))

    with pytest.raises(ValueError):
        ledger.set_daily_limit(Decimal("-1"))

    assert ledger.daily_limit == Decimal("5")


def test_zero_limit_disables_enforcement() -> None:
    ledger = ExpenseLedger(daily_limit=Decimal("5"))
    ledger.set_daily_limit(Decimal("0"))

    assert ledger.add_expense(_record(Category.FOOD, "500")).added


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_remove_invalid_index_leaves_ledger_unchanged(index: int) -> None:
    ledger = ExpenseLedger()
    records = [_record(Category.FOOD, "1"), _record(Category.OTHER, "2")]
    for record in records:
        ledger.add_expense(record)

    result = ledger.remove_by_index(index)

    assert result.outcome is RemoveOutcome.INVALID_INDEX
    assert result.record is None
    assert ledger.list_all() == records


def test_remove_from_empty_ledger_reports_invalid_index() -> None:
    assert ExpenseLedger().remove_by_index(0).outcome is RemoveOutcome.INVALID_INDEX


def test_remove_valid_index_keeps_relative_order() -> None:
    """Removing the middle record shifts the rest without reordering."""

    first, middle, last = (
        _record(Category.FOOD, "1", description="first"),
        _record(Category.TRANSPORT, "2", description="middle"),
        _record(Category.OTHER, "3", description="last"),
    )
    ledger = ExpenseLedger([first, middle, last])

    result = ledger.remove_by_index(1)

    assert result.removed
    assert result.record == middle
    assert ledger.list_all() == [first, last]


def test_expenses_for_date_filters_and_totals() -> None:
    """Only exact date matches are returned, in insertion order, with their sum."""

    ledger = ExpenseLedger()
    lunch = _record(Category.FOOD, "10.00", date(2024, 1, 1), "lunch")
    bus = _record(Category.TRANSPORT, "5.00", date(2024, 1, 2), "bus")
    snack = _record(Category.FOOD, "3.00", date(2024, 1, 1), "snack")
    for record in (lunch, bus, snack):
        ledger.add_expense(record)

    summary = ledger.expenses_for_date(date(2024, 1, 1))

    assert summary is not None
    assert summary.records == (lunch, snack)
    assert summary.total == Decimal("13.00")
    assert ledger.expenses_for_date(date(2024, 1, 3)) is None


def test_list_all_returns_a_copy() -> None:
    ledger = ExpenseLedger()
    assert ledger.list_all() == []
    assert ledger.is_empty

    record = _record(Category.FOOD, "4")
    ledger.add_expense(record)
    listing = ledger.list_all()
    listing.clear()

    assert ledger.list_all() == [record]


def test_expense_record_is_immutable_and_validated() -> None:
    record = _record(Category.FOOD, "2.5")

    with pytest.raises(AttributeError):
        record.amount = Decimal("3")  # type: ignore[misc]
    with pytest.raises(ValueError):
        _record(Category.FOOD, "-1")
    with pytest.raises(ValueError):
        ExpenseRecord(Category.FOOD, Decimal("1"), datetime(2024, 1, 1, 12, 0))
    assert ExpenseRecord(Category.OTHER, 7, NEW_YEAR).amount == Decimal("7")


def test_record_description_format() -> None:
    record = _record(Category.FOOD, "10", description="lunch")

    assert record.describe() == "Category: FOOD | Amount: 10.00 | Date: 2024-01-01 | Description: lunch"


def test_category_from_str_is_case_insensitive() -> None:
    assert Category.from_str(" transport ") is Category.TRANSPORT
    with pytest.raises(ValueError):
        Category.from_str("groceries")


def test_limit_check_stays_exact_at_largest_amount() -> None:
    """Same-day sums near the amount ceiling are compared without rounding."""

    ledger = ExpenseLedger(daily_limit=MAX_AMOUNT)
    assert ledger.add_expense(_record(Category.OTHER, str(MAX_AMOUNT))).added

    result = ledger.add_expense(_record(Category.OTHER, "0.01"))

    assert result.outcome is AddOutcome.REJECTED_BY_LIMIT
    assert result.projected_total == MAX_AMOUNT + Decimal("0.01")
    assert len(ledger) == 1


@pytest.mark.parametrize("limit", ["1e30", "1e1000000", "NaN", "Infinity"])
def test_out_of_range_limit_is_rejected(limit: str) -> None:
    ledger = ExpenseLedger(daily_limit=Decimal("5"))

    with pytest.raises(ValueError):
        ledger.set_daily_limit(Decimal(limit))

    assert ledger.daily_limit == Decimal("5")


@pytest.mark.parametrize("amount", ["1e30", "1e1000000"])
def test_oversized_amount_is_rejected(amount: str) -> None:
    with pytest.raises(ValueError):
        _record(Category.FOOD, amount)


def test_amounts_are_rounded_to_cents_and_negative_zero_folded() -> None:
    assert _record(Category.FOOD, "2.345").amount == Decimal("2.35")
    zero = _record(Category.FOOD, "-0")
    assert not zero.amount.is_signed()
    assert "Amount: 0.00 |" in zero.describe()
