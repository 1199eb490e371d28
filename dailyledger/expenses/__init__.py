"""Mini README: Expense records and the in-memory ledger.

This package groups the immutable expense value, its closed category
enumeration, and the ledger that enforces the optional daily spending
limit. Everything lives in memory for the lifetime of one console session.
"""

from .ledger import (
    AddOutcome,
    AddResult,
    DailySummary,
    ExpenseLedger,
    RemoveOutcome,
    RemoveResult,
)
from .records import MAX_AMOUNT, Category, ExpenseRecord, coerce_amount

__all__ = [
    "MAX_AMOUNT",
    "AddOutcome",
    "AddResult",
    "Category",
    "DailySummary",
    "ExpenseLedger",
    "ExpenseRecord",
    "RemoveOutcome",
    "RemoveResult",
    "coerce_amount",
]
