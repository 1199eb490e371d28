"""Mini README: Menu-driven console for the expense ledger.

Structure:
    * MENU - the six numbered options shown before every prompt.
    * ExpenseConsole - read-eval loop owning one ``ExpenseLedger``.

The console parses every answer before calling into the ledger, so format
errors are reported and the menu is shown again without touching state.
Input and output callables are injectable which keeps the loop testable
without a terminal. End of input behaves like choosing Exit.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

import typer

from ..expenses import ExpenseLedger, ExpenseRecord
from ..logging_utils import get_logger
from .parsing import InputFormatError, parse_amount, parse_category, parse_date, parse_position

LOGGER = get_logger(__name__)

EXIT_CHOICE = "6"

MENU = (
    "",
    "1. Set Daily Limit",
    "2. Add Expense",
    "3. View Expenses",
    "4. Remove Expense",
    "5. View Expenses for a Specific Date",
    "6. Exit",
)


class ExpenseConsole:
    """Interactive loop translating menu choices into ledger operations."""

    def __init__(
        self,
        ledger: Optional[ExpenseLedger] = None,
        *,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], None] = typer.echo,
    ) -> None:
        self.ledger = ledger if ledger is not None else ExpenseLedger()
        self._read = reader
        self._write = writer
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.set_daily_limit,
            "2": self.add_expense,
            "3": self.view_expenses,
            "4": self.remove_expense,
            "5": self.view_expenses_for_date,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input runs out."""

        while True:
            for line in MENU:
                self._write(line)
            try:
                choice = self._read("Enter your choice: ").strip()
            except EOFError:
                choice = EXIT_CHOICE
            if choice == EXIT_CHOICE:
                self._write("Exiting...")
                return
            action = self._actions.get(choice)
            if action is None:
                self._write("Invalid choice. Please try again.")
                continue
            try:
                action()
            except InputFormatError as error:
                LOGGER.debug("Rejected input for option %s: %s", choice, error)
                self._write(str(error))
            except EOFError:
                self._write("Exiting...")
                return

    def set_daily_limit(self) -> None:
        limit = parse_amount(self._read("Enter the daily expense limit: "))
        applied = self.ledger.set_daily_limit(limit)
        self._write(f"Daily limit set to {applied:.2f}")

    def add_expense(self) -> None:
        category = parse_category(
            self._read("Enter category (FOOD, TRANSPORT, ENTERTAINMENT, UTILITIES, OTHER): ")
        )
        amount = parse_amount(self._read("Enter amount: "))
        occurred_on = parse_date(self._read("Enter date (YYYY-MM-DD): "))
        description = self._read("Enter description: ")

        result = self.ledger.add_expense(
            ExpenseRecord(category=category, amount=amount, occurred_on=occurred_on, description=description)
        )
        if result.added:
            self._write("Expense added!")
        else:
            self._write(
                f"Warning: Adding this expense will exceed your daily limit of {result.daily_limit:.2f}!"
            )

    def view_expenses(self) -> None:
        records = self.ledger.list_all()
        if not records:
            self._write("No expenses recorded.")
            return
        self._write("Expenses:")
        for position, record in enumerate(records, start=1):
            self._write(f"{position}. {record.describe()}")

    def remove_expense(self) -> None:
        index = parse_position(self._read("Enter expense index to remove: "))
        result = self.ledger.remove_by_index(index)
        if result.removed:
            self._write(f"Expense removed: {result.record.describe()}")
        else:
            self._write("Invalid index.")

    def view_expenses_for_date(self) -> None:
        occurred_on = parse_date(self._read("Enter the date to view expenses (YYYY-MM-DD): "))
        self._write(f"Expenses for date: {occurred_on.isoformat()}")
        summary = self.ledger.expenses_for_date(occurred_on)
        if summary is None:
            self._write("No expenses recorded for this date.")
            return
        for record in summary.records:
            self._write(record.describe())
        self._write(f"Total expenses for {occurred_on.isoformat()}: {summary.total:.2f}")
