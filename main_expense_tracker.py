"""Mini README: Entry point CLI for launching the dailyledger console.

This script exposes a Typer CLI that starts the interactive expense menu
with an optional starting daily limit. It configures logging once and draws
defaults from ``DAILYLEDGER_`` environment variables when available.
"""

from __future__ import annotations

from typing import Optional

import typer

from dailyledger.configuration import get_settings
from dailyledger.expenses import ExpenseLedger
from dailyledger.interface import ExpenseConsole, InputFormatError, parse_amount
from dailyledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track daily expenses from an interactive console menu.")


@cli.command()
def run(
    daily_limit: Optional[str] = typer.Option(
        None, help="Starting daily limit (0 disables the limit)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Start the interactive expense tracker."""

    settings = get_settings()
    configure_root_logger("DEBUG" if verbose else settings.log_level)
    effective_limit = settings.default_daily_limit
    if daily_limit is not None:
        try:
            effective_limit = parse_amount(daily_limit)
        except InputFormatError as error:
            raise typer.BadParameter(str(error), param_hint="'--daily-limit'") from error
    LOGGER.debug(
        "Starting console environment=%s daily_limit=%s", settings.environment, effective_limit
    )

    console = ExpenseConsole(ExpenseLedger(daily_limit=effective_limit))
    console.run()


if __name__ == "__main__":
    cli()
