"""Mini README: Interactive menu loop driving the finance tracker.

Structure:
    * MENU_OPTIONS - numbered menu entries shown before every choice.
    * ConsoleSession - reads choices with Typer prompts and renders results.

The session is a thin shell: it turns console input into typed arguments,
calls one ``FinanceTracker`` operation per choice and prints the outcome.
Typer/Click re-prompt on malformed numbers so the tracker only ever sees
well-typed values. End of input raises ``typer.Abort`` out of ``run``.
"""

from __future__ import annotations

import math
from typing import Callable, Dict, Optional

import typer

from ..configuration import TrackerSettings, get_settings
from ..ledger import Transaction, TransactionType
from ..logging_utils import get_logger
from ..tracker import FinanceTracker

LOGGER = get_logger(__name__)

EXIT_CHOICE = 9

MENU_OPTIONS = (
    "Add Transaction",
    "Display Transactions",
    "Delete Transaction",
    "Search Transaction by Amount",
    "Undo Last Transaction",
    "Add Reminder",
    "Process Reminders",
    "Calculate Cumulative Transactions",
    "Exit",
)


class ConsoleSession:
    """Run the numbered menu until the operator chooses to exit."""

    def __init__(
        self,
        tracker: Optional[FinanceTracker] = None,
        settings: Optional[TrackerSettings] = None,
    ) -> None:
        self.tracker = tracker or FinanceTracker()
        self.settings = settings or get_settings()
        self._handlers: Dict[int, Callable[[], None]] = {
            1: self.add_transaction,
            2: self.display_transactions,
            3: self.delete_transaction,
            4: self.search_transaction,
            5: self.undo_last_transaction,
            6: self.add_reminder,
            7: self.process_reminders,
            8: self.cumulative_total,
        }

    def run(self) -> None:
        """Loop over menu choices until ``EXIT_CHOICE`` is selected."""

        LOGGER.debug("Console session started (environment=%s)", self.settings.environment)
        while True:
            self._show_menu()
            choice = typer.prompt("Choose an option", type=int)
            if choice == EXIT_CHOICE:
                typer.echo("Exiting...")
                LOGGER.debug("Console session finished")
                return
            handler = self._handlers.get(choice)
            if handler is None:
                typer.echo("Invalid choice. Try again.")
                continue
            handler()

    def _show_menu(self) -> None:
        typer.echo("\nPersonal Finance Tracker:")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            typer.echo(f"{number}. {label}")

    def _prompt_amount(self, message: str) -> float:
        """Prompt until a finite float is entered."""

        while True:
            amount = typer.prompt(message, type=float)
            if math.isfinite(amount):
                return amount
            typer.echo("Error: amount must be a finite number.")

    def _prompt_text(self, message: str) -> str:
        # Free text may be left blank.
        return typer.prompt(message, default="", show_default=False)

    def _amount(self, amount: float) -> str:
        return self.settings.format_amount(amount)

    def _describe(self, transaction: Transaction) -> str:
        return (
            f"ID: {transaction.transaction_id}, Amount: {self._amount(transaction.amount)}, "
            f"Date: {transaction.occurred_on}, Category: {transaction.category}"
        )

    def add_transaction(self) -> None:
        amount = self._prompt_amount("Enter amount")
        occurred_on = self._prompt_text(f"Enter date ({self.settings.date_hint})")
        labels = "/".join(member.value for member in TransactionType)
        category = self._prompt_text(f"Enter type ({labels})")
        transaction_id = self.tracker.add_transaction(amount, occurred_on, category)
        typer.echo("Transaction added.")
        typer.echo(f"Transaction ID: {transaction_id}")

    def display_transactions(self) -> None:
        typer.echo("Transaction History:")
        for transaction in self.tracker.iter_transactions():
            typer.echo(self._describe(transaction))

    def delete_transaction(self) -> None:
        transaction_id = typer.prompt("Enter transaction ID to delete", type=int)
        if self.tracker.delete_transaction(transaction_id):
            typer.echo(f"Transaction {transaction_id} deleted.")
        else:
            typer.echo("Transaction not found.")

    def search_transaction(self) -> None:
        amount = self._prompt_amount("Enter amount to search")
        transaction = self.tracker.search_transaction(amount)
        if transaction is None:
            typer.echo(f"No transaction with amount {self._amount(amount)} found.")
        else:
            typer.echo(f"Transaction Found - {self._describe(transaction)}")

    def undo_last_transaction(self) -> None:
        result = self.tracker.undo_last_transaction()
        if result.is_empty:
            typer.echo("No transactions to undo.")
            return
        if result.removed:
            typer.echo(f"Transaction {result.transaction_id} deleted.")
        else:
            typer.echo("Transaction not found.")
        typer.echo("Last transaction undone.")

    def add_reminder(self) -> None:
        self.tracker.add_reminder(self._prompt_text("Enter reminder"))
        typer.echo("Reminder added.")

    def process_reminders(self) -> None:
        typer.echo("Processing Reminders:")
        for reminder in self.tracker.process_reminders():
            typer.echo(reminder)

    def cumulative_total(self) -> None:
        total = self.tracker.cumulative_total()
        typer.echo(f"Cumulative Transaction Amount: {self._amount(total)}")
