"""Mini README: Facade combining the ledger, undo history and reminders.

Structure:
    * FinanceTracker - the single entry point used by interfaces.

The tracker owns identifier assignment. Its counter starts at zero for each
instance and is incremented before every addition, so identifiers begin at 1,
rise by one per addition and are never handed out twice, even after a
deletion. Additions update the ledger and the undo history together; manual
deletions touch only the ledger.

Every operation returns a value instead of raising: ``None`` or ``False``
for a missing transaction, ``UndoStatus.EMPTY`` when there is nothing to
undo and an empty list when no reminders are pending.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .ledger import Transaction, TransactionLedger, UndoHistory, UndoResult
from .logging_utils import get_logger
from .reminders import ReminderQueue
from .reports import cumulative_sum

LOGGER = get_logger(__name__)


class FinanceTracker:
    """Record transactions and reminders for one session."""

    def __init__(self) -> None:
        self._ledger = TransactionLedger()
        self._history = UndoHistory()
        self._reminders = ReminderQueue()
        self._sequence = 0
        LOGGER.debug("Finance tracker initialised")

    @property
    def ledger(self) -> TransactionLedger:
        return self._ledger

    def _next_id(self) -> int:
        """Allocate the next sequential transaction identifier."""

        self._sequence += 1
        return self._sequence

    def add_transaction(self, amount: float, occurred_on: str, category: str) -> int:
        """Record a transaction and make it eligible for undo."""

        transaction_id = self._next_id()
        self._ledger.insert_front(transaction_id, amount, occurred_on, category)
        self._history.record_addition(transaction_id)
        LOGGER.info("Added transaction %s amount=%s category=%s", transaction_id, amount, category)
        return transaction_id

    def delete_transaction(self, transaction_id: int) -> bool:
        """Delete a transaction by identifier. The undo history is left alone."""

        deleted = self._ledger.delete_by_id(transaction_id)
        if deleted:
            LOGGER.info("Deleted transaction %s", transaction_id)
        else:
            LOGGER.info("Delete requested for unknown transaction %s", transaction_id)
        return deleted

    def search_transaction(self, amount: float) -> Optional[Transaction]:
        """Return the most recent transaction with exactly ``amount``."""

        return self._ledger.find_by_amount(amount)

    def undo_last_transaction(self) -> UndoResult:
        """Revert the most recent pending addition."""

        result = self._history.undo_last(self._ledger)
        if not result.is_empty:
            LOGGER.info("Undid transaction %s (removed=%s)", result.transaction_id, result.removed)
        return result

    def list_transactions(self) -> List[Transaction]:
        """Return transactions most-recent-first."""

        return self._ledger.list_transactions()

    def iter_transactions(self) -> Iterator[Transaction]:
        return self._ledger.iter_transactions()

    def add_reminder(self, text: str) -> None:
        """Queue a reminder for later processing."""

        self._reminders.enqueue(text)
        LOGGER.debug("Queued reminder (%s pending)", len(self._reminders))

    def process_reminders(self) -> List[str]:
        """Hand back every pending reminder, oldest first, and clear the queue."""

        return self._reminders.drain_all()

    def cumulative_total(self) -> float:
        """Sum of all amounts currently in the ledger."""

        return cumulative_sum(self._ledger.iter_transactions())
