"""Mini README: Ordered in-memory container of transactions.

Structure:
    * TransactionLedger - owns every Transaction and keeps them most-recent-first.

The newest record is always visited first, whether listing, searching or
summing. Search ties therefore resolve to the latest matching entry. The
ledger never allocates identifiers; the tracker hands them in and is
responsible for keeping them unique.

Known limitation: ``find_by_amount`` compares floats with ``==``. Amounts
that are equal on paper but not in binary (``0.1 + 0.2`` vs ``0.3``) will
not match.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from ..logging_utils import get_logger
from .records import Transaction

LOGGER = get_logger(__name__)


class TransactionLedger:
    """Store transactions with front insertion and linear lookups."""

    def __init__(self) -> None:
        self._records: Deque[Transaction] = deque()

    def insert_front(
        self, transaction_id: int, amount: float, occurred_on: str, category: str
    ) -> Transaction:
        """Create a record and make it the first element in traversal order."""

        transaction = Transaction(
            transaction_id=transaction_id,
            amount=amount,
            occurred_on=occurred_on,
            category=category,
        )
        self._records.appendleft(transaction)
        LOGGER.debug("Inserted transaction %s (%s records)", transaction_id, len(self._records))
        return transaction

    def find_by_amount(self, amount: float) -> Optional[Transaction]:
        """Return the most recently added record whose amount equals ``amount``."""

        for transaction in self._records:
            if transaction.amount == amount:
                return transaction
        return None

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Return the record with ``transaction_id`` or ``None`` when absent."""

        for transaction in self._records:
            if transaction.transaction_id == transaction_id:
                return transaction
        return None

    def delete_by_id(self, transaction_id: int) -> bool:
        """Remove the record with ``transaction_id``; report whether one was removed."""

        for index, transaction in enumerate(self._records):
            if transaction.transaction_id == transaction_id:
                del self._records[index]
                LOGGER.debug("Removed transaction %s", transaction_id)
                return True
        LOGGER.debug("Transaction %s not present, nothing removed", transaction_id)
        return False

    def iter_transactions(self) -> Iterator[Transaction]:
        """Yield records most-recent-first. Each call starts a fresh pass.

        The pass walks a snapshot taken when iteration starts, so callers may
        add or delete while looping without disturbing it.
        """

        yield from tuple(self._records)

    def list_transactions(self) -> List[Transaction]:
        """Return a snapshot of the records in traversal order."""

        return list(self._records)

    def size(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def __iter__(self) -> Iterator[Transaction]:
        return self.iter_transactions()

    def __len__(self) -> int:
        return self.size()
