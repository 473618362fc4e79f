"""Mini README: Undo support for recently added transactions.

Structure:
    * UndoStatus - outcome labels for an undo request.
    * UndoResult - dataclass describing what an undo request did.
    * UndoHistory - LIFO stack of transaction identifiers.

Undo deletes by identifier; it never restores data. The history is only fed
by additions, so a transaction deleted by hand keeps its identifier on the
stack. Undoing it later pops that stale identifier and still reports
``UNDONE``, with ``removed`` set to ``False`` because the ledger had nothing
left to delete.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..logging_utils import get_logger
from .transactions import TransactionLedger

LOGGER = get_logger(__name__)


class UndoStatus(str, Enum):
    """Possible outcomes of ``UndoHistory.undo_last``."""

    UNDONE = "undone"
    EMPTY = "empty"


@dataclass(slots=True, frozen=True)
class UndoResult:
    """Outcome of an undo request."""

    status: UndoStatus
    transaction_id: Optional[int] = None
    removed: bool = False

    @classmethod
    def undone(cls, transaction_id: int, *, removed: bool) -> "UndoResult":
        return cls(UndoStatus.UNDONE, transaction_id, removed)

    @classmethod
    def empty(cls) -> "UndoResult":
        return cls(UndoStatus.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.status is UndoStatus.EMPTY


class UndoHistory:
    """Track added identifiers so the latest additions can be reverted."""

    def __init__(self) -> None:
        self._stack: List[int] = []

    def record_addition(self, transaction_id: int) -> None:
        """Push an identifier onto the history."""

        self._stack.append(transaction_id)

    def undo_last(self, ledger: TransactionLedger) -> UndoResult:
        """Pop the latest identifier and delete it from ``ledger``."""

        if not self._stack:
            LOGGER.debug("Undo requested with an empty history")
            return UndoResult.empty()
        transaction_id = self._stack.pop()
        removed = ledger.delete_by_id(transaction_id)
        if not removed:
            LOGGER.info("Undo popped transaction %s which was already deleted", transaction_id)
        return UndoResult.undone(transaction_id, removed=removed)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def __len__(self) -> int:
        return len(self._stack)
