"""Mini README: Transaction storage for PocketLedger.

``records`` defines the value types, ``transactions`` the ordered container
that owns them, and ``history`` the undo stack that reverts recent additions.
"""

from .history import UndoHistory, UndoResult, UndoStatus
from .records import Transaction, TransactionType
from .transactions import TransactionLedger

__all__ = [
    "Transaction",
    "TransactionLedger",
    "TransactionType",
    "UndoHistory",
    "UndoResult",
    "UndoStatus",
]
