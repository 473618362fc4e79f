"""Mini README: Value types describing a single ledger entry.

Structure:
    * TransactionType - enum of the conventional category labels.
    * Transaction - immutable dataclass storing one recorded transaction.

Categories and dates are free text. ``TransactionType`` only names the
income/expense convention so interfaces can suggest it; nothing rejects a
category outside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class TransactionType(str, Enum):
    """Enumerate the conventional transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a conventional transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(slots=True, frozen=True)
class Transaction:
    """Represent a ledger entry. Records are never edited after creation."""

    transaction_id: int
    amount: float
    occurred_on: str
    category: str

    @property
    def transaction_type(self) -> Optional[TransactionType]:
        """Conventional type matching the category, or ``None`` for other labels."""

        try:
            return TransactionType.from_str(self.category)
        except ValueError:
            return None

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction as a plain mapping."""

        return {
            "transaction_id": self.transaction_id,
            "amount": self.amount,
            "occurred_on": self.occurred_on,
            "category": self.category,
        }
