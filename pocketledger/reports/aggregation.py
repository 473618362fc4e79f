"""Mini README: Aggregate figures computed over the ledger.

Structure:
    * cumulative_sum - total of every amount currently recorded.
"""

from __future__ import annotations

from typing import Iterable

from ..ledger.records import Transaction


def cumulative_sum(transactions: Iterable[Transaction]) -> float:
    """Sum amounts in the order given (the ledger yields most-recent-first)."""

    total = 0.0
    for transaction in transactions:
        total += transaction.amount
    return total
