"""Mini README: Tests for ledger aggregation helpers."""

from __future__ import annotations

import pytest

from pocketledger.ledger import TransactionLedger
from pocketledger.reports import cumulative_sum


def test_cumulative_sum_of_empty_ledger_is_zero() -> None:
    assert cumulative_sum(TransactionLedger()) == 0


def test_cumulative_sum_handles_signed_amounts() -> None:
    ledger = TransactionLedger()
    for transaction_id, amount in enumerate((5.0, -2.5, 3.0), start=1):
        ledger.insert_front(transaction_id, amount, "", "expense")

    assert cumulative_sum(ledger) == pytest.approx(5.5)
    assert ledger.size() == 3


def test_cumulative_sum_does_not_recurse() -> None:
    """Large ledgers must not hit the recursion limit."""

    ledger = TransactionLedger()
    for transaction_id in range(1, 20001):
        ledger.insert_front(transaction_id, 1.0, "", "income")

    assert cumulative_sum(ledger.iter_transactions()) == pytest.approx(20000.0)
