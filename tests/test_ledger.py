"""Mini README: Tests for the transaction ledger container.

These tests confirm that records are traversed most-recent-first, that
amount searches resolve ties to the newest record using exact comparison,
and that deletions report whether anything was removed.
"""

from __future__ import annotations

from pocketledger.ledger import Transaction, TransactionLedger, TransactionType


def _ledger_with(*entries: tuple) -> TransactionLedger:
    ledger = TransactionLedger()
    for transaction_id, amount in entries:
        ledger.insert_front(transaction_id, amount, "01-01-2024", "expense")
    return ledger


def test_iteration_is_most_recent_first() -> None:
    """Listing after three insertions should yield them newest first."""

    ledger = TransactionLedger()
    ledger.insert_front(1, 10.0, "01-01-2024", "A")
    ledger.insert_front(2, 20.0, "02-01-2024", "B")
    ledger.insert_front(3, 30.0, "03-01-2024", "C")

    assert [t.category for t in ledger.iter_transactions()] == ["C", "B", "A"]
    assert [t.transaction_id for t in ledger] == [3, 2, 1]


def test_iteration_is_restartable_and_read_only() -> None:
    """Each traversal starts over and leaves the ledger untouched."""

    ledger = _ledger_with((1, 5.0), (2, 6.0))

    first = list(ledger.iter_transactions())
    second = list(ledger.iter_transactions())

    assert first == second
    assert ledger.size() == 2


def test_find_by_amount_prefers_latest_match() -> None:
    """Ties resolve to the most recently added record."""

    ledger = _ledger_with((1, 10.0), (2, 10.0), (3, 4.0))

    match = ledger.find_by_amount(10.0)

    assert match is not None
    assert match.transaction_id == 2


def test_find_by_amount_uses_exact_comparison() -> None:
    """No tolerance is applied, so binary rounding differences do not match."""

    ledger = _ledger_with((1, 0.1 + 0.2))

    assert ledger.find_by_amount(0.3) is None
    assert ledger.find_by_amount(0.1 + 0.2) is not None


def test_find_by_amount_on_empty_ledger() -> None:
    assert TransactionLedger().find_by_amount(1.0) is None


def test_delete_by_id_removes_only_the_match() -> None:
    """Deleting from the middle keeps the order of the remaining records."""

    ledger = _ledger_with((1, 1.0), (2, 2.0), (3, 3.0))

    assert ledger.delete_by_id(2) is True
    assert [t.transaction_id for t in ledger] == [3, 1]
    assert ledger.get_transaction(2) is None


def test_delete_missing_id_leaves_ledger_unchanged() -> None:
    ledger = _ledger_with((1, 1.0))

    assert ledger.delete_by_id(42) is False
    assert len(ledger) == 1
    assert not ledger.is_empty()


def test_insert_front_returns_immutable_record() -> None:
    """Records expose their fields and a conventional type when one applies."""

    ledger = TransactionLedger()
    record = ledger.insert_front(7, -12.5, "free text date", " Income ")

    assert isinstance(record, Transaction)
    assert record.transaction_type is TransactionType.INCOME
    assert record.as_dict() == {
        "transaction_id": 7,
        "amount": -12.5,
        "occurred_on": "free text date",
        "category": " Income ",
    }
    assert ledger.insert_front(8, 0.0, "", "gift").transaction_type is None
