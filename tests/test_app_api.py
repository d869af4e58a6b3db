"""Tests for app core API (new_ledger, open_account, list_accounts, summarize)."""

from decimal import Decimal

import pytest

from simple_bank.app import list_accounts, new_ledger, open_account, summarize
from simple_bank.errors import DuplicateAccountError, ValidationError


def test_new_ledger_empty() -> None:
    """new_ledger without seed data holds no accounts."""
    ledger = new_ledger()
    assert len(ledger) == 0
    assert list_accounts(ledger) == []
    assert summarize(ledger) == {"count": 0, "total_balance": Decimal("0.00")}


def test_new_ledger_seeded() -> None:
    ledger = new_ledger([("B2", "Bob", 10), ("A1", "Alice", "100.0")])
    assert [a.account_number for a in list_accounts(ledger)] == ["A1", "B2"]
    assert summarize(ledger)["total_balance"] == Decimal("110.00")


def test_new_ledger_seed_is_validated() -> None:
    with pytest.raises(DuplicateAccountError):
        new_ledger([("A1", "Alice", 1), ("A1", "Alice again", 2)])
    with pytest.raises(ValidationError):
        new_ledger([("A1", "Alice", -1)])


def test_open_account() -> None:
    ledger = new_ledger()
    account = open_account(ledger, "C3", "Carol")
    assert account.balance == Decimal("0.00")
    assert ledger.get_account("C3").name == "Carol"
