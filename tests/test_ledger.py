"""Tests for the in-memory account ledger."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from simple_bank.errors import (
    DuplicateAccountError,
    InsufficientFundsError,
    LedgerError,
    NotFoundError,
    ValidationError,
)
from simple_bank.services.ledger import AccountLedger, parse_amount


def test_create_account_returns_account(ledger) -> None:
    """create_account stores number, name and initial balance."""
    account = ledger.create_account("B2", "Bob", "25.5")
    assert account.account_number == "B2"
    assert account.name == "Bob"
    assert account.balance == Decimal("25.50")
    assert "B2" in ledger
    assert len(ledger) == 2


def test_create_account_strips_fields() -> None:
    """Surrounding whitespace is not part of the number or name."""
    ledger = AccountLedger()
    account = ledger.create_account("  A1 ", " Alice ", 0)
    assert account.account_number == "A1"
    assert account.name == "Alice"
    assert ledger.get_account("A1").name == "Alice"


def test_create_account_default_balance_is_zero() -> None:
    ledger = AccountLedger()
    assert ledger.create_account("Z9", "Zed").balance == Decimal("0.00")


def test_duplicate_account_number_fails(ledger) -> None:
    """A second account with the same number is rejected and the first is untouched."""
    with pytest.raises(DuplicateAccountError):
        ledger.create_account("A1", "Someone Else", 5)
    with pytest.raises(DuplicateAccountError):
        ledger.create_account(" A1", "Someone Else", 5)
    assert ledger.get_account("A1").name == "Alice"
    assert len(ledger) == 1


@pytest.mark.parametrize(
    "number, name",
    [("", "Alice"), ("A2", ""), ("   ", "Alice"), ("A2", "  "), (None, "Alice")],
)
def test_create_account_requires_number_and_name(number, name) -> None:
    ledger = AccountLedger()
    with pytest.raises(ValidationError, match="required"):
        ledger.create_account(number, name, 10)
    assert len(ledger) == 0


@pytest.mark.parametrize("balance", [-1, -0.01, "-5", "abc", "", float("nan"), float("inf"), None, True])
def test_create_account_rejects_bad_initial_balance(balance) -> None:
    ledger = AccountLedger()
    with pytest.raises(ValidationError, match="non-negative"):
        ledger.create_account("A1", "Alice", balance)
    assert "A1" not in ledger


def test_create_account_missing_fields_reported_before_duplicate(ledger) -> None:
    with pytest.raises(ValidationError):
        ledger.create_account("A1", "", 10)


def test_create_account_duplicate_reported_before_bad_balance(ledger) -> None:
    with pytest.raises(DuplicateAccountError):
        ledger.create_account("A1", "Alice", -10)


def test_deposit_increases_balance(ledger) -> None:
    assert ledger.deposit("A1", 50.0) == Decimal("150.00")
    assert ledger.get_account("A1").balance == Decimal("150.00")


def test_deposit_then_withdraw_restores_balance(ledger) -> None:
    """Depositing and withdrawing the same amount leaves the balance as it was."""
    for amount in ("0.01", "19.99", "1000000"):
        before = ledger.get_account("A1").balance
        ledger.deposit("A1", amount)
        assert ledger.withdraw("A1", amount) == before


@pytest.mark.parametrize("amount", [0, -1, -0.01, "0", "-0", "-100", Decimal("-0.004")])
def test_non_positive_amounts_rejected(ledger, amount) -> None:
    """Deposit and withdraw both reject amounts <= 0."""
    with pytest.raises(ValidationError, match="greater than 0"):
        ledger.deposit("A1", amount)
    with pytest.raises(ValidationError, match="greater than 0"):
        ledger.withdraw("A1", amount)
    assert ledger.get_account("A1").balance == Decimal("100.00")


def test_non_numeric_amount_rejected(ledger) -> None:
    with pytest.raises(ValidationError, match="valid number"):
        ledger.deposit("A1", "ten")


def test_withdraw_more_than_balance_fails(ledger) -> None:
    """Over-withdrawal raises and leaves the balance unchanged."""
    with pytest.raises(InsufficientFundsError, match="Insufficient balance"):
        ledger.withdraw("A1", "100.01")
    assert ledger.get_account("A1").balance == Decimal("100.00")


def test_withdraw_entire_balance(ledger) -> None:
    assert ledger.withdraw("A1", 100) == Decimal("0.00")


def test_unknown_account(ledger) -> None:
    """Unknown accounts raise NotFoundError before amount validation."""
    with pytest.raises(NotFoundError):
        ledger.deposit("NOPE", 10)
    with pytest.raises(NotFoundError):
        ledger.withdraw("NOPE", -10)
    with pytest.raises(NotFoundError):
        ledger.get_account("NOPE")
    assert ledger.find_account("NOPE") is None
    assert ledger.find_account("") is None
    assert ledger.find_account(None) is None


def test_errors_share_base_class() -> None:
    for error in (ValidationError, DuplicateAccountError, NotFoundError, InsufficientFundsError):
        assert issubclass(error, LedgerError)


def test_accounts_are_immutable(ledger) -> None:
    """Returned accounts cannot be edited; balances only move through the ledger."""
    account = ledger.get_account("A1")
    with pytest.raises(FrozenInstanceError):
        account.balance = Decimal("-5")
    with pytest.raises(FrozenInstanceError):
        account.name = "Mallory"
    ledger.deposit("A1", 1)
    assert account.balance == Decimal("100.00")
    assert ledger.get_account("A1").balance == Decimal("101.00")


def test_scenario_alice() -> None:
    """create 100 -> deposit 50 -> failed withdraw 200 -> withdraw 150."""
    ledger = AccountLedger()
    assert ledger.create_account("A1", "Alice", 100.0).balance == Decimal("100.0")
    assert ledger.deposit("A1", 50.0) == Decimal("150.0")
    with pytest.raises(InsufficientFundsError):
        ledger.withdraw("A1", 200.0)
    assert ledger.get_account("A1").balance == Decimal("150.0")
    assert ledger.withdraw("A1", 150.0) == Decimal("0")


def test_list_accounts_sorted_by_number() -> None:
    ledger = AccountLedger()
    for number in ("B2", "A1", "C3"):
        ledger.create_account(number, f"Holder {number}", 1)
    assert [a.account_number for a in ledger.list_accounts()] == ["A1", "B2", "C3"]
    assert ledger.account_numbers() == ["A1", "B2", "C3"]


def test_list_accounts_empty() -> None:
    assert AccountLedger().list_accounts() == []


def test_summary(ledger) -> None:
    ledger.create_account("B2", "Bob", "0.50")
    summary = ledger.summary()
    assert summary["count"] == 2
    assert summary["total_balance"] == Decimal("100.50")
    assert AccountLedger().summary() == {"count": 0, "total_balance": Decimal("0.00")}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10", Decimal("10.00")),
        ("  2.5 ", Decimal("2.50")),
        ("1,250.75", Decimal("1250.75")),
        ("₱ 1,000", Decimal("1000.00")),
        ("0.005", Decimal("0.005")),
        ("-3", Decimal("-3.00")),
    ],
)
def test_parse_amount(text, expected) -> None:
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3", "nan", "Infinity", None])
def test_parse_amount_invalid(text) -> None:
    with pytest.raises(ValidationError, match="Enter a valid number."):
        parse_amount(text)


def test_withdraw_fraction_over_balance_fails(ledger) -> None:
    """Amounts are compared exactly: 100.004 is more than 100.00."""
    with pytest.raises(InsufficientFundsError):
        ledger.withdraw("A1", Decimal("100.004"))
    assert ledger.get_account("A1").balance == Decimal("100.00")


def test_sub_centavo_deposit_is_kept_exactly(ledger) -> None:
    """A positive amount below one centavo is still a valid deposit."""
    assert ledger.deposit("A1", Decimal("0.004")) == Decimal("100.004")
    assert ledger.withdraw("A1", "0.004") == Decimal("100.00")


def test_large_amounts(ledger) -> None:
    """Sums that do not fit exactly are rejected as ValidationError, not decimal errors."""
    assert parse_amount("1e27") == Decimal("1e27")
    assert ledger.deposit("A1", "1e20") == Decimal("100000000000000000100.00")
    with pytest.raises(ValidationError, match="too large"):
        ledger.deposit("A1", "1e30")
    with pytest.raises(ValidationError, match="too large"):
        ledger.deposit("A1", parse_amount("1e27"))
    assert ledger.get_account("A1").balance == Decimal("100000000000000000100.00")


def test_negative_zero_initial_balance_is_zero() -> None:
    account = AccountLedger().create_account("A1", "Alice", "-0")
    assert account.balance == 0
    assert not account.balance.is_signed()
