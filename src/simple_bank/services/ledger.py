"""In-memory account ledger: create, deposit, withdraw and query accounts.

Accounts are immutable records; the ledger swaps in a new record whenever a
balance changes, so balances can only move through deposit() and withdraw().
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Any, Dict, List, Optional

from simple_bank.config.constants import (
    CURRENCY_SYMBOL,
    MSG_ACCOUNT_NOT_FOUND,
    MSG_AMOUNT_TOO_LARGE,
    MSG_DEPOSIT_NOT_POSITIVE,
    MSG_DUPLICATE_ACCOUNT,
    MSG_FIELDS_REQUIRED,
    MSG_INSUFFICIENT_BALANCE,
    MSG_INVALID_INITIAL_BALANCE,
    MSG_INVALID_NUMBER,
    MSG_WITHDRAW_NOT_POSITIVE,
    ZERO,
)
from simple_bank.errors import (
    DuplicateAccountError,
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from simple_bank.models.core import Account, LedgerSummary


def _to_decimal(value: Any, message: str) -> Decimal:
    """Convert user or API input to a finite Decimal, raising ValidationError(message)."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(message)
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        # str() first so 0.1 stays 0.1 instead of its binary expansion
        amount = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if text.startswith(CURRENCY_SYMBOL):
            text = text[len(CURRENCY_SYMBOL):].strip()
        if not text:
            raise ValidationError(message)
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise ValidationError(message) from None
    else:
        raise ValidationError(message)
    if not amount.is_finite():
        raise ValidationError(message)
    # -0 compares equal to 0 but would display as "-0.00"
    return ZERO if amount == 0 else amount


def _exact(op, left: Decimal, right: Decimal) -> Decimal:
    """Apply op exactly; a result that needs rounding raises ValidationError."""
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return op(left, right)
        except Inexact:
            raise ValidationError(MSG_AMOUNT_TOO_LARGE) from None


def parse_amount(text: Any) -> Decimal:
    """
    Parse an amount typed into a dialog.

    Accepts surrounding whitespace, a leading peso sign and thousands
    separators ("₱1,250.50"). The value is kept exact; sign and size are
    checked by the ledger.

    Raises:
        ValidationError: Empty or non-numeric text ("Enter a valid number.").
    """
    return _to_decimal(text, MSG_INVALID_NUMBER)


def _required_text(value: Any) -> str:
    return "" if value is None else str(value).strip()


class AccountLedger:
    """Registry of accounts keyed by account number."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    def _require(self, account_number: str) -> Account:
        account = self._accounts.get(account_number)
        if account is None:
            raise NotFoundError(MSG_ACCOUNT_NOT_FOUND)
        return account

    def create_account(self, account_number: str, name: str, initial_balance: Any = ZERO) -> Account:
        """
        Open a new account.

        Number and name are stored stripped of surrounding whitespace. Checks run
        in the order the Create Account dialog reports them: missing fields,
        duplicate number, then the initial balance.

        Raises:
            ValidationError: Empty number or name, or a negative/non-numeric balance.
            DuplicateAccountError: The number is already in the ledger.
        """
        number = _required_text(account_number)
        holder = _required_text(name)
        if not number or not holder:
            raise ValidationError(MSG_FIELDS_REQUIRED)
        if number in self._accounts:
            raise DuplicateAccountError(MSG_DUPLICATE_ACCOUNT)
        balance = _to_decimal(initial_balance, MSG_INVALID_INITIAL_BALANCE)
        if balance < 0:
            raise ValidationError(MSG_INVALID_INITIAL_BALANCE)

        account = Account(account_number=number, name=holder, balance=balance)
        self._accounts[number] = account
        return account

    def deposit(self, account_number: str, amount: Any) -> Decimal:
        """Add a positive amount to an account. Returns the new balance."""
        account = self._require(account_number)
        value = _to_decimal(amount, MSG_INVALID_NUMBER)
        if value <= 0:
            raise ValidationError(MSG_DEPOSIT_NOT_POSITIVE)
        balance = _exact(Decimal.__add__, account.balance, value)
        self._accounts[account.account_number] = replace(account, balance=balance)
        return balance

    def withdraw(self, account_number: str, amount: Any) -> Decimal:
        """
        Take a positive amount out of an account. Returns the new balance.

        Raises:
            NotFoundError: Unknown account number.
            ValidationError: amount <= 0 or not a number.
            InsufficientFundsError: amount > balance; the balance is left unchanged.
        """
        account = self._require(account_number)
        value = _to_decimal(amount, MSG_INVALID_NUMBER)
        if value <= 0:
            raise ValidationError(MSG_WITHDRAW_NOT_POSITIVE)
        if value > account.balance:
            raise InsufficientFundsError(MSG_INSUFFICIENT_BALANCE)
        balance = _exact(Decimal.__sub__, account.balance, value)
        self._accounts[account.account_number] = replace(account, balance=balance)
        return balance

    def get_account(self, account_number: str) -> Account:
        """Return one account. Raises NotFoundError if unknown."""
        return self._require(account_number)

    def find_account(self, account_number: Optional[str]) -> Optional[Account]:
        """Like get_account but returns None for unknown or empty numbers."""
        if not account_number:
            return None
        return self._accounts.get(account_number)

    def account_numbers(self) -> List[str]:
        """Sorted account numbers (used to fill the account selector)."""
        return sorted(self._accounts)

    def list_accounts(self) -> List[Account]:
        """All accounts sorted by account number ascending."""
        return [self._accounts[n] for n in self.account_numbers()]

    def summary(self) -> LedgerSummary:
        """Number of accounts and total balance held."""
        total = sum((a.balance for a in self._accounts.values()), ZERO)
        return {"count": len(self._accounts), "total_balance": total}
