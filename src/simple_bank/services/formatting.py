"""Display formatting for balances, the accounts table and report dialogs (pure functions)."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Tuple, Union

from simple_bank.config.constants import CURRENCY_SYMBOL
from simple_bank.models.core import Account


def format_currency(amount: Union[Decimal, int, float]) -> str:
    """
    Format an amount as pesos with thousands separators and two decimals.

    Examples:
        format_currency(Decimal("1234.5")) -> "₱1,234.50"
        format_currency(0) -> "₱0.00"
    """
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def account_rows(accounts: Iterable[Account]) -> List[Tuple[str, str, str]]:
    """Rows for the accounts table: (account number, name, formatted balance)."""
    return [(a.account_number, a.name, format_currency(a.balance)) for a in accounts]


def format_accounts_report(accounts: Iterable[Account]) -> str:
    """Plain-text listing shown by the View All dialog, sorted by account number."""
    lines = ["ALL ACCOUNTS", "-----------"]
    for account in sorted(accounts, key=lambda a: a.account_number):
        lines.append(f"{account.account_number} | {account.name} | {format_currency(account.balance)}")
    return "\n".join(lines) + "\n"


def format_balance_message(account: Account) -> str:
    """Body of the Check Balance message box."""
    return (
        f"Account: {account.account_number}\n"
        f"Name: {account.name}\n"
        f"Balance: {format_currency(account.balance)}"
    )
