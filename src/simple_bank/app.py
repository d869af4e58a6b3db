"""Application bootstrap and core API entrypoints for Simple Bank.

Provides a small core API (new_ledger, open_account, list_accounts,
summarize) for use by the desktop UI, scripts, or tests. The GUI is
launched with main().
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Tuple

from simple_bank.config.constants import DEFAULT_THEME
from simple_bank.models.core import Account, LedgerSummary
from simple_bank.services.ledger import AccountLedger


def new_ledger(accounts: Optional[Iterable[Tuple[str, str, Any]]] = None) -> AccountLedger:
    """Return a fresh ledger, optionally seeded with (number, name, initial balance) tuples.

    Seeding goes through create_account, so the same validation applies and
    the first bad tuple raises.
    """
    ledger = AccountLedger()
    for account_number, name, initial_balance in accounts or ():
        ledger.create_account(account_number, name, initial_balance)
    return ledger


def open_account(ledger: AccountLedger, account_number: str, name: str, initial_balance: Any = 0) -> Account:
    """Create an account in ledger (see AccountLedger.create_account)."""
    return ledger.create_account(account_number, name, initial_balance)


def list_accounts(ledger: AccountLedger) -> List[Account]:
    """Return all accounts sorted by account number."""
    return ledger.list_accounts()


def summarize(ledger: AccountLedger) -> LedgerSummary:
    """Return account count and total balance."""
    return ledger.summary()


def main(themename: str = DEFAULT_THEME) -> None:
    """Launch the Simple Bank Tkinter application."""
    from simple_bank.ui import main_window  # Deferred so core API is usable without a display

    main_window.main(themename=themename)
