"""Typed structures for accounts and ledger summaries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TypedDict


@dataclass(frozen=True)
class Account:
    """A named balance keyed by a unique account number.

    Records are immutable; AccountLedger.deposit / AccountLedger.withdraw
    store a replacement with the new balance.
    """

    account_number: str
    name: str
    balance: Decimal


class LedgerSummary(TypedDict):
    """Aggregate ledger figures as returned by AccountLedger.summary."""

    count: int
    total_balance: Decimal
