"""Pytest configuration: ensure src is on path and provide a seeded ledger."""

import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
_src = _root / "src"
if _src.is_dir() and str(_src) not in sys.path:
    sys.path.insert(0, str(_src))


@pytest.fixture
def ledger():
    """Ledger holding A1 (Alice, 100.00)."""
    from simple_bank.services.ledger import AccountLedger

    ledger = AccountLedger()
    ledger.create_account("A1", "Alice", 100.0)
    return ledger
