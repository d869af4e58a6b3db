"""Error taxonomy for ledger operations.

Every error carries a message that the desktop UI shows as-is, so callers
never have to rebuild user-facing text.
"""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for all ledger errors."""


class ValidationError(LedgerError):
    """Raised for bad input: empty fields, non-positive or malformed amounts."""


class DuplicateAccountError(LedgerError):
    """Raised when creating an account whose number already exists."""


class NotFoundError(LedgerError):
    """Raised when an account number is not in the ledger."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the current balance."""
