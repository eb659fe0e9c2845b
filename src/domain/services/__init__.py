"""Domain services package."""

from .balances import compute_account_balances
from .normalization import (
    normalize_account_id,
    normalize_kind,
    normalize_status,
)
from .validation import warn_orphaned_transactions

__all__ = [
    "compute_account_balances",
    "normalize_account_id",
    "normalize_kind",
    "normalize_status",
    "warn_orphaned_transactions",
]
