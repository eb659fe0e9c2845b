"""Domain package for business rules and core models."""

from .constants import (
    TRANSACTION_KIND_EXPENSE,
    TRANSACTION_KIND_REVENUE,
    TRANSACTION_STATUS_PAID,
    TRANSACTION_STATUS_PENDING,
)
from .models import (
    EMPTY_SNAPSHOT,
    AccountBalance,
    BalanceSnapshot,
    BankAccount,
    Company,
    LedgerTransaction,
)
from .policies import is_balance_eligible
from .services import (
    compute_account_balances,
    normalize_account_id,
    normalize_kind,
    normalize_status,
    warn_orphaned_transactions,
)

__all__ = [
    "AccountBalance",
    "BalanceSnapshot",
    "BankAccount",
    "Company",
    "EMPTY_SNAPSHOT",
    "LedgerTransaction",
    "TRANSACTION_KIND_EXPENSE",
    "TRANSACTION_KIND_REVENUE",
    "TRANSACTION_STATUS_PAID",
    "TRANSACTION_STATUS_PENDING",
    "compute_account_balances",
    "is_balance_eligible",
    "normalize_account_id",
    "normalize_kind",
    "normalize_status",
    "warn_orphaned_transactions",
]
