"""Policies deciding which ledger entries count toward balances."""

from src.domain.constants import TRANSACTION_STATUS_PAID
from src.domain.models.banking import LedgerTransaction


def is_balance_eligible(transaction: LedgerTransaction) -> bool:
    """Return True when the transaction settles against a bank account.

    Args:
        transaction: Ledger entry to evaluate.

    Returns:
        bool: True for paid transactions bound to an account.
    """
    if transaction.status != TRANSACTION_STATUS_PAID:
        return False
    return transaction.account_id is not None


__all__ = ["is_balance_eligible"]
