"""Domain models package."""

from .balances import EMPTY_SNAPSHOT, AccountBalance, BalanceSnapshot
from .banking import BankAccount, Company, LedgerTransaction

__all__ = [
    "AccountBalance",
    "BalanceSnapshot",
    "BankAccount",
    "Company",
    "EMPTY_SNAPSHOT",
    "LedgerTransaction",
]
