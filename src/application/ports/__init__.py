"""Application ports package."""

from .bank_accounts_repository import BankAccountsRepositoryPort
from .companies_repository import CompaniesRepositoryPort
from .database import DatabaseEnginePort
from .preference_store import PreferenceStorePort
from .transactions_repository import TransactionsRepositoryPort

__all__ = [
    "BankAccountsRepositoryPort",
    "CompaniesRepositoryPort",
    "DatabaseEnginePort",
    "PreferenceStorePort",
    "TransactionsRepositoryPort",
]
