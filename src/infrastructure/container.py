"""Composition root for wiring infrastructure adapters."""

from src.application.ports.bank_accounts_repository import (
    BankAccountsRepositoryPort,
)
from src.application.ports.companies_repository import CompaniesRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.preference_store import PreferenceStorePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.balance_view import BalanceView
from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.application.use_cases.select_active_company import (
    SelectActiveCompanyUseCase,
)
from src.infrastructure.bank_accounts_repository import (
    SqlAlchemyBankAccountsRepository,
)
from src.infrastructure.companies_repository import (
    SqlAlchemyCompaniesRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.preference_store import JsonFilePreferenceStore
from src.infrastructure.settings import BalanceSettings
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_bank_accounts_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BankAccountsRepositoryPort:
    """Return the bank accounts repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBankAccountsRepository(resolved_db)


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionsRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionsRepository(resolved_db)


def build_companies_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CompaniesRepositoryPort:
    """Return the companies repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCompaniesRepository(resolved_db)


def build_preference_store(
    settings: BalanceSettings | None = None,
) -> PreferenceStorePort:
    """Return the preference store configured by settings."""
    resolved_settings = settings or BalanceSettings.from_env()
    return JsonFilePreferenceStore(
        resolved_settings.preferences_file,
        logger=get_app_logger(),
    )


def build_balance_view(
    db_port: DatabaseEnginePort | None = None,
    settings: BalanceSettings | None = None,
) -> BalanceView:
    """Return a balance view bound to the SQLAlchemy repositories."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or BalanceSettings.from_env()
    return BalanceView(
        accounts_repository=build_bank_accounts_repository(resolved_db),
        transactions_repository=build_transactions_repository(resolved_db),
        logger=get_app_logger(),
        warn_orphans=resolved_settings.warn_orphans,
    )


def build_get_account_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: BalanceSettings | None = None,
) -> GetAccountBalancesUseCase:
    """Return the one-shot balances use case."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or BalanceSettings.from_env()
    return GetAccountBalancesUseCase(
        accounts_repository=build_bank_accounts_repository(resolved_db),
        transactions_repository=build_transactions_repository(resolved_db),
        logger=get_app_logger(),
        warn_orphans=resolved_settings.warn_orphans,
    )


def build_select_active_company_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: BalanceSettings | None = None,
) -> SelectActiveCompanyUseCase:
    """Return the active company use case."""
    resolved_db = db_port or build_database_adapter()
    return SelectActiveCompanyUseCase(
        companies_repository=build_companies_repository(resolved_db),
        preference_store=build_preference_store(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_bank_accounts_repository",
    "build_transactions_repository",
    "build_companies_repository",
    "build_preference_store",
    "build_balance_view",
    "build_get_account_balances_use_case",
    "build_select_active_company_use_case",
]
