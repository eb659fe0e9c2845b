"""Application use cases package."""

from .balance_view import BalanceView
from .get_account_balances import GetAccountBalancesUseCase
from .select_active_company import (
    ACTIVE_COMPANY_KEY,
    SelectActiveCompanyUseCase,
)

__all__ = [
    "ACTIVE_COMPANY_KEY",
    "BalanceView",
    "GetAccountBalancesUseCase",
    "SelectActiveCompanyUseCase",
]
