"""Use case to compute bank account balances for a company."""

from src.application.ports.bank_accounts_repository import (
    BankAccountsRepositoryPort,
)
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import BalanceSnapshot
from src.domain.services import (
    compute_account_balances,
    warn_orphaned_transactions,
)
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute the current balance of every bank account of a company."""

    def __init__(
        self,
        accounts_repository: BankAccountsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
        warn_orphans: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            accounts_repository: Port providing company bank accounts.
            transactions_repository: Port providing the company ledger.
            logger: Optional logger compatible with logging.Logger-like API.
            warn_orphans: Whether to warn about transactions bound to
                unknown accounts.
        """
        self._accounts_repository = accounts_repository
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()
        self._warn_orphans = warn_orphans

    def execute(self, company_id: str) -> BalanceSnapshot:
        """Return the balances of the company.

        Args:
            company_id: Company whose accounts and ledger are read.

        Returns:
            BalanceSnapshot: Per-account balances and the grand total.
        """
        accounts = self._accounts_repository.fetch_accounts(company_id)
        transactions = self._transactions_repository.fetch_paid_transactions(
            company_id
        )
        snapshot = compute_account_balances(
            accounts,
            transactions,
            company_id=company_id,
        )
        if self._warn_orphans:
            warn_orphaned_transactions(snapshot, self._logger)
        self._logger.info(
            f"Computed {len(snapshot.balances)} account balances "
            f"for company={company_id}: total={snapshot.total}"
        )
        return snapshot


__all__ = ["GetAccountBalancesUseCase", "BalanceSnapshot"]
