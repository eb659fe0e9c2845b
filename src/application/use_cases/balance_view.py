"""Reactive view over the balances of the selected company.

The view owns the latest ``BalanceSnapshot``. Selecting a company starts
two concurrent fetches (accounts and paid transactions) and aggregates once
both have resolved for that same selection. Responses that arrive after the
selection changed, or after a newer request for the same source, are
dropped. A failed fetch keeps the previous snapshot in place.
"""

import asyncio
from collections.abc import Callable
from decimal import Decimal

from src.application.ports.bank_accounts_repository import (
    BankAccountsRepositoryPort,
)
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import (
    EMPTY_SNAPSHOT,
    AccountBalance,
    BalanceSnapshot,
    BankAccount,
    LedgerTransaction,
)
from src.domain.services import (
    compute_account_balances,
    warn_orphaned_transactions,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.derived_value import DerivedValue

ACCOUNTS_SOURCE = "accounts"
TRANSACTIONS_SOURCE = "transactions"

SnapshotListener = Callable[[BalanceSnapshot], None]


class BalanceView:
    """Cache of derived balances bound to the two data sources."""

    def __init__(
        self,
        accounts_repository: BankAccountsRepositoryPort,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
        warn_orphans: bool = True,
        aggregate: Callable[..., BalanceSnapshot] = compute_account_balances,
    ) -> None:
        """Initialize the view.

        Args:
            accounts_repository: Port providing company bank accounts.
            transactions_repository: Port providing the company ledger.
            logger: Optional logger compatible with logging.Logger-like API.
            warn_orphans: Whether to warn about transactions bound to
                unknown accounts.
            aggregate: Aggregation function, replaceable in tests.
        """
        self._accounts_repository = accounts_repository
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()
        self._warn_orphans = warn_orphans
        self._aggregate = aggregate
        self._derived: DerivedValue[BalanceSnapshot] = DerivedValue(
            self._compute
        )
        self._snapshot: BalanceSnapshot = EMPTY_SNAPSHOT
        self._company_id: str | None = None
        self._epoch = 0
        self._accounts: list[BankAccount] | None = None
        self._transactions: list[LedgerTransaction] | None = None
        self._pending: set[str] = set()
        self._sequence = {ACCOUNTS_SOURCE: 0, TRANSACTIONS_SOURCE: 0}
        self._listeners: list[SnapshotListener] = []
        self.last_error: BaseException | None = None

    @property
    def company_id(self) -> str | None:
        return self._company_id

    @property
    def snapshot(self) -> BalanceSnapshot:
        return self._snapshot

    @property
    def balances(self) -> tuple[AccountBalance, ...]:
        return self._snapshot.balances

    @property
    def total(self) -> Decimal:
        return self._snapshot.total

    @property
    def is_loading(self) -> bool:
        """True while a source is still being fetched for the company."""
        return bool(self._pending)

    def get_total(self) -> Decimal:
        """Return the latest grand total."""
        return self._snapshot.total

    def get_balance(self, account_id: str) -> AccountBalance | None:
        """Return the latest balance of an account, if known."""
        return self._snapshot.get(account_id)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a callback invoked with every new snapshot.

        Returns:
            Callable[[], None]: Function removing the listener.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def select_company(self, company_id: str | None) -> BalanceSnapshot:
        """Switch to a company and load its balances.

        Changing company discards the previous company's data and any
        fetch still in flight for it. Selecting the company already shown
        only fetches when its data has not resolved yet; use ``refresh``
        to reload it.

        Args:
            company_id: Company to display, or None to clear the view.

        Returns:
            BalanceSnapshot: Snapshot current after the load completes.
        """
        if company_id != self._company_id:
            self._reset(company_id)
        elif self._is_resolved():
            return self._snapshot
        if company_id is None:
            return self._snapshot
        await self._load(ACCOUNTS_SOURCE, TRANSACTIONS_SOURCE)
        return self._snapshot

    async def refresh(self) -> BalanceSnapshot:
        """Refetch both sources for the current company."""
        await self._load(ACCOUNTS_SOURCE, TRANSACTIONS_SOURCE)
        return self._snapshot

    async def refresh_transactions(self) -> BalanceSnapshot:
        """Refetch only the ledger, keeping the resolved accounts."""
        await self._load(TRANSACTIONS_SOURCE)
        return self._snapshot

    def recompute(self) -> BalanceSnapshot:
        """Aggregate the resolved inputs, reusing the cached result.

        Nothing happens until both sources have resolved for the current
        company.
        """
        if not self._is_resolved():
            return self._snapshot
        snapshot = self._derived.get(self._accounts, self._transactions)
        if snapshot is self._snapshot:
            return snapshot
        self._snapshot = snapshot
        if self._warn_orphans:
            warn_orphaned_transactions(snapshot, self._logger)
        self._logger.info(
            f"Recomputed {len(snapshot.balances)} account balances "
            f"for company={snapshot.company_id}: total={snapshot.total}"
        )
        self._notify(snapshot)
        return snapshot

    def _is_resolved(self) -> bool:
        return self._accounts is not None and self._transactions is not None

    def _reset(self, company_id: str | None) -> None:
        self._epoch += 1
        self._company_id = company_id
        self._accounts = None
        self._transactions = None
        self._pending = set()
        self._derived.invalidate()
        self.last_error = None
        if self._snapshot is not EMPTY_SNAPSHOT:
            self._snapshot = EMPTY_SNAPSHOT
            self._notify(EMPTY_SNAPSHOT)

    async def _load(self, *sources: str) -> None:
        if self._company_id is None:
            return
        epoch = self._epoch
        company_id = self._company_id
        requests: dict[str, int] = {}
        for source in sources:
            self._sequence[source] += 1
            requests[source] = self._sequence[source]
            self._pending.add(source)

        results = await asyncio.gather(
            *(self._fetch(source, company_id) for source in sources),
            return_exceptions=True,
        )

        if epoch != self._epoch:
            self._logger.debug(
                f"Discarded stale fetch for company={company_id}"
            )
            return

        failed = False
        for source, result in zip(sources, results):
            if self._sequence[source] != requests[source]:
                self._logger.debug(
                    f"Discarded superseded {source} fetch "
                    f"for company={company_id}"
                )
                continue
            self._pending.discard(source)
            if isinstance(result, BaseException):
                failed = True
                self.last_error = result
                self._logger.error(
                    f"Failed to fetch {source} for company={company_id}: "
                    f"{result}"
                )
                continue
            if source == ACCOUNTS_SOURCE:
                self._accounts = result
            else:
                self._transactions = result

        if failed:
            return
        self.last_error = None
        self.recompute()

    async def _fetch(self, source: str, company_id: str) -> list:
        if source == ACCOUNTS_SOURCE:
            return await asyncio.to_thread(
                self._accounts_repository.fetch_accounts,
                company_id,
            )
        return await asyncio.to_thread(
            self._transactions_repository.fetch_paid_transactions,
            company_id,
        )

    def _compute(
        self,
        accounts: list[BankAccount],
        transactions: list[LedgerTransaction],
    ) -> BalanceSnapshot:
        return self._aggregate(
            accounts,
            transactions,
            company_id=self._company_id,
        )

    def _notify(self, snapshot: BalanceSnapshot) -> None:
        for listener in list(self._listeners):
            listener(snapshot)


__all__ = [
    "BalanceView",
    "ACCOUNTS_SOURCE",
    "TRANSACTIONS_SOURCE",
]
