"""Port for reading the ledger of a company."""

from typing import Protocol

from src.domain.models import LedgerTransaction


class TransactionsRepositoryPort(Protocol):
    """Port exposing read access to ledger transactions."""

    def fetch_paid_transactions(
        self,
        company_id: str,
    ) -> list[LedgerTransaction]:
        """Return settled transactions bound to a bank account.

        Implementations may filter server side; callers re-apply the
        same filter and must tolerate unfiltered results.
        """


__all__ = ["TransactionsRepositoryPort"]
