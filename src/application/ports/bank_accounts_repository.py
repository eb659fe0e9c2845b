"""Port for reading the bank accounts of a company."""

from typing import Protocol

from src.domain.models import BankAccount


class BankAccountsRepositoryPort(Protocol):
    """Port exposing read access to company bank accounts."""

    def fetch_accounts(self, company_id: str) -> list[BankAccount]:
        """Return the active bank accounts of a company."""


__all__ = ["BankAccountsRepositoryPort"]
