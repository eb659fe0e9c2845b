"""Domain models for derived account balances."""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from src.domain.models.banking import BankAccount
from src.utils.decimal_utils import exact_sum


@dataclass(frozen=True)
class AccountBalance:
    """Balance derived for a single bank account.

    Attributes:
        account: Account the balance belongs to.
        opening_balance: Opening balance of the account.
        total_revenue: Sum of settled revenue bound to the account.
        total_expense: Sum of settled expenses bound to the account.
        current_balance: Opening balance plus revenue minus expense.
    """

    account: BankAccount
    opening_balance: Decimal
    total_revenue: Decimal
    total_expense: Decimal
    current_balance: Decimal

    @property
    def account_id(self) -> str:
        """Return the identifier of the underlying account."""
        return self.account.id


@dataclass(frozen=True)
class BalanceSnapshot:
    """Result of one aggregation pass over accounts and transactions."""

    balances: tuple[AccountBalance, ...] = ()
    total: Decimal = Decimal("0")
    orphaned_transaction_ids: tuple[str, ...] = ()
    company_id: str | None = None
    _index: Mapping[str, AccountBalance] = field(
        default_factory=dict,
        repr=False,
        compare=False,
    )

    def __post_init__(self) -> None:
        index = {balance.account_id: balance for balance in self.balances}
        object.__setattr__(self, "_index", MappingProxyType(index))

    def get(self, account_id: str) -> AccountBalance | None:
        """Return the balance for an account id, if present."""
        return self._index.get(account_id)

    @property
    def total_revenue(self) -> Decimal:
        """Return settled revenue summed over every account."""
        return exact_sum(balance.total_revenue for balance in self.balances)

    @property
    def total_expense(self) -> Decimal:
        """Return settled expenses summed over every account."""
        return exact_sum(balance.total_expense for balance in self.balances)


EMPTY_SNAPSHOT = BalanceSnapshot()


__all__ = ["AccountBalance", "BalanceSnapshot", "EMPTY_SNAPSHOT"]
