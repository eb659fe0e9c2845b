"""Domain services deriving bank account balances from the ledger."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    TRANSACTION_KIND_EXPENSE,
    TRANSACTION_KIND_REVENUE,
)
from src.domain.models import (
    AccountBalance,
    BalanceSnapshot,
    BankAccount,
    LedgerTransaction,
)
from src.domain.policies import is_balance_eligible
from src.utils.decimal_utils import coerce_decimal, exact_sum


def compute_account_balances(
    accounts: Iterable[BankAccount],
    transactions: Iterable[LedgerTransaction],
    *,
    company_id: str | None = None,
) -> BalanceSnapshot:
    """Compute current balances for every account.

    Only paid transactions bound to an account are counted. Transactions
    pointing to an account that is not in ``accounts`` are left out of
    every total and reported through ``orphaned_transaction_ids``.
    Inputs are never mutated and nothing is logged.

    Args:
        accounts: Bank accounts of the company, in display order.
        transactions: Ledger entries of the company.
        company_id: Optional company identifier stamped on the result.

    Returns:
        BalanceSnapshot: One balance per account, in input order, and the
        grand total.
    """
    accounts = tuple(accounts)
    known_ids = {account.id for account in accounts}
    revenue: dict[str, list[Decimal]] = {}
    expense: dict[str, list[Decimal]] = {}
    orphaned: list[str] = []

    for transaction in transactions:
        if not is_balance_eligible(transaction):
            continue
        if transaction.account_id not in known_ids:
            orphaned.append(transaction.id)
            continue
        amount = coerce_decimal(transaction.amount)
        if transaction.kind == TRANSACTION_KIND_REVENUE:
            revenue.setdefault(transaction.account_id, []).append(amount)
        elif transaction.kind == TRANSACTION_KIND_EXPENSE:
            expense.setdefault(transaction.account_id, []).append(amount)

    balances = tuple(
        _build_balance(
            account,
            revenue.get(account.id, ()),
            expense.get(account.id, ()),
        )
        for account in accounts
    )
    total = exact_sum(balance.current_balance for balance in balances)
    return BalanceSnapshot(
        balances=balances,
        total=total,
        orphaned_transaction_ids=tuple(orphaned),
        company_id=company_id,
    )


def _build_balance(
    account: BankAccount,
    revenue: Iterable[Decimal],
    expense: Iterable[Decimal],
) -> AccountBalance:
    opening_balance = coerce_decimal(account.opening_balance)
    total_revenue = exact_sum(revenue)
    total_expense = exact_sum(expense)
    return AccountBalance(
        account=account,
        opening_balance=opening_balance,
        total_revenue=total_revenue,
        total_expense=total_expense,
        current_balance=exact_sum(
            (opening_balance, total_revenue, total_expense.copy_negate())
        ),
    )


__all__ = ["compute_account_balances"]
