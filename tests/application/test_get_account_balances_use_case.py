"""Tests for the GetAccountBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.domain.models import BankAccount, LedgerTransaction


def _build_repositories(
    *,
    accounts: list[BankAccount],
    transactions: list[LedgerTransaction],
) -> tuple[MagicMock, MagicMock]:
    accounts_repository = MagicMock()
    accounts_repository.fetch_accounts.return_value = accounts
    transactions_repository = MagicMock()
    transactions_repository.fetch_paid_transactions.return_value = transactions
    return accounts_repository, transactions_repository


def _account(account_id: str, opening: str) -> BankAccount:
    return BankAccount(
        id=account_id,
        company_id="acme",
        name=account_id,
        opening_balance=Decimal(opening),
    )


def _transaction(
    transaction_id: str,
    account_id: str,
    kind: str,
    amount: str,
) -> LedgerTransaction:
    return LedgerTransaction(
        id=transaction_id,
        company_id="acme",
        account_id=account_id,
        kind=kind,
        amount=Decimal(amount),
        status="paid",
    )


def test_execute_returns_balances_for_company() -> None:
    """Use case should fetch both sources for the company and aggregate."""
    accounts_repository, transactions_repository = _build_repositories(
        accounts=[_account("A", "100.00"), _account("B", "0")],
        transactions=[
            _transaction("t1", "A", "revenue", "20.50"),
            _transaction("t2", "A", "expense", "0.50"),
            _transaction("t3", "B", "expense", "10"),
        ],
    )
    logger = MagicMock()

    use_case = GetAccountBalancesUseCase(
        accounts_repository=accounts_repository,
        transactions_repository=transactions_repository,
        logger=logger,
    )

    result = use_case.execute("acme")

    assert result.company_id == "acme"
    assert result.get("A").current_balance == Decimal("120.00")
    assert result.get("B").current_balance == Decimal("-10")
    assert result.total == Decimal("110.00")
    accounts_repository.fetch_accounts.assert_called_once_with("acme")
    transactions_repository.fetch_paid_transactions.assert_called_once_with(
        "acme"
    )
    logger.info.assert_called_once()
    logger.warning.assert_not_called()


def test_execute_warns_about_orphaned_transactions() -> None:
    """Transactions for unknown accounts are logged when enabled."""
    accounts_repository, transactions_repository = _build_repositories(
        accounts=[_account("A", "0")],
        transactions=[_transaction("t9", "gone", "revenue", "1")],
    )
    logger = MagicMock()

    use_case = GetAccountBalancesUseCase(
        accounts_repository=accounts_repository,
        transactions_repository=transactions_repository,
        logger=logger,
    )

    result = use_case.execute("acme")

    assert result.total == Decimal("0")
    logger.warning.assert_called_once()
    assert "t9" in logger.warning.call_args.args[0]


def test_execute_can_ignore_orphaned_transactions_silently() -> None:
    accounts_repository, transactions_repository = _build_repositories(
        accounts=[_account("A", "0")],
        transactions=[_transaction("t9", "gone", "revenue", "1")],
    )
    logger = MagicMock()

    use_case = GetAccountBalancesUseCase(
        accounts_repository=accounts_repository,
        transactions_repository=transactions_repository,
        logger=logger,
        warn_orphans=False,
    )

    result = use_case.execute("acme")

    assert result.orphaned_transaction_ids == ("t9",)
    logger.warning.assert_not_called()
