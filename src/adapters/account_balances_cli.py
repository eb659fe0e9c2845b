"""CLI adapter printing the bank account balances of a company.

The company comes from ``COMPANY_ID`` when set, otherwise from the last
selection saved in the preference store (or the first company available).
"""

from src.adapters.formatting import format_currency
from src.infrastructure.container import (
    build_database_adapter,
    build_get_account_balances_use_case,
    build_select_active_company_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BalanceSettings


def _resolve_company_id(settings: BalanceSettings, db_adapter) -> str | None:
    """Return the company to report on.

    Args:
        settings: Settings possibly forcing a company id.
        db_adapter: Database adapter used to list companies.

    Returns:
        str | None: Company identifier, or None when none is available.
    """
    if settings.company_id:
        return settings.company_id
    selector = build_select_active_company_use_case(db_adapter, settings)
    company = selector.execute()
    return company.id if company else None


def main() -> None:
    """Compute and print the balances of the active company."""
    logger = get_app_logger()
    settings = BalanceSettings.from_env()
    db_adapter = build_database_adapter()

    company_id = _resolve_company_id(settings, db_adapter)
    if company_id is None:
        logger.warning("No company available. Set COMPANY_ID to choose one.")
        return

    use_case = build_get_account_balances_use_case(db_adapter, settings)
    snapshot = use_case.execute(company_id)

    currency = settings.currency_code
    print(f"Balances for company {company_id}")
    for balance in snapshot.balances:
        print(
            f"{balance.account.name}: "
            f"opening={format_currency(balance.opening_balance, currency)}, "
            f"revenue={format_currency(balance.total_revenue, currency)}, "
            f"expense={format_currency(balance.total_expense, currency)}, "
            f"current={format_currency(balance.current_balance, currency)}"
        )
    print(f"Total: {format_currency(snapshot.total, currency)}")


if __name__ == "__main__":  # pragma: no cover
    main()
