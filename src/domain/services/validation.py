"""Domain validation helpers."""

from logging import Logger

from src.domain.models import BalanceSnapshot


def warn_orphaned_transactions(
    snapshot: BalanceSnapshot,
    logger: Logger,
) -> None:
    """Warn when paid transactions point to unknown bank accounts.

    Args:
        snapshot: Aggregation result to inspect.
        logger: Logger used for warnings.
    """
    if not snapshot.orphaned_transaction_ids:
        return
    ids = ", ".join(snapshot.orphaned_transaction_ids)
    logger.warning(
        f"Ignored {len(snapshot.orphaned_transaction_ids)} paid transactions "
        f"bound to unknown accounts for company={snapshot.company_id}: {ids}"
    )


__all__ = ["warn_orphaned_transactions"]
