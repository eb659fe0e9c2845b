"""SQLAlchemy-backed repository for the company ledger."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import LedgerTransaction
from src.domain.services import (
    normalize_account_id,
    normalize_kind,
    normalize_status,
)
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository backed by SQLAlchemy for transacoes."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the company engine.
        """
        self._db_port = db_port

    def fetch_paid_transactions(
        self,
        company_id: str,
    ) -> list[LedgerTransaction]:
        """Return paid transactions bound to a bank account."""
        query = text(
            """
            SELECT id, empresa_id, tipo, valor, conta_bancaria_id,
                   status, conciliado
            FROM transacoes
            WHERE empresa_id = :company_id
              AND status = 'pago'
              AND conta_bancaria_id IS NOT NULL
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"company_id": company_id}).all()
        return [
            LedgerTransaction(
                id=str(row.id),
                company_id=str(row.empresa_id),
                account_id=normalize_account_id(row.conta_bancaria_id),
                kind=normalize_kind(row.tipo),
                amount=coerce_decimal(row.valor),
                status=normalize_status(row.status),
                reconciled=bool(row.conciliado),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyTransactionsRepository"]
