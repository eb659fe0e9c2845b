"""SQLAlchemy-backed repository for company bank accounts."""

from sqlalchemy import text

from src.application.ports.bank_accounts_repository import (
    BankAccountsRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import BankAccount
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyBankAccountsRepository(BankAccountsRepositoryPort):
    """Repository backed by SQLAlchemy for contas_bancarias."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the company engine.
        """
        self._db_port = db_port

    def fetch_accounts(self, company_id: str) -> list[BankAccount]:
        """Return the active bank accounts of a company, ordered by name."""
        query = text(
            """
            SELECT id, empresa_id, nome, banco, saldo_inicial, ativo
            FROM contas_bancarias
            WHERE empresa_id = :company_id
              AND ativo = TRUE
            ORDER BY nome
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"company_id": company_id}).all()
        return [
            BankAccount(
                id=str(row.id),
                company_id=str(row.empresa_id),
                name=row.nome,
                bank=row.banco,
                opening_balance=coerce_decimal(row.saldo_inicial),
                active=bool(row.ativo),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyBankAccountsRepository"]
