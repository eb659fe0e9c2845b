"""SQLAlchemy-backed repository for companies."""

from sqlalchemy import text

from src.application.ports.companies_repository import CompaniesRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.models import Company


class SqlAlchemyCompaniesRepository(CompaniesRepositoryPort):
    """Repository backed by SQLAlchemy for empresas."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port

    def fetch_companies(self) -> list[Company]:
        """Return active companies ordered by name."""
        query = text(
            """
            SELECT id, nome, cnpj, ativo
            FROM empresas
            WHERE ativo = TRUE
            ORDER BY nome
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            Company(
                id=str(row.id),
                name=row.nome,
                tax_id=row.cnpj,
                active=bool(row.ativo),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyCompaniesRepository"]
