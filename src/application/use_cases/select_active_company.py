"""Use case to resolve and persist the active company."""

from src.application.ports.companies_repository import CompaniesRepositoryPort
from src.application.ports.preference_store import PreferenceStorePort
from src.domain.models import Company
from src.infrastructure.logging.logger import get_app_logger

ACTIVE_COMPANY_KEY = "active_company"


class SelectActiveCompanyUseCase:
    """Restore the last selected company or fall back to the first one."""

    def __init__(
        self,
        companies_repository: CompaniesRepositoryPort,
        preference_store: PreferenceStorePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            companies_repository: Port listing the available companies.
            preference_store: Store keeping the last selection.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._companies_repository = companies_repository
        self._preference_store = preference_store
        self._logger = logger or get_app_logger()

    def available_companies(self) -> list[Company]:
        """Return the companies the user can select."""
        return self._companies_repository.fetch_companies()

    def execute(
        self,
        companies: list[Company] | None = None,
    ) -> Company | None:
        """Return the active company.

        Args:
            companies: Optional pre-fetched company list.

        Returns:
            Company | None: Saved company when still available, else the
            first company, or None when there are no companies.
        """
        if companies is None:
            companies = self.available_companies()
        if not companies:
            return None
        saved_id = self._preference_store.get(ACTIVE_COMPANY_KEY)
        if saved_id:
            for company in companies:
                if company.id == saved_id:
                    return company
            self._logger.info(
                f"Saved company {saved_id} is no longer available"
            )
        return companies[0]

    def select(self, company: Company | None) -> None:
        """Persist the selection, or clear it when company is None."""
        if company is None:
            self._preference_store.delete(ACTIVE_COMPANY_KEY)
            return
        self._preference_store.set(ACTIVE_COMPANY_KEY, company.id)
        self._logger.info(f"Active company set to {company.id}")


__all__ = ["SelectActiveCompanyUseCase", "ACTIVE_COMPANY_KEY"]
