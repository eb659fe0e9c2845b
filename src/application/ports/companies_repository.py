"""Port for reading the companies available for selection."""

from typing import Protocol

from src.domain.models import Company


class CompaniesRepositoryPort(Protocol):
    """Port exposing read access to companies."""

    def fetch_companies(self) -> list[Company]:
        """Return the active companies ordered by name."""


__all__ = ["CompaniesRepositoryPort"]
