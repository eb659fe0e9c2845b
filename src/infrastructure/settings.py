"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

ORPHAN_POLICIES = ("warn", "ignore")


@dataclass(frozen=True)
class BalanceSettings:
    """Settings for the balances back office.

    Attributes:
        currency_code: Currency used to format amounts.
        orphan_policy: ``warn`` to log paid transactions bound to unknown
            accounts, ``ignore`` to drop them silently.
        preferences_file: JSON file keeping the last selected company.
        company_id: Optional company forced by the environment.
    """

    currency_code: str = "BRL"
    orphan_policy: str = "warn"
    preferences_file: Optional[Path] = None
    company_id: Optional[str] = None

    @property
    def warn_orphans(self) -> bool:
        """Return True when orphaned transactions should be logged."""
        return self.orphan_policy == "warn"

    @classmethod
    def from_env(cls) -> "BalanceSettings":
        """Build settings from environment variables.

        Returns:
            BalanceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        currency_code = (
            os.getenv("BALANCE_CURRENCY", "BRL").strip().upper() or "BRL"
        )
        orphan_policy = cls._normalize_orphan_policy(
            os.getenv("ORPHAN_TRANSACTION_POLICY", "warn"),
            logger=logger,
        )
        raw_preferences = os.getenv("PREFERENCES_FILE")
        if raw_preferences:
            preferences_file = Path(raw_preferences).expanduser().resolve()
        else:
            preferences_file = get_project_root() / "data" / "preferences.json"
        company_id = (os.getenv("COMPANY_ID") or "").strip() or None
        return cls(
            currency_code=currency_code,
            orphan_policy=orphan_policy,
            preferences_file=preferences_file,
            company_id=company_id,
        )

    @staticmethod
    def _normalize_orphan_policy(raw_policy: str, logger) -> str:
        """Return a supported orphan policy.

        Args:
            raw_policy: Raw policy value.
            logger: Logger used for warnings.

        Returns:
            str: ``warn`` or ``ignore``; unknown values fall back to warn.
        """
        policy = raw_policy.strip().lower()
        if policy in ORPHAN_POLICIES:
            return policy
        logger.warning(
            f"Unknown ORPHAN_TRANSACTION_POLICY '{raw_policy}', using 'warn'"
        )
        return "warn"


__all__ = ["BalanceSettings", "ORPHAN_POLICIES"]
