"""Domain policies package."""

from .transaction_filters import is_balance_eligible

__all__ = ["is_balance_eligible"]
