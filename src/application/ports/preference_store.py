"""Port for persisting small user preferences."""

from typing import Protocol


class PreferenceStorePort(Protocol):
    """Key/value store for preferences such as the last company."""

    def get(self, key: str) -> str | None:
        """Return the stored value for key, or None."""

    def set(self, key: str, value: str) -> None:
        """Store value under key."""

    def delete(self, key: str) -> None:
        """Remove key if present."""


__all__ = ["PreferenceStorePort"]
