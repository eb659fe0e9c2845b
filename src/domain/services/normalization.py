"""Domain normalization helpers."""

from src.domain.constants import STORED_KIND_VALUES, STORED_STATUS_VALUES


def normalize_kind(kind: str | None) -> str | None:
    """Normalize a transaction kind to its domain value.

    Args:
        kind: Raw kind from a repository (``receita``, ``despesa``...).

    Returns:
        str | None: ``revenue``, ``expense``, the cleaned value when it
        is not a known storage value, or None when empty.
    """
    if not kind:
        return None
    cleaned = kind.strip().lower()
    if not cleaned:
        return None
    return STORED_KIND_VALUES.get(cleaned, cleaned)


def normalize_status(status: str | None) -> str | None:
    """Normalize a settlement status to its domain value.

    Args:
        status: Raw status from a repository (``pago``, ``pendente``...).

    Returns:
        str | None: Domain status, the cleaned value for unknown states,
        or None when empty.
    """
    if not status:
        return None
    cleaned = status.strip().lower()
    if not cleaned:
        return None
    return STORED_STATUS_VALUES.get(cleaned, cleaned)


def normalize_account_id(account_id) -> str | None:
    """Return the account id as a string, or None when unbound."""
    if account_id is None:
        return None
    cleaned = str(account_id).strip()
    return cleaned or None


__all__ = ["normalize_kind", "normalize_status", "normalize_account_id"]
