"""Tests for domain normalization helpers."""

from src.domain.services import (
    normalize_account_id,
    normalize_kind,
    normalize_status,
)


def test_normalize_kind_maps_storage_values() -> None:
    """Portuguese storage values map to domain kinds."""
    assert normalize_kind("receita") == "revenue"
    assert normalize_kind(" Despesa ") == "expense"
    assert normalize_kind("revenue") == "revenue"


def test_normalize_kind_handles_empty_values() -> None:
    assert normalize_kind(None) is None
    assert normalize_kind("   ") is None


def test_normalize_status_maps_storage_values() -> None:
    """Known statuses are translated; unknown ones are kept."""
    assert normalize_status("pago") == "paid"
    assert normalize_status("PENDENTE") == "pending"
    assert normalize_status("cancelado") == "cancelado"
    assert normalize_status("") is None


def test_normalize_account_id() -> None:
    """Identifiers become strings; blanks mean unbound."""
    assert normalize_account_id(None) is None
    assert normalize_account_id("  ") is None
    assert normalize_account_id(42) == "42"
