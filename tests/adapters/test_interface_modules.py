"""Check the adapter packages keep an empty public surface."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    [
        "src.adapters",
        "src.adapters.interface",
        "src.adapters.interface.streamlit",
    ],
)
def test_adapter_packages_export_nothing(package: str) -> None:
    """Entry points are run as modules, not imported from the package."""
    assert import_module(package).__all__ == []
