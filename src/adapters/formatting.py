"""Display formatting for monetary amounts."""

from decimal import Decimal

_SYMBOLS = {"BRL": "R$", "EUR": "€", "USD": "$"}


def format_currency(value: Decimal, currency_code: str) -> str:
    """Format a monetary amount for display.

    BRL amounts use Brazilian separators (``R$ 1.234,56``); other
    currencies use ``1,234.56 <symbol>``.

    Args:
        value: Amount to format.
        currency_code: ISO currency code.

    Returns:
        str: Human readable amount.
    """
    symbol = _SYMBOLS.get(currency_code, currency_code)
    formatted = f"{value:,.2f}"
    if currency_code == "BRL":
        swapped = formatted.replace(",", "_").replace(".", ",")
        return f"{symbol} {swapped.replace('_', '.')}"
    return f"{formatted} {symbol}"


__all__ = ["format_currency"]
