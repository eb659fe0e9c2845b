"""Helpers for Decimal normalization and exact money sums."""

from collections.abc import Iterable
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Decimal,
    InvalidOperation,
    localcontext,
)


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum Decimal values without rounding.

    The running total is computed in a context wide enough that additions
    are never rounded, so the result does not depend on iteration order.
    Invalid operations such as ``Infinity - Infinity`` or a signaling NaN
    yield ``NaN`` instead of raising.

    Args:
        values: Decimal amounts to add.

    Returns:
        Decimal: Exact sum, ``Decimal("0")`` for an empty iterable.
    """
    total = Decimal("0")
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.traps[InvalidOperation] = False
        for value in values:
            total += value
    return total


__all__ = ["coerce_decimal", "exact_sum"]
