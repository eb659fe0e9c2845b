"""Domain constants for bank account balances."""

TRANSACTION_KIND_REVENUE = "revenue"
TRANSACTION_KIND_EXPENSE = "expense"

TRANSACTION_STATUS_PAID = "paid"
TRANSACTION_STATUS_PENDING = "pending"

# Storage values used by the remote tables.
STORED_KIND_VALUES = {
    "receita": TRANSACTION_KIND_REVENUE,
    "despesa": TRANSACTION_KIND_EXPENSE,
}
STORED_STATUS_VALUES = {
    "pago": TRANSACTION_STATUS_PAID,
    "pendente": TRANSACTION_STATUS_PENDING,
}


__all__ = [
    "TRANSACTION_KIND_REVENUE",
    "TRANSACTION_KIND_EXPENSE",
    "TRANSACTION_STATUS_PAID",
    "TRANSACTION_STATUS_PENDING",
    "STORED_KIND_VALUES",
    "STORED_STATUS_VALUES",
]
