"""Domain models for bank accounts and ledger transactions."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Company:
    """Tenant owning bank accounts and transactions.

    Attributes:
        id: Opaque company identifier.
        name: Display name.
        tax_id: Optional CNPJ.
        active: Whether the company is enabled.
    """

    id: str
    name: str
    tax_id: str | None = None
    active: bool = True


@dataclass(frozen=True)
class BankAccount:
    """Bank account registered for a company."""

    id: str
    company_id: str
    name: str
    opening_balance: Decimal
    bank: str | None = None
    active: bool = True


@dataclass(frozen=True)
class LedgerTransaction:
    """Ledger entry of a company.

    Attributes:
        id: Transaction identifier.
        company_id: Owning company identifier.
        account_id: Bound bank account, or None when unbound.
        kind: Either ``revenue`` or ``expense``.
        amount: Non-negative magnitude; the sign comes from ``kind``.
        status: Settlement status such as ``paid`` or ``pending``.
        reconciled: Informational flag, not used by balance math.
    """

    id: str
    company_id: str
    account_id: str | None
    kind: str
    amount: Decimal
    status: str
    reconciled: bool = False


__all__ = ["Company", "BankAccount", "LedgerTransaction"]
