"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from folio.domain.models.enums import CASH_TICKER, TransactionType


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction entry (source of truth).

    - BUY/SELL carry quantity and unit price
    - DIVIDEND/DEPOSIT/WITHDRAW/FEES use quantity as the cash amount
    - ticker "CASH" marks pure cash movements
    """

    ticker: str
    txn_type: TransactionType
    txn_date: date
    quantity: Decimal
    price: Decimal = field(default_factory=lambda: Decimal("0"))
    fees: Decimal = field(default_factory=lambda: Decimal("0"))
    note: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.txn_type, str) and not isinstance(self.txn_type, TransactionType):
            object.__setattr__(self, "txn_type", TransactionType(self.txn_type))

    @property
    def is_cash(self) -> bool:
        """Return True if this entry belongs to the cash ledger."""
        return self.ticker == CASH_TICKER

    @property
    def gross_amount(self) -> Decimal:
        """Quantity times unit price, before fees."""
        return self.quantity * self.price
