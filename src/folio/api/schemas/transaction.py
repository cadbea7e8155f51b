"""Pydantic schemas for transaction endpoints."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from folio.domain.models import Transaction, TransactionType


class TransactionCreateRequest(BaseModel):
    """Request schema for adding a transaction."""

    ticker: str = Field(..., min_length=1, max_length=20, description="Ticker, or CASH for cash movements")
    txn_type: TransactionType = Field(..., description="Transaction type")
    txn_date: str = Field(..., description="Transaction date (YYYY-MM-DD)")
    quantity: Decimal = Field(..., gt=0, description="Units, or amount for cash-like kinds")
    price: Decimal = Field(default=Decimal("0"), ge=0, description="Unit price (BUY/SELL only)")
    fees: Decimal = Field(default=Decimal("0"), ge=0, description="Transaction fees")
    note: str = Field(default="", max_length=500, description="Optional note")

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class TransactionResponse(BaseModel):
    """Response schema for a single ledger entry."""

    index: int
    ticker: str
    txn_type: TransactionType
    txn_date: date
    quantity: Decimal
    price: Decimal
    fees: Decimal
    note: str

    @classmethod
    def from_transaction(cls, index: int, txn: Transaction) -> "TransactionResponse":
        return cls(
            index=index,
            ticker=txn.ticker,
            txn_type=txn.txn_type,
            txn_date=txn.txn_date,
            quantity=txn.quantity,
            price=txn.price,
            fees=txn.fees,
            note=txn.note,
        )


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int


class UndoResponse(BaseModel):
    """Response schema for undo."""

    undone: bool
    message: str
