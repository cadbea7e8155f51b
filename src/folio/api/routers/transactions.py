"""Transaction ledger endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from folio.api.deps import get_ledger_service
from folio.api.schemas import (
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    UndoResponse,
)
from folio.services import LedgerService, TransactionCreate

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    ticker: Optional[str] = Query(None, description="Only entries for this ticker"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionListResponse:
    """List ledger entries in date order with their positions."""
    rows = [
        TransactionResponse.from_transaction(index, txn)
        for index, txn in ledger.indexed_transactions(ticker)
    ]
    return TransactionListResponse(transactions=rows, count=len(rows))


@router.post("", response_model=TransactionResponse, status_code=201)
def add_transaction(
    data: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Add a transaction; the response carries its position after re-sorting."""
    txn = ledger.add_transaction(
        TransactionCreate(
            ticker=data.ticker,
            txn_type=data.txn_type,
            txn_date=data.txn_date,
            quantity=data.quantity,
            price=data.price,
            fees=data.fees,
            note=data.note,
        )
    )
    # Same-day entries keep insertion order, so the new one is the last match
    index = max(i for i, t in ledger.indexed_transactions(txn.ticker) if t == txn)
    return TransactionResponse.from_transaction(index, txn)


@router.delete("/{index}", response_model=TransactionResponse)
def remove_transaction(
    index: int,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Remove the transaction at a 0-based position."""
    removed = ledger.remove_transaction(index)
    return TransactionResponse.from_transaction(index, removed)


@router.post("/undo", response_model=UndoResponse)
def undo(ledger: LedgerService = Depends(get_ledger_service)) -> UndoResponse:
    """Undo the last transaction change."""
    if ledger.undo():
        return UndoResponse(undone=True, message="Undone.")
    return UndoResponse(undone=False, message="Nothing to undo.")
