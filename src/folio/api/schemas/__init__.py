"""Pydantic schemas for API request/response."""

from folio.api.schemas.asset import (
    AssetCreateRequest,
    AssetResponse,
    PriceUpdateRequest,
)
from folio.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionListResponse,
    UndoResponse,
)
from folio.api.schemas.portfolio import (
    HoldingResponse,
    TotalsResponse,
    PortfolioSummaryResponse,
    FileRequest,
    FileResponse,
)

__all__ = [
    "AssetCreateRequest",
    "AssetResponse",
    "PriceUpdateRequest",
    "TransactionCreateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "UndoResponse",
    "HoldingResponse",
    "TotalsResponse",
    "PortfolioSummaryResponse",
    "FileRequest",
    "FileResponse",
]
