"""Domain layer - pure business models with no external dependencies."""

from folio.domain.models import (
    CASH_TICKER,
    Asset,
    AssetType,
    PortfolioState,
    Transaction,
    TransactionType,
)

__all__ = [
    "CASH_TICKER",
    "Asset",
    "AssetType",
    "PortfolioState",
    "Transaction",
    "TransactionType",
]
