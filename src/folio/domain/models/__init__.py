"""Domain models package."""

from folio.domain.models.enums import (
    CASH_TICKER,
    AssetType,
    TransactionType,
    CASH_TRANSACTION_TYPES,
    ASSET_TRANSACTION_TYPES,
)
from folio.domain.models.asset import Asset
from folio.domain.models.transaction import Transaction
from folio.domain.models.state import PortfolioState

__all__ = [
    "CASH_TICKER",
    "AssetType",
    "TransactionType",
    "CASH_TRANSACTION_TYPES",
    "ASSET_TRANSACTION_TYPES",
    "Asset",
    "Transaction",
    "PortfolioState",
]
