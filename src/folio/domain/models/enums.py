"""Enumerations for domain models."""

from enum import Enum
from typing import Optional, Union

CASH_TICKER = "CASH"


class AssetType(str, Enum):
    """Asset categories."""

    STOCK = "Stock"
    ETF = "ETF"
    MUTUAL_FUND = "MutualFund"
    CRYPTO = "Crypto"
    BOND = "Bond"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "Optional[Union[str, AssetType]]") -> "AssetType":
        """
        Leniently map user or file text onto an asset type.

        Matching is case-insensitive; "mutual" and "mf" are accepted for
        MutualFund and anything unrecognised becomes Other.
        """
        if isinstance(value, AssetType):
            return value
        key = (value or "").strip().lower()
        return _ASSET_ALIASES.get(key, cls.OTHER)


_ASSET_ALIASES = {
    "stock": AssetType.STOCK,
    "etf": AssetType.ETF,
    "mutualfund": AssetType.MUTUAL_FUND,
    "mutual": AssetType.MUTUAL_FUND,
    "mf": AssetType.MUTUAL_FUND,
    "crypto": AssetType.CRYPTO,
    "bond": AssetType.BOND,
    "other": AssetType.OTHER,
}


class TransactionType(str, Enum):
    """Types of ledger transactions."""

    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    FEES = "FEES"

    @property
    def is_trade(self) -> bool:
        """Return True for kinds that carry a unit price."""
        return self in (TransactionType.BUY, TransactionType.SELL)


# Kinds that make sense on the CASH ledger vs. on an asset ticker
CASH_TRANSACTION_TYPES = frozenset(
    {TransactionType.DEPOSIT, TransactionType.WITHDRAW, TransactionType.FEES}
)
ASSET_TRANSACTION_TYPES = frozenset(
    {TransactionType.BUY, TransactionType.SELL, TransactionType.DIVIDEND, TransactionType.FEES}
)
