"""Pydantic schemas for asset and price endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from folio.domain.models import Asset, AssetType


class AssetCreateRequest(BaseModel):
    """Request schema for registering an asset."""

    ticker: str = Field(..., min_length=1, max_length=20, description="Unique ticker")
    name: str = Field(default="", max_length=100, description="Display name (defaults to ticker)")
    asset_type: str = Field(default="Stock", description="Stock/ETF/MutualFund/Crypto/Bond/Other")
    currency: Optional[str] = Field(default=None, max_length=10, description="Currency code")

    @field_validator("ticker")
    @classmethod
    def uppercase_ticker(cls, v: str) -> str:
        return v.strip().upper()


class AssetResponse(BaseModel):
    """Response schema for a registered asset."""

    ticker: str
    name: str
    asset_type: AssetType
    currency: str
    price: Optional[Decimal] = None

    @classmethod
    def from_asset(cls, asset: Asset, price: Optional[Decimal] = None) -> "AssetResponse":
        return cls(
            ticker=asset.ticker,
            name=asset.name,
            asset_type=asset.asset_type,
            currency=asset.currency,
            price=price,
        )


class PriceUpdateRequest(BaseModel):
    """Request schema for setting a current price."""

    price: Decimal = Field(..., ge=0, description="Current price per unit")
